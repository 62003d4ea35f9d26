"""Toolset 服務模組。"""

from __future__ import annotations

from typing import List, Optional

from debate import config
from debate.engine import DebateEngine
from debate.presentation import ConsoleSink, Sink
from debate.tools import DebateToolset, initialize_transcript


def build_toolset(
    show_live: Optional[bool] = None,
    color: Optional[bool] = None,
    record_path: Optional[str] = None,
) -> DebateToolset:
    """依設定組裝引擎與呈現端；未指定的參數使用 config 預設值"""
    show_live = config.DEBATE_SHOW_LIVE if show_live is None else show_live
    color = config.DEBATE_COLOR if color is None else color
    record_path = config.DEBATE_RECORD_PATH if record_path is None else record_path

    sinks: List[Sink] = []
    if show_live:
        # 僅在終端機上著色
        sinks.append(ConsoleSink(color=None if color else False, width=config.DEBATE_RENDER_WIDTH))
    recorder = initialize_transcript(record_path)
    if recorder is not None:
        sinks.append(recorder)
    return DebateToolset(engine=DebateEngine(), sinks=sinks)


# 建立唯一的 DebateToolset，整個行程共用同一個引擎
debate_tools: DebateToolset = build_toolset()
