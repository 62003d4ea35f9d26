"""將已接受的發言渲染成主控台文字框，純觀察用途"""

from __future__ import annotations

import logging
import sys
import textwrap
from typing import Callable, List, Optional, TextIO

from colorama import Fore, Style

from .models import Action, HistoryRecord

logger = logging.getLogger(__name__)

Sink = Callable[[HistoryRecord], None]


def _colour_for(record: HistoryRecord) -> str:
    """judge 黃色，pro 綠色，con 紅色，其餘青色"""
    if record.action is Action.JUDGE:
        return Fore.YELLOW
    if record.agent_id == "pro":
        return Fore.GREEN
    if record.agent_id == "con":
        return Fore.RED
    return Fore.CYAN


def _content_lines(content: str, width: int) -> List[str]:
    lines = content.splitlines() or [""]
    if width <= 0:
        return lines
    wrapped: List[str] = []
    for line in lines:
        wrapped.extend(textwrap.wrap(line, width) or [""])
    return wrapped


def render_record(record: HistoryRecord, color: bool = True, width: int = 0) -> str:
    """產生帶框線的發言文字

    參數:
        record: 已接受的辯論紀錄。
        color: 是否在動作標籤加上 ANSI 顏色。
        width: 內容換行寬度，0 表示不換行。
    """
    tag = f"[{record.action.value.upper()}]"
    rest = f" {record.agent_id} (round {record.round})"
    if record.target_agent_id:
        rest += f" → {record.target_agent_id}"
    header_len = len(tag) + len(rest)

    lines = _content_lines(record.content, width)
    inner = max([header_len] + [len(line) for line in lines]) + 2
    border = "─" * (inner + 2)

    shown_tag = f"{_colour_for(record)}{tag}{Style.RESET_ALL}" if color else tag
    header = shown_tag + rest + " " * (inner - header_len)

    out = ["", f"┌{border}┐", f"│ {header} │", f"├{border}┤"]
    out.extend(f"│ {line.ljust(inner)} │" for line in lines)
    out.append(f"└{border}┘")
    return "\n".join(out) + "\n"


class ConsoleSink:
    """將發言框寫入串流（預設 stderr，stdout 保留給協定資料）"""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None, width: int = 0) -> None:
        self.stream = stream if stream is not None else sys.stderr
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        self.width = width

    def __call__(self, record: HistoryRecord) -> None:
        self.stream.write(render_record(record, color=self.color, width=self.width))
        self.stream.flush()


def safe_emit(sink: Sink, record: HistoryRecord) -> bool:
    """呼叫呈現端；失敗只記錄警告，不影響提交結果"""
    try:
        sink(record)
    except Exception:
        logger.warning("presentation sink %r failed", sink, exc_info=True)
        return False
    return True


__all__ = ["Sink", "render_record", "ConsoleSink", "safe_emit"]
