"""日誌設定與工具呼叫的事件回呼"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

logger = logging.getLogger("debate.tools")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """設定根 logger；輸出到 stderr，避免干擾 stdout 上的協定資料"""
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
    # 重複呼叫時不重複掛 handler
    if not any(getattr(h, "_debate_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._debate_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def create_tool_callbacks(
    log_store: list[dict[str, Any]]
) -> tuple[Callable[..., Any], Callable[..., Any]]:
    """建立工具呼叫前後的回呼函式並記錄事件"""

    def _before_tool(tool, args, tool_context):  # type: ignore[no-untyped-def]
        log_store.append({"name": tool.name, "input": args})
        logger.info("before_tool %s args=%s", tool.name, args)
        return None

    def _after_tool(tool, args, tool_context, tool_response):  # type: ignore[no-untyped-def]
        if log_store:
            log_store[-1]["output"] = tool_response
        is_error = isinstance(tool_response, dict) and "error" in tool_response
        if is_error:
            logger.warning("after_tool %s rejected: %s", tool.name, tool_response["error"])
        else:
            logger.info("after_tool %s ok", tool.name)
        return None

    return _before_tool, _after_tool
