"""工具模組：對外辯論工具與逐筆紀錄檔。"""

from __future__ import annotations

from .debate_tool import (
    TOOL_NAME,
    TOOL_DESCRIPTION,
    INPUT_SCHEMA,
    TOOLS,
    ToolResult,
    DebateToolset,
)
from ._transcript import TranscriptRecorder, initialize_transcript

__all__ = [
    "TOOL_NAME",
    "TOOL_DESCRIPTION",
    "INPUT_SCHEMA",
    "TOOLS",
    "ToolResult",
    "DebateToolset",
    "TranscriptRecorder",
    "initialize_transcript",
]
