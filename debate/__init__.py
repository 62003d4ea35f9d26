"""Debate 套件初始化。

只匯出辯論引擎本身；主持代理 `root_agent` 會載入 google.adk，
需要時再從 `debate.agent` 匯入，避免單純使用引擎時也得初始化 ADK。
"""

from .engine import DebateEngine
from .errors import (
    DebateError,
    InvalidInput,
    MissingContent,
    UnknownAction,
    UnregisteredAgent,
)
from .models import Action, HistoryRecord, Snapshot, SubmissionRequest, Verdict
from .validator import parse_submission
from .verdict import extract_verdict

__all__ = [
    "DebateEngine",
    "DebateError",
    "InvalidInput",
    "MissingContent",
    "UnknownAction",
    "UnregisteredAgent",
    "Action",
    "HistoryRecord",
    "Snapshot",
    "SubmissionRequest",
    "Verdict",
    "parse_submission",
    "extract_verdict",
]
