"""將未定型的請求資料轉為 SubmissionRequest"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict

from pydantic import ValidationError

from .errors import InvalidInput
from .models import SubmissionRequest


def _action_message(payload: Mapping) -> str:
    value = payload.get("action")
    if not isinstance(value, str) or not value:
        return "action missing"
    return f"unknown action: {value}"


# 對外欄位名稱對應的錯誤訊息
_FIELD_MESSAGES: Dict[str, Callable[[Mapping], str]] = {
    "agentId": lambda _: "agentId must be a string",
    "round": lambda _: "round must be a positive integer",
    "action": _action_message,
    "needsMoreRounds": lambda _: "needsMoreRounds must be boolean",
    "content": lambda _: "content must be a string",
    "targetAgentId": lambda _: "targetAgentId must be a string",
}


def _describe(exc: ValidationError, payload: Mapping) -> str:
    """取第一個錯誤欄位轉為單一訊息（依欄位定義順序）"""
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else ""
        builder = _FIELD_MESSAGES.get(field)
        if builder is not None:
            return builder(payload)
    return str(exc.errors()[0].get("msg", "invalid input"))


def parse_submission(payload: Any) -> SubmissionRequest:
    """驗證請求並回傳 SubmissionRequest，格式錯誤時拋出 InvalidInput

    沒有副作用；content 與 targetAgentId 僅檢查型別，語意由引擎判斷。
    """
    if isinstance(payload, SubmissionRequest):
        return payload
    if not isinstance(payload, Mapping):
        raise InvalidInput("arguments must be an object")
    try:
        # 原始請求只認對外欄位名稱（agentId 等），不接受 agent_id 之類的內部名稱
        return SubmissionRequest.model_validate(dict(payload), by_alias=True, by_name=False)
    except ValidationError as exc:
        raise InvalidInput(_describe(exc, payload)) from exc


__all__ = ["parse_submission"]
