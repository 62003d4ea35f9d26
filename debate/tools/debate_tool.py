"""對外的辯論工具：接收未定型參數、交給引擎並序列化結果"""

import copy
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from debate.engine import DebateEngine
from debate.errors import DebateError, UnknownAction
from debate.presentation import Sink, safe_emit

logger = logging.getLogger(__name__)

TOOL_NAME = "multiagentdebate"

TOOL_DESCRIPTION = """Structured multi-persona debate tool.

Call sequence (typical):
1. Each persona registers once with action:"register".
2. Personas alternate action:"argue" (fresh point) or "rebut" (counter a targetAgentId).
3. A special persona (or either side) issues action:"judge" with a verdict text
   (first line should be "pro", "con", or "inconclusive").
4. Set needsMoreRounds:false only when the debate is finished and a verdict stands.

Parameters:
- agentId (string)            : "pro", "con", "judge", or any custom ID
- round (int >=1)             : Debate round number
- action (string)             : "register" | "argue" | "rebut" | "judge"
- content (string, optional)  : Argument text or verdict
- targetAgentId (string opt.) : Agent being rebutted (only for action:"rebut")
- needsMoreRounds (boolean)   : True if additional debate rounds desired"""

INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "agentId": {"type": "string"},
        "round": {"type": "integer", "minimum": 1},
        "action": {"type": "string", "enum": ["register", "argue", "rebut", "judge"]},
        "content": {"type": "string"},
        "targetAgentId": {"type": "string"},
        "needsMoreRounds": {"type": "boolean"},
    },
    "required": ["agentId", "round", "action", "needsMoreRounds"],
}

# 工具清單 (for list_tools / Agent runtime)
TOOLS = [
    {
        "name": TOOL_NAME,
        "description": TOOL_DESCRIPTION,
        "inputSchema": INPUT_SCHEMA,
    },
]


class ToolResult(BaseModel):
    """工具呼叫結果；is_error 為帶外旗標，呼叫端不必解析內容即可判斷成敗"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    payload: Dict[str, Any]
    is_error: bool = Field(default=False, alias="isError")

    def to_content(self) -> Dict[str, Any]:
        """轉為 {content: [{type, text}], isError} 的工具回應格式"""
        out: Dict[str, Any] = {
            "content": [
                {
                    "type": "text",
                    "text": json.dumps(self.payload, ensure_ascii=False, indent=2),
                }
            ]
        }
        if self.is_error:
            out["isError"] = True
        return out


def _error_result(exc: DebateError) -> ToolResult:
    logger.warning("%s: %s", exc.code, exc.message)
    return ToolResult(payload={"error": exc.message}, is_error=True)


class DebateToolset:
    """請求邊界：持有唯一的 DebateEngine 與呈現端

    Args:
        engine: 辯論引擎，未提供時建立新的空白引擎
        sinks:  接收已接受紀錄的呈現端，失敗不影響結果
    """

    def __init__(self, engine: Optional[DebateEngine] = None, sinks: Iterable[Sink] = ()) -> None:
        self.engine = engine or DebateEngine()
        self.sinks: List[Sink] = list(sinks)

    def list_tools(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(TOOLS)

    def process(self, arguments: Any) -> ToolResult:
        """驗證並提交一次請求，錯誤轉為 {error} 結果"""
        try:
            snapshot = self.engine.submit(arguments)
        except DebateError as exc:
            return _error_result(exc)

        # 狀態已更新後才交給呈現端
        if snapshot.record is not None:
            for sink in self.sinks:
                safe_emit(sink, snapshot.record)
        return ToolResult(payload=snapshot.to_payload())

    def call_tool(self, name: str, arguments: Any = None) -> ToolResult:
        """依工具名稱分派；未知名稱回傳 UnknownAction 錯誤"""
        if name != TOOL_NAME:
            return _error_result(UnknownAction(name))
        return self.process(arguments)

    def multiagentdebate(
        self,
        agentId: str,
        round: int,
        action: str,
        needsMoreRounds: bool,
        content: Optional[str] = None,
        targetAgentId: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Structured multi-persona debate tool.

        Register each persona once with action "register", then alternate
        "argue" and "rebut" (targetAgentId names the rebutted agent). A judge
        submits action "judge" whose first content line is "pro", "con" or
        "inconclusive". Set needsMoreRounds to false only when the debate is
        finished and a verdict stands.

        Args:
            agentId: "pro", "con", "judge", or any custom ID.
            round: Debate round number, starting at 1.
            action: One of "register", "argue", "rebut", "judge".
            needsMoreRounds: True if additional debate rounds are desired.
            content: Argument text or verdict.
            targetAgentId: Agent being rebutted.

        Returns:
            The debate status, or {"error": message} when the call is rejected.
        """
        arguments: Dict[str, Any] = {
            "agentId": agentId,
            "round": round,
            "action": action,
            "needsMoreRounds": needsMoreRounds,
        }
        if content is not None:
            arguments["content"] = content
        if targetAgentId is not None:
            arguments["targetAgentId"] = targetAgentId
        return self.process(arguments).payload


__all__ = [
    "TOOL_NAME",
    "TOOL_DESCRIPTION",
    "INPUT_SCHEMA",
    "TOOLS",
    "ToolResult",
    "DebateToolset",
]
