from __future__ import annotations

import json
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from debate.engine import DebateEngine
from debate.tools import TOOL_NAME, DebateToolset


def _call(tools: DebateToolset, **arguments):
    return tools.call_tool(TOOL_NAME, arguments)


def test_list_tools_describes_parameter_contract() -> None:
    """工具描述包含名稱與參數 schema"""
    tools = DebateToolset()
    (tool,) = tools.list_tools()
    assert tool["name"] == "multiagentdebate"
    schema = tool["inputSchema"]
    assert schema["required"] == ["agentId", "round", "action", "needsMoreRounds"]
    assert schema["properties"]["action"]["enum"] == ["register", "argue", "rebut", "judge"]
    assert schema["properties"]["round"]["minimum"] == 1


def test_success_result_shape() -> None:
    tools = DebateToolset()
    result = _call(tools, agentId="pro", round=1, action="register", needsMoreRounds=True)
    assert result.is_error is False
    assert result.payload == {
        "agents": ["pro"],
        "totalArguments": 0,
        "lastAction": "register",
        "verdict": None,
        "needsMoreRounds": True,
    }
    content = result.to_content()
    assert "isError" not in content
    assert json.loads(content["content"][0]["text"]) == result.payload


def test_error_result_shape() -> None:
    """錯誤以 {error} 回傳並附帶 isError 旗標，不含部分狀態"""
    tools = DebateToolset()
    result = _call(tools, agentId="pro", round=1, action="argue", content="X", needsMoreRounds=True)
    assert result.is_error is True
    assert set(result.payload) == {"error"}
    assert "not registered" in result.payload["error"]
    content = result.to_content()
    assert content["isError"] is True
    assert json.loads(content["content"][0]["text"]) == result.payload
    assert len(tools.engine.history) == 0


def test_invalid_input_reported_as_error() -> None:
    tools = DebateToolset()
    result = _call(tools, agentId="pro", round=0, action="register", needsMoreRounds=True)
    assert result.payload == {"error": "round must be a positive integer"}


def test_unknown_tool_name() -> None:
    """未知工具名稱回傳錯誤且不觸及引擎"""
    tools = DebateToolset()
    result = tools.call_tool("debate", {"agentId": "pro", "round": 1, "action": "register", "needsMoreRounds": True})
    assert result.is_error is True
    assert result.payload == {"error": "Unknown tool: debate"}
    assert tools.engine.agents == ()


def test_sinks_receive_accepted_records_only() -> None:
    seen = []
    tools = DebateToolset(sinks=[seen.append])
    _call(tools, agentId="pro", round=1, action="register", needsMoreRounds=True)
    _call(tools, agentId="pro", round=1, action="argue", content="   ", needsMoreRounds=True)
    _call(tools, agentId="pro", round=1, action="argue", content="point", needsMoreRounds=True)
    assert [r.content for r in seen] == ["point"]


def test_failing_sink_does_not_fail_submission() -> None:
    """呈現端失敗不影響提交結果，其他呈現端照常執行"""
    seen = []

    def broken(_record):
        raise RuntimeError("terminal closed")

    tools = DebateToolset(engine=DebateEngine(), sinks=[broken, seen.append])
    _call(tools, agentId="con", round=1, action="register", needsMoreRounds=True)
    result = _call(tools, agentId="con", round=1, action="argue", content="no", needsMoreRounds=True)
    assert result.is_error is False
    assert result.payload["totalArguments"] == 1
    assert len(seen) == 1


def test_function_tool_entry_point() -> None:
    """multiagentdebate 直接回傳 payload，選填欄位可省略"""
    tools = DebateToolset()
    tools.multiagentdebate(agentId="judge", round=1, action="register", needsMoreRounds=True)
    out = tools.multiagentdebate(
        agentId="judge", round=2, action="judge", needsMoreRounds=False, content="con\nclearer evidence"
    )
    assert out["verdict"] == {"for": "con", "rationale": "con\nclearer evidence", "round": 2}
    assert out["needsMoreRounds"] is False

    err = tools.multiagentdebate(agentId="judge", round=2, action="judge", needsMoreRounds=False)
    assert err == {"error": "content required for this action"}


def test_list_tools_returns_independent_copy() -> None:
    """修改回傳的 schema 不影響模組層級的工具描述"""
    tools = DebateToolset()
    listed = tools.list_tools()
    listed[0]["inputSchema"]["required"].append("content")
    listed[0]["inputSchema"]["properties"].pop("round")

    fresh = tools.list_tools()[0]["inputSchema"]
    assert fresh["required"] == ["agentId", "round", "action", "needsMoreRounds"]
    assert "round" in fresh["properties"]
