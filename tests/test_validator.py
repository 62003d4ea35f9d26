from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from debate.errors import InvalidInput
from debate.models import Action, SubmissionRequest
from debate.validator import parse_submission


def _payload(**overrides):
    data = {"agentId": "pro", "round": 1, "action": "argue", "needsMoreRounds": True}
    data.update(overrides)
    return {k: v for k, v in data.items() if v is not ...}


def test_valid_payload_parsed() -> None:
    """合法請求轉為 SubmissionRequest，選填欄位原樣保留"""
    req = parse_submission(_payload(content="Earth is round", targetAgentId="con"))
    assert isinstance(req, SubmissionRequest)
    assert req.agent_id == "pro"
    assert req.round == 1
    assert req.action is Action.ARGUE
    assert req.content == "Earth is round"
    assert req.target_agent_id == "con"
    assert req.needs_more_rounds is True


def test_optional_fields_default_to_none() -> None:
    req = parse_submission(_payload(action="register"))
    assert req.content is None
    assert req.target_agent_id is None


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"agentId": ...}, "agentId must be a string"),
        ({"agentId": ""}, "agentId must be a string"),
        ({"agentId": 7}, "agentId must be a string"),
        ({"round": ...}, "round must be a positive integer"),
        ({"round": 0}, "round must be a positive integer"),
        ({"round": "2"}, "round must be a positive integer"),
        ({"action": ...}, "action missing"),
        ({"action": 3}, "action missing"),
        ({"action": "shout"}, "unknown action: shout"),
        ({"needsMoreRounds": ...}, "needsMoreRounds must be boolean"),
        ({"needsMoreRounds": "yes"}, "needsMoreRounds must be boolean"),
    ],
)
def test_invalid_fields_rejected(overrides, message) -> None:
    """每個必填欄位錯誤都回報對應訊息"""
    with pytest.raises(InvalidInput) as exc:
        parse_submission(_payload(**overrides))
    assert str(exc.value) == message


def test_first_failing_field_reported() -> None:
    """多個欄位錯誤時依 agentId、round、action、needsMoreRounds 順序回報"""
    with pytest.raises(InvalidInput) as exc:
        parse_submission({"round": -1, "action": "nope"})
    assert str(exc.value) == "agentId must be a string"


@pytest.mark.parametrize("payload", [None, "register", ["pro"]])
def test_non_object_payload_rejected(payload) -> None:
    with pytest.raises(InvalidInput):
        parse_submission(payload)


def test_whitespace_agent_id_passes_validation() -> None:
    """agentId 只要求非空字串，不做修剪"""
    assert parse_submission(_payload(agentId=" ")).agent_id == " "


def test_internal_field_names_rejected() -> None:
    """原始請求只接受對外欄位名稱，agent_id / needs_more_rounds 視為缺漏"""
    payload = {"agent_id": "pro", "round": 1, "action": "register", "needs_more_rounds": True}
    with pytest.raises(InvalidInput) as exc:
        parse_submission(payload)
    assert str(exc.value) == "agentId must be a string"

    with pytest.raises(InvalidInput) as exc:
        parse_submission({"agentId": "pro", "round": 1, "action": "register", "needs_more_rounds": True})
    assert str(exc.value) == "needsMoreRounds must be boolean"


def test_internal_names_still_build_requests() -> None:
    """程式內部仍可用欄位名稱建立請求"""
    req = SubmissionRequest(agent_id="pro", round=2, action=Action.ARGUE, needs_more_rounds=False)
    assert req.agent_id == "pro"
    assert req.needs_more_rounds is False


@pytest.mark.parametrize("value, expected", [(2, 2), (2.0, 2), (1.0, 1)])
def test_integral_round_accepted(value, expected) -> None:
    """整數值的浮點數回合（JSON 常見）轉為 int"""
    req = parse_submission(_payload(round=value))
    assert req.round == expected
    assert type(req.round) is int


@pytest.mark.parametrize("value", [True, False, "2", 2.5, 0.0, None])
def test_non_integral_round_rejected(value) -> None:
    with pytest.raises(InvalidInput) as exc:
        parse_submission(_payload(round=value))
    assert str(exc.value) == "round must be a positive integer"


@pytest.mark.parametrize("field", ["targetAgentId", "content"])
def test_non_string_optional_fields_rejected(field) -> None:
    """選填欄位若提供則必須是字串"""
    with pytest.raises(InvalidInput) as exc:
        parse_submission(_payload(**{field: 42}))
    assert str(exc.value) == f"{field} must be a string"
