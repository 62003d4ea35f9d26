"""辯論引擎使用的資料模型"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class Action(str, Enum):
    """代理可提交的動作"""

    REGISTER = "register"
    ARGUE = "argue"
    REBUT = "rebut"
    JUDGE = "judge"


# 會寫入辯論紀錄的動作（register 只影響代理名單）
CONTENT_ACTIONS = (Action.ARGUE, Action.REBUT, Action.JUDGE)


def _integral_round(value: Any) -> Any:
    """整數值的浮點數（如 2.0）轉為 int；bool 與字串交由 StrictInt 拒絕"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


RoundNumber = Annotated[StrictInt, BeforeValidator(_integral_round)]


class SubmissionRequest(BaseModel):
    """單次提交的請求內容，驗證後即丟棄

    欄位順序即驗證錯誤的回報順序。
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    agent_id: StrictStr = Field(alias="agentId", min_length=1)  # 如 pro / con / judge
    round: RoundNumber = Field(ge=1)  # 從 1 開始的回合編號
    action: Action
    needs_more_rounds: StrictBool = Field(alias="needsMoreRounds")
    content: Optional[StrictStr] = None  # 論點或裁決文字
    target_agent_id: Optional[StrictStr] = Field(default=None, alias="targetAgentId")


class HistoryRecord(BaseModel):
    """已接受的一筆發言，寫入後不再變動"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    agent_id: str = Field(alias="agentId")
    round: int
    action: Action
    content: str
    target_agent_id: Optional[str] = Field(default=None, alias="targetAgentId")
    timestamp: datetime

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Verdict(BaseModel):
    """由最近一次 judge 發言推導出的裁決"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    winner: str = Field(alias="for")  # 裁決內容第一行，如 pro / con / inconclusive
    rationale: str
    round: int


class Snapshot(BaseModel):
    """每次提交後回傳的狀態摘要

    `record` 為本次新增的辯論紀錄，只提供給呈現端使用，不會序列化輸出。
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    agents: List[str]
    total_arguments: int = Field(alias="totalArguments")
    last_action: Action = Field(alias="lastAction")
    verdict: Optional[Verdict] = None
    needs_more_rounds: bool = Field(alias="needsMoreRounds")
    record: Optional[HistoryRecord] = Field(default=None, exclude=True)

    def to_payload(self) -> Dict[str, Any]:
        """轉為對外回傳的 JSON 結構"""
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "Action",
    "CONTENT_ACTIONS",
    "SubmissionRequest",
    "HistoryRecord",
    "Verdict",
    "Snapshot",
]
