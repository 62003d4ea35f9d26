"""辯論狀態引擎：驗證提交、附加紀錄並產生狀態摘要"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Callable, Dict, Optional, Tuple

from .errors import MissingContent, UnregisteredAgent
from .models import Action, HistoryRecord, Snapshot, SubmissionRequest, Verdict
from .validator import parse_submission
from .verdict import extract_verdict

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DebateEngine:
    """持有代理名單、辯論紀錄與裁決的唯一寫入者

    所有狀態變更都經由 `submit`；每次呼叫在同一把鎖內完成，
    任何驗證失敗都不會留下部分變更。
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        # dict 保留註冊順序，值不使用
        self._agents: Dict[str, None] = {}
        self._history: list[HistoryRecord] = []
        self._verdict: Optional[Verdict] = None
        self._clock = clock or _utcnow
        self._lock = Lock()

    @property
    def agents(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._agents)

    @property
    def history(self) -> Tuple[HistoryRecord, ...]:
        with self._lock:
            return tuple(self._history)

    @property
    def verdict(self) -> Optional[Verdict]:
        with self._lock:
            return self._verdict

    def submit(self, request: SubmissionRequest | Any) -> Snapshot:
        """處理一次提交並回傳狀態摘要

        參數:
            request: 已驗證的 SubmissionRequest，或尚未驗證的原始 dict。

        回傳:
            Snapshot: 目前代理名單、紀錄數、最後動作、裁決與呼叫端的 needsMoreRounds。

        例外:
            InvalidInput / UnregisteredAgent / MissingContent，皆不改變狀態。
        """
        req = parse_submission(request)

        with self._lock:
            record: Optional[HistoryRecord] = None

            if req.action is Action.REGISTER:
                self._agents.setdefault(req.agent_id, None)
            else:
                if req.agent_id not in self._agents:
                    raise UnregisteredAgent(req.agent_id)
                if req.content is None or not req.content.strip():
                    raise MissingContent()

                # targetAgentId 不比對代理名單，round 也不檢查順序
                record = HistoryRecord(
                    agent_id=req.agent_id,
                    round=req.round,
                    action=req.action,
                    content=req.content,
                    target_agent_id=req.target_agent_id,
                    timestamp=self._clock(),
                )
                self._history.append(record)

                if req.action is Action.JUDGE:
                    self._verdict = extract_verdict(req.content, req.round)

            snapshot = Snapshot(
                agents=list(self._agents),
                total_arguments=len(self._history),
                last_action=req.action,
                verdict=self._verdict,
                needs_more_rounds=req.needs_more_rounds,
                record=record,
            )

        logger.debug(
            "accepted %s from %s (round %d), total=%d",
            req.action.value,
            req.agent_id,
            req.round,
            snapshot.total_arguments,
        )
        return snapshot


__all__ = ["DebateEngine"]
