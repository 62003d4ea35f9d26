"""辯論引擎的錯誤分類"""

from __future__ import annotations


class DebateError(ValueError):
    """所有可由呼叫端處理的辯論錯誤基底類別"""

    code = "debate_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(DebateError):
    """請求欄位缺漏或格式錯誤"""

    code = "invalid_input"


class UnregisteredAgent(DebateError):
    """代理尚未註冊即嘗試發言"""

    code = "unregistered_agent"

    def __init__(self, agent_id: str) -> None:
        super().__init__(f'agent {agent_id} is not registered – call action:"register" first')
        self.agent_id = agent_id


class MissingContent(DebateError):
    """需要內容的動作沒有提供內容"""

    code = "missing_content"

    def __init__(self, message: str = "content required for this action") -> None:
        super().__init__(message)


class UnknownAction(DebateError):
    """邊界層收到無法辨識的工具名稱"""

    code = "unknown_action"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


__all__ = [
    "DebateError",
    "InvalidInput",
    "UnregisteredAgent",
    "MissingContent",
    "UnknownAction",
]
