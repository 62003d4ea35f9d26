"""服務模組匯入點。

這裡將個別 service 實例從子模組 re-export，方便外部以 `debate.services` 直接匯入。
例如：

	from debate.services import debate_tools

"""

from debate.services.toolset import build_toolset, debate_tools

__all__ = ["build_toolset", "debate_tools"]
