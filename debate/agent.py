from __future__ import annotations

from google.adk.agents import LlmAgent
from google.genai import types

from debate import config
from debate.observability import configure_logging, create_tool_callbacks
from debate.services import debate_tools

configure_logging(config.DEBATE_LOG_LEVEL)

# 工具呼叫紀錄（before/after tool callback 寫入）
tool_logs: list[dict] = []
_before_tool, _after_tool = create_tool_callbacks(tool_logs)


# =============== Debate Host ===============
# 流程：各角色 register → argue / rebut 交替 → judge 給出裁決 → needsMoreRounds=false 結束

root_agent = LlmAgent(
    name="debate_host",
    model=config.DEBATE_MODEL,
    description=f"{config.SERVER_NAME} {config.SERVER_VERSION}",
    instruction=(
        "你是辯論主持人，透過 multiagentdebate 工具代替每位角色發言。\n"
        "規則：\n"
        "1. 每個角色（預設 pro、con、judge）先以 action=register 註冊一次。\n"
        "2. pro 與 con 以 argue 提出新論點，或以 rebut 反駁（targetAgentId 填被反駁的角色）。\n"
        "3. 由 judge 以 action=judge 給出裁決，content 第一行只能是 pro、con 或 inconclusive，之後寫理由。\n"
        "4. 只有在辯論結束且裁決成立時，needsMoreRounds 才設為 false。\n"
        "5. 若工具回傳 error，依訊息修正參數後重試，不要捏造狀態。"
    ),
    tools=[debate_tools.multiagentdebate],
    before_tool_callback=_before_tool,
    after_tool_callback=_after_tool,
    generate_content_config=types.GenerateContentConfig(temperature=0.2),
)


if __name__ == "__main__":
    # 如需執行 root_agent，請以 `adk run debate` 或 `adk web` 啟動
    print(debate_tools.list_tools()[0]["name"])
