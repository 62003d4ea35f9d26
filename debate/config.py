"""設定讀取：載入 .env 後以環境變數覆寫預設值"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# =========================
# Load .env if available
# =========================

def _load_dotenv_if_any() -> None:
    # 尋找目前工作目錄下的 .env
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

_load_dotenv_if_any()


# =========================
# Helpers
# =========================

def getenv_str(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key, default)
    if v is None:
        return None
    v = str(v).strip()
    return v if v != "" else default

def getenv_int(key: str, default: int = 0) -> int:
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return int(default)
    try:
        return int(str(v).strip())
    except ValueError:
        return int(default)

def getenv_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return bool(default)
    s = str(v).strip().lower()
    return s in ("1", "true", "yes", "y", "on")


# 伺服器識別（對外工具描述使用）
SERVER_NAME: str = "multi-agent-debate-server"
SERVER_VERSION: str = "0.1.0"

# 主持代理使用的模型
DEBATE_MODEL: str = getenv_str("DEBATE_MODEL", "gemini-2.5-flash") or "gemini-2.5-flash"

# 日誌層級
DEBATE_LOG_LEVEL: str = getenv_str("DEBATE_LOG_LEVEL", "INFO") or "INFO"

# 逐筆在 stderr 顯示發言框；DEBATE_COLOR=false 時輸出純文字
DEBATE_SHOW_LIVE: bool = getenv_bool("DEBATE_SHOW_LIVE", True)
DEBATE_COLOR: bool = getenv_bool("DEBATE_COLOR", True)

# 若設定路徑，每筆已接受的發言另以 ndjson 附加寫入（僅供觀察，不會回讀）
DEBATE_RECORD_PATH: Optional[str] = getenv_str("DEBATE_RECORD_PATH")

# 發言框內容的最大寬度（0 = 不限制）
DEBATE_RENDER_WIDTH: int = getenv_int("DEBATE_RENDER_WIDTH", 0)
