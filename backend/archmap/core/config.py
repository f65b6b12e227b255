import os
import logging
from typing import List

# --- Logging Setup ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def get_bool_env(var_name: str, default: bool = False) -> bool:
    value = os.getenv(var_name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_list_env(var_name: str, default: List[str]) -> List[str]:
    value = os.getenv(var_name)
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


# --- Environment Variables & Basic Config ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./archmap.db")

# 檢查 URL 是否使用非同步驅動
if not DATABASE_URL.startswith(("postgresql+asyncpg", "sqlite+aiosqlite")):
    logger.warning(
        f"DATABASE_URL does not use an async driver (postgresql+asyncpg / sqlite+aiosqlite). Received: {DATABASE_URL}. Ensure it's correctly configured for async."
    )

# --- Record Source Configuration ---
# "database": 從 catalog_entities 資料表讀取；"memory": 直接使用模擬目錄
RECORD_SOURCE_DATABASE = "database"
RECORD_SOURCE_MEMORY = "memory"
ARCHITECTURE_RECORD_SOURCE = os.getenv(
    "ARCHITECTURE_RECORD_SOURCE", RECORD_SOURCE_DATABASE
).lower()
if ARCHITECTURE_RECORD_SOURCE not in (RECORD_SOURCE_DATABASE, RECORD_SOURCE_MEMORY):
    logger.warning(
        f"Unknown ARCHITECTURE_RECORD_SOURCE '{ARCHITECTURE_RECORD_SOURCE}'. Falling back to '{RECORD_SOURCE_DATABASE}'."
    )
    ARCHITECTURE_RECORD_SOURCE = RECORD_SOURCE_DATABASE

# 啟動時將模擬銀行目錄寫入資料庫
ARCHITECTURE_USE_MOCK_DATA = get_bool_env("ARCHITECTURE_USE_MOCK_DATA")

# --- CORS ---
CORS_ORIGINS = get_list_env(
    "CORS_ORIGINS",
    [
        "http://localhost",
        "http://localhost:3000",  # 本地開發環境
        "http://127.0.0.1:3000",
    ],
)

logger.info(
    f"Record source: {ARCHITECTURE_RECORD_SOURCE}, mock data: {ARCHITECTURE_USE_MOCK_DATA}"
)
