from marybot.config.settings import (
    BEG_COOLDOWN_SECONDS,
    BOT_STATUS,
    DAILY_COOLDOWN_SECONDS,
    DAILY_REWARD,
    DB_PATH,
    EMBED_COLOR,
    INVENTORY_PAGE_SIZE,
    LEADERBOARD_SIZE,
    OWNER_IDS,
    ROB_COOLDOWN_SECONDS,
    SHOP_PAGE_SIZE,
    START_BALANCE,
    STORE_TIMEOUT_SECONDS,
    TOKEN,
    USE_COOLDOWN_SECONDS,
)

__all__ = [
    "BEG_COOLDOWN_SECONDS",
    "BOT_STATUS",
    "DAILY_COOLDOWN_SECONDS",
    "DAILY_REWARD",
    "DB_PATH",
    "EMBED_COLOR",
    "INVENTORY_PAGE_SIZE",
    "LEADERBOARD_SIZE",
    "OWNER_IDS",
    "ROB_COOLDOWN_SECONDS",
    "SHOP_PAGE_SIZE",
    "START_BALANCE",
    "STORE_TIMEOUT_SECONDS",
    "TOKEN",
    "USE_COOLDOWN_SECONDS",
]
