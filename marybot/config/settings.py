import os
from pathlib import Path


def parse_user_ids(raw: str | int | list[int] | tuple[int, ...] | None) -> set[int]:
    if raw is None:
        return set()
    if isinstance(raw, int):
        return {raw} if raw > 0 else set()
    if isinstance(raw, (list, tuple)):
        out: set[int] = set()
        for item in raw:
            try:
                uid = int(item)
            except (TypeError, ValueError):
                continue
            if uid > 0:
                out.add(uid)
        return out
    text = str(raw).strip().replace(";", ",").replace("|", ",")
    out = set()
    for token in (t.strip() for t in text.split(",")):
        if token.startswith("+"):
            token = token[1:]
        if token.isdigit() and int(token) > 0:
            out.add(int(token))
    return out


_ROOT = Path(__file__).resolve().parents[2]
_TOKEN_PATH = _ROOT / "TOKEN"
TOKEN = (
    _TOKEN_PATH.read_text(encoding="utf-8").strip()
    if _TOKEN_PATH.exists()
    else os.getenv("MARY_TOKEN", "").strip()
)
DB_PATH = Path(os.getenv("MARY_DB_PATH", str(_ROOT / "data" / "marybot.db")))

# APP CONFIGS
STORE_TIMEOUT_SECONDS = 10.0                # Busy timeout for every store round-trip
USE_COOLDOWN_SECONDS = 60                   # Minimum gap between two /use actions
DAILY_REWARD = 100                          # Coins paid out by /daily
DAILY_COOLDOWN_SECONDS = 86400              # One /daily claim per day
BEG_COOLDOWN_SECONDS = 60                   # Minimum gap between two /beg attempts
ROB_COOLDOWN_SECONDS = 1800                 # Minimum gap between two /rob attempts
OWNER_IDS = parse_user_ids(os.getenv("MARY_OWNER_IDS"))  # Discord user IDs that skip every cooldown
START_BALANCE = 0                           # Balance of a freshly created player record
SHOP_PAGE_SIZE = 3                          # Catalog items per /shop page
INVENTORY_PAGE_SIZE = 9                     # Stacks per /inventory page (3x3 inline grid)
LEADERBOARD_SIZE = 10                       # Players listed by /leaderboard
BOT_STATUS = "with her sister Eve"          # "Playing ..." presence text
EMBED_COLOR = 0xFFC0CB
