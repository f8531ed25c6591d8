import sqlite3
from pathlib import Path

from marybot.config import DB_PATH, STORE_TIMEOUT_SECONDS


class StoreUnavailable(RuntimeError):
    """The record store timed out or could not be reached."""


def get_connection() -> sqlite3.Connection:
    Path(DB_PATH).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(DB_PATH, timeout=STORE_TIMEOUT_SECONDS)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_db() -> None:
    conn = get_connection()
    try:
        with conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS players (
                    guild_id INTEGER NOT NULL,
                    user_id INTEGER NOT NULL,
                    guild_name TEXT NOT NULL DEFAULT '',
                    display_name TEXT NOT NULL DEFAULT '',
                    joined_at TEXT NOT NULL,
                    balance INTEGER NOT NULL DEFAULT 0,
                    last_use_at TEXT,
                    last_daily_at TEXT,
                    last_beg_at TEXT,
                    last_rob_at TEXT,
                    married_to INTEGER NOT NULL DEFAULT 0,
                    inventory TEXT NOT NULL DEFAULT '[]',
                    version INTEGER NOT NULL DEFAULT 0,
                    PRIMARY KEY (guild_id, user_id)
                );

                CREATE INDEX IF NOT EXISTS idx_players_balance
                    ON players (guild_id, balance DESC);

                CREATE TABLE IF NOT EXISTS app_state (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                );
                """
            )
            _ensure_player_columns(conn)
    finally:
        conn.close()


def _ensure_player_columns(conn: sqlite3.Connection) -> None:
    columns = {
        row["name"]
        for row in conn.execute("PRAGMA table_info(players);").fetchall()
    }
    for name in ("last_daily_at", "last_beg_at", "last_rob_at"):
        if name not in columns:
            conn.execute(f"ALTER TABLE players ADD COLUMN {name} TEXT;")
