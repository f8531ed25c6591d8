from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Iterator, TypeVar

from marybot.config import START_BALANCE
from marybot.core.cooldown import as_utc
from marybot.core.inventory import Inventory, from_rows, increment, to_rows
from marybot.core.player import PlayerRecord
from marybot.db.database import StoreUnavailable, get_connection

T = TypeVar("T")

_PLAYER_COLUMNS = """
    guild_id, user_id, guild_name, display_name, joined_at,
    balance, last_use_at, last_daily_at, last_beg_at, last_rob_at,
    married_to, inventory, version
"""

# Timestamp columns a write may stamp.
_TIMER_FIELDS = ("last_use_at", "last_daily_at", "last_beg_at", "last_rob_at")


@contextmanager
def _session(*, immediate: bool = False) -> Iterator[sqlite3.Connection]:
    try:
        conn = get_connection()
    except (sqlite3.DatabaseError, OSError) as exc:
        raise StoreUnavailable(f"could not open store: {exc}") from exc
    try:
        with conn:
            if immediate:
                conn.execute("BEGIN IMMEDIATE")
            yield conn
    except sqlite3.DatabaseError as exc:
        raise StoreUnavailable(str(exc)) from exc
    finally:
        conn.close()


def _parse_timestamp(raw: object) -> datetime | None:
    if not raw:
        return None
    try:
        return as_utc(datetime.fromisoformat(str(raw)))
    except ValueError:
        return None


def _load_inventory(raw: object) -> Inventory:
    try:
        data = json.loads(str(raw or "[]"))
    except json.JSONDecodeError:
        return ()
    return from_rows(data)


def _dump_inventory(inventory: Inventory) -> str:
    return json.dumps(to_rows(inventory), separators=(",", ":"), ensure_ascii=False)


def _row_to_player(row: sqlite3.Row) -> PlayerRecord:
    return PlayerRecord(
        guild_id=int(row["guild_id"]),
        user_id=int(row["user_id"]),
        balance=int(row["balance"] or 0),
        last_use_at=_parse_timestamp(row["last_use_at"]),
        married_to=int(row["married_to"] or 0),
        inventory=_load_inventory(row["inventory"]),
        version=int(row["version"] or 0),
        display_name=str(row["display_name"] or ""),
        guild_name=str(row["guild_name"] or ""),
        joined_at=str(row["joined_at"] or ""),
        last_daily_at=_parse_timestamp(row["last_daily_at"]),
        last_beg_at=_parse_timestamp(row["last_beg_at"]),
        last_rob_at=_parse_timestamp(row["last_rob_at"]),
    )


def _select_player(conn: sqlite3.Connection, guild_id: int, user_id: int) -> sqlite3.Row | None:
    return conn.execute(
        f"""
        SELECT {_PLAYER_COLUMNS}
        FROM players
        WHERE guild_id = ? AND user_id = ?
        """,
        (guild_id, user_id),
    ).fetchone()


def _assignments(
    balance_delta: int = 0,
    inventory: Inventory | None = None,
    married_to: int | None = None,
    **timers: datetime | None,
) -> tuple[list[str], list[object]]:
    assignments = ["balance = balance + ?", "version = version + 1"]
    params: list[object] = [int(balance_delta)]
    if inventory is not None:
        assignments.append("inventory = ?")
        params.append(_dump_inventory(inventory))
    if married_to is not None:
        assignments.append("married_to = ?")
        params.append(int(married_to))
    for name, stamp in timers.items():
        if name not in _TIMER_FIELDS:
            raise TypeError(f"Unknown player field: {name}")
        if stamp is not None:
            assignments.append(f"{name} = ?")
            params.append(as_utc(stamp).isoformat())
    return assignments, params


def get_player(guild_id: int, user_id: int) -> PlayerRecord | None:
    with _session() as conn:
        row = _select_player(conn, guild_id, user_id)
        return None if row is None else _row_to_player(row)


def ensure_player_exists(
    guild_id: int,
    user_id: int,
    guild_name: str,
    display_name: str,
    *,
    start_balance: int = START_BALANCE,
) -> PlayerRecord:
    joined_at = datetime.now(timezone.utc).isoformat()
    with _session() as conn:
        conn.execute(
            """
            INSERT INTO players (guild_id, user_id, guild_name, display_name, joined_at, balance)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(guild_id, user_id) DO UPDATE SET
                guild_name = excluded.guild_name,
                display_name = excluded.display_name
            """,
            (guild_id, user_id, guild_name, display_name, joined_at, int(start_balance)),
        )
        return _row_to_player(_select_player(conn, guild_id, user_id))


def update_player(
    guild_id: int,
    user_id: int,
    *,
    expected_version: int,
    balance_delta: int = 0,
    inventory: Inventory | None = None,
    married_to: int | None = None,
    **timers: datetime | None,
) -> bool:
    """
    Apply a partial update only if the stored version still equals
    `expected_version`. Balance is relative; the other fields are absolute.
    `timers` stamps any of last_use_at, last_daily_at, last_beg_at,
    last_rob_at. Returns False when another write got there first.
    """
    assignments, params = _assignments(balance_delta, inventory, married_to, **timers)
    params.extend([guild_id, user_id, int(expected_version)])
    with _session() as conn:
        cur = conn.execute(
            f"""
            UPDATE players
            SET {", ".join(assignments)}
            WHERE guild_id = ? AND user_id = ? AND version = ?
            """,
            params,
        )
        return cur.rowcount == 1


def modify_player(
    guild_id: int,
    user_id: int,
    change: Callable[[PlayerRecord], tuple[dict[str, Any] | None, T]],
) -> tuple[bool, T | None]:
    """
    Locked read-modify-write that cannot lose to another writer.

    `change` gets the current record and returns (fields, result): `fields`
    are update_player keyword arguments (without expected_version), or None
    to leave the record alone. Returns (found, result); found is False when
    the record does not exist and `change` was never called.
    """
    with _session(immediate=True) as conn:
        row = _select_player(conn, guild_id, user_id)
        if row is None:
            return False, None
        fields, result = change(_row_to_player(row))
        if fields is not None:
            assignments, params = _assignments(**fields)
            params.extend([guild_id, user_id])
            conn.execute(
                f"""
                UPDATE players
                SET {", ".join(assignments)}
                WHERE guild_id = ? AND user_id = ?
                """,
                params,
            )
        return True, result


def credit_player(
    guild_id: int,
    user_id: int,
    *,
    balance_delta: int = 0,
    item_name: str | None = None,
    quantity: int = 0,
) -> bool:
    """Add money and/or items to a record in one locked read-modify-write."""

    def change(player: PlayerRecord) -> tuple[dict[str, Any], None]:
        fields: dict[str, Any] = {"balance_delta": balance_delta}
        if item_name and quantity > 0:
            fields["inventory"] = increment(player.inventory, item_name, quantity)
        return fields, None

    found, _ = modify_player(guild_id, user_id, change)
    return found


def get_players(guild_id: int, limit: int | None = None) -> list[PlayerRecord]:
    with _session() as conn:
        rows = conn.execute(
            f"""
            SELECT {_PLAYER_COLUMNS}
            FROM players
            WHERE guild_id = ?
            ORDER BY balance DESC, user_id ASC
            LIMIT ?
            """,
            (guild_id, -1 if limit is None else max(0, int(limit))),
        ).fetchall()
        return [_row_to_player(row) for row in rows]


def get_guilds() -> list[dict]:
    with _session() as conn:
        rows = conn.execute(
            """
            SELECT guild_id, MAX(guild_name) AS guild_name, COUNT(*) AS players
            FROM players
            GROUP BY guild_id
            ORDER BY guild_id
            """
        ).fetchall()
        return [dict(row) for row in rows]


def get_state_value(key: str) -> str | None:
    with _session() as conn:
        row = conn.execute(
            "SELECT value FROM app_state WHERE key = ?",
            (key,),
        ).fetchone()
        return None if row is None else row["value"]


def set_state_value(key: str, value: str) -> None:
    with _session() as conn:
        conn.execute(
            """
            INSERT INTO app_state (key, value)
            VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
            (key, value),
        )
