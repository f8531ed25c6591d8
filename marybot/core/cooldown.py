from __future__ import annotations

from datetime import datetime, timezone
from typing import Collection

from marybot.config import OWNER_IDS, USE_COOLDOWN_SECONDS


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def cooldown_remaining(
    last_use_at: datetime | None,
    now: datetime,
    cooldown_seconds: float = USE_COOLDOWN_SECONDS,
) -> float:
    if last_use_at is None:
        return 0.0
    elapsed = (as_utc(now) - as_utc(last_use_at)).total_seconds()
    return max(0.0, float(cooldown_seconds) - elapsed)


def cooldown_blocks(
    user_id: int,
    last_use_at: datetime | None,
    now: datetime,
    *,
    cooldown_seconds: float = USE_COOLDOWN_SECONDS,
    bypass_ids: Collection[int] | None = None,
) -> bool:
    if int(user_id) in (OWNER_IDS if bypass_ids is None else bypass_ids):
        return False
    return cooldown_remaining(last_use_at, now, cooldown_seconds) > 0
