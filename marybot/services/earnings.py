from __future__ import annotations

import random
from datetime import datetime, timezone

from marybot.config import (
    BEG_COOLDOWN_SECONDS,
    DAILY_COOLDOWN_SECONDS,
    DAILY_REWARD,
    ROB_COOLDOWN_SECONDS,
)
from marybot.core.cooldown import cooldown_blocks
from marybot.core.outcomes import ErrorKind, Outcome, failure, store_guarded, success
from marybot.db import credit_player, get_player, modify_player, update_player
from marybot.services.money import roll_coins

BEG_RANGE = (1, 10)
ROB_RANGE = (1, 50)


@store_guarded
def claim_daily(guild_id: int, user_id: int, *, now: datetime | None = None) -> Outcome:
    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)

    now = now or datetime.now(timezone.utc)
    if cooldown_blocks(user_id, player.last_daily_at, now, cooldown_seconds=DAILY_COOLDOWN_SECONDS):
        return failure(ErrorKind.DAILY_ALREADY_CLAIMED)

    applied = update_player(
        guild_id,
        user_id,
        expected_version=player.version,
        balance_delta=DAILY_REWARD,
        last_daily_at=now,
    )
    if not applied:
        return failure(ErrorKind.CONCURRENT_MODIFICATION)
    return success(f"You claimed your daily {DAILY_REWARD} coins!")


@store_guarded
def beg(
    guild_id: int,
    user_id: int,
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> Outcome:
    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)

    now = now or datetime.now(timezone.utc)
    if cooldown_blocks(user_id, player.last_beg_at, now, cooldown_seconds=BEG_COOLDOWN_SECONDS):
        return failure(ErrorKind.TOO_SOON)

    gift = roll_coins(*BEG_RANGE, rng or random.Random())
    applied = update_player(
        guild_id,
        user_id,
        expected_version=player.version,
        balance_delta=gift,
        last_beg_at=now,
    )
    if not applied:
        return failure(ErrorKind.CONCURRENT_MODIFICATION)
    return success(f"Someone took pity on you and gave you {gift} coins!")


@store_guarded
def rob(
    guild_id: int,
    user_id: int,
    target_id: int,
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> Outcome:
    if int(target_id) == int(user_id):
        return failure(ErrorKind.INVALID_TARGET)

    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)
    target = get_player(guild_id, target_id)
    if target is None:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)

    now = now or datetime.now(timezone.utc)
    if cooldown_blocks(user_id, player.last_rob_at, now, cooldown_seconds=ROB_COOLDOWN_SECONDS):
        return failure(ErrorKind.TOO_SOON)

    # The attempt costs the cooldown whatever the target holds.
    if not update_player(guild_id, user_id, expected_version=player.version, last_rob_at=now):
        return failure(ErrorKind.CONCURRENT_MODIFICATION)

    rng = rng or random.Random()

    def steal(current):
        taken = min(roll_coins(*ROB_RANGE, rng), max(0, current.balance))
        if taken <= 0:
            return None, 0
        return {"balance_delta": -taken}, taken

    _found, taken = modify_player(guild_id, target_id, steal)
    if not taken:
        return success(f"You tried to rob {target.mention}, but their pockets were empty!")
    if not credit_player(guild_id, user_id, balance_delta=taken):
        print(f"[rob] robber vanished guild={guild_id} user={user_id} amount={taken}")
    return success(f"You robbed {target.mention} and got away with {taken} coins!")
