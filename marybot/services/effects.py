from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timezone

from marybot.core.catalog import BOW, CAR, CHOCOLATE, GUN, RING, SHIELD, find_item
from marybot.core.cooldown import cooldown_blocks
from marybot.core.inventory import decrement
from marybot.core.marriage import resolve_marriage
from marybot.core.outcomes import ErrorKind, Outcome, failure, store_guarded, success
from marybot.core.player import PlayerRecord
from marybot.db import credit_player, get_player, modify_player, update_player
from marybot.services.money import fraction_of

CHOCOLATE_JACKPOT = 1_000_000
CHOCOLATE_JACKPOT_CHANCE = 0.01
CAR_TOLL = 1000
GUN_ROB_RANGE = (0.10, 0.60)
BOW_ROB_RANGE = (0.20, 0.30)
BOW_BACKFIRE_RANGE = (0.10, 0.20)

PASSIVE_ITEMS = {SHIELD}


@store_guarded
def use_item(
    guild_id: int,
    user_id: int,
    item: str,
    target_id: int = 0,
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> Outcome:
    """
    Use one item. The cooldown stamp is the only conditional write; once it
    lands every later write goes through `modify_player` against the current
    record, so the effect either happens or fails for a terminal reason.
    """
    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)

    catalog_item = find_item(item)
    if catalog_item is None:
        return failure(ErrorKind.ITEM_NOT_FOUND)
    if not player.inventory:
        return failure(ErrorKind.EMPTY_INVENTORY)

    name = catalog_item.identifier
    if player.held(name) < 1:
        return failure(ErrorKind.ITEM_NOT_IN_INVENTORY)
    if name in PASSIVE_ITEMS:
        return failure(ErrorKind.ITEM_NOT_USABLE)

    now = now or datetime.now(timezone.utc)
    if cooldown_blocks(user_id, player.last_use_at, now):
        return failure(ErrorKind.COOLDOWN_ACTIVE)

    # Nothing is committed before this write, so a conflict here is safe to retry.
    if not update_player(guild_id, user_id, expected_version=player.version, last_use_at=now):
        return failure(ErrorKind.CONCURRENT_MODIFICATION)
    player = replace(player, last_use_at=now, version=player.version + 1)

    rng = rng or random.Random()
    if name == CHOCOLATE:
        return _eat_chocolate(player, rng)

    if int(target_id or 0) == int(user_id):
        return failure(ErrorKind.INVALID_TARGET)
    target = get_player(guild_id, target_id) if target_id else None
    if target is None:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)

    if name == CAR:
        return _run_over(player, target)
    if name == GUN:
        return _shoot(player, target, rng)
    if name == BOW:
        return _fire_bow(player, target, rng)
    return _propose(player, target)


def _consume(player: PlayerRecord, name: str, *, balance_delta: int = 0) -> bool:
    def change(current: PlayerRecord):
        inventory, ok = decrement(current.inventory, name, 1)
        if not ok:
            return None, False
        return {"inventory": inventory, "balance_delta": balance_delta}, True

    _found, consumed = modify_player(player.guild_id, player.user_id, change)
    return bool(consumed)


def _pay(player: PlayerRecord, amount: int) -> None:
    if amount > 0 and not credit_player(player.guild_id, player.user_id, balance_delta=amount):
        print(f"[use] payout target vanished guild={player.guild_id} user={player.user_id} amount={amount}")


def _eat_chocolate(player: PlayerRecord, rng: random.Random) -> Outcome:
    jackpot = rng.random() < CHOCOLATE_JACKPOT_CHANCE
    if not _consume(player, CHOCOLATE, balance_delta=CHOCOLATE_JACKPOT if jackpot else 0):
        return failure(ErrorKind.ITEM_NOT_IN_INVENTORY)
    if jackpot:
        return success(f"You found a golden ticket! You won {CHOCOLATE_JACKPOT} coins!")
    return success("You ate some chocolate. Yum!")


def _run_over(player: PlayerRecord, target: PlayerRecord) -> Outcome:
    # The car is never used up.
    def toll(current: PlayerRecord):
        if current.balance < CAR_TOLL:
            return None, 0
        return {"balance_delta": -CAR_TOLL}, CAR_TOLL

    found, taken = modify_player(target.guild_id, target.user_id, toll)
    if not found:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)
    if not taken:
        return success(
            f"You ran over {target.mention} with your car, but they didn't have enough money to pay you!"
        )
    _pay(player, taken)
    return success(f"You ran over {target.mention} with your car and took {CAR_TOLL} coins from them!")


def _shoot(player: PlayerRecord, target: PlayerRecord, rng: random.Random) -> Outcome:
    if not _consume(player, GUN):
        return failure(ErrorKind.ITEM_NOT_IN_INVENTORY)

    def hit(current: PlayerRecord):
        inventory, blocked = decrement(current.inventory, SHIELD, 1)
        if blocked:
            return {"inventory": inventory}, None
        robbed = fraction_of(current.balance, *GUN_ROB_RANGE, rng)
        return {"balance_delta": -robbed}, robbed

    found, robbed = modify_player(target.guild_id, target.user_id, hit)
    if not found:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)
    if robbed is None:
        return success(
            f"You shot {target.mention} with your gun, but they had a shield and it blocked the bullet!"
        )
    _pay(player, robbed)
    return success(f"You held up {target.mention} at gunpoint and robbed {robbed} coins from them!")


def _fire_bow(player: PlayerRecord, target: PlayerRecord, rng: random.Random) -> Outcome:
    if not _consume(player, BOW):
        return failure(ErrorKind.ITEM_NOT_IN_INVENTORY)

    def hit(current: PlayerRecord):
        inventory, armed = decrement(current.inventory, GUN, 1)
        if armed:
            return {"inventory": inventory}, None
        robbed = fraction_of(current.balance, *BOW_ROB_RANGE, rng)
        return {"balance_delta": -robbed}, robbed

    found, robbed = modify_player(target.guild_id, target.user_id, hit)
    if not found:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)
    if robbed is not None:
        _pay(player, robbed)
        return success(f"You shot {target.mention} and took {robbed} coins from them!")

    # Lost coins go nowhere; the target does not receive them.
    def shot_back(current: PlayerRecord):
        lost = fraction_of(current.balance, *BOW_BACKFIRE_RANGE, rng)
        return {"balance_delta": -lost}, lost

    _found, lost = modify_player(player.guild_id, player.user_id, shot_back)
    return success(
        f"You tried to rob {target.mention} with a bow, but they had a gun and shot you! "
        f"You lost {lost} coins!"
    )


def _propose(player: PlayerRecord, target: PlayerRecord) -> Outcome:
    if target.married_to not in (0, player.user_id):
        return failure(ErrorKind.TARGET_ALREADY_MARRIED)

    def give_ring(current: PlayerRecord):
        if current.married_to != 0:
            return None, ErrorKind.ALREADY_MARRIED
        inventory, ok = decrement(current.inventory, RING, 1)
        if not ok:
            return None, ErrorKind.ITEM_NOT_IN_INVENTORY
        return {"inventory": inventory, "married_to": target.user_id}, None

    _found, error = modify_player(player.guild_id, player.user_id, give_ring)
    if error is not None:
        return failure(error)

    state = resolve_marriage(replace(player, married_to=target.user_id), target)
    if state.is_married:
        return success(f"🎉 Congratulations! You and {target.mention} are now officially married! 🎉")
    return success(
        f"You proposed to {target.mention} with a ring! "
        "They now have to accept your proposal by using their own ring!"
    )
