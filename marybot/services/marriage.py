from __future__ import annotations

from marybot.core.catalog import RING
from marybot.core.inventory import increment
from marybot.core.marriage import MarriageStatus, resolve_marriage
from marybot.core.outcomes import ErrorKind, Outcome, failure, store_guarded, success
from marybot.db import get_player, update_player


@store_guarded
def divorce(guild_id: int, user_id: int, target_id: int) -> Outcome:
    """
    Leave a marriage (or withdraw a proposal). Only the caller's record is
    written: the ring goes back to them and their `married_to` is cleared.
    The other side stays pending until they divorce too.
    """
    player = get_player(guild_id, user_id)
    if player is None:
        return failure(ErrorKind.PLAYER_NOT_FOUND)
    if player.married_to == 0:
        return failure(ErrorKind.NOT_MARRIED)

    target = get_player(guild_id, target_id)
    if target is None:
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)
    if player.married_to != target.user_id:
        return failure(ErrorKind.NOT_MARRIED_TO_THAT_USER)

    applied = update_player(
        guild_id,
        user_id,
        expected_version=player.version,
        inventory=increment(player.inventory, RING, 1),
        married_to=0,
    )
    if not applied:
        return failure(ErrorKind.CONCURRENT_MODIFICATION)

    if target.married_to == user_id:
        return success(
            f"You filed for divorce with {target.mention}! "
            "They now have to sign the papers to finalize the divorce."
        )
    return success(
        f"The papers have gone through. You and {target.mention} are now officially divorced..."
    )


@store_guarded
def marriage_status(guild_id: int, user_id: int, subject_id: int | None = None) -> Outcome:
    subject_id = user_id if subject_id is None else subject_id
    subject = get_player(guild_id, subject_id)
    if subject is None:
        if subject_id == user_id:
            return failure(ErrorKind.PLAYER_NOT_FOUND)
        return failure(ErrorKind.RECIPIENT_NOT_PLAYING)

    partner = get_player(guild_id, subject.married_to) if subject.married_to else None
    state = resolve_marriage(subject, partner)
    if state.status is MarriageStatus.MARRIED:
        return success(f"💍 {subject.mention} is married to <@{state.partner_id}>!")
    if state.status is MarriageStatus.PROPOSED:
        return success(
            f"{subject.mention} is waiting on <@{state.partner_id}> to use their ring."
        )
    return success(f"{subject.mention} is not married.")
