from __future__ import annotations

import asyncio
from typing import Callable

from discord import Embed, Interaction, app_commands

from marybot.config.runtime import get_app_config
from marybot.config.settings import EMBED_COLOR
from marybot.core.catalog import list_items
from marybot.core.outcomes import ErrorKind, Listing, Outcome
from marybot.db import StoreUnavailable, ensure_player_exists

SERVER_ONLY_MESSAGE = "Please use this command in a server."

ITEM_CHOICES = [
    app_commands.Choice(name=item.name, value=item.identifier) for item in list_items()
]


def build_listing_embed(listing: Listing) -> Embed:
    embed = Embed(title=listing.title, color=EMBED_COLOR)
    for entry in listing.entries:
        embed.add_field(name=entry.label, value=entry.detail, inline=listing.inline)
    if listing.total_pages > 1:
        embed.set_footer(text=listing.footer)
    return embed


async def reply(interaction: Interaction, content: str | None = None, *, ephemeral: bool = False, **kwargs) -> None:
    """Answer directly, or through the followup webhook once the interaction was deferred."""
    if not interaction.response.is_done():
        await interaction.response.send_message(content, ephemeral=ephemeral, **kwargs)
        return
    if ephemeral:
        # The deferred "thinking" message is public; swap it for a private one.
        await interaction.delete_original_response()
    await interaction.followup.send(content, ephemeral=ephemeral, **kwargs)


async def join_game(interaction: Interaction) -> bool:
    """Create (or refresh) the caller's record. Returns False when the store is down."""
    guild = interaction.guild
    try:
        await asyncio.to_thread(
            ensure_player_exists,
            guild.id,
            interaction.user.id,
            guild.name,
            interaction.user.display_name,
            start_balance=int(get_app_config("START_BALANCE")),
        )
    except StoreUnavailable as exc:
        print(f"[commands] join guild={guild.id} user={interaction.user.id} failed: {exc}")
        return False
    return True


async def run_operation(operation: Callable[..., Outcome], *args, **kwargs) -> Outcome:
    outcome = await asyncio.to_thread(operation, *args, **kwargs)
    if outcome.error is ErrorKind.CONCURRENT_MODIFICATION:
        # One retry; the operation re-reads every record it needs.
        print(f"[commands] {operation.__name__} hit a concurrent write, retrying once")
        outcome = await asyncio.to_thread(operation, *args, **kwargs)
    return outcome


async def perform(
    interaction: Interaction,
    operation: Callable[..., Outcome],
    *args,
    **kwargs,
) -> Outcome | None:
    """
    Shared path for every player command: reject DMs, defer (store calls can
    wait out the busy timeout), make sure the caller has a record, run the
    operation on a worker thread and reply with its message.
    Listings are not sent here; callers render them.
    """
    if interaction.guild is None:
        await interaction.response.send_message(SERVER_ONLY_MESSAGE, ephemeral=True)
        return None

    await interaction.response.defer(thinking=True)
    if not await join_game(interaction):
        await reply(interaction, ErrorKind.STORE_UNAVAILABLE.message, ephemeral=True)
        return None

    outcome = await run_operation(operation, interaction.guild.id, interaction.user.id, *args, **kwargs)
    if not outcome.ok:
        print(
            f"[commands] {operation.__name__} guild={interaction.guild.id} user={interaction.user.id} "
            f"error={outcome.error.value}"
        )
        await reply(interaction, outcome.message, ephemeral=True)
        return outcome

    if outcome.listing is None:
        await reply(interaction, outcome.message)
    return outcome
