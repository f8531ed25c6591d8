from __future__ import annotations

from typing import Callable

from discord import ButtonStyle, Interaction
from discord.ui import Button, View, button

from marybot.commands.common import build_listing_embed, reply, run_operation
from marybot.core.outcomes import Listing, Outcome


class ListingPager(View):
    """Prev/Next buttons over a paged listing; each page is fetched fresh."""

    def __init__(
        self,
        owner_id: int,
        listing: Listing,
        fetch_page: Callable[[int], Outcome],
    ) -> None:
        super().__init__(timeout=180)
        self._owner_id = owner_id
        self._listing = listing
        self._fetch_page = fetch_page
        self._sync_buttons()

    def _sync_buttons(self) -> None:
        self.prev.disabled = self._listing.page <= 0
        self.next.disabled = self._listing.page >= self._listing.total_pages - 1

    async def interaction_check(self, interaction: Interaction) -> bool:
        if interaction.user.id != self._owner_id:
            await interaction.response.send_message(
                "Only the command user can change pages.",
                ephemeral=True,
            )
            return False
        return True

    async def _show(self, interaction: Interaction, page: int) -> None:
        await interaction.response.defer()
        outcome = await run_operation(self._fetch_page, page)
        if not outcome.ok or outcome.listing is None:
            await interaction.edit_original_response(content=outcome.message, embed=None, view=None)
            self.stop()
            return
        self._listing = outcome.listing
        self._sync_buttons()
        await interaction.edit_original_response(embed=build_listing_embed(self._listing), view=self)

    @button(label="Prev", style=ButtonStyle.secondary)
    async def prev(self, interaction: Interaction, _button: Button) -> None:
        await self._show(interaction, max(0, self._listing.page - 1))

    @button(label="Next", style=ButtonStyle.secondary)
    async def next(self, interaction: Interaction, _button: Button) -> None:
        await self._show(interaction, min(self._listing.total_pages - 1, self._listing.page + 1))


async def send_listing(
    interaction: Interaction,
    listing: Listing,
    fetch_page: Callable[[int], Outcome] | None = None,
) -> None:
    embed = build_listing_embed(listing)
    if fetch_page is None or listing.total_pages <= 1:
        await reply(interaction, embed=embed)
        return
    view = ListingPager(interaction.user.id, listing, fetch_page)
    await reply(interaction, embed=embed, view=view)
