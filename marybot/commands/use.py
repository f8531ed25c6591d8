from __future__ import annotations

from discord import Interaction, Member, app_commands

from marybot.commands.common import ITEM_CHOICES, perform
from marybot.services.effects import use_item


def setup_use(tree: app_commands.CommandTree) -> None:
    @tree.command(name="use", description="Use an item, on yourself or on another player.")
    @app_commands.describe(
        item="Item to use.",
        member="Target player (car, gun, bow and ring need one).",
    )
    @app_commands.choices(item=ITEM_CHOICES)
    async def use(interaction: Interaction, item: str, member: Member | None = None) -> None:
        await perform(interaction, use_item, item, member.id if member is not None else 0)
