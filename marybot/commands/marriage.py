from __future__ import annotations

from discord import Interaction, Member, app_commands

from marybot.commands.common import perform
from marybot.services.marriage import marriage_status


def setup_marriage(tree: app_commands.CommandTree) -> None:
    @tree.command(name="marriage", description="Check who someone is married to.")
    @app_commands.describe(member="Player to check (defaults to you).")
    async def marriage(interaction: Interaction, member: Member | None = None) -> None:
        await perform(interaction, marriage_status, member.id if member is not None else None)
