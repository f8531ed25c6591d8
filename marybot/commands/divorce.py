from discord import Interaction, Member, app_commands

from marybot.commands.common import perform
from marybot.services.marriage import divorce as divorce_player


def setup_divorce(tree: app_commands.CommandTree) -> None:
    @tree.command(name="divorce", description="Divorce your partner and get your ring back.")
    @app_commands.describe(member="The player you are married to.")
    async def divorce(interaction: Interaction, member: Member) -> None:
        await perform(interaction, divorce_player, member.id)
