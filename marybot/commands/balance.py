from discord import Interaction, app_commands

from marybot.commands.common import SERVER_ONLY_MESSAGE, perform, reply, run_operation
from marybot.commands.listing import send_listing
from marybot.services.transactions import check_balance, leaderboard


def setup_balance(tree: app_commands.CommandTree) -> None:
    @tree.command(name="balance", description="Check how many coins you have.")
    async def balance(interaction: Interaction) -> None:
        await perform(interaction, check_balance)


def setup_leaderboard(tree: app_commands.CommandTree) -> None:
    @tree.command(name="leaderboard", description="See the richest players in this server.")
    async def leaderboard_command(interaction: Interaction) -> None:
        if interaction.guild is None:
            await interaction.response.send_message(SERVER_ONLY_MESSAGE, ephemeral=True)
            return

        await interaction.response.defer(thinking=True)
        outcome = await run_operation(leaderboard, interaction.guild.id)
        if not outcome.ok:
            await reply(interaction, outcome.message, ephemeral=True)
            return
        if outcome.listing is None:
            await reply(interaction, outcome.message)
            return
        await send_listing(interaction, outcome.listing)
