from discord import Interaction, Member, app_commands

from marybot.commands.common import perform
from marybot.services.earnings import beg as beg_for_coins
from marybot.services.earnings import claim_daily, rob as rob_player


def setup_daily(tree: app_commands.CommandTree) -> None:
    @tree.command(name="daily", description="Claim your daily coins.")
    async def daily(interaction: Interaction) -> None:
        await perform(interaction, claim_daily)


def setup_beg(tree: app_commands.CommandTree) -> None:
    @tree.command(name="beg", description="Beg for a few coins.")
    async def beg(interaction: Interaction) -> None:
        await perform(interaction, beg_for_coins)


def setup_rob(tree: app_commands.CommandTree) -> None:
    @tree.command(name="rob", description="Try to pickpocket another player.")
    @app_commands.describe(member="The player to rob.")
    async def rob(interaction: Interaction, member: Member) -> None:
        await perform(interaction, rob_player, member.id)
