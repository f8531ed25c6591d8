from discord import Interaction, Member, app_commands

from marybot.commands.common import perform
from marybot.services.transactions import pay_coins


def setup_pay(tree: app_commands.CommandTree) -> None:
    @tree.command(name="pay", description="Pay coins to another player.")
    @app_commands.describe(
        member="Player who will receive the coins.",
        amount="How many coins to pay.",
    )
    async def pay(interaction: Interaction, member: Member, amount: int) -> None:
        await perform(interaction, pay_coins, member.id, amount)
