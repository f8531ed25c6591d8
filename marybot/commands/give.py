from discord import Interaction, Member, app_commands

from marybot.commands.common import ITEM_CHOICES, perform
from marybot.services.transactions import give_item


def setup_give(tree: app_commands.CommandTree) -> None:
    @tree.command(name="give", description="Give items to another player.")
    @app_commands.describe(
        member="Player who will receive the items.",
        item="Item to give.",
        amount="How many to give.",
    )
    @app_commands.choices(item=ITEM_CHOICES)
    async def give(interaction: Interaction, member: Member, item: str, amount: int = 1) -> None:
        await perform(interaction, give_item, item, amount, member.id)
