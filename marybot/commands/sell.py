from discord import Interaction, app_commands

from marybot.commands.common import ITEM_CHOICES, perform
from marybot.services.transactions import sell_item


def setup_sell(tree: app_commands.CommandTree) -> None:
    @tree.command(name="sell", description="Sell items back to the shop for half price.")
    @app_commands.describe(item="Item to sell.", amount="How many to sell.")
    @app_commands.choices(item=ITEM_CHOICES)
    async def sell(interaction: Interaction, item: str, amount: int = 1) -> None:
        await perform(interaction, sell_item, item, amount)
