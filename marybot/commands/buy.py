from discord import Interaction, app_commands

from marybot.commands.common import ITEM_CHOICES, perform
from marybot.services.transactions import buy_item


def setup_buy(tree: app_commands.CommandTree) -> None:
    @tree.command(name="buy", description="Buy items from the shop.")
    @app_commands.describe(item="Item to buy.", amount="How many to buy.")
    @app_commands.choices(item=ITEM_CHOICES)
    async def buy(interaction: Interaction, item: str, amount: int = 1) -> None:
        await perform(interaction, buy_item, item, amount)
