from functools import partial

from discord import Interaction, app_commands

from marybot.commands.common import perform
from marybot.commands.listing import send_listing
from marybot.services.transactions import inventory_listing


def setup_inventory(tree: app_commands.CommandTree) -> None:
    @tree.command(name="inventory", description="See the items you are carrying.")
    @app_commands.describe(page="Page of your inventory to open (starts at 1).")
    async def inventory(interaction: Interaction, page: app_commands.Range[int, 1, None] = 1) -> None:
        name = interaction.user.display_name
        outcome = await perform(interaction, inventory_listing, name, page - 1)
        if outcome is None or outcome.listing is None:
            return

        def fetch_page(index: int):
            return inventory_listing(interaction.guild.id, interaction.user.id, name, index)

        await send_listing(interaction, outcome.listing, fetch_page)
