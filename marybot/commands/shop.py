from discord import Interaction, app_commands

from marybot.commands.common import SERVER_ONLY_MESSAGE, reply, run_operation
from marybot.commands.listing import send_listing
from marybot.services.transactions import shop_listing


def setup_shop(tree: app_commands.CommandTree) -> None:
    @tree.command(name="shop", description="See what Mary has for sale.")
    @app_commands.describe(page="Page of the shop to open (starts at 1).")
    async def shop(interaction: Interaction, page: app_commands.Range[int, 1, None] = 1) -> None:
        if interaction.guild is None:
            await interaction.response.send_message(SERVER_ONLY_MESSAGE, ephemeral=True)
            return

        await interaction.response.defer(thinking=True)
        outcome = await run_operation(shop_listing, page - 1)
        if not outcome.ok:
            await reply(interaction, outcome.message, ephemeral=True)
            return
        await send_listing(interaction, outcome.listing, shop_listing)
