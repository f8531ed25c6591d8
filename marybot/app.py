import discord

from marybot.commands import setup_commands
from marybot.config.runtime import ensure_app_config_defaults
from marybot.config.settings import BOT_STATUS, TOKEN
from marybot.db import init_db


class MaryBot(discord.Client):
    def __init__(self) -> None:
        intents = discord.Intents.default()
        super().__init__(
            intents=intents,
            activity=discord.Game(name=BOT_STATUS),
        )
        self.tree = discord.app_commands.CommandTree(self)
        self._synced = False

    async def setup_hook(self) -> None:
        setup_commands(self.tree)

    async def on_ready(self) -> None:
        if self._synced:
            return

        # Per-guild sync shows new commands immediately; global sync can take an hour.
        for guild in self.guilds:
            self.tree.copy_global_to(guild=guild)
            await self.tree.sync(guild=guild)

        self._synced = True
        print("Mary, online and ready!")

    async def on_guild_join(self, guild: discord.Guild) -> None:
        self.tree.copy_global_to(guild=guild)
        await self.tree.sync(guild=guild)
        print(f"[startup] synced commands to new guild={guild.id}")


def run() -> None:
    if not TOKEN:
        print("[startup] no bot token: put it in the TOKEN file or set MARY_TOKEN.")
        raise SystemExit(1)
    init_db()
    ensure_app_config_defaults()
    bot = MaryBot()
    bot.run(TOKEN)


if __name__ == "__main__":
    run()
