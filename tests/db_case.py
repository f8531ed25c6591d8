import tempfile
import unittest
from contextlib import contextmanager
from pathlib import Path
from unittest import mock

from marybot.core.inventory import ItemStack
from marybot.db import credit_player, ensure_player_exists, get_player, init_db, update_player

GUILD_ID = 4242


class StubRandom:
    """Hands out fixed values from random(), in order."""

    def __init__(self, *values: float) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


class TempDatabaseCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        patcher = mock.patch("marybot.db.database.DB_PATH", Path(tmp.name) / "marybot.db")
        patcher.start()
        self.addCleanup(patcher.stop)
        init_db()

    def add_player(
        self,
        user_id: int,
        balance: int = 0,
        inventory: dict[str, int] | None = None,
        married_to: int = 0,
        guild_id: int = GUILD_ID,
    ):
        player = ensure_player_exists(
            guild_id,
            user_id,
            "Test Guild",
            f"player{user_id}",
            start_balance=balance,
        )
        if inventory or married_to:
            stacks = tuple(ItemStack(name, qty) for name, qty in (inventory or {}).items())
            update_player(
                guild_id,
                user_id,
                expected_version=player.version,
                inventory=stacks,
                married_to=married_to,
            )
        return get_player(guild_id, user_id)

    def player(self, user_id: int, guild_id: int = GUILD_ID):
        return get_player(guild_id, user_id)

    @contextmanager
    def write_lands_after_read(self, module: str, user_id: int, **credit):
        """
        Patch `module.get_player` so that right after the first read of
        `user_id` another writer credits that record (bumping its version).
        """
        fired = []

        def reading(guild_id, read_id):
            record = get_player(guild_id, read_id)
            if read_id == user_id and not fired:
                fired.append(read_id)
                credit_player(guild_id, read_id, **credit)
            return record

        with mock.patch(f"{module}.get_player", side_effect=reading):
            yield fired
