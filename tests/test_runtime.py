import unittest

from marybot.config import settings
from marybot.config.runtime import (
    APP_CONFIG_SPECS,
    ensure_app_config_defaults,
    get_all_app_configs,
    get_app_config,
)
from marybot.db import get_state_value, set_state_value
from tests.db_case import TempDatabaseCase


class RuntimeConfigTests(TempDatabaseCase):
    def test_defaults_come_from_settings(self) -> None:
        self.assertEqual(get_app_config("SHOP_PAGE_SIZE"), settings.SHOP_PAGE_SIZE)
        self.assertEqual(get_app_config("START_BALANCE"), settings.START_BALANCE)

    def test_ensure_defaults_persists_every_key(self) -> None:
        ensure_app_config_defaults()
        for name in APP_CONFIG_SPECS:
            self.assertIsNotNone(get_state_value(f"config:{name}"))

    def test_stored_values_are_clamped(self) -> None:
        set_state_value("config:SHOP_PAGE_SIZE", "100")
        set_state_value("config:START_BALANCE", "-30")
        set_state_value("config:LEADERBOARD_SIZE", "0")
        self.assertEqual(get_app_config("SHOP_PAGE_SIZE"), 25)
        self.assertEqual(get_app_config("START_BALANCE"), 0)
        self.assertEqual(get_app_config("LEADERBOARD_SIZE"), 1)

    def test_garbage_value_falls_back_to_default(self) -> None:
        set_state_value("config:LEADERBOARD_SIZE", "lots")
        self.assertEqual(get_app_config("LEADERBOARD_SIZE"), settings.LEADERBOARD_SIZE)

    def test_unknown_key(self) -> None:
        with self.assertRaises(KeyError):
            get_app_config("NOPE")

    def test_get_all_app_configs(self) -> None:
        rows = get_all_app_configs()
        self.assertEqual([row["name"] for row in rows], list(APP_CONFIG_SPECS))
        self.assertTrue(all(row["type"] == "int" for row in rows))


if __name__ == "__main__":
    unittest.main()
