import unittest
from datetime import datetime, timedelta, timezone
from unittest import mock

from marybot.core.outcomes import ErrorKind
from marybot.services.earnings import beg, claim_daily, rob
from marybot.services.transactions import buy_item
from tests.db_case import GUILD_ID, StubRandom, TempDatabaseCase

NOW = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)


class EarningCase(TempDatabaseCase):
    def setUp(self) -> None:
        super().setUp()
        patcher = mock.patch("marybot.core.cooldown.OWNER_IDS", set())
        patcher.start()
        self.addCleanup(patcher.stop)


class DailyTests(EarningCase):
    def test_daily_once_per_day(self) -> None:
        self.add_player(1)

        self.assertEqual(claim_daily(GUILD_ID, 1, now=NOW).message, "You claimed your daily 100 coins!")
        again = claim_daily(GUILD_ID, 1, now=NOW + timedelta(hours=23))
        self.assertIs(again.error, ErrorKind.DAILY_ALREADY_CLAIMED)
        self.assertEqual(self.player(1).balance, 100)

        self.assertTrue(claim_daily(GUILD_ID, 1, now=NOW + timedelta(days=1)).ok)
        self.assertEqual(self.player(1).balance, 200)
        self.assertEqual(self.player(1).last_daily_at, NOW + timedelta(days=1))

    def test_new_player_can_afford_chocolate_after_daily(self) -> None:
        self.add_player(1)
        self.assertIs(buy_item(GUILD_ID, 1, "chocolate", 1).error, ErrorKind.INSUFFICIENT_FUNDS)

        claim_daily(GUILD_ID, 1, now=NOW)

        self.assertTrue(buy_item(GUILD_ID, 1, "chocolate", 1).ok)
        self.assertEqual(self.player(1).balance, 50)

    def test_daily_without_record(self) -> None:
        self.assertIs(claim_daily(GUILD_ID, 1, now=NOW).error, ErrorKind.PLAYER_NOT_FOUND)

    def test_daily_on_a_stale_record_writes_nothing(self) -> None:
        self.add_player(1)

        with self.write_lands_after_read("marybot.services.earnings", 1):
            outcome = claim_daily(GUILD_ID, 1, now=NOW)

        self.assertIs(outcome.error, ErrorKind.CONCURRENT_MODIFICATION)
        self.assertEqual(self.player(1).balance, 0)
        self.assertIsNone(self.player(1).last_daily_at)


class BegTests(EarningCase):
    def test_beg_pays_between_one_and_ten(self) -> None:
        self.add_player(1)

        low = beg(GUILD_ID, 1, now=NOW, rng=StubRandom(0.0))
        high = beg(GUILD_ID, 1, now=NOW + timedelta(minutes=1), rng=StubRandom(0.99))

        self.assertEqual(low.message, "Someone took pity on you and gave you 1 coins!")
        self.assertEqual(high.message, "Someone took pity on you and gave you 10 coins!")
        self.assertEqual(self.player(1).balance, 11)

    def test_beg_cooldown(self) -> None:
        self.add_player(1)
        beg(GUILD_ID, 1, now=NOW, rng=StubRandom(0.5))

        outcome = beg(GUILD_ID, 1, now=NOW + timedelta(seconds=10), rng=StubRandom(0.5))

        self.assertIs(outcome.error, ErrorKind.TOO_SOON)
        self.assertEqual(self.player(1).balance, 6)


class RobTests(EarningCase):
    def test_rob_takes_coins(self) -> None:
        self.add_player(1, balance=5)
        self.add_player(2, balance=100)

        outcome = rob(GUILD_ID, 1, 2, now=NOW, rng=StubRandom(0.5))

        self.assertEqual(outcome.message, "You robbed <@2> and got away with 26 coins!")
        self.assertEqual(self.player(1).balance, 31)
        self.assertEqual(self.player(2).balance, 74)
        self.assertEqual(self.player(1).last_rob_at, NOW)

    def test_rob_never_takes_more_than_the_target_has(self) -> None:
        self.add_player(1)
        self.add_player(2, balance=10)

        rob(GUILD_ID, 1, 2, now=NOW, rng=StubRandom(0.99))

        self.assertEqual(self.player(1).balance, 10)
        self.assertEqual(self.player(2).balance, 0)

    def test_rob_empty_pockets_still_costs_the_cooldown(self) -> None:
        self.add_player(1)
        self.add_player(2)

        outcome = rob(GUILD_ID, 1, 2, now=NOW, rng=StubRandom(0.5))
        self.assertEqual(outcome.message, "You tried to rob <@2>, but their pockets were empty!")

        again = rob(GUILD_ID, 1, 2, now=NOW + timedelta(minutes=5), rng=StubRandom(0.5))
        self.assertIs(again.error, ErrorKind.TOO_SOON)

    def test_rob_failures(self) -> None:
        self.add_player(1)

        self.assertIs(rob(GUILD_ID, 1, 1, now=NOW).error, ErrorKind.INVALID_TARGET)
        self.assertIs(rob(GUILD_ID, 1, 2, now=NOW).error, ErrorKind.RECIPIENT_NOT_PLAYING)
        self.assertIs(rob(GUILD_ID, 3, 1, now=NOW).error, ErrorKind.PLAYER_NOT_FOUND)
        self.assertIsNone(self.player(1).last_rob_at)

    def test_target_changing_after_read_uses_fresh_balance(self) -> None:
        self.add_player(1)
        self.add_player(2, balance=0)

        with self.write_lands_after_read("marybot.services.earnings", 2, balance_delta=100):
            outcome = rob(GUILD_ID, 1, 2, now=NOW, rng=StubRandom(0.0))

        self.assertEqual(outcome.message, "You robbed <@2> and got away with 1 coins!")
        self.assertEqual(self.player(2).balance, 99)


if __name__ == "__main__":
    unittest.main()
