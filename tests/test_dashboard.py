import unittest

from marybot.dashboard import create_app
from tests.db_case import GUILD_ID, TempDatabaseCase


class DashboardTests(TempDatabaseCase):
    def setUp(self) -> None:
        super().setUp()
        self.add_player(1, balance=50, inventory={"ring": 1}, married_to=2)
        self.add_player(2, balance=900, married_to=1)
        self.add_player(3, balance=10, married_to=1)
        self.client = create_app().test_client()

    def test_index_lists_guilds(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn(b"Test Guild", response.data)
        self.assertIn(f"/guild/{GUILD_ID}".encode(), response.data)

    def test_index_shows_settings(self) -> None:
        response = self.client.get("/")
        self.assertIn(b"Settings", response.data)
        self.assertIn(b"SHOP_PAGE_SIZE", response.data)
        self.assertIn(b"LEADERBOARD_SIZE", response.data)

    def test_guild_page(self) -> None:
        response = self.client.get(f"/guild/{GUILD_ID}")
        self.assertEqual(response.status_code, 200)
        self.assertIn(b"player1", response.data)
        self.assertIn(b"married to player1", response.data)
        self.assertIn(b"proposed to player1", response.data)

    def test_unknown_guild(self) -> None:
        self.assertEqual(self.client.get("/guild/1").status_code, 404)

    def test_players_api(self) -> None:
        payload = self.client.get(f"/api/guild/{GUILD_ID}/players").get_json()

        self.assertEqual(payload["guild_id"], str(GUILD_ID))
        players = payload["players"]
        self.assertEqual([p["user_id"] for p in players], ["2", "1", "3"])
        self.assertEqual(players[0]["marriage"], "MARRIED")
        self.assertEqual(players[2]["marriage"], "PROPOSED")
        self.assertEqual(
            players[1]["inventory"],
            [{"name": "ring", "emblem": "💍", "quantity": 1}],
        )

    def test_dashboard_is_read_only(self) -> None:
        self.assertEqual(self.client.post(f"/api/guild/{GUILD_ID}/players").status_code, 405)


if __name__ == "__main__":
    unittest.main()
