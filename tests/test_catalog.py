import unittest

from marybot.core.catalog import CATALOG, emblem_for, find_item, normalize_item_name, page_slice


class CatalogTests(unittest.TestCase):
    def test_catalog_is_sorted_by_price(self) -> None:
        self.assertEqual(
            [item.price for item in CATALOG],
            [50, 400, 1000, 2000, 5000, 50000],
        )
        self.assertEqual(
            [item.identifier for item in CATALOG],
            ["chocolate", "bow", "ring", "gun", "shield", "car"],
        )

    def test_normalize_strips_emblem_and_case(self) -> None:
        self.assertEqual(normalize_item_name("🔫 Gun"), "gun")
        self.assertEqual(normalize_item_name("🛡️ Shield"), "shield")
        self.assertEqual(normalize_item_name("  CHOCOLATE "), "chocolate")
        self.assertEqual(normalize_item_name(None), "")

    def test_find_item(self) -> None:
        gun = find_item("GUN")
        self.assertIsNotNone(gun)
        self.assertEqual(gun.price, 2000)
        self.assertEqual(gun.sell_price, 1000)
        self.assertEqual(find_item("chocolate").sell_price, 25)
        self.assertIsNone(find_item("laser"))
        self.assertEqual(emblem_for("car"), "🚗")
        self.assertEqual(emblem_for("laser"), "")

    def test_page_slice_clamps_page(self) -> None:
        entries = list(range(7))
        self.assertEqual(page_slice(entries, 3, 0), ([0, 1, 2], 0, 3))
        self.assertEqual(page_slice(entries, 3, 9), ([6], 2, 3))
        self.assertEqual(page_slice(entries, 3, -4), ([0, 1, 2], 0, 3))
        self.assertEqual(page_slice([], 3, 2), ([], 0, 1))


if __name__ == "__main__":
    unittest.main()
