import unittest

from marybot.commands.common import ITEM_CHOICES, build_listing_embed
from marybot.config import EMBED_COLOR
from marybot.core.outcomes import Listing, ListingEntry


class ListingEmbedTests(unittest.TestCase):
    def test_single_page_has_no_footer(self) -> None:
        listing = Listing(
            title="Shop",
            entries=(ListingEntry("🍫 Chocolate", "Price: 50 coins"),),
        )
        embed = build_listing_embed(listing)
        self.assertEqual(embed.title, "Shop")
        self.assertEqual(embed.color.value, EMBED_COLOR)
        self.assertEqual(len(embed.fields), 1)
        self.assertFalse(embed.fields[0].inline)
        self.assertIsNone(embed.footer.text)

    def test_paged_listing_has_footer(self) -> None:
        listing = Listing(
            title="Inventory",
            entries=(ListingEntry("🔫 Gun", "Quantity: 1"),),
            page=1,
            total_pages=3,
            inline=True,
        )
        embed = build_listing_embed(listing)
        self.assertEqual(embed.footer.text, "Page 2 of 3")
        self.assertTrue(embed.fields[0].inline)

    def test_item_choices_follow_catalog(self) -> None:
        self.assertEqual(
            [choice.value for choice in ITEM_CHOICES],
            ["chocolate", "bow", "ring", "gun", "shield", "car"],
        )


if __name__ == "__main__":
    unittest.main()
