"""Unit tests for the card catalog."""

import unittest

from cards import (
    ALL_CARDS,
    CATEGORIES,
    ROOMS,
    SUSPECTS,
    WEAPONS,
    card_index,
    category_of,
    in_catalog_order,
    require_card,
)
from clue_errors import UnknownCard


class TestCatalog(unittest.TestCase):

    def test_sizes(self) -> None:
        self.assertEqual(len(SUSPECTS), 6)
        self.assertEqual(len(WEAPONS), 6)
        self.assertEqual(len(ROOMS), 9)
        self.assertEqual(len(ALL_CARDS), 21)
        self.assertEqual(len(set(ALL_CARDS)), 21)

    def test_index_follows_category_order(self) -> None:
        self.assertEqual(card_index("mustard"), 0)
        self.assertEqual(card_index("knife"), 6)
        self.assertEqual(card_index("study"), 20)
        self.assertIsNone(card_index("colonel"))

    def test_category_of(self) -> None:
        self.assertEqual(category_of("plum"), "suspect")
        self.assertEqual(category_of("lead pipe"), "weapon")
        self.assertEqual(category_of("billiard room"), "room")
        self.assertIsNone(category_of("pool"))
        self.assertEqual(list(CATEGORIES), ["suspect", "weapon", "room"])

    def test_require_card(self) -> None:
        self.assertEqual(require_card("rope"), "rope")
        self.assertEqual(require_card("rope", "weapon"), "rope")
        with self.assertRaises(UnknownCard):
            require_card("rope", "room")
        with self.assertRaises(UnknownCard):
            require_card("colonel")
        with self.assertRaisesRegex(UnknownCard, "is a weapon, not a room"):
            require_card("lead pipe", "room")

    def test_in_catalog_order(self) -> None:
        self.assertEqual(in_catalog_order({"study", "knife", "plum"}), ["plum", "knife", "study"])


if __name__ == "__main__":
    unittest.main()
