"""Unit tests for the constraint store."""

import unittest

from cards import SUSPECTS
from constraints import ConstraintStore
from enumerate_solutions import enumerate_values
from sat_oracle import SatOracle


class TestConstraintStore(unittest.TestCase):

    def setUp(self) -> None:
        self.oracle = SatOracle()
        self.store = ConstraintStore(self.oracle)

    def test_create_slot_tracks_slots(self) -> None:
        slot = self.store.create_slot("s")
        self.assertEqual(self.store.slots, [slot])

    def test_slot_names_are_unique(self) -> None:
        first = self.store.create_slot("s")
        with self.assertRaises(ValueError):
            self.store.create_slot("s")
        self.assertEqual(self.store.slots, [first])

    def test_has_any(self) -> None:
        first = self.store.create_slot("first")
        second = self.store.create_slot("second")
        self.store.constrain_has_any([first], ["knife"])
        self.assertEqual(enumerate_values(self.oracle, first), {"knife"})
        self.assertIn("rope", enumerate_values(self.oracle, second))

    def test_has_any_over_several_slots(self) -> None:
        first = self.store.create_slot("first")
        second = self.store.create_slot("second")
        self.store.constrain_has_any([first, second], ["knife"])
        self.store.constrain_has_none([first], ["knife"])
        self.assertEqual(enumerate_values(self.oracle, second), {"knife"})

    def test_has_none(self) -> None:
        first = self.store.create_slot("first")
        second = self.store.create_slot("second")
        self.store.constrain_has_none([first, second], ["knife", "rope"])
        for slot in (first, second):
            values = enumerate_values(self.oracle, slot)
            self.assertNotIn("knife", values)
            self.assertNotIn("rope", values)
            self.assertEqual(len(values), 19)

    def test_category_exists_and_unique(self) -> None:
        shared = [self.store.create_slot(f"p{i}") for i in range(5)]
        case_file = self.store.create_slot("case")
        self.store.constrain_category_exists_and_unique(SUSPECTS, case_file, shared)

        self.assertEqual(enumerate_values(self.oracle, case_file), set(SUSPECTS))
        # six suspects over six places leaves no room for anything else
        self.assertEqual(enumerate_values(self.oracle, shared[0]), set(SUSPECTS))

        self.store.constrain_has_any([case_file], ["plum"])
        self.assertEqual(enumerate_values(self.oracle, case_file), {"plum"})
        self.assertEqual(enumerate_values(self.oracle, shared[0]), set(SUSPECTS) - {"plum"})

    def test_unique_card_cannot_be_in_two_places(self) -> None:
        shared = [self.store.create_slot(f"p{i}") for i in range(5)]
        case_file = self.store.create_slot("case")
        self.store.constrain_category_exists_and_unique(SUSPECTS, case_file, shared)
        self.store.constrain_has_any([shared[0]], ["green"])
        self.store.constrain_has_any([shared[1]], ["green"])
        self.assertIsNone(self.oracle.solve())

    def test_not_all(self) -> None:
        first = self.store.create_slot("first")
        second = self.store.create_slot("second")
        self.store.constrain_has_any([first], ["knife"])
        self.store.constrain_not_all([(first, "knife"), (second, "rope")])
        values = enumerate_values(self.oracle, second)
        self.assertNotIn("rope", values)
        self.assertIn("knife", values)
        self.assertEqual(len(values), 20)


if __name__ == "__main__":
    unittest.main()
