# -*- coding: utf-8 -*-
"""Unit tests for room number aggregation."""
import os
import sys
import unittest

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "PI1Tools.extension", "lib"))
if LIB_PATH not in sys.path:
    sys.path.insert(0, LIB_PATH)

from FloorExplication.domain.rooms import join_room_numbers, natural_key, room_numbers_for
from FloorExplication.models.explication import RoomInfo


class RoomNumbersTests(unittest.TestCase):

    def setUp(self):
        self.rooms = [
            RoomInfo(1, "105", "Пол Тип 1"),
            RoomInfo(2, "101", "Пол Тип 2"),
            RoomInfo(3, "12", "Пол Тип 1"),
            RoomInfo(4, "200", None),
            RoomInfo(5, "2", "Пол Тип 1"),
        ]

    def test_keeps_room_order_by_default(self):
        self.assertEqual(room_numbers_for("Пол Тип 1", self.rooms), ["105", "12", "2"])

    def test_sorts_naturally_when_requested(self):
        self.assertEqual(room_numbers_for("Пол Тип 1", self.rooms, sort=True), ["2", "12", "105"])

    def test_room_without_floor_is_never_listed(self):
        for name in ("Пол Тип 1", "Пол Тип 2"):
            self.assertNotIn("200", room_numbers_for(name, self.rooms))

    def test_type_name_must_match_exactly(self):
        self.assertEqual(room_numbers_for("Пол Тип 11", self.rooms), [])

    def test_join_uses_comma_and_space(self):
        self.assertEqual(join_room_numbers(["1.01", "1.02"]), "1.01, 1.02")

    def test_join_of_nothing_is_none(self):
        self.assertIsNone(join_room_numbers([]))
        self.assertIsNone(join_room_numbers(["", None]))

    def test_natural_key_orders_dotted_numbers(self):
        numbers = ["1.10", "1.2", "1.1"]
        self.assertEqual(sorted(numbers, key=natural_key), ["1.1", "1.2", "1.10"])


if __name__ == "__main__":
    unittest.main()
