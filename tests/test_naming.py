# -*- coding: utf-8 -*-
"""Unit tests for floor type / legend naming conventions."""
import os
import sys
import unittest

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "PI1Tools.extension", "lib"))
if LIB_PATH not in sys.path:
    sys.path.insert(0, LIB_PATH)

from FloorExplication.domain.naming import (
    LegendMatcher,
    is_floor_type_name,
    legend_views_to_export,
    parse_type_number,
)
from FloorExplication.errors import DuplicateLegendError
from FloorExplication.models.explication import FloorTypeInfo, LegendImageInfo, LegendViewInfo
from FloorExplication.models.settings import DuplicateLegendPolicy, ExplicationSettings


class ParseTypeNumberTests(unittest.TestCase):

    def test_segment_after_marker(self):
        self.assertEqual(parse_type_number("Пол_Керамогранит Тип 3", "Тип"), "3")
        self.assertEqual(parse_type_number("(P)_FL_Тип 13", "Тип"), "13")

    def test_name_without_marker(self):
        self.assertIsNone(parse_type_number("Перекрытие 200", "Тип"))
        self.assertIsNone(parse_type_number("", "Тип"))

    def test_floor_type_filter_uses_marker(self):
        self.assertTrue(is_floor_type_name("Пол Тип 1", "Тип"))
        self.assertFalse(is_floor_type_name("Плита 220", "Тип"))


class LegendViewsToExportTests(unittest.TestCase):

    def test_skips_views_with_existing_images(self):
        views = [LegendViewInfo(1, "(P)_FL_Тип 1"), LegendViewInfo(2, "(P)_FL_Тип 2")]
        pending = legend_views_to_export(views, ["(P)_FL_Тип 1"], "(P)_FL_Тип")
        self.assertEqual([v.name for v in pending], ["(P)_FL_Тип 2"])

    def test_skips_legends_without_marker(self):
        views = [LegendViewInfo(1, "Условные обозначения"), LegendViewInfo(2, "(P)_FL_Тип 4")]
        pending = legend_views_to_export(views, [], "(P)_FL_Тип")
        self.assertEqual([v.element_id for v in pending], [2])

    def test_second_run_exports_nothing(self):
        views = [LegendViewInfo(1, "(P)_FL_Тип 1"), LegendViewInfo(2, "(P)_FL_Тип 2")]
        images = [v.name for v in legend_views_to_export(views, [], "(P)_FL_Тип")]
        self.assertEqual(len(images), 2)
        self.assertEqual(legend_views_to_export(views, images, "(P)_FL_Тип"), [])


class LegendMatcherTests(unittest.TestCase):

    def setUp(self):
        self.images = [
            LegendImageInfo(10, "(P)_FL_Тип 13"),
            LegendImageInfo(11, "(P)_FL_Тип 3"),
            LegendImageInfo(12, "(P)_FL_Тип 30"),
            LegendImageInfo(13, "Тип 3 без маркера"),
        ]

    def test_matches_exact_type_number_only(self):
        matcher = LegendMatcher(ExplicationSettings(), self.images)
        image = matcher.match("Пол_Плитка Тип 3")
        self.assertEqual(image.element_id, 11)

    def test_no_match_returns_none(self):
        matcher = LegendMatcher(ExplicationSettings(), self.images)
        self.assertIsNone(matcher.match("Пол_Плитка Тип 7"))

    def test_images_without_legend_marker_are_ignored(self):
        matcher = LegendMatcher(ExplicationSettings(), self.images)
        self.assertEqual(sorted(matcher.type_numbers), ["13", "3", "30"])

    def test_duplicate_images_raise_by_default(self):
        images = self.images + [LegendImageInfo(14, "(P)_FL_Тип 3")]
        matcher = LegendMatcher(ExplicationSettings(), images)
        with self.assertRaises(DuplicateLegendError) as ctx:
            matcher.match("Пол Тип 3")
        self.assertEqual(ctx.exception.type_number, "3")
        self.assertEqual(len(ctx.exception.image_names), 2)

    def test_duplicate_images_last_wins_when_configured(self):
        images = self.images + [LegendImageInfo(14, "(P)_FL_Тип 3")]
        settings = ExplicationSettings({"duplicate_legend_policy": DuplicateLegendPolicy.LAST_WINS})
        matcher = LegendMatcher(settings, images)
        self.assertEqual(matcher.match("Пол Тип 3").element_id, 14)

    def test_ambiguities_only_for_numbers_in_use(self):
        images = [
            LegendImageInfo(1, "(P)_FL_Тип 5"),
            LegendImageInfo(2, "(P)_FL_Тип 5"),
            LegendImageInfo(3, "(P)_FL_Тип 6"),
        ]
        matcher = LegendMatcher(ExplicationSettings(), images)
        self.assertEqual(matcher.ambiguities([FloorTypeInfo(1, "Пол Тип 6")]), [])
        errors = matcher.ambiguities([FloorTypeInfo(1, "Пол Тип 5"), FloorTypeInfo(2, "Пол 2 Тип 5")])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].type_number, "5")


if __name__ == "__main__":
    unittest.main()
