# -*- coding: utf-8 -*-
"""Unit tests for floor type material descriptions."""
import os
import sys
import unittest

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "PI1Tools.extension", "lib"))
if LIB_PATH not in sys.path:
    sys.path.insert(0, LIB_PATH)

from FloorExplication.domain.materials import MaterialDescriptionBuilder, format_layer, format_width
from FloorExplication.models.explication import FloorTypeInfo, LayerInfo
from FloorExplication.models.settings import ExplicationSettings


def floor_type(widths, materials, name="Пол Тип 1"):
    layers = [LayerInfo(m, w) for m, w in zip(materials, widths)]
    return FloorTypeInfo(1, name, layers=layers)


class FormatWidthTests(unittest.TestCase):

    def test_whole_millimetres_have_no_decimals(self):
        self.assertEqual(format_width(50.0), "50")
        self.assertEqual(format_width(120), "120")

    def test_fractional_millimetres_are_kept(self):
        self.assertEqual(format_width(12.5), "12.5")
        self.assertEqual(format_width(0.25), "0.25")

    def test_float_noise_from_unit_conversion_is_rounded(self):
        self.assertEqual(format_width(49.99999999999999), "50")
        self.assertEqual(format_width(30.000000000004), "30")


class FormatLayerTests(unittest.TestCase):

    def test_zero_width_omits_thickness(self):
        self.assertEqual(format_layer(LayerInfo("Линолеум", 0)), "Линолеум")

    def test_non_zero_width_appends_thickness(self):
        self.assertEqual(format_layer(LayerInfo("Стяжка", 50)), "Стяжка - 50мм")

    def test_missing_description_is_empty(self):
        self.assertEqual(format_layer(LayerInfo(None, 0)), "")


class MaterialDescriptionBuilderTests(unittest.TestCase):

    def setUp(self):
        self.builder = MaterialDescriptionBuilder(ExplicationSettings())

    def test_specification_numbers_layers_and_appends_slab_line(self):
        ft = floor_type([0, 50, 120], ["A", "B", "C"])
        self.assertEqual(
            self.builder.specification(ft),
            "1. A\n2. B - 50мм\n3. C - 120мм\n4. Ж/б плита см. раздел КР",
        )

    def test_specification_without_layers_has_only_slab_line(self):
        ft = floor_type([], [])
        self.assertEqual(self.builder.specification(ft), "1. Ж/б плита см. раздел КР")

    def test_layer_values_target_numbered_parameters(self):
        ft = floor_type([0, 50], ["A", "B"])
        self.assertEqual(
            self.builder.layer_values(ft),
            [("Dyn_Материал_1", "A"), ("Dyn_Материал_2", "B - 50мм")],
        )

    def test_required_parameters_follow_layer_count(self):
        ft = floor_type([10, 20, 30], ["A", "B", "C"])
        self.assertEqual(
            self.builder.required_parameters(ft),
            ["Dyn_Материал_1", "Dyn_Материал_2", "Dyn_Материал_3", "Dyn_Материалы_Спецификация"],
        )

    def test_closing_line_comes_from_settings(self):
        settings = ExplicationSettings({"closing_material_line": "Плита перекрытия"})
        builder = MaterialDescriptionBuilder(settings)
        self.assertEqual(builder.specification(floor_type([40], ["A"])), "1. A - 40мм\n2. Плита перекрытия")


if __name__ == "__main__":
    unittest.main()
