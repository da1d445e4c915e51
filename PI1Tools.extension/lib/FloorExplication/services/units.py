# -*- coding: utf-8 -*-
from pyrevit import DB


def to_mm(internal_value):
    try:
        return DB.UnitUtils.ConvertFromInternalUnits(internal_value, DB.UnitTypeId.Millimeters)
    except AttributeError:
        # Revit 2020 and older
        return DB.UnitUtils.ConvertFromInternalUnits(internal_value, DB.DisplayUnitType.DUT_MILLIMETERS)


def mm_to_internal(mm_value):
    try:
        return DB.UnitUtils.ConvertToInternalUnits(mm_value, DB.UnitTypeId.Millimeters)
    except AttributeError:
        return DB.UnitUtils.ConvertToInternalUnits(mm_value, DB.DisplayUnitType.DUT_MILLIMETERS)
