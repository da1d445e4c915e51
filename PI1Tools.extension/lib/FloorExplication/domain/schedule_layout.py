# -*- coding: utf-8 -*-
"""Schedule layout definition, loaded from YAML and validated once."""
import copy
import io
import os

import yaml

from FloorExplication.errors import LayoutError

DEFAULT_LAYOUT_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "refdata",
    "floor_schedule.yaml",
)

VISIBLE_FIELD_COUNT = 5
HIDDEN_FIELD_COUNT = 1

ALIGNMENTS = ("left", "center", "right")
DISPLAY_TYPES = ("standard", "totals")
FILTER_TYPES = ("equal", "not_equal", "greater_than", "greater_than_or_equal",
                "less_than", "less_than_or_equal", "contains", "not_contains")
SORT_ORDERS = ("ascending", "descending")


class ScheduleFieldSpec(object):
    def __init__(self, parameter, heading=None, width_mm=None, alignment="left",
                 display="standard", hidden=False):
        self.parameter = parameter
        self.heading = heading
        self.width_mm = width_mm
        self.alignment = alignment
        self.display = display
        self.hidden = hidden

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict) or not data.get("parameter"):
            raise LayoutError("Schedule field needs a 'parameter': {!r}".format(data))
        field = cls(
            parameter=str(data["parameter"]),
            heading=data.get("heading"),
            width_mm=data.get("width_mm"),
            alignment=data.get("alignment", "left"),
            display=data.get("display", "standard"),
            hidden=bool(data.get("hidden", False)),
        )
        if field.alignment not in ALIGNMENTS:
            raise LayoutError("Unknown alignment '{}' for {}".format(field.alignment, field.parameter))
        if field.display not in DISPLAY_TYPES:
            raise LayoutError("Unknown display '{}' for {}".format(field.display, field.parameter))
        if field.width_mm is not None:
            try:
                field.width_mm = float(field.width_mm)
            except (TypeError, ValueError):
                raise LayoutError("Width of {} is not a number".format(field.parameter))
        return field


class ScheduleFilterSpec(object):
    def __init__(self, parameter, filter_type, value):
        self.parameter = parameter
        self.filter_type = filter_type
        self.value = value

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict) or not data.get("parameter"):
            raise LayoutError("Schedule filter needs a 'parameter': {!r}".format(data))
        filter_type = data.get("type")
        if filter_type not in FILTER_TYPES:
            raise LayoutError("Unknown filter type '{}'".format(filter_type))
        return cls(str(data["parameter"]), filter_type, data.get("value"))


class ScheduleSortSpec(object):
    def __init__(self, parameter, order="ascending"):
        self.parameter = parameter
        self.order = order

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict) or not data.get("parameter"):
            raise LayoutError("Schedule sort needs a 'parameter': {!r}".format(data))
        order = data.get("order", "ascending")
        if order not in SORT_ORDERS:
            raise LayoutError("Unknown sort order '{}'".format(order))
        return cls(str(data["parameter"]), order)


class ScheduleLayout(object):
    """Name, title, fields, filters and sort order of the explication schedule."""

    def __init__(self, name, title, fields, filters=None, sort=None,
                 category="OST_Floors", itemized=False):
        self.name = name
        self.title = title
        self.fields = list(fields)
        self.filters = list(filters or [])
        self.sort = list(sort or [])
        self.category = category
        self.itemized = itemized

    @property
    def visible_fields(self):
        return [f for f in self.fields if not f.hidden]

    @property
    def hidden_fields(self):
        return [f for f in self.fields if f.hidden]

    @property
    def parameter_names(self):
        return [f.parameter for f in self.fields]

    def field(self, parameter):
        for f in self.fields:
            if f.parameter == parameter:
                return f
        return None

    def validate(self):
        if not self.name:
            raise LayoutError("Schedule layout has no name")
        if len(self.visible_fields) != VISIBLE_FIELD_COUNT:
            raise LayoutError("Expected {} visible fields, got {}".format(
                VISIBLE_FIELD_COUNT, len(self.visible_fields)))
        if len(self.hidden_fields) != HIDDEN_FIELD_COUNT:
            raise LayoutError("Expected {} hidden field, got {}".format(
                HIDDEN_FIELD_COUNT, len(self.hidden_fields)))
        names = self.parameter_names
        if len(set(names)) != len(names):
            raise LayoutError("Schedule fields must be unique")
        for item in self.filters + self.sort:
            if item.parameter not in names:
                raise LayoutError("'{}' is filtered or sorted but not a schedule field".format(item.parameter))
        return self

    def renamed(self, mapping):
        """Copy of the layout with parameter names replaced through ``mapping``."""
        layout = copy.deepcopy(self)
        for item in layout.fields + layout.filters + layout.sort:
            item.parameter = mapping.get(item.parameter, item.parameter)
        return layout.validate()

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise LayoutError("Schedule layout must be a mapping")
        layout = cls(
            name=data.get("name"),
            title=data.get("title"),
            fields=[ScheduleFieldSpec.from_dict(f) for f in data.get("fields") or []],
            filters=[ScheduleFilterSpec.from_dict(f) for f in data.get("filters") or []],
            sort=[ScheduleSortSpec.from_dict(s) for s in data.get("sort") or []],
            category=data.get("category", "OST_Floors"),
            itemized=bool(data.get("itemized", False)),
        )
        return layout.validate()


def load_schedule_layout(path=None):
    path = path or DEFAULT_LAYOUT_PATH
    try:
        with io.open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise LayoutError("Cannot parse {}: {}".format(path, exc))
    return ScheduleLayout.from_dict(data)
