# -*- coding: utf-8 -*-
"""Data-only classes describing a snapshot of the document and the planned writes."""


class LayerInfo(object):
    """One structural layer of a floor type, width already in millimetres."""

    def __init__(self, material_description, width_mm=0.0):
        self.material_description = material_description or ""
        self.width_mm = width_mm or 0.0

    def __repr__(self):
        return "LayerInfo({!r}, {})".format(self.material_description, self.width_mm)


class FloorTypeInfo(object):
    """Pure-data representation of a Revit floor type."""

    def __init__(self, element_id, name, layers=None, parameter_names=None):
        self.element_id = element_id
        self.name = name
        self.layers = list(layers or [])
        self.parameter_names = set(parameter_names or [])

    def has_parameter(self, name):
        return name in self.parameter_names

    def __repr__(self):
        return "FloorTypeInfo({}, {!r})".format(self.element_id, self.name)


class RoomInfo(object):
    """A room and the floor type its downward ray hit first."""

    def __init__(self, element_id, number, floor_type_name=None):
        self.element_id = element_id
        self.number = number or ""
        self.floor_type_name = floor_type_name

    @property
    def has_floor(self):
        return self.floor_type_name is not None


class LegendViewInfo(object):
    def __init__(self, element_id, name):
        self.element_id = element_id
        self.name = name


class LegendImageInfo(object):
    def __init__(self, element_id, name):
        self.element_id = element_id
        self.name = name

    def __repr__(self):
        return "LegendImageInfo({}, {!r})".format(self.element_id, self.name)


class FloorTypeResult(object):
    """Values planned for one floor type.

    ``material_values`` holds ordered ``(parameter name, text)`` pairs.
    ``room_numbers`` and ``image_id`` are ``None`` when nothing should be written.
    """

    def __init__(self, floor_type, material_values=None, material_spec="",
                 room_numbers=None, image_id=None):
        self.floor_type = floor_type
        self.material_values = list(material_values or [])
        self.material_spec = material_spec
        self.room_numbers = room_numbers
        self.image_id = image_id

    @property
    def has_rooms(self):
        return bool(self.room_numbers)

    @property
    def has_image(self):
        return self.image_id is not None


class ExplicationPlan(object):
    """Everything the writer needs, computed before the transaction starts."""

    def __init__(self, results=None, notices=None):
        self.results = list(results or [])
        self.notices = list(notices or [])

    def __iter__(self):
        return iter(self.results)

    def __len__(self):
        return len(self.results)

    @property
    def room_count(self):
        return sum(1 for r in self.results if r.has_rooms)

    @property
    def image_count(self):
        return sum(1 for r in self.results if r.has_image)
