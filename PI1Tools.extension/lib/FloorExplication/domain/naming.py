# -*- coding: utf-8 -*-
"""Naming conventions binding floor types to their legend images.

Floor types end with ``Тип <N>``, legends and their images are named
``(P)_FL_Тип <N>``. The segment after the type marker identifies the pair.
"""
from collections import OrderedDict

from FloorExplication.errors import DuplicateLegendError
from FloorExplication.models.settings import DuplicateLegendPolicy


def parse_type_number(name, marker):
    """Return the segment following ``marker`` in ``name`` or None."""
    if not name or not marker:
        return None
    parts = name.split(marker)
    if len(parts) < 2:
        return None
    return parts[1].strip()


def is_floor_type_name(name, marker):
    return bool(name) and marker in name


def legend_views_to_export(legend_views, existing_image_names, legend_marker):
    """Legend views that carry the marker and have no image of the same name yet."""
    existing = set(existing_image_names)
    pending = []
    for view in legend_views:
        if legend_marker not in (view.name or ""):
            continue
        if view.name in existing:
            continue
        existing.add(view.name)
        pending.append(view)
    return pending


class LegendMatcher(object):
    """Pairs floor types with legend images by their parsed type number."""

    def __init__(self, settings, images, logger=None):
        self.settings = settings
        self.logger = logger
        self._by_number = OrderedDict()
        for image in images:
            if settings.legend_marker not in (image.name or ""):
                continue
            number = parse_type_number(image.name, settings.type_marker)
            if number is None:
                continue
            self._by_number.setdefault(number, []).append(image)

    @property
    def type_numbers(self):
        return list(self._by_number.keys())

    def candidates(self, floor_type_name):
        number = parse_type_number(floor_type_name, self.settings.type_marker)
        if number is None:
            return []
        return list(self._by_number.get(number, []))

    def ambiguities(self, floor_types):
        """``DuplicateLegendError`` for every floor type number with several images."""
        errors = []
        seen = set()
        for floor_type in floor_types:
            number = parse_type_number(floor_type.name, self.settings.type_marker)
            if number is None or number in seen:
                continue
            seen.add(number)
            images = self._by_number.get(number, [])
            if len(images) > 1:
                errors.append(DuplicateLegendError(number, [i.name for i in images]))
        return errors

    def match(self, floor_type_name):
        images = self.candidates(floor_type_name)
        if not images:
            if self.logger:
                self.logger.debug("No legend image for floor type '{}'".format(floor_type_name))
            return None
        if len(images) > 1:
            if self.settings.duplicate_legend_policy == DuplicateLegendPolicy.ERROR:
                raise DuplicateLegendError(
                    parse_type_number(floor_type_name, self.settings.type_marker),
                    [i.name for i in images],
                )
            if self.logger:
                self.logger.warning("Floor type '{}' matches {} legend images, using '{}'".format(
                    floor_type_name, len(images), images[-1].name))
        return images[-1]
