# -*- coding: utf-8 -*-
"""Computes every value the explication writes, without touching the document."""
from FloorExplication.domain.materials import MaterialDescriptionBuilder
from FloorExplication.domain.naming import LegendMatcher, is_floor_type_name
from FloorExplication.domain.rooms import join_room_numbers, room_numbers_for
from FloorExplication.domain.schema_validator import SchemaValidator
from FloorExplication.models.explication import ExplicationPlan, FloorTypeResult
from FloorExplication.models.settings import DuplicateLegendPolicy


class ExplicationPlanner(object):
    """Validates the snapshot once, then plans the writes for all floor types.

    Validation happens before any result is produced so a missing parameter
    or an ambiguous legend never leaves the document half written.
    """

    def __init__(self, settings, logger=None):
        self.settings = settings
        self.logger = logger
        self.materials = MaterialDescriptionBuilder(settings)
        self.validator = SchemaValidator(settings, logger)

    def select_floor_types(self, floor_types):
        return [ft for ft in floor_types if is_floor_type_name(ft.name, self.settings.type_marker)]

    def plan(self, floor_types, rooms, images):
        floor_types = self.select_floor_types(floor_types)
        matcher = LegendMatcher(self.settings, images, self.logger)

        self.validator.validate(floor_types)
        if self.settings.duplicate_legend_policy == DuplicateLegendPolicy.ERROR:
            ambiguities = matcher.ambiguities(floor_types)
            if ambiguities:
                raise ambiguities[0]

        rooms = list(rooms)
        notices = []
        results = []
        for floor_type in floor_types:
            numbers = room_numbers_for(floor_type.name, rooms, sort=self.settings.sort_room_numbers)
            room_value = join_room_numbers(numbers)
            if room_value is None:
                notices.append("'{}': помещения не найдены".format(floor_type.name))

            image = matcher.match(floor_type.name)
            if image is None:
                notices.append("'{}': изображение легенды не найдено".format(floor_type.name))

            results.append(FloorTypeResult(
                floor_type,
                material_values=self.materials.layer_values(floor_type),
                material_spec=self.materials.specification(floor_type),
                room_numbers=room_value,
                image_id=image.element_id if image else None,
            ))

        if self.logger:
            for notice in notices:
                self.logger.debug(notice)
        return ExplicationPlan(results, notices)
