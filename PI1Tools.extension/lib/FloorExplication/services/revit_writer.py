# -*- coding: utf-8 -*-
from pyrevit import DB, script

from FloorExplication.errors import MissingParametersError

logger = script.get_logger()


class FloorTypeWriter(object):
    """Writes planned explication values into floor type parameters.

    Must run inside an open transaction.
    """

    def __init__(self, doc, settings):
        self.doc = doc
        self.settings = settings

    @staticmethod
    def _set_text(element, owner_name, param_name, value):
        param = element.LookupParameter(param_name)
        if not param:
            raise MissingParametersError([(owner_name, param_name)])
        param.Set(value)

    def write_result(self, result):
        floor_type = result.floor_type
        element = self.doc.GetElement(floor_type.element_id)

        for param_name, value in result.material_values:
            self._set_text(element, floor_type.name, param_name, value)
        self._set_text(element, floor_type.name, self.settings.material_spec_param, result.material_spec)

        if result.room_numbers is not None:
            self._set_text(element, floor_type.name, self.settings.room_numbers_param, result.room_numbers)

        if result.image_id is not None:
            element.get_Parameter(DB.BuiltInParameter.ALL_MODEL_TYPE_IMAGE).Set(result.image_id)

        logger.debug("✅ {}: {} layers, rooms: {}, image: {}".format(
            floor_type.name, len(result.material_values), result.room_numbers or "-", result.has_image))

    def write(self, plan):
        counts = {'floor_types': 0, 'rooms': 0, 'images': 0}
        for result in plan:
            self.write_result(result)
            counts['floor_types'] += 1
            if result.has_rooms:
                counts['rooms'] += 1
            if result.has_image:
                counts['images'] += 1
        return counts
