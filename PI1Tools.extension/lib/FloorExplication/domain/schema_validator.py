# -*- coding: utf-8 -*-
"""Checks that every floor type exposes the parameters the explication writes to."""
from FloorExplication.domain.materials import MaterialDescriptionBuilder
from FloorExplication.errors import MissingParametersError


class SchemaValidator(object):
    def __init__(self, settings, logger=None):
        self.settings = settings
        self.logger = logger
        self.materials = MaterialDescriptionBuilder(settings)

    def required_parameters(self, floor_type):
        names = self.materials.required_parameters(floor_type)
        names.append(self.settings.room_numbers_param)
        return names

    def missing(self, floor_types):
        """All ``(floor type name, parameter name)`` pairs that are absent."""
        missing = []
        for floor_type in floor_types:
            for name in self.required_parameters(floor_type):
                if not floor_type.has_parameter(name):
                    missing.append((floor_type.name, name))
        if missing and self.logger:
            for owner, name in missing:
                self.logger.debug("'{}' has no parameter '{}'".format(owner, name))
        return missing

    def validate(self, floor_types):
        missing = self.missing(floor_types)
        if missing:
            raise MissingParametersError(missing)
