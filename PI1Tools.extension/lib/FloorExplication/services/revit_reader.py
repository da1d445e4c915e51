# -*- coding: utf-8 -*-
from pyrevit import DB, script
from pyrevit.revit import query

from FloorExplication.errors import NoView3DError
from FloorExplication.models.explication import (
    FloorTypeInfo,
    LayerInfo,
    LegendImageInfo,
    LegendViewInfo,
    RoomInfo,
)
from FloorExplication.services.units import to_mm

logger = script.get_logger()


def find_view3d(doc):
    """First non-template 3D view, used as the context for ray casting."""
    for view in DB.FilteredElementCollector(doc).OfClass(DB.View3D):
        if not view.IsTemplate:
            return view
    raise NoView3DError()


class FloorExplicationReader(object):
    """Reads floor types, rooms, legends and images into plain models."""

    def __init__(self, doc, view3d=None):
        self.doc = doc
        self._view3d = view3d

    @property
    def view3d(self):
        if self._view3d is None:
            self._view3d = find_view3d(self.doc)
        return self._view3d

    # ------------- floor types -----------------
    def floor_types(self):
        floor_types = []
        for floor_type in DB.FilteredElementCollector(self.doc)\
                .OfCategory(DB.BuiltInCategory.OST_Floors)\
                .WhereElementIsElementType():
            floor_types.append(FloorTypeInfo(
                floor_type.Id,
                query.get_name(floor_type),
                layers=self._layers(floor_type),
                parameter_names=[p.Definition.Name for p in floor_type.Parameters if p.Definition],
            ))
        return floor_types

    def _layers(self, floor_type):
        get_structure = getattr(floor_type, 'GetCompoundStructure', None)
        structure = get_structure() if get_structure else None
        if structure is None:
            return []
        return [LayerInfo(self._material_description(layer.MaterialId), to_mm(layer.Width))
                for layer in structure.GetLayers()]

    def _material_description(self, material_id):
        material = self.doc.GetElement(material_id)
        if material is None:
            return ""
        param = material.get_Parameter(DB.BuiltInParameter.ALL_MODEL_DESCRIPTION)
        if not param or not param.HasValue:
            return ""
        return param.AsString() or ""

    # ------------- rooms -----------------------
    def rooms(self):
        intersector = DB.ReferenceIntersector(
            DB.ElementCategoryFilter(DB.BuiltInCategory.OST_Floors),
            DB.FindReferenceTarget.Element,
            self.view3d,
        )
        direction = DB.XYZ.BasisZ.Negate()

        rooms = []
        for room in DB.FilteredElementCollector(self.doc)\
                .OfCategory(DB.BuiltInCategory.OST_Rooms)\
                .WhereElementIsNotElementType():
            location = room.Location
            if not isinstance(location, DB.LocationPoint):
                logger.debug("Room {} is not placed, skipped".format(room.Id))
                continue
            number_param = room.get_Parameter(DB.BuiltInParameter.ROOM_NUMBER)
            number = number_param.AsString() if number_param else ""
            rooms.append(RoomInfo(room.Id, number, self._floor_type_below(intersector, location.Point, direction)))
        return rooms

    def _floor_type_below(self, intersector, point, direction):
        context = intersector.FindNearest(point, direction)
        if context is None:
            return None
        floor = self.doc.GetElement(context.GetReference())
        if floor is None:
            return None
        floor_type = self.doc.GetElement(floor.GetTypeId())
        if floor_type is None:
            return None
        return query.get_name(floor_type)

    # ------------- legends ---------------------
    def legend_views(self):
        views = []
        for view in DB.FilteredElementCollector(self.doc).OfClass(DB.View):
            if view.ViewType != DB.ViewType.Legend or view.IsTemplate:
                continue
            views.append(LegendViewInfo(view.Id, view.Name))
        return views

    def legend_images(self):
        return [LegendImageInfo(image.Id, query.get_name(image))
                for image in DB.FilteredElementCollector(self.doc).OfClass(DB.ImageType)]
