# -*- coding: utf-8 -*-
"""Creates the floor explication schedule from a ScheduleLayout."""
from pyrevit import DB, script

from FloorExplication.errors import MissingParametersError
from FloorExplication.services.units import mm_to_internal

logger = script.get_logger()

ALIGNMENTS = {
    "left": DB.ScheduleHorizontalAlignment.Left,
    "center": DB.ScheduleHorizontalAlignment.Center,
    "right": DB.ScheduleHorizontalAlignment.Right,
}

FILTER_TYPES = {
    "equal": DB.ScheduleFilterType.Equal,
    "not_equal": DB.ScheduleFilterType.NotEqual,
    "greater_than": DB.ScheduleFilterType.GreaterThan,
    "greater_than_or_equal": DB.ScheduleFilterType.GreaterThanOrEqual,
    "less_than": DB.ScheduleFilterType.LessThan,
    "less_than_or_equal": DB.ScheduleFilterType.LessThanOrEqual,
    "contains": DB.ScheduleFilterType.Contains,
    "not_contains": DB.ScheduleFilterType.NotContains,
}

SORT_ORDERS = {
    "ascending": DB.ScheduleSortOrder.Ascending,
    "descending": DB.ScheduleSortOrder.Descending,
}


def find_schedule(doc, name):
    for schedule in DB.FilteredElementCollector(doc).OfClass(DB.ViewSchedule):
        if schedule.Name == name:
            return schedule
    return None


class FloorScheduleBuilder(object):
    def __init__(self, doc, layout):
        self.doc = doc
        self.layout = layout

    def _schedulable_fields(self, definition):
        fields = {}
        for schedulable_field in definition.GetSchedulableFields():
            name = schedulable_field.GetName(self.doc)
            if name not in fields:
                fields[name] = schedulable_field
        return fields

    def _add_field(self, definition, schedulable_field, spec):
        field = definition.AddField(schedulable_field)
        if spec.hidden:
            field.IsHidden = True
            return field
        if spec.heading:
            field.ColumnHeading = spec.heading
        if spec.width_mm:
            field.SheetColumnWidth = mm_to_internal(spec.width_mm)
        field.HorizontalAlignment = ALIGNMENTS[spec.alignment]
        if spec.display == "totals":
            field.DisplayType = DB.ScheduleFieldDisplayType.Totals
        return field

    def build(self):
        """Create the schedule. Returns it, or None when one with that name exists.

        Must run inside an open transaction.
        """
        layout = self.layout
        if find_schedule(self.doc, layout.name):
            logger.info("Schedule '{}' already exists, left unchanged".format(layout.name))
            return None

        category_id = DB.ElementId(getattr(DB.BuiltInCategory, layout.category))
        schedule = DB.ViewSchedule.CreateSchedule(self.doc, category_id)
        definition = schedule.Definition

        schedulable = self._schedulable_fields(definition)
        missing = [(None, name) for name in layout.parameter_names if name not in schedulable]
        if missing:
            raise MissingParametersError(missing)

        schedule.get_Parameter(DB.BuiltInParameter.VIEW_NAME).Set(layout.name)
        definition.IsItemized = layout.itemized

        field_ids = {}
        for spec in layout.fields:
            field = self._add_field(definition, schedulable[spec.parameter], spec)
            field_ids[spec.parameter] = field.FieldId

        for spec in layout.filters:
            definition.AddFilter(
                DB.ScheduleFilter(field_ids[spec.parameter], FILTER_TYPES[spec.filter_type], spec.value))

        for spec in layout.sort:
            definition.AddSortGroupField(DB.ScheduleSortGroupField(field_ids[spec.parameter], SORT_ORDERS[spec.order]))

        if layout.title:
            header = schedule.GetTableData().GetSectionData(DB.SectionType.Header)
            header.SetCellText(0, 0, layout.title)

        logger.debug("Schedule '{}' created with {} fields".format(layout.name, len(layout.fields)))
        return schedule
