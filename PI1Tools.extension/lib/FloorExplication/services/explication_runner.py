# -*- coding: utf-8 -*-
from pyrevit import DB

from FloorExplication.domain.explication_planner import ExplicationPlanner
from FloorExplication.domain.schedule_layout import load_schedule_layout
from FloorExplication.models.settings import ExplicationSettings
from FloorExplication.services.legend_exporter import LegendImageExporter
from FloorExplication.services.revit_reader import FloorExplicationReader
from FloorExplication.services.revit_writer import FloorTypeWriter
from FloorExplication.services.schedule_builder import FloorScheduleBuilder

TRANSACTION_NAME = "Создание экспликации полов"


class FloorExplicationRunner(object):
    """Runs the legend pre-pass, plans every floor type and writes the results.

    All floor type writes and the schedule share one transaction: any failure
    rolls back the whole explication. Legend images exported by the pre-pass
    are committed separately and survive a later rollback.
    """

    def __init__(self, doc, uidoc, settings=None, layout=None, logger=None):
        self.doc = doc
        self.uidoc = uidoc
        self.settings = settings or ExplicationSettings()
        self.layout = layout or load_schedule_layout()
        self.logger = logger
        self.reader = FloorExplicationReader(doc)
        self.planner = ExplicationPlanner(self.settings, logger)

    def schedule_layout(self):
        """Layout with parameter names following the current settings."""
        defaults = ExplicationSettings.DEFAULTS
        return self.layout.renamed({
            defaults["room_numbers_param"]: self.settings.room_numbers_param,
            defaults["material_spec_param"]: self.settings.material_spec_param,
        })

    def export_legends(self):
        exporter = LegendImageExporter(self.doc, self.uidoc, self.settings)
        existing = [image.name for image in self.reader.legend_images()]
        return exporter.export_missing(self.reader.legend_views(), existing)

    def plan(self):
        return self.planner.plan(
            self.reader.floor_types(),
            self.reader.rooms(),
            self.reader.legend_images(),
        )

    def run(self):
        exported = self.export_legends()
        plan = self.plan()
        layout = self.schedule_layout()

        writer = FloorTypeWriter(self.doc, self.settings)
        builder = FloorScheduleBuilder(self.doc, layout)

        t = DB.Transaction(self.doc, TRANSACTION_NAME)
        try:
            t.Start()
            counts = writer.write(plan)
            schedule = builder.build()
            t.Commit()
        except Exception as e:
            if t.HasStarted() and not t.HasEnded():
                t.RollBack()
            if self.logger:
                self.logger.error("❌ Transaction failed: {}".format(e))
            raise

        return {
            'legends_exported': exported,
            'floor_types': counts['floor_types'],
            'rooms': counts['rooms'],
            'images': counts['images'],
            'schedule_created': schedule is not None,
            'schedule_name': layout.name,
            'notices': plan.notices,
        }
