# -*- coding: utf-8 -*-
"""Exports floor-type legend views into the project as images."""
from pyrevit import DB, UI, revit, script

from FloorExplication.domain.naming import legend_views_to_export

logger = script.get_logger()

RESOLUTIONS = {
    72: DB.ImageResolution.DPI_72,
    150: DB.ImageResolution.DPI_150,
    300: DB.ImageResolution.DPI_300,
    600: DB.ImageResolution.DPI_600,
}


class LegendImageExporter(object):
    def __init__(self, doc, uidoc, settings):
        self.doc = doc
        self.uidoc = uidoc
        self.settings = settings

    def _options(self, view_name):
        options = DB.ImageExportOptions()
        options.ExportRange = DB.ExportRange.CurrentView
        options.ImageResolution = RESOLUTIONS[self.settings.image_resolution_dpi]
        options.ZoomType = DB.ZoomFitType.Zoom
        options.Zoom = 100
        options.ViewName = view_name
        return options

    def _close_view(self, view_id):
        for ui_view in self.uidoc.GetOpenUIViews():
            if ui_view.ViewId == view_id:
                try:
                    ui_view.Close()
                except Exception as e:
                    # Revit refuses to close the last open view
                    logger.debug("Could not close view {}: {}".format(view_id, e))

    def export_missing(self, legend_views, existing_image_names):
        """Export every marked legend that has no image yet. Returns exported names."""
        pending = legend_views_to_export(legend_views, existing_image_names, self.settings.legend_marker)
        if not pending:
            return []

        exported = []
        thin_lines = UI.ThinLinesOptions.AreThinLinesEnabled
        UI.ThinLinesOptions.AreThinLinesEnabled = False
        try:
            for legend in pending:
                view = self.doc.GetElement(legend.element_id)
                self.uidoc.ActiveView = view
                with revit.Transaction("Создание изображения {}".format(legend.name), self.doc):
                    self.doc.SaveToProjectAsImage(self._options(legend.name))
                    self._close_view(legend.element_id)
                logger.debug("Exported legend image '{}'".format(legend.name))
                exported.append(legend.name)
        finally:
            UI.ThinLinesOptions.AreThinLinesEnabled = thin_lines
        return exported
