# -*- coding: utf-8 -*-
from pyrevit import DB

from FloorExplication.models.settings import ExplicationSettings

GP_NAME = "PI1_FloorExplication_Settings"


# ---------------------------
# INTERNAL HELPERS
# ---------------------------

def _get_global_param(doc):
    """Return existing global parameter Element or None."""
    gp_id = DB.GlobalParametersManager.FindByName(doc, GP_NAME)
    if gp_id and gp_id != DB.ElementId.InvalidElementId:
        return doc.GetElement(gp_id)
    return None


def _create_global_param(doc):
    """Create a new global text parameter and return it."""
    spec = DB.SpecTypeId.String.Text
    t = DB.Transaction(doc, "Create {}".format(GP_NAME))
    t.Start()
    gp = DB.GlobalParameter.Create(doc, GP_NAME, spec)
    t.Commit()
    return gp


def _get_or_create_global_param(doc):
    gp = _get_global_param(doc)
    if gp:
        return gp
    return _create_global_param(doc)


# ---------------------------
# PUBLIC API
# ---------------------------

def load_explication_settings(doc):
    """Return stored ExplicationSettings, or defaults when nothing is stored yet."""
    if not DB.GlobalParametersManager.AreGlobalParametersAllowed(doc):
        return ExplicationSettings()

    gp = _get_global_param(doc)
    if gp is None:
        return ExplicationSettings()

    value_obj = gp.GetValue()
    if value_obj and isinstance(value_obj, DB.StringParameterValue):
        json_text = value_obj.Value
    else:
        json_text = None

    return ExplicationSettings.from_json(json_text)


def save_explication_settings(doc, settings):
    """Write settings JSON back into the global parameter."""
    gp = _get_or_create_global_param(doc)

    spv = DB.StringParameterValue(settings.to_json())
    t = DB.Transaction(doc, "Save {}".format(GP_NAME))
    t.Start()
    gp.SetValue(spv)
    t.Commit()
