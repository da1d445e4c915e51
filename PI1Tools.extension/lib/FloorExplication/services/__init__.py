from FloorExplication.services.explication_runner import FloorExplicationRunner
from FloorExplication.services.revit_reader import FloorExplicationReader
from FloorExplication.services.settings_manager import load_explication_settings, save_explication_settings

__all__ = [
    'FloorExplicationRunner',
    'FloorExplicationReader',
    'load_explication_settings',
    'save_explication_settings',
]
