# -*- coding: utf-8 -*-
import json


class DuplicateLegendPolicy(object):
    ERROR = "error"
    LAST_WINS = "last_wins"

    @classmethod
    def all(cls):
        return [cls.ERROR, cls.LAST_WINS]


IMAGE_RESOLUTIONS = (72, 150, 300, 600)


class ExplicationSettings(object):
    DEFAULTS = {
        # Naming conventions shared with the templates
        "type_marker": "Тип",
        "legend_marker": "(P)_FL_Тип",
        "material_param_prefix": "Dyn_Материал_",
        "material_spec_param": "Dyn_Материалы_Спецификация",
        "room_numbers_param": "Dyn_НомерПомещения",
        "closing_material_line": "Ж/б плита см. раздел КР",

        # Behaviour switches
        "sort_room_numbers": False,
        "duplicate_legend_policy": DuplicateLegendPolicy.ERROR,
        "image_resolution_dpi": 600,
    }

    def __init__(self, values=None):
        values = values or {}
        self._values = {}

        for key in self.DEFAULTS:
            if key in values:
                self._values[key] = values[key]
            else:
                self._values[key] = self.DEFAULTS[key]

    def get(self, key):
        return self._values.get(key)

    def set(self, key, value):
        if key not in self.DEFAULTS:
            raise KeyError("Unknown setting: {}".format(key))

        if key == "duplicate_legend_policy":
            if value not in DuplicateLegendPolicy.all():
                raise ValueError("Invalid duplicate_legend_policy: {}".format(value))

        if key == "image_resolution_dpi":
            value = int(value)
            if value not in IMAGE_RESOLUTIONS:
                raise ValueError("Invalid image_resolution_dpi: {}".format(value))

        if key == "sort_room_numbers":
            value = bool(value)

        if key in ("type_marker", "legend_marker", "material_param_prefix",
                   "material_spec_param", "room_numbers_param"):
            value = str(value or "").strip()
            if not value:
                raise ValueError("{} cannot be empty".format(key))

        self._values[key] = value

    def to_dict(self):
        return dict(self._values)

    def to_json(self):
        return json.dumps(self._values, ensure_ascii=False)

    @classmethod
    def from_json(cls, text):
        if not text:
            return cls()
        try:
            data = json.loads(text)
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        settings = cls()
        for key, value in data.items():
            if key not in cls.DEFAULTS:
                continue
            try:
                settings.set(key, value)
            except (ValueError, TypeError):
                # stale or hand-edited value, keep the default
                pass
        return settings

    def material_param_name(self, index):
        """Parameter name holding the text of layer ``index`` (1-based)."""
        return "{}{}".format(self.material_param_prefix, index)

# Attribute accessors ----------------------------------------

    @property
    def type_marker(self):
        return self._values["type_marker"]

    @property
    def legend_marker(self):
        return self._values["legend_marker"]

    @property
    def material_param_prefix(self):
        return self._values["material_param_prefix"]

    @property
    def material_spec_param(self):
        return self._values["material_spec_param"]

    @property
    def room_numbers_param(self):
        return self._values["room_numbers_param"]

    @property
    def closing_material_line(self):
        return self._values["closing_material_line"]

    @property
    def sort_room_numbers(self):
        return bool(self._values["sort_room_numbers"])

    @property
    def duplicate_legend_policy(self):
        return self._values["duplicate_legend_policy"]

    @property
    def image_resolution_dpi(self):
        return int(self._values["image_resolution_dpi"])
