# -*- coding: utf-8 -*-
"""Material description text for floor types."""

WIDTH_DECIMALS = 2


def format_width(width_mm):
    """Render a width in millimetres without float noise (50.0 -> '50')."""
    rounded = round(float(width_mm or 0.0), WIDTH_DECIMALS)
    if rounded == int(rounded):
        return str(int(rounded))
    return ("%.*f" % (WIDTH_DECIMALS, rounded)).rstrip("0").rstrip(".")


def format_layer(layer):
    """Layer text: the description, plus ' - <width>мм' for non-zero widths."""
    description = layer.material_description
    if round(float(layer.width_mm or 0.0), WIDTH_DECIMALS) == 0:
        return description
    return "{} - {}мм".format(description, format_width(layer.width_mm))


class MaterialDescriptionBuilder(object):
    """Builds per-layer values and the numbered specification text."""

    def __init__(self, settings):
        self.settings = settings

    def layer_values(self, floor_type):
        """Ordered ``(parameter_name, text)`` pairs, one per layer."""
        values = []
        for index, layer in enumerate(floor_type.layers, 1):
            values.append((self.settings.material_param_name(index), format_layer(layer)))
        return values

    def specification(self, floor_type):
        lines = []
        for index, layer in enumerate(floor_type.layers, 1):
            lines.append("{}. {}".format(index, format_layer(layer)))
        lines.append("{}. {}".format(len(floor_type.layers) + 1, self.settings.closing_material_line))
        return "\n".join(lines)

    def required_parameters(self, floor_type):
        names = [self.settings.material_param_name(i) for i in range(1, len(floor_type.layers) + 1)]
        names.append(self.settings.material_spec_param)
        return names
