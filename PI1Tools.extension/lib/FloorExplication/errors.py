# -*- coding: utf-8 -*-
"""Exceptions raised when the document does not meet the explication preconditions."""


class ExplicationError(Exception):
    """Base class for every fatal explication failure."""


class MissingParametersError(ExplicationError):
    """One or more required parameters are not created in the document.

    ``missing`` is a list of ``(owner, parameter_name)`` pairs where ``owner``
    is a floor type name or ``None`` for schedule fields.
    """

    def __init__(self, missing):
        self.missing = list(missing)
        ExplicationError.__init__(self, self.describe())

    @property
    def parameter_names(self):
        names = []
        for _, name in self.missing:
            if name not in names:
                names.append(name)
        return names

    def describe(self):
        lines = []
        for name in self.parameter_names:
            lines.append("Параметр {} не создан для категории Перекрытия".format(name))
        return "\n".join(lines)


class DuplicateLegendError(ExplicationError):
    """Several legend images parse to the same type number."""

    def __init__(self, type_number, image_names):
        self.type_number = type_number
        self.image_names = list(image_names)
        ExplicationError.__init__(
            self,
            "Несколько изображений легенд для типа {}: {}".format(
                type_number, ", ".join(self.image_names)
            ),
        )


class LayoutError(ExplicationError):
    """The schedule layout definition is malformed."""


class NoView3DError(ExplicationError):
    def __init__(self):
        ExplicationError.__init__(self, "В проекте нет 3D вида для поиска перекрытий под помещениями")
