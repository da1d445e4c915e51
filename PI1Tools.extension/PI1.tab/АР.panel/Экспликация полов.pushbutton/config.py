# -*- coding: utf-8 -*-
from pyrevit import forms, revit, script

from FloorExplication.models.settings import (
    DuplicateLegendPolicy,
    ExplicationSettings,
    IMAGE_RESOLUTIONS,
)
from FloorExplication.services import load_explication_settings, save_explication_settings

doc = revit.doc
logger = script.get_logger()

POLICY_LABELS = {
    DuplicateLegendPolicy.ERROR: "ошибка",
    DuplicateLegendPolicy.LAST_WINS: "последнее изображение",
}

TEXT_SETTINGS = [
    ("type_marker", "Маркер типа в наименовании"),
    ("legend_marker", "Маркер легенд и изображений"),
    ("material_param_prefix", "Префикс параметров слоёв"),
    ("material_spec_param", "Параметр состава пола"),
    ("room_numbers_param", "Параметр номеров помещений"),
    ("closing_material_line", "Последняя строка состава"),
]

SAVE = "Сохранить"
RESET = "Сбросить по умолчанию"


def _yes_no(value):
    return "да" if value else "нет"


def _menu(settings):
    options = [
        "Сортировать номера помещений: {}".format(_yes_no(settings.sort_room_numbers)),
        "Несколько легенд одного типа: {}".format(POLICY_LABELS[settings.duplicate_legend_policy]),
        "Разрешение изображений: {} DPI".format(settings.image_resolution_dpi),
    ]
    for key, label in TEXT_SETTINGS:
        options.append("{}: {}".format(label, settings.get(key)))
    options.extend([RESET, SAVE])
    return options


def _edit(settings, choice):
    if choice.startswith("Сортировать"):
        settings.set("sort_room_numbers", not settings.sort_room_numbers)
    elif choice.startswith("Несколько легенд"):
        policies = DuplicateLegendPolicy.all()
        current = policies.index(settings.duplicate_legend_policy)
        settings.set("duplicate_legend_policy", policies[(current + 1) % len(policies)])
    elif choice.startswith("Разрешение"):
        picked = forms.SelectFromList.show(
            [str(dpi) for dpi in IMAGE_RESOLUTIONS],
            title="Разрешение изображений легенд, DPI",
            multiselect=False,
        )
        if picked:
            settings.set("image_resolution_dpi", int(picked))
    else:
        for key, label in TEXT_SETTINGS:
            if choice.startswith(label):
                value = forms.ask_for_string(default=settings.get(key), prompt=label, title="Экспликация полов")
                if value is None:
                    return
                try:
                    settings.set(key, value)
                except ValueError as e:
                    forms.alert(str(e), title="Предупреждение")
                return


def main():
    settings = load_explication_settings(doc)
    while True:
        choice = forms.CommandSwitchWindow.show(_menu(settings), message="Настройки экспликации полов")
        if not choice:
            return
        if choice == SAVE:
            save_explication_settings(doc, settings)
            logger.debug("Saved settings: {}".format(settings.to_json()))
            return
        if choice == RESET:
            settings = ExplicationSettings()
            continue
        _edit(settings, choice)


if __name__ == "__main__":
    main()
