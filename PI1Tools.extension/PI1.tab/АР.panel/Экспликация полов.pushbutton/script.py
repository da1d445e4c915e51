# -*- coding: utf-8 -*-
__title__ = "Экспликация\nполов"
__doc__ = """Создаёт экспликацию полов при условии:
-в конце наименования пола указан тип в формате Тип 1;
-подготовлена легенда по типу пола и названа в формате (P)_FL_Тип 1;
-заполнены описания используемых в составе пола материалов.

Shift+Click: настройки."""

from pyrevit import forms, revit, script

from FloorExplication.errors import ExplicationError
from FloorExplication.services import FloorExplicationRunner, load_explication_settings

doc = revit.doc
uidoc = revit.uidoc
logger = script.get_logger()


def report(summary):
    output = script.get_output()
    output.close_others()
    output.print_md("## ✅ Экспликация полов")
    if summary['legends_exported']:
        output.print_md("* Созданы изображения легенд: **{}**".format(", ".join(summary['legends_exported'])))
    output.print_md("* Типов полов обработано: **{}**".format(summary['floor_types']))
    output.print_md("* Типов с номерами помещений: **{}**".format(summary['rooms']))
    output.print_md("* Типов со схемой пола: **{}**".format(summary['images']))
    if summary['schedule_created']:
        output.print_md("* Создана спецификация: **{}**".format(summary['schedule_name']))
    else:
        output.print_md("* Спецификация **{}** уже существует и не изменялась".format(summary['schedule_name']))
    for notice in summary['notices']:
        logger.debug(notice)


def main():
    settings = load_explication_settings(doc)
    runner = FloorExplicationRunner(doc, uidoc, settings=settings, logger=logger)
    try:
        summary = runner.run()
    except ExplicationError as e:
        forms.alert(str(e), title="Предупреждение", exitscript=True)
        return
    report(summary)


if __name__ == "__main__":
    main()
