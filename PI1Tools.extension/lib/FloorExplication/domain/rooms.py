# -*- coding: utf-8 -*-
import re

ROOM_SEPARATOR = ", "

_DIGITS = re.compile(r"(\d+)")


def natural_key(text):
    """Sort key ordering '2' before '10' and '1.2' before '1.10'."""
    parts = _DIGITS.split(text or "")
    return [(0, int(p), "") if p.isdigit() else (1, 0, p.lower()) for p in parts]


def room_numbers_for(floor_type_name, rooms, sort=False):
    """Numbers of the rooms standing on ``floor_type_name``, in room order."""
    numbers = []
    for room in rooms:
        if not room.has_floor:
            continue
        if room.floor_type_name == floor_type_name:
            numbers.append(room.number)
    if sort:
        numbers = sorted(numbers, key=natural_key)
    return numbers


def join_room_numbers(numbers):
    """Comma-joined numbers, or None when there is nothing to write."""
    value = ROOM_SEPARATOR.join(n for n in numbers if n)
    return value or None
