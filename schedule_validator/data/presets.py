"""
Bundled example configurations.

Useful as starting points for a new section and as realistic test data:

- standard:  Mon-Fri, one shared break pattern
- complex:   Mon-Sat, Friday swaps lunch for a class and a civic activity,
             Saturday is shorter
- intensive: short morning day, Tuesday opens with an assembly
- legacy:    the older flat break-list format
"""

from __future__ import annotations

import copy
from typing import Any, Optional

from .models import ScheduleConfig
from .loader import load_schedule_config


def _slot(start: str, end: str, label: str, type_: str = "break", is_class: bool = False) -> dict:
    return {"start": start, "end": end, "label": label, "type": type_, "isClass": is_class}


def _same_for(days: list[int], slots: list[dict]) -> dict[str, list[dict]]:
    return {str(day): [dict(s) for s in slots] for day in days}


_STANDARD_DAY = [
    _slot("10:00", "10:15", "RECREO"),
    _slot("13:15", "14:00", "ALMUERZO", "lunch"),
]

_COMPLEX_DAY = [
    _slot("09:30", "09:45", "RECREO"),
    _slot("13:00", "14:00", "ALMUERZO", "lunch"),
    _slot("15:30", "15:45", "RECREO"),
]

_INTENSIVE_DAY = [
    _slot("09:00", "09:15", "RECREO"),
    _slot("11:00", "11:30", "ALMUERZO", "lunch"),
]


PRESETS: dict[str, dict[str, Any]] = {
    "standard": {
        "id": 1,
        "sectionId": 101,
        "workingDays": [1, 2, 3, 4, 5],
        "startTime": "07:00",
        "endTime": "17:00",
        "classDuration": 45,
        "breakSlots": _same_for([1, 2, 3, 4, 5], _STANDARD_DAY),
    },
    "complex": {
        "id": 2,
        "sectionId": 102,
        "workingDays": [1, 2, 3, 4, 5, 6],
        "startTime": "07:00",
        "endTime": "18:00",
        "classDuration": 50,
        "breakSlots": {
            **_same_for([1, 2, 3, 4], _COMPLEX_DAY),
            "5": [
                _slot("09:30", "09:45", "RECREO"),
                _slot("13:00", "13:30", "CLASE ESPECIAL", "class", is_class=True),
                _slot("13:30", "14:00", "ACTIVIDAD CIVICA", "activity"),
                _slot("15:30", "15:45", "RECREO"),
            ],
            "6": [
                _slot("09:30", "09:45", "RECREO"),
                _slot("12:00", "13:00", "ALMUERZO", "lunch"),
            ],
        },
    },
    "intensive": {
        "id": 3,
        "sectionId": 103,
        "workingDays": [1, 2, 3, 4, 5],
        "startTime": "07:30",
        "endTime": "13:00",
        "classDuration": 50,
        "breakSlots": {
            **_same_for([1, 3, 4, 5], _INTENSIVE_DAY),
            "2": [_slot("07:30", "08:00", "ASAMBLEA CIVICA", "activity")] + [dict(s) for s in _INTENSIVE_DAY],
        },
    },
    "legacy": {
        "id": 4,
        "sectionId": 104,
        "workingDays": [1, 2, 3, 4, 5],
        "startTime": "07:00",
        "endTime": "17:00",
        "classDuration": 45,
        "breakSlots": [
            {"start": "10:00", "end": "10:15", "label": "RECREO"},
            {"start": "13:15", "end": "14:00", "label": "ALMUERZO"},
        ],
    },
}


def preset_names() -> list[str]:
    return sorted(PRESETS)


def get_preset_data(name: str) -> dict[str, Any]:
    """Raw preset dictionary (a deep copy, safe to modify)."""
    if name not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(preset_names())}")
    return copy.deepcopy(PRESETS[name])


def get_preset(name: str, section_id: Optional[int] = None) -> ScheduleConfig:
    """
    Load a preset as a per-day configuration.

    Args:
        name: Preset name (see ``preset_names()``)
        section_id: Override the preset's section

    Raises:
        KeyError: If the preset does not exist
    """
    data = get_preset_data(name)
    if section_id is not None:
        data["sectionId"] = section_id
    return load_schedule_config(data)
