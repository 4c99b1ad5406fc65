"""
Plant Factory

Turns a menu key ("1".."5") into a fresh plant of the matching variety.
Unknown keys give None rather than an exception so the caller can simply
ask again.
"""

from typing import Dict, List, Optional, Type

from plant import Plant
from varieties import VARIETIES

PLANT_TYPES: Dict[str, Type[Plant]] = {
    str(key): cls for key, cls in enumerate(VARIETIES, start=1)
}

UNKNOWN_PLANT = "Unknown Plant"


def _normalize(choice) -> Optional[str]:
    if choice is None:
        return None
    return str(choice).strip()


def is_valid_choice(choice) -> bool:
    return _normalize(choice) in PLANT_TYPES


def create_plant(choice) -> Optional[Plant]:
    """Build a new plant for `choice`, or None if the key is not in the catalog."""
    cls = PLANT_TYPES.get(_normalize(choice))
    if cls is None:
        return None
    return cls()


def plant_name(choice) -> str:
    cls = PLANT_TYPES.get(_normalize(choice))
    return cls.DISPLAY_NAME if cls is not None else UNKNOWN_PLANT


def available_choices() -> List[str]:
    return sorted(PLANT_TYPES, key=int)


def other_plants(choice) -> List[str]:
    """Display names of every variety except the chosen one, in menu order."""
    chosen = _normalize(choice)
    return [PLANT_TYPES[key].DISPLAY_NAME for key in available_choices() if key != chosen]


def create_all_plants() -> List[Plant]:
    return [PLANT_TYPES[key]() for key in available_choices()]


def plant_count() -> int:
    return len(PLANT_TYPES)
