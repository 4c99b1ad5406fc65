"""
Plant Module

Base plant entity for the PlanTings game. Holds the resource levels
(health, water, sunlight), the growth stage and the alive flag, and runs
the shared per-tick decay/growth rule. Variety-specific care lives in
varieties.py.
"""

import logging
from typing import List

from gameticker import Entity

log = logging.getLogger(__name__)

MIN_LEVEL = 0
MAX_LEVEL = 100

START_HEALTH = 100
START_WATER = 50
START_SUNLIGHT = 50
SEEDLING_STAGE = 1

# Per-tick rule knobs
CRITICAL_LEVEL = 20        # below this a resource costs health every tick
CRITICAL_PENALTY = 10
WATER_DECAY = 5
SUNLIGHT_DECAY = 3
GROWTH_MIN_LEVEL = 30      # water and sunlight must be above this to grow
GROWTH_MIN_HEALTH = 50


def _clamp(value: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, int(value)))


class Plant(Entity):
    """
    A single plant cared for during one session.

    Subclasses supply the variety constants below plus their own care
    messages; everything that mutates state lives here.
    """

    DISPLAY_NAME = "Plant"
    WATER_BOOST = 0
    SUNLIGHT_BOOST = 0
    HARVEST_STAGE = 1
    HARVEST_TEXT = ""

    WATER_MESSAGE = "You water the {name}. Water level: {level}"
    BASK_MESSAGE = "Your {name} gets some sunlight. Sunlight level: {level}"

    def __init__(self, name: str = None):
        self._name = name or self.DISPLAY_NAME
        self._health = START_HEALTH
        self._water_level = START_WATER
        self._sunlight_level = START_SUNLIGHT
        self._growth_stage = SEEDLING_STAGE
        self._alive = True

    # --- state --------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int):
        self._health = _clamp(value)

    @property
    def water_level(self) -> int:
        return self._water_level

    @water_level.setter
    def water_level(self, value: int):
        self._water_level = _clamp(value)

    @property
    def sunlight_level(self) -> int:
        return self._sunlight_level

    @sunlight_level.setter
    def sunlight_level(self, value: int):
        self._sunlight_level = _clamp(value)

    @property
    def growth_stage(self) -> int:
        return self._growth_stage

    @property
    def is_alive(self) -> bool:
        return self._alive

    # --- conditions ---------------------------------------------------------

    @property
    def is_thriving(self) -> bool:
        return self._health > 80 and self._water_level > 50 and self._sunlight_level > 50

    @property
    def needs_immediate_care(self) -> bool:
        return (self._health < 30
                or self._water_level < CRITICAL_LEVEL
                or self._sunlight_level < CRITICAL_LEVEL)

    @property
    def can_grow(self) -> bool:
        return (self._water_level > GROWTH_MIN_LEVEL
                and self._sunlight_level > GROWTH_MIN_LEVEL
                and self._health > GROWTH_MIN_HEALTH)

    def is_ready_to_harvest(self) -> bool:
        return self._growth_stage >= self.HARVEST_STAGE

    # --- care ---------------------------------------------------------------

    def water(self) -> str:
        self.water_level = self._water_level + self.WATER_BOOST
        return self.WATER_MESSAGE.format(name=self._name, level=self._water_level)

    def bask(self) -> str:
        self.sunlight_level = self._sunlight_level + self.SUNLIGHT_BOOST
        return self.BASK_MESSAGE.format(name=self._name, level=self._sunlight_level)

    def harvest_product(self) -> str:
        """Describe the harvest. Does not change the plant."""
        if not self.is_ready_to_harvest():
            return f"Not ready yet! Plant is only at stage {self._growth_stage}"
        return self.HARVEST_TEXT

    # --- simulation ---------------------------------------------------------

    def grow(self) -> List[str]:
        """
        Advance the plant by one tick and return the messages it raised.

        Order matters: decay and regeneration still run on the tick the
        plant dies, so a freshly dead plant can be left with a little health.
        """
        if not self._alive:
            return [f"Your {self._name} is no longer alive."]

        messages = []

        # Critical needs, each check independent
        if self._water_level < CRITICAL_LEVEL:
            self._health -= CRITICAL_PENALTY
            messages.append(f"Your {self._name} needs water!")
        if self._sunlight_level < CRITICAL_LEVEL:
            self._health -= CRITICAL_PENALTY
            messages.append(f"Your {self._name} needs sunlight!")

        if self._health <= 0:
            self._health = 0
            self._alive = False
            messages.append(f"Oh no! Your {self._name} has withered away.")
            log.info("%s died at growth stage %d", self._name, self._growth_stage)

        self._water_level = max(MIN_LEVEL, self._water_level - WATER_DECAY)
        self._sunlight_level = max(MIN_LEVEL, self._sunlight_level - SUNLIGHT_DECAY)

        if self.can_grow:
            self._growth_stage += 1
            messages.append(f"Your {self._name} is growing! Stage: {self._growth_stage}")
            log.info("%s reached growth stage %d", self._name, self._growth_stage)

        boost = (self._water_level // 2) + (self._sunlight_level // 3)
        self._health = min(MAX_LEVEL, self._health + boost // 10)

        return messages

    def update(self, tick_counter: int) -> List[str]:
        messages = self.grow()
        for message in messages:
            log.debug("tick %d: %s", tick_counter, message)
        return messages

    # --- reporting ----------------------------------------------------------

    def status(self) -> dict:
        return {
            "name": self._name,
            "health": self._health,
            "water_level": self._water_level,
            "sunlight_level": self._sunlight_level,
            "growth_stage": self._growth_stage,
            "is_alive": self._alive,
            "is_thriving": self.is_thriving,
            "needs_care": self.needs_immediate_care,
        }

    def diagnostics(self) -> List[str]:
        checks = (
            (self.is_thriving, "✓ Plant is thriving!"),
            (self.needs_immediate_care, "⚠ Plant needs immediate care!"),
            (self._water_level < 50, "💧 Consider watering"),
            (self._sunlight_level < 50, "☀ Needs more sunlight"),
            (self.is_ready_to_harvest(), "🌱 Ready for harvest!"),
        )
        return [message for condition, message in checks if condition]

    def __str__(self):
        return (f"{self._name} (health={self._health}, water={self._water_level}, "
                f"sunlight={self._sunlight_level}, stage={self._growth_stage}, "
                f"alive={self._alive})")
