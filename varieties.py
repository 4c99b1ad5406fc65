"""
Varieties Module

The five plant varieties of the PlanTings catalog. Each one only differs
from the base Plant in its care increments, its harvest threshold/yield
and the wording of its care messages.
"""

from plant import Plant


class Potato(Plant):
    DISPLAY_NAME = "Peruna (Potato)"
    WATER_BOOST = 25
    SUNLIGHT_BOOST = 15         # prefers indirect light
    HARVEST_STAGE = 5
    HARVEST_TEXT = "Fresh potatoes harvested! You got 15 potatoes."

    BASK_MESSAGE = "Your {name} gets some gentle sunlight. Sunlight level: {level}"


class Marigold(Plant):
    DISPLAY_NAME = "Calendula (Marigold)"
    WATER_BOOST = 15
    SUNLIGHT_BOOST = 30
    HARVEST_STAGE = 4
    HARVEST_TEXT = "Beautiful marigold seeds collected! You got 50 seeds."

    WATER_MESSAGE = "You give the {name} a little water. Water level: {level}"
    BASK_MESSAGE = "Your {name} basks in the sun! Sunlight level: {level}"


class Tomato(Plant):
    DISPLAY_NAME = "Lycopersicum (Tomato)"
    WATER_BOOST = 35
    SUNLIGHT_BOOST = 35
    HARVEST_STAGE = 6
    HARVEST_TEXT = "Delicious red tomatoes harvested! You got 12 tomatoes."

    WATER_MESSAGE = "You give the {name} plenty of water. Water level: {level}"
    BASK_MESSAGE = "Your {name} soaks up the sun! Sunlight level: {level}"


class Cucumber(Plant):
    DISPLAY_NAME = "Cucumis (Cucumber)"
    WATER_BOOST = 28
    SUNLIGHT_BOOST = 28
    HARVEST_STAGE = 5
    HARVEST_TEXT = "Fresh cucumbers harvested! You got 8 cucumbers."

    BASK_MESSAGE = "Your {name} receives good sunlight. Sunlight level: {level}"


class Sunflower(Plant):
    DISPLAY_NAME = "Helianthus (Sunflower)"
    WATER_BOOST = 20
    SUNLIGHT_BOOST = 40
    HARVEST_STAGE = 6
    HARVEST_TEXT = "Beautiful sunflower seeds harvested! You got 80 seeds."

    BASK_MESSAGE = "Your {name} loves the sun! Sunlight level: {level}"


# Catalog order is also menu order
VARIETIES = (Potato, Marigold, Tomato, Cucumber, Sunflower)
