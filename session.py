"""
Session Module

Everything one play-through owns (player, plant, season snapshot, seed
count, score) lives in a GameSession that is handed to apply_action()
for every menu choice. Scoring is a session concern; the plant knows
nothing about points.
"""

import datetime as dt
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from gameticker import GameTicker
from plant import Plant
from player import Player
from seasons import Season, current_season

log = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Player"

MIN_SEEDS = 1
MAX_SEEDS = 20
BIG_POT_LIMIT = 5

# Points per action
WATER_POINTS = 5
BASK_POINTS = 5
PASS_TIME_POINTS = 2
HARVEST_BONUS = 50

# Display thresholds
HEALTHY_ABOVE = 70
LOW_RESOURCE_BELOW = 30

MENU = (
    ("1", "Water the plant"),
    ("2", "Give sunlight"),
    ("3", "Check plant status"),
    ("4", "Try to harvest"),
    ("5", "Pass time (plant grows)"),
    ("6", "Quit game"),
)


def roll_seeds(rng: random.Random) -> int:
    return rng.randint(MIN_SEEDS, MAX_SEEDS)


@dataclass
class GameSession:
    player: Player
    plant: Plant
    season: Season
    seeds: int
    points: int = 0
    running: bool = True
    ticker: GameTicker = field(default_factory=GameTicker)

    def __post_init__(self):
        self.ticker.register(self.plant)

    @property
    def active(self) -> bool:
        return self.running and self.plant.is_alive


@dataclass
class ActionResult:
    messages: List[str] = field(default_factory=list)
    points: int = 0
    valid: bool = True


def new_session(player_name: str, plant: Plant, rng: Optional[random.Random] = None,
                today: Optional[dt.date] = None) -> GameSession:
    """Start a session; blank names become DEFAULT_PLAYER_NAME."""
    name = (player_name or "").strip() or DEFAULT_PLAYER_NAME
    rng = rng or random.Random()
    session = GameSession(
        player=Player(name),
        plant=plant,
        season=current_season(today),
        seeds=roll_seeds(rng),
    )
    log.info("New session: player=%s plant=%s season=%s seeds=%d",
             session.player.name, plant.name, session.season.label, session.seeds)
    return session


def _award(session: GameSession, result: ActionResult, points: int):
    session.points += points
    result.points += points


def _harvest(session: GameSession) -> ActionResult:
    plant = session.plant
    result = ActionResult(messages=[plant.harvest_product()])
    if plant.is_ready_to_harvest():
        _award(session, result, HARVEST_BONUS)
        result.messages.append(f"You earned {HARVEST_BONUS} bonus points!")
        session.running = False
        log.info("%s harvested at stage %d", plant.name, plant.growth_stage)
    return result


def apply_action(session: GameSession, choice: str) -> ActionResult:
    """Run one menu choice against the session and report what happened."""
    choice = (choice or "").strip()
    plant = session.plant

    if not session.active:
        return ActionResult(messages=["The game is already over."], valid=False)

    if choice == "1":
        result = ActionResult(messages=[plant.water()])
        _award(session, result, WATER_POINTS)
    elif choice == "2":
        result = ActionResult(messages=[plant.bask()])
        _award(session, result, BASK_POINTS)
    elif choice == "3":
        result = ActionResult(messages=detailed_status(plant))
    elif choice == "4":
        result = _harvest(session)
    elif choice == "5":
        result = ActionResult(messages=session.ticker.advance())
        _award(session, result, PASS_TIME_POINTS)
    elif choice == "6":
        session.running = False
        result = ActionResult(messages=["Thanks for playing PlanTings!"])
    else:
        result = ActionResult(messages=["Invalid choice. Please try again."], valid=False)

    return result


# ============================================================================
# Display text
# ============================================================================

def is_healthy(plant: Plant) -> bool:
    return plant.health > HEALTHY_ABOVE


def detailed_status(plant: Plant) -> List[str]:
    return [
        str(plant),
        "Health Status: " + ("Healthy" if is_healthy(plant) else "Needs Care"),
    ]


def status_lines(session: GameSession) -> List[str]:
    plant = session.plant

    def mark(ok):
        return "✓" if ok else "⚠"

    ready = " (Ready to Harvest!)" if plant.is_ready_to_harvest() else ""
    return [
        "Current Plant Status:",
        f"  Health: {plant.health}/100 {mark(is_healthy(plant))}",
        f"  Water: {plant.water_level}/100 {mark(plant.water_level >= LOW_RESOURCE_BELOW)}",
        f"  Sunlight: {plant.sunlight_level}/100 {mark(plant.sunlight_level >= LOW_RESOURCE_BELOW)}",
        f"  Growth Stage: {plant.growth_stage}{ready}",
        f"  Points Earned: {session.points}",
    ]


def care_suggestions(plant: Plant) -> List[str]:
    suggestions = []
    if plant.water_level < LOW_RESOURCE_BELOW:
        suggestions.append("💧 Plant needs water!")
    if plant.sunlight_level < LOW_RESOURCE_BELOW:
        suggestions.append("☀ Plant needs sunlight!")
    if plant.is_ready_to_harvest():
        suggestions.append("🌱 Plant is ready to harvest!")
    return suggestions


def seed_message(seeds: int) -> str:
    if seeds < BIG_POT_LIMIT:
        return "You can fit these in one big pot. Let's get started!"
    return "Let's put these little babies down in a larger pot."


def game_over_lines(session: GameSession) -> List[str]:
    lines = []
    if not session.plant.is_alive:
        lines.append("Game Over! Your plant has withered.")
    lines.append(f"Final Score: {session.points} points")
    return lines
