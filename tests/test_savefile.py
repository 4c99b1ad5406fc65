# tests/test_savefile.py
import datetime as dt
import logging
import random

import pytest

from savefile import format_summary, save_game_state
from session import new_session
from varieties import Sunflower


@pytest.fixture
def finished_session():
    session = new_session("Lina", Sunflower(), rng=random.Random(3), today=dt.date(2026, 11, 2))
    session.seeds = 12
    session.points = 37
    session.plant.health = 64
    session.plant._growth_stage = 3
    return session


def test_format_summary(finished_session):
    assert format_summary(finished_session) == (
        "PlanTings Game State\n"
        "====================\n"
        "\n"
        "Player: Lina\n"
        "Character Name: Plant_L\n"
        "Plant: Helianthus (Sunflower)\n"
        "Plant Health: 64\n"
        "Plant Growth Stage: 3\n"
        "Seeds: 12\n"
        "Season: Early Winter\n"
        "Points Earned: 37\n"
        "Plant Status: Alive\n"
    )


def test_dead_plant_status(finished_session):
    finished_session.plant._alive = False
    assert format_summary(finished_session).endswith("Plant Status: Dead\n")


def test_save_writes_file(finished_session, tmp_path):
    target = tmp_path / "state.txt"
    message = save_game_state(finished_session, str(target))
    assert message == f"Game state saved successfully to {target}"
    assert target.read_text(encoding="utf-8") == format_summary(finished_session)


def test_save_failure_is_reported_not_raised(finished_session, tmp_path, caplog):
    target = tmp_path / "missing" / "state.txt"
    with caplog.at_level(logging.ERROR, logger="savefile"):
        message = save_game_state(finished_session, str(target))
    assert message.startswith("Error saving game state:")
    assert not target.exists()
    assert "Failed to save game state" in caplog.text
    # in-memory state untouched
    assert finished_session.points == 37
    assert finished_session.plant.is_alive
