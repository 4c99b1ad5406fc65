# tests/test_session.py
import datetime as dt
import random

import pytest

import session as game
from player import Player
from seasons import Season
from varieties import Marigold, Potato, Tomato

JUNE = dt.date(2026, 6, 15)


@pytest.fixture
def potato_session() -> game.GameSession:
    """A fresh potato session with a fixed seed roll and date."""
    return game.new_session("Ana", Potato(), rng=random.Random(7), today=JUNE)


class TestNewSession:
    def test_fields(self, potato_session):
        assert potato_session.player == Player("Ana", "Plant_A")
        assert potato_session.season is Season.SUMMER
        assert potato_session.points == 0
        assert potato_session.running
        assert potato_session.active
        assert potato_session.plant in potato_session.ticker.entities()

    def test_seed_roll_uses_injected_rng(self):
        expected = random.Random(7).randint(1, 20)
        assert game.new_session("Ana", Potato(), rng=random.Random(7), today=JUNE).seeds == expected

    @pytest.mark.parametrize("seed", range(50))
    def test_seed_roll_range(self, seed):
        assert 1 <= game.roll_seeds(random.Random(seed)) <= 20

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_becomes_player(self, name):
        session = game.new_session(name, Potato(), rng=random.Random(1), today=JUNE)
        assert session.player.name == "Player"
        assert session.player.character_name == "Plant_P"


class TestApplyAction:
    def test_water(self, potato_session):
        result = game.apply_action(potato_session, "1")
        assert potato_session.plant.water_level == 75
        assert potato_session.points == 5
        assert result.points == 5
        assert result.valid

    def test_bask(self, potato_session):
        game.apply_action(potato_session, " 2 ")
        assert potato_session.plant.sunlight_level == 65
        assert potato_session.points == 5

    def test_status_costs_nothing(self, potato_session):
        result = game.apply_action(potato_session, "3")
        assert potato_session.points == 0
        assert result.messages[-1] == "Health Status: Healthy"
        assert result.messages[0].startswith("Peruna (Potato) (health=100")

    def test_pass_time_ticks_the_plant(self, potato_session):
        result = game.apply_action(potato_session, "5")
        assert potato_session.ticker.tick_counter == 1
        assert potato_session.plant.water_level == 45
        assert potato_session.plant.growth_stage == 2
        assert potato_session.points == 2
        assert result.messages == ["Your Peruna (Potato) is growing! Stage: 2"]

    def test_quit(self, potato_session):
        result = game.apply_action(potato_session, "6")
        assert not potato_session.running
        assert not potato_session.active
        assert result.messages == ["Thanks for playing PlanTings!"]

    @pytest.mark.parametrize("choice", ["7", "", "water", "0"])
    def test_invalid_choice_changes_nothing(self, potato_session, choice):
        before = potato_session.plant.status()
        result = game.apply_action(potato_session, choice)
        assert not result.valid
        assert result.messages == ["Invalid choice. Please try again."]
        assert potato_session.plant.status() == before
        assert potato_session.points == 0
        assert potato_session.running

    def test_early_harvest_keeps_playing(self, potato_session):
        result = game.apply_action(potato_session, "4")
        assert result.messages == ["Not ready yet! Plant is only at stage 1"]
        assert potato_session.points == 0
        assert potato_session.running

    def test_ready_harvest_scores_and_ends(self, potato_session):
        potato_session.plant._growth_stage = 5
        result = game.apply_action(potato_session, "4")
        assert result.messages == [
            "Fresh potatoes harvested! You got 15 potatoes.",
            "You earned 50 bonus points!",
        ]
        assert potato_session.points == 50
        assert not potato_session.running

    def test_harvest_uses_each_variety_threshold(self):
        marigold = game.new_session("Mia", Marigold(), rng=random.Random(1), today=JUNE)
        marigold.plant._growth_stage = 4
        game.apply_action(marigold, "4")
        assert marigold.points == 50

        tomato = game.new_session("Tom", Tomato(), rng=random.Random(1), today=JUNE)
        tomato.plant._growth_stage = 5
        game.apply_action(tomato, "4")
        assert tomato.points == 0
        assert tomato.running

    def test_no_actions_after_the_plant_dies(self, potato_session):
        potato_session.plant.water_level = 0
        potato_session.plant.sunlight_level = 0
        for _ in range(5):
            game.apply_action(potato_session, "5")
        assert not potato_session.plant.is_alive
        assert not potato_session.active
        assert potato_session.points == 10

        result = game.apply_action(potato_session, "1")
        assert not result.valid
        assert potato_session.plant.water_level == 0
        assert potato_session.points == 10


class TestDisplayText:
    def test_status_lines(self, potato_session):
        lines = game.status_lines(potato_session)
        assert lines[1] == "  Health: 100/100 ✓"
        assert lines[2] == "  Water: 50/100 ✓"
        assert lines[4] == "  Growth Stage: 1"
        assert lines[5] == "  Points Earned: 0"

    def test_status_lines_warnings(self, potato_session):
        potato_session.plant.water_level = 29
        potato_session.plant._growth_stage = 5
        lines = game.status_lines(potato_session)
        assert lines[2] == "  Water: 29/100 ⚠"
        assert lines[4] == "  Growth Stage: 5 (Ready to Harvest!)"

    def test_care_suggestions(self, potato_session):
        plant = potato_session.plant
        assert game.care_suggestions(plant) == []
        plant.water_level = 10
        plant.sunlight_level = 10
        assert game.care_suggestions(plant) == ["💧 Plant needs water!", "☀ Plant needs sunlight!"]

    @pytest.mark.parametrize("seeds, pot", [(1, "one big pot"), (4, "one big pot"), (5, "larger pot"), (20, "larger pot")])
    def test_seed_message(self, seeds, pot):
        assert pot in game.seed_message(seeds)

    def test_game_over_lines(self, potato_session):
        potato_session.points = 12
        assert game.game_over_lines(potato_session) == ["Final Score: 12 points"]
        potato_session.plant._alive = False
        assert game.game_over_lines(potato_session) == [
            "Game Over! Your plant has withered.",
            "Final Score: 12 points",
        ]
