"""
PlanTings - Plant Care Game

Console entry point. Asks for the player's name and a plant, then runs
the care loop (water, sunlight, status, harvest, pass time, quit) until
the player quits, harvests or the plant withers, and finally writes a
short summary file.

Architecture:
-------------
1. **plantings.main**: click command, logging setup, screen flow
2. **session.GameSession / apply_action**: per-session state and scoring
3. **plant.Plant / varieties**: resource levels and the per-tick rule
4. **plant_factory**: menu key -> plant variety
5. **seasons**: calendar month -> season label
6. **savefile**: end-of-session summary writer
"""


# ============================================================================
# Imports
# ============================================================================

# --- Standard Library (Built-ins) ---
import datetime as dt
import logging
import random

# --- Third-Party / Installed Modules ---
import click

# --- Local Modules ---
import plant_factory
from config import GameConfig, load_config
from console import clear_screen, echo_lines, pause, print_header, type_text
from crashhandler import CrashHandler
from plant import Plant
from player import character_name_for
from savefile import save_game_state
from session import (
    MENU,
    DEFAULT_PLAYER_NAME,
    GameSession,
    apply_action,
    care_suggestions,
    game_over_lines,
    new_session,
    seed_message,
    status_lines,
)

TITLE = "PlanTings Cultivations"

log = logging.getLogger(__name__)


# ============================================================================
# Logging Configuration
# ============================================================================

def configure_logging(cfg: GameConfig):
    # Configure logging (if not already configured)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            filename=cfg.log_file,
            filemode="a",
            level=getattr(logging, str(cfg.log_level).upper(), logging.WARNING),
            format="%(asctime)s %(levelname)s %(message)s"
        )


# ============================================================================
# Screens
# ============================================================================

def _next_screen(cfg: GameConfig):
    pause(cfg.pause_seconds)
    clear_screen(cfg.clear_screen)


def ask_player_name() -> str:
    return click.prompt("Please enter your name", default="", show_default=False)


def choose_plant() -> Plant:
    """Keep asking until the player picks a valid variety."""
    print_header(TITLE)
    while True:
        click.echo("\nAvailable plants:")
        for key in plant_factory.available_choices():
            click.echo(f"{key}. {plant_factory.plant_name(key)}")
        click.echo()

        choice = click.prompt("Please pick a number between 1 and 5", default="", show_default=False)
        plant = plant_factory.create_plant(choice)
        if plant is not None:
            return plant
        click.echo("Invalid choice. Please pick a number between 1 and 5.")


def show_other_plants(chosen: Plant):
    print_header(TITLE)
    click.echo("\nOther members of Cultivations include:\n")
    for other in plant_factory.create_all_plants():
        if other.name != chosen.name:
            click.echo(f"  • {other.name}")
    click.echo()


def show_season(session: GameSession, today: dt.date):
    print_header(TITLE)
    click.echo(f"\nCurrent date: {today.isoformat()}")
    click.echo(f"Current season: {session.season.label}\n")
    click.echo("To achieve a healthy plant, you need to water it and give it sunlight.")
    click.echo("Let's help you get started with that.\n")


def show_seeds(session: GameSession):
    print_header(TITLE)
    click.echo(f"\nYou have {session.seeds} seeds to start with.\n")
    click.echo(seed_message(session.seeds))


def show_care_instructions(session: GameSession, cfg: GameConfig):
    print_header(TITLE)
    click.echo("\nThere we go.")
    click.echo("Now we just need to take well care of the plant so it starts to grow.\n")
    type_text(f"Happy planting {session.player.character_name}!", cfg.type_delay)


def show_menu():
    click.echo("What would you like to do?")
    for key, label in MENU:
        click.echo(f"{key}. {label}")
    click.echo()


def game_loop(session: GameSession, cfg: GameConfig):
    clear_screen(cfg.clear_screen)
    while session.active:
        print_header(TITLE + " - Game Loop")
        click.echo()
        echo_lines(status_lines(session))
        click.echo()
        show_menu()

        suggestions = care_suggestions(session.plant)
        if suggestions:
            click.echo("Suggestions:")
            echo_lines(suggestions, indent="  ")
            click.echo()

        choice = click.prompt("Choose an action (1-6)", default="", show_default=False)
        result = apply_action(session, choice)
        click.echo()
        echo_lines(result.messages)
        _next_screen(cfg)

    click.echo()
    echo_lines(game_over_lines(session))


def play(cfg: GameConfig, rng: random.Random = None, today: dt.date = None) -> GameSession:
    """Run one full session and return its final state."""
    today = today or dt.date.today()

    clear_screen(cfg.clear_screen)
    print_header("Welcome to the PlanTings application!")
    pause(cfg.pause_seconds)

    name = ask_player_name().strip() or DEFAULT_PLAYER_NAME
    click.echo(f"\nHello {character_name_for(name)}!\n")
    _next_screen(cfg)

    print_header(TITLE)
    click.echo("\nIn this game you will take care of a plant.")
    click.echo("First, let us choose a plant for you to take care of.\n")
    _next_screen(cfg)

    plant = choose_plant()
    session = new_session(name, plant, rng=rng, today=today)
    click.echo(f"\nYou have been given a {plant.name} to take care of.")
    _next_screen(cfg)

    show_other_plants(plant)
    _next_screen(cfg)

    show_season(session, today)
    _next_screen(cfg)

    show_seeds(session)
    _next_screen(cfg)

    show_care_instructions(session, cfg)
    _next_screen(cfg)

    game_loop(session, cfg)
    log.info("Session ended: points=%d alive=%s stage=%d",
             session.points, session.plant.is_alive, session.plant.growth_stage)

    click.echo("\n" + save_game_state(session, cfg.save_file))
    return session


# ============================================================================
# CLI
# ============================================================================

@click.command()
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help='YAML settings file (default: plantings.yaml if present)')
@click.option('--save-file', type=click.Path(dir_okay=False), default=None,
              help='Where to write the end-of-session summary')
@click.option('--fast', is_flag=True, help='Skip pauses, typed text and screen clearing')
@click.option('--seed', type=int, default=None, help='Seed for the starting seed count')
def main(config_path, save_file, fast, seed):
    """Take care of a plant until it is ready to harvest."""
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError) as e:
        raise click.UsageError(str(e))
    if save_file:
        cfg.save_file = save_file
    if fast:
        cfg = cfg.fast()

    configure_logging(cfg)
    CrashHandler(log_path=cfg.log_file).install()

    rng = random.Random(seed) if seed is not None else random.Random()
    play(cfg, rng=rng)


if __name__ == "__main__":
    main()
