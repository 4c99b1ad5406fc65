"""
Session summary writer.

Dumps the end-of-session state as flat "Key: value" lines for the player
to read. There is no loader; the file is never read back by the game.
"""

import logging

from session import GameSession

log = logging.getLogger(__name__)

TITLE = "PlanTings Game State"


def format_summary(session: GameSession) -> str:
    plant = session.plant
    rows = (
        ("Player", session.player.name),
        ("Character Name", session.player.character_name),
        ("Plant", plant.name),
        ("Plant Health", plant.health),
        ("Plant Growth Stage", plant.growth_stage),
        ("Seeds", session.seeds),
        ("Season", session.season.label),
        ("Points Earned", session.points),
        ("Plant Status", "Alive" if plant.is_alive else "Dead"),
    )
    lines = [TITLE, "=" * len(TITLE), ""]
    lines.extend(f"{key}: {value}" for key, value in rows)
    return "\n".join(lines) + "\n"


def save_game_state(session: GameSession, filepath: str) -> str:
    """Write the summary to `filepath` and return the message to show the player."""
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(format_summary(session))
    except OSError as e:
        log.error(f"Failed to save game state to {filepath}: {e}", exc_info=True)
        return f"Error saving game state: {e}"
    log.info(f"Game state saved to {filepath}")
    return f"Game state saved successfully to {filepath}"
