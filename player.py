from dataclasses import dataclass, field

CHARACTER_PREFIX = "Plant_"


def character_name_for(name: str) -> str:
    return CHARACTER_PREFIX + name[0].upper()


@dataclass
class Player:
    """The person caring for the plant, plus their in-game character name."""
    name: str
    character_name: str = field(default="")

    def __post_init__(self):
        if not self.name:
            raise ValueError("player name must not be empty")
        if not self.character_name:
            self.character_name = character_name_for(self.name)
