from abc import ABC, abstractmethod
from collections import defaultdict


class Entity(ABC):
    @abstractmethod
    def update(self, tick_counter: int):
        """Advance one tick. May return a list of messages for the player."""
        pass


class GameTicker:
    """
    Turn-based tick registry.

    Nothing runs on a timer: the counter only moves when advance() is
    called, which in the game happens once per "pass time" action.
    """

    def __init__(self):
        self.tick_counter: int = 0

        # A map of {frequency_in_ticks: set(entities)}
        # e.g., {1: {plant}, 4: {weekly_report}}
        self._registry: dict[int, set[Entity]] = defaultdict(set)

    def advance(self, ticks: int = 1) -> list:
        """Run `ticks` ticks and return every message the entities raised."""
        events = []
        for _ in range(ticks):
            self.tick_counter += 1
            for frequency, entities in list(self._registry.items()):
                if self.tick_counter % frequency == 0:
                    for entity in list(entities):
                        result = entity.update(self.tick_counter)
                        if result:
                            events.extend(result)
        return events

    def register(self, entity: Entity, frequency: int = 1):
        if frequency < 1:
            raise ValueError(f"frequency must be >= 1, got {frequency}")
        self._registry[frequency].add(entity)

    def unregister(self, entity: Entity, frequency: int = 1):
        entities = self._registry.get(frequency)
        if not entities:
            return
        entities.discard(entity)
        if not entities:
            del self._registry[frequency]

    def entities(self) -> set:
        return {e for entities in self._registry.values() for e in entities}
