from __future__ import annotations

from esper import World

from clausy.components.game_state import GameMode
from clausy.events.bus import EVENT_GAME_WON, EventBus
from clausy.utils.queries import get_game_state, plant_entities


class WinSystem:
    """Flips the game into WON once every plant has finished growing."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def process(self) -> None:
        state = get_game_state(self.world)
        if state is None or state.game_won:
            return
        if all(plant.grown for _, plant in plant_entities(self.world)):
            state.mode = GameMode.WON
            self.event_bus.emit(EVENT_GAME_WON, step=state.step)
