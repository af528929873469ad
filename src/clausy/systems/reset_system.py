from __future__ import annotations

import random
from typing import Any

from esper import World

from clausy.components.game_state import GameMode
from clausy.events.bus import EVENT_GAME_RESET, EVENT_GAME_RESET_REQUEST, EventBus
from clausy.factories.plants import clear_plants, spawn_plants
from clausy.factories.rain import clear_rain
from clausy.utils.queries import get_canvas, get_cloud, get_game_state
from clausy.world import cloud_start_x


class ResetSystem:
    """Restores a fresh round: cloud centred, rain gone, new plants."""

    def __init__(self, world: World, event_bus: EventBus, rng: random.Random):
        self.world = world
        self.event_bus = event_bus
        self.rng = rng
        self.event_bus.subscribe(EVENT_GAME_RESET_REQUEST, self.on_reset_request)

    def on_reset_request(self, sender: Any, **payload: Any) -> None:
        self.reset(reason=payload.get("reason"))

    def reset(self, *, reason: str | None = None) -> None:
        canvas = get_canvas(self.world)
        if canvas is None:
            return
        state = get_game_state(self.world)
        if state is not None:
            state.mode = GameMode.PLAYING
            state.step = 0
        clear_rain(self.world)
        cloud = get_cloud(self.world)
        if cloud is not None:
            cloud.x = cloud_start_x(canvas.width)
        clear_plants(self.world)
        spawn_plants(self.world, canvas.height, self.rng)
        self.event_bus.emit(EVENT_GAME_RESET, reason=reason)
