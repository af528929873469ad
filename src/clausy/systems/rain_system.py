from __future__ import annotations

import random

from esper import World

from clausy.components.rain_drop import RainDrop
from clausy.constants import RAIN_FALL_SPEED
from clausy.events.bus import EVENT_RAIN_SPAWNED, EventBus
from clausy.factories.rain import spawn_rain_drop
from clausy.utils.queries import get_canvas, get_cloud, rain_entities


class RainSystem:
    """Advances, spawns and culls rain drops once per simulation step.

    Drops fall first, then a single new drop is added under the cloud, then
    everything that has dropped past the bottom edge is removed. One drop per
    step against a fixed fall speed keeps the live count bounded.
    """

    def __init__(self, world: World, event_bus: EventBus, rng: random.Random):
        self.world = world
        self.event_bus = event_bus
        self.rng = rng

    def process(self) -> None:
        self._advance()
        self._spawn()
        self._cleanup()

    def _advance(self) -> None:
        for _, drop in rain_entities(self.world):
            drop.y += RAIN_FALL_SPEED

    def _spawn(self) -> None:
        cloud = get_cloud(self.world)
        if cloud is None:
            return
        ent = spawn_rain_drop(self.world, cloud, self.rng)
        drop = self.world.component_for_entity(ent, RainDrop)
        self.event_bus.emit(EVENT_RAIN_SPAWNED, entity=ent, x=drop.x, y=drop.y)

    def _cleanup(self) -> None:
        canvas = get_canvas(self.world)
        if canvas is None:
            return
        fallen = [ent for ent, drop in rain_entities(self.world) if drop.y > canvas.height]
        for ent in fallen:
            self.world.delete_entity(ent, immediate=True)
