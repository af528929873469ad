from __future__ import annotations

from typing import Any

from esper import World

from clausy.events.bus import EVENT_CLOUD_MOVE_REQUEST, EVENT_CLOUD_MOVED, EventBus
from clausy.utils.queries import get_canvas, get_cloud


class MovementSystem:
    """Moves the cloud horizontally in response to directional intents."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CLOUD_MOVE_REQUEST, self.on_move_request)

    def on_move_request(self, sender: Any, **payload: Any) -> None:
        direction = payload.get("direction")
        try:
            step = int(direction)
        except (TypeError, ValueError):
            return
        if step == 0:
            return
        self.move(-1 if step < 0 else 1)

    def move(self, direction: int) -> None:
        cloud = get_cloud(self.world)
        canvas = get_canvas(self.world)
        if cloud is None or canvas is None:
            return
        previous_x = cloud.x
        cloud.x += direction * cloud.speed
        cloud.clamp_x(canvas.width)
        if cloud.x != previous_x:
            self.event_bus.emit(EVENT_CLOUD_MOVED, x=cloud.x, previous_x=previous_x)
