from __future__ import annotations

import random
from typing import Any, Sequence

from clausy.constants import CANVAS_HEIGHT, CANVAS_WIDTH
from clausy.events.bus import EventBus
from clausy.simulation import GameSimulation


class PredictableRandom(random.Random):
    """Random source with fixed answers: first palette entry, middle of ranges."""

    def __init__(self, element_index: int = 0) -> None:
        super().__init__(0)
        self.element_index = element_index

    def choice(self, seq: Sequence[Any]) -> Any:
        if self.element_index < len(seq):
            return seq[self.element_index]
        return seq[0]

    def uniform(self, a: float, b: float) -> float:
        return (a + b) / 2


def make_simulation(
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    event_bus: EventBus | None = None,
) -> GameSimulation:
    if rng is None:
        rng = random.Random(seed)
    return GameSimulation(width, height, rng=rng, event_bus=event_bus)


def center_cloud_over(sim: GameSimulation, index: int) -> None:
    """Park the cloud right above the centre of plant ``index``."""

    sim.cloud.x = sim.plants[index].center_x


def capture(bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received
