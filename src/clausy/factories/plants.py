"""Factory helpers for the row of plants along the bottom of the canvas."""
from __future__ import annotations

import random
from typing import List, Tuple

from esper import World

from clausy.components.petal_color import PetalColor
from clausy.components.plant import Plant
from clausy.constants import (
    PETALS_PER_PLANT,
    PLANT_COUNT,
    PLANT_GAP,
    PLANT_MARGIN,
    PLANT_WIDTH,
)

_PALETTE: Tuple[PetalColor, ...] = tuple(PetalColor)


def plant_origin_x(index: int) -> float:
    return index * (PLANT_WIDTH + PLANT_GAP) + PLANT_MARGIN


def random_petals(rng: random.Random, count: int = PETALS_PER_PLANT) -> Tuple[PetalColor, ...]:
    """Pick ``count`` colors independently; repeats are allowed."""

    return tuple(rng.choice(_PALETTE) for _ in range(count))


def spawn_plants(
    world: World,
    canvas_height: float,
    rng: random.Random,
    *,
    count: int = PLANT_COUNT,
) -> List[int]:
    """Create ``count`` fresh plants and return their entities in order."""

    entities: List[int] = []
    for idx in range(count):
        plant = Plant(
            x=plant_origin_x(idx),
            y=canvas_height,
            petals=random_petals(rng),
            index=idx,
        )
        entities.append(world.create_entity(plant))
    return entities


def clear_plants(world: World) -> None:
    for ent in [ent for ent, _ in world.get_component(Plant)]:
        world.delete_entity(ent, immediate=True)
