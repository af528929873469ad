from __future__ import annotations

import random

from esper import World

from clausy.components.cloud import Cloud
from clausy.components.rain_drop import RainDrop
from clausy.constants import RAIN_JITTER_X, RAIN_SPAWN_OFFSET_Y


def spawn_rain_drop(world: World, cloud: Cloud, rng: random.Random) -> int:
    """Create a drop just below ``cloud`` with a little horizontal jitter."""

    drop = RainDrop(
        x=cloud.x + rng.uniform(-RAIN_JITTER_X, RAIN_JITTER_X),
        y=cloud.y + RAIN_SPAWN_OFFSET_Y,
    )
    return world.create_entity(drop)


def clear_rain(world: World) -> None:
    for ent in [ent for ent, _ in world.get_component(RainDrop)]:
        world.delete_entity(ent, immediate=True)
