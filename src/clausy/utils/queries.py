from __future__ import annotations

from typing import List, Tuple

from esper import World

from clausy.components.canvas import Canvas
from clausy.components.cloud import Cloud
from clausy.components.game_state import GameState
from clausy.components.plant import Plant
from clausy.components.rain_drop import RainDrop


def get_canvas(world: World) -> Canvas | None:
    for _, canvas in world.get_component(Canvas):
        return canvas
    return None


def get_cloud(world: World) -> Cloud | None:
    for _, cloud in world.get_component(Cloud):
        return cloud
    return None


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def plant_entities(world: World) -> List[Tuple[int, Plant]]:
    """Plants in left-to-right spawn order."""

    return sorted(world.get_component(Plant), key=lambda entry: entry[1].index)


def rain_entities(world: World) -> List[Tuple[int, RainDrop]]:
    return list(world.get_component(RainDrop))
