"""Immutable per-frame view of the simulation for the rendering layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from esper import World

from clausy.components.petal_color import PetalColor
from clausy.utils.queries import (
    get_canvas,
    get_cloud,
    get_game_state,
    plant_entities,
    rain_entities,
)


@dataclass(frozen=True, slots=True)
class CloudView:
    x: float
    y: float
    width: float
    height: float
    speed: float


@dataclass(frozen=True, slots=True)
class PlantView:
    x: float
    y: float
    height: float
    grown: bool
    petals: Tuple[PetalColor, ...]


@dataclass(frozen=True, slots=True)
class RainDropView:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class SimulationSnapshot:
    canvas_width: float
    canvas_height: float
    cloud: CloudView
    plants: Tuple[PlantView, ...]
    rain_drops: Tuple[RainDropView, ...]
    game_won: bool
    step: int


def take_snapshot(world: World) -> SimulationSnapshot:
    canvas = get_canvas(world)
    cloud = get_cloud(world)
    state = get_game_state(world)
    if canvas is None or cloud is None or state is None:
        raise LookupError("world is missing its canvas, cloud or game state")
    return SimulationSnapshot(
        canvas_width=canvas.width,
        canvas_height=canvas.height,
        cloud=CloudView(
            x=cloud.x,
            y=cloud.y,
            width=cloud.width,
            height=cloud.height,
            speed=cloud.speed,
        ),
        plants=tuple(
            PlantView(
                x=plant.x,
                y=plant.y,
                height=plant.height,
                grown=plant.grown,
                petals=plant.petals,
            )
            for _, plant in plant_entities(world)
        ),
        rain_drops=tuple(RainDropView(x=drop.x, y=drop.y) for _, drop in rain_entities(world)),
        game_won=state.game_won,
        step=state.step,
    )
