import random

from esper import World

from clausy.components.canvas import Canvas
from clausy.components.cloud import Cloud
from clausy.components.game_state import GameMode, GameState
from clausy.constants import CANVAS_HEIGHT, CANVAS_WIDTH, CLOUD_START_Y
from clausy.factories.plants import spawn_plants


def cloud_start_x(canvas_width: float) -> float:
    # Degenerate canvases park the cloud at the origin instead of a negative centre.
    if canvas_width <= 0:
        return 0
    return canvas_width / 2


def create_world(
    canvas_width: float = CANVAS_WIDTH,
    canvas_height: float = CANVAS_HEIGHT,
    *,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Singleton resources share one entity.
    world.create_entity(
        GameState(mode=GameMode.PLAYING),
        Canvas(width=canvas_width, height=canvas_height),
    )
    world.create_entity(Cloud(x=cloud_start_x(canvas_width), y=CLOUD_START_Y))
    spawn_plants(world, canvas_height, world.random)
    return world
