"""Frame-stepped simulation for the cloud watering game.

``GameSimulation`` owns an ECS world plus the systems that evolve it. The
rendering layer drives it by calling :meth:`GameSimulation.advance_step` once
per frame and pulls state through the read-only properties or
:meth:`GameSimulation.snapshot`. Randomness is always an injected
``random.Random`` so a fixed seed replays a round exactly.
"""
from __future__ import annotations

import logging
import random
from typing import List

from esper import World

from clausy.components.canvas import Canvas
from clausy.components.cloud import Cloud
from clausy.components.game_state import GameState
from clausy.components.plant import Plant
from clausy.components.rain_drop import RainDrop
from clausy.constants import CANVAS_HEIGHT, CANVAS_WIDTH
from clausy.events.bus import EVENT_STEP_COMPLETE, EventBus
from clausy.snapshot import SimulationSnapshot, take_snapshot
from clausy.systems.growth_system import GrowthSystem
from clausy.systems.movement_system import MovementSystem
from clausy.systems.rain_system import RainSystem
from clausy.systems.reset_system import ResetSystem
from clausy.systems.win_system import WinSystem
from clausy.utils.queries import (
    get_canvas,
    get_cloud,
    get_game_state,
    plant_entities,
    rain_entities,
)
from clausy.world import create_world

logger = logging.getLogger(__name__)


class GameSimulation:
    """Owns all game state and advances it in fixed steps."""

    def __init__(
        self,
        canvas_width: float = CANVAS_WIDTH,
        canvas_height: float = CANVAS_HEIGHT,
        *,
        rng: random.Random | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.event_bus = event_bus or EventBus()
        self.world: World = create_world(canvas_width, canvas_height, rng=self.rng)
        self.movement_system = MovementSystem(self.world, self.event_bus)
        self.rain_system = RainSystem(self.world, self.event_bus, self.rng)
        self.growth_system = GrowthSystem(self.world, self.event_bus)
        self.win_system = WinSystem(self.world, self.event_bus)
        self.reset_system = ResetSystem(self.world, self.event_bus, self.rng)
        logger.debug("Simulation created for %sx%s canvas", canvas_width, canvas_height)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def move_left(self) -> None:
        self.movement_system.move(-1)

    def move_right(self) -> None:
        self.movement_system.move(1)

    def advance_step(self) -> None:
        """Run one frame: rain, then growth, then the win check."""
        state = self.game_state
        was_won = state.game_won
        state.step += 1
        self.rain_system.process()
        self.growth_system.process()
        self.win_system.process()
        if state.game_won and not was_won:
            logger.debug("All plants grown after %d steps", state.step)
        self.event_bus.emit(EVENT_STEP_COMPLETE, step=state.step)

    def reset(self) -> None:
        self.reset_system.reset(reason="reset")
        logger.debug("Simulation reset")

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    @property
    def canvas(self) -> Canvas:
        canvas = get_canvas(self.world)
        assert canvas is not None
        return canvas

    @property
    def canvas_width(self) -> float:
        return self.canvas.width

    @property
    def canvas_height(self) -> float:
        return self.canvas.height

    @property
    def cloud(self) -> Cloud:
        cloud = get_cloud(self.world)
        assert cloud is not None
        return cloud

    @property
    def game_state(self) -> GameState:
        state = get_game_state(self.world)
        assert state is not None
        return state

    @property
    def plants(self) -> List[Plant]:
        return [plant for _, plant in plant_entities(self.world)]

    @property
    def rain_drops(self) -> List[RainDrop]:
        return [drop for _, drop in rain_entities(self.world)]

    @property
    def game_won(self) -> bool:
        return self.game_state.game_won

    def snapshot(self) -> SimulationSnapshot:
        return take_snapshot(self.world)
