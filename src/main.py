"""Entry point for Clausy the Cloud.

Sets up the simulation, event bus, input and rendering systems, and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from clausy.constants import CANVAS_HEIGHT, CANVAS_WIDTH, STEPS_PER_SECOND
from clausy.events.bus import EVENT_GAME_PAUSED, EVENT_GAME_RESET, EVENT_GAME_WON, EVENT_TICK, EventBus
from clausy.rendering.colors import SKY_RGB
from clausy.rendering.scene_renderer import SceneRenderer
from clausy.simulation import GameSimulation
from clausy.systems.input import InputSystem
from clausy.utils.frame_clock import FixedStepClock

logger = logging.getLogger(__name__)


class CloudWindow(Window):
    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        super().__init__(width, height, "Clausy the Cloud")
        self.set_update_rate(1 / STEPS_PER_SECOND)
        self.event_bus = EventBus()
        self.simulation = GameSimulation(width, height, event_bus=self.event_bus)
        self.frame_clock = FixedStepClock()
        self.input_system = InputSystem(
            self.simulation.world,
            self.event_bus,
            frame_clock=self.frame_clock,
        )
        self.scene_renderer = SceneRenderer(self)

        self.event_bus.subscribe(EVENT_GAME_WON, self._on_game_won)
        self.event_bus.subscribe(EVENT_GAME_RESET, self._on_game_reset)
        self.event_bus.subscribe(EVENT_GAME_PAUSED, self._on_game_paused)
        set_background_color(SKY_RGB)

    def on_draw(self):
        self.clear()
        self.scene_renderer.draw(self.simulation.snapshot(), paused=self.input_system.paused)

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)
        for _ in range(self.frame_clock.consume(delta_time)):
            self.simulation.advance_step()

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)

    def on_key_release(self, symbol: int, modifiers: int):
        self.input_system.handle_key_release(symbol, modifiers)

    def on_deactivate(self):
        # Keys released while unfocused never reach us.
        self.input_system.repeat.release_all()

    def _on_game_won(self, sender, **kwargs):
        logger.info("All plants grown after %s steps", kwargs.get("step"))

    def _on_game_reset(self, sender, **kwargs):
        logger.info("Round reset (%s)", kwargs.get("reason"))

    def _on_game_paused(self, sender, **kwargs):
        logger.info("Paused" if kwargs.get("paused") else "Resumed")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = CloudWindow()
    logger.info("Starting Clausy the Cloud")
    run()
    logger.info("Window closed")

if __name__ == "__main__":
    main()
