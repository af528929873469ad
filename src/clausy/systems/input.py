from __future__ import annotations

from typing import Any

from esper import World

from clausy.events.bus import (
    EVENT_CLOUD_MOVE_REQUEST,
    EVENT_GAME_PAUSED,
    EVENT_GAME_RESET_REQUEST,
    EVENT_TICK,
    EventBus,
)
from clausy.utils.frame_clock import FixedStepClock
from clausy.utils.hold_repeat import HoldRepeat
from clausy.utils.queries import get_game_state

# pyglet key codes (arcade.key re-exports these); kept numeric to avoid importing arcade here.
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_A = 97
KEY_D = 100
KEY_R = 114
KEY_P = 112
KEY_ENTER = 65293
KEY_RETURN = 13

_DIRECTIONS = {
    KEY_LEFT: -1,
    KEY_A: -1,
    KEY_RIGHT: 1,
    KEY_D: 1,
}


class InputSystem:
    """Maps keyboard input to cloud movement, reset and pause requests.

    Held direction keys go through a ``HoldRepeat`` so the cloud keeps moving
    on a fixed interval; repeats are polled on ``EVENT_TICK`` so they land on
    the same loop that advances the simulation.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        repeat: HoldRepeat | None = None,
        frame_clock: FixedStepClock | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.repeat = repeat or HoldRepeat()
        self.frame_clock = frame_clock
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def paused(self) -> bool:
        return self.frame_clock is not None and not self.frame_clock.running

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        direction = _DIRECTIONS.get(symbol)
        if direction is not None:
            if self.paused:
                return
            fired = self.repeat.press(direction)
            if fired:
                self._request_move(fired)
            return
        if symbol == KEY_R:
            self._request_reset("key_r")
        elif symbol in (KEY_ENTER, KEY_RETURN):
            state = get_game_state(self.world)
            if state is not None and state.game_won:
                self._request_reset("play_again")
        elif symbol == KEY_P:
            self._toggle_pause()

    def handle_key_release(self, symbol: int, modifiers: int = 0) -> None:
        direction = _DIRECTIONS.get(symbol)
        if direction is None:
            return
        fired = self.repeat.release(direction)
        # Releasing one of two held keys resumes the other direction.
        if fired and not self.paused:
            self._request_move(fired)

    def on_tick(self, sender: Any, **payload: Any) -> None:
        if self.paused:
            return
        due = self.repeat.poll()
        if due == 0:
            return
        direction = -1 if due < 0 else 1
        for _ in range(abs(due)):
            self._request_move(direction)

    def _request_move(self, direction: int) -> None:
        self.event_bus.emit(EVENT_CLOUD_MOVE_REQUEST, direction=direction)

    def _request_reset(self, reason: str) -> None:
        self.repeat.release_all()
        self.event_bus.emit(EVENT_GAME_RESET_REQUEST, reason=reason)

    def _toggle_pause(self) -> None:
        if self.frame_clock is None:
            return
        running = self.frame_clock.toggle()
        if not running:
            self.repeat.release_all()
        self.event_bus.emit(EVENT_GAME_PAUSED, paused=not running)
