import pytest

from clausy.components.game_state import GameMode
from clausy.events.bus import EVENT_CLOUD_MOVE_REQUEST, EVENT_GAME_PAUSED, EVENT_GAME_RESET, EVENT_TICK
from clausy.systems.input import KEY_A, KEY_D, KEY_ENTER, KEY_LEFT, KEY_P, KEY_R, KEY_RIGHT, InputSystem
from clausy.utils.frame_clock import FixedStepClock
from clausy.utils.hold_repeat import HoldRepeat
from tests.helpers import capture


class _FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


@pytest.fixture
def setup_input(predictable_simulation):
    sim = predictable_simulation
    clock = _FakeClock()
    frame_clock = FixedStepClock()
    input_sys = InputSystem(
        sim.world,
        sim.event_bus,
        repeat=HoldRepeat(interval=0.25, clock=clock),
        frame_clock=frame_clock,
    )
    return sim, input_sys, clock, frame_clock


def test_press_moves_immediately(setup_input):
    sim, input_sys, clock, _ = setup_input
    input_sys.handle_key_press(KEY_LEFT)
    assert sim.cloud.x == 292
    input_sys.handle_key_press(KEY_D)
    # Both held: the directions cancel and nothing moves.
    assert sim.cloud.x == 292


def test_held_key_repeats_on_tick(setup_input):
    sim, input_sys, clock, _ = setup_input
    input_sys.handle_key_press(KEY_RIGHT)
    sim.event_bus.emit(EVENT_TICK, dt=0.1)
    assert sim.cloud.x == 308
    clock.advance(0.25)
    sim.event_bus.emit(EVENT_TICK, dt=0.25)
    assert sim.cloud.x == 316
    input_sys.handle_key_release(KEY_RIGHT)
    clock.advance(1.0)
    sim.event_bus.emit(EVENT_TICK, dt=1.0)
    assert sim.cloud.x == 316


def test_releasing_one_of_two_keys_resumes_the_other(setup_input):
    sim, input_sys, clock, _ = setup_input
    moves = capture(sim.event_bus, EVENT_CLOUD_MOVE_REQUEST)
    input_sys.handle_key_press(KEY_A)
    input_sys.handle_key_press(KEY_RIGHT)
    input_sys.handle_key_release(KEY_A)
    assert [m["direction"] for m in moves] == [-1, 1]


def test_r_resets_round(setup_input):
    sim, input_sys, clock, _ = setup_input
    resets = capture(sim.event_bus, EVENT_GAME_RESET)
    sim.advance_step()
    input_sys.handle_key_press(KEY_R)
    assert sim.rain_drops == []
    assert resets == [{"reason": "key_r"}]


def test_enter_only_resets_after_win(setup_input):
    sim, input_sys, clock, _ = setup_input
    resets = capture(sim.event_bus, EVENT_GAME_RESET)
    input_sys.handle_key_press(KEY_ENTER)
    assert resets == []
    sim.game_state.mode = GameMode.WON
    input_sys.handle_key_press(KEY_ENTER)
    assert resets == [{"reason": "play_again"}]
    assert not sim.game_won


def test_pause_stops_frame_clock_and_movement(setup_input):
    sim, input_sys, clock, frame_clock = setup_input
    paused = capture(sim.event_bus, EVENT_GAME_PAUSED)
    input_sys.handle_key_press(KEY_P)
    assert input_sys.paused
    assert frame_clock.consume(1.0) == 0
    input_sys.handle_key_press(KEY_LEFT)
    assert sim.cloud.x == 300
    input_sys.handle_key_press(KEY_P)
    assert not input_sys.paused
    assert paused == [{"paused": True}, {"paused": False}]


def test_pause_key_without_frame_clock_is_ignored(predictable_simulation):
    sim = predictable_simulation
    input_sys = InputSystem(sim.world, sim.event_bus)
    paused = capture(sim.event_bus, EVENT_GAME_PAUSED)
    input_sys.handle_key_press(KEY_P)
    assert paused == []
    assert not input_sys.paused


def test_unknown_keys_do_nothing(setup_input):
    sim, input_sys, clock, _ = setup_input
    before = sim.snapshot()
    input_sys.handle_key_press(0)
    input_sys.handle_key_release(0)
    assert sim.snapshot() == before
