from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_STEP_COMPLETE = "step_complete"      # payload: step=int


# ============================================================================
# INPUT & MOVEMENT
# ============================================================================
EVENT_CLOUD_MOVE_REQUEST = "cloud_move_request"  # payload: direction=int (-1 left, +1 right)
EVENT_CLOUD_MOVED = "cloud_moved"                # payload: x=float, previous_x=float


# ============================================================================
# RAIN & GROWTH
# ============================================================================
EVENT_RAIN_SPAWNED = "rain_spawned"        # payload: entity=int, x=float, y=float
EVENT_PLANT_GROWN = "plant_grown"          # payload: entity=int, index=int, height=float


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_WON = "game_won"                        # payload: step=int
EVENT_GAME_RESET_REQUEST = "game_reset_request"    # payload: reason=str|None
EVENT_GAME_RESET = "game_reset"                    # payload: reason=str|None
EVENT_GAME_PAUSED = "game_paused"                  # payload: paused=bool
