"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level modes; WON is only left through a reset."""
    PLAYING = auto()
    WON = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and step counter."""
    mode: GameMode = GameMode.PLAYING
    step: int = 0

    @property
    def game_won(self) -> bool:
        return self.mode == GameMode.WON
