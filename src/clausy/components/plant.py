from dataclasses import dataclass
from typing import Tuple

from clausy.components.petal_color import PetalColor
from clausy.constants import PLANT_WIDTH


@dataclass(slots=True)
class Plant:
    """A plant rooted at the bottom edge; ``y`` is the canvas height."""

    x: float
    y: float
    petals: Tuple[PetalColor, ...]
    index: int = 0
    height: float = 0
    grown: bool = False

    @property
    def center_x(self) -> float:
        return self.x + PLANT_WIDTH / 2

    @property
    def top(self) -> float:
        return self.y - self.height
