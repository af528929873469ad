from dataclasses import dataclass

from clausy.constants import CLOUD_HEIGHT, CLOUD_SPEED, CLOUD_WIDTH


@dataclass(slots=True)
class Cloud:
    """Player avatar; only ``x`` changes once spawned."""

    x: float
    y: float
    width: float = CLOUD_WIDTH
    height: float = CLOUD_HEIGHT
    speed: float = CLOUD_SPEED

    @property
    def underside(self) -> float:
        return self.y + self.height / 2

    def clamp_x(self, canvas_width: float) -> None:
        half = self.width / 2
        self.x = max(half, min(canvas_width - half, self.x))
