from dataclasses import dataclass


@dataclass(slots=True)
class RainDrop:
    x: float
    y: float
