from dataclasses import dataclass


@dataclass(slots=True)
class Canvas:
    """Singleton component holding the play field size."""

    width: float
    height: float
