from enum import Enum


class PetalColor(Enum):
    """Fixed rainbow palette petals are drawn from."""
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    INDIGO = "indigo"
    VIOLET = "violet"
