from typing import Dict, Tuple

from clausy.components.petal_color import PetalColor

RGB = Tuple[int, int, int]

PETAL_RGB: Dict[PetalColor, RGB] = {
    PetalColor.RED: (255, 0, 0),
    PetalColor.ORANGE: (255, 127, 0),
    PetalColor.YELLOW: (255, 255, 0),
    PetalColor.GREEN: (0, 255, 0),
    PetalColor.BLUE: (0, 0, 255),
    PetalColor.INDIGO: (75, 0, 130),
    PetalColor.VIOLET: (139, 0, 255),
}

# Rainbow arcs on the win screen, outermost first.
RAINBOW_RGB: Tuple[RGB, ...] = tuple(PETAL_RGB[color] for color in PetalColor)

SKY_RGB: RGB = (135, 206, 235)
STEM_RGB: RGB = (34, 139, 34)
RAIN_RGB: RGB = (0, 191, 255)
FLOWER_CENTER_RGB: RGB = (255, 215, 0)
WIN_TEXT_RGB: RGB = (255, 215, 0)


def petal_rgb(color: PetalColor) -> RGB:
    return PETAL_RGB.get(color, PETAL_RGB[PetalColor.RED])
