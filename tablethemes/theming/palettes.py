"""
Fixed rainbow palettes. Both palettes are ordered, immutable and built once at
import time from the hsv settings in settings.colors.
"""
from typing import Sequence, Tuple

from tablethemes.theming.color import Color

import settings.colors as color_settings


def build_palette(saturation: int, value: int) -> Tuple[Color, ...]:
    r""" Build a rainbow palette by stepping through the rainbow hues at a
    fixed saturation and value.

    @param saturation: saturation in [0, 255]
    @param value: value in [0, 255]

    @return: tuple of colors, one per hue in settings.colors.RAINBOW_HUES
    """
    return tuple(
        Color.from_hsv((hue, saturation, value))
        for hue in color_settings.RAINBOW_HUES
    )


def palette_color(palette: Sequence[Color], index: int) -> Color:
    # modulo indexing, defined for any grid size
    return palette[index % len(palette)]


LIGHT_PALETTE = build_palette(
    saturation=color_settings.LIGHT_SATURATION,
    value=color_settings.LIGHT_VALUE
)

MEDIUM_PALETTE = build_palette(
    saturation=color_settings.MEDIUM_SATURATION,
    value=color_settings.MEDIUM_VALUE
)
