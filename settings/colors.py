"""
This module contains all basic settings related to table theme colors.
"""

# colors are in hue saturation value (HSV) format, and we adopt opencv's
# convention: hue is in [0, 179], saturation and value are in [0, 255]
# !caution: any values outside of these ranges will lead to unexpected
# !behavior

# hues used by the rainbow palettes, in palette order (red, orange, yellow,
# green, teal, blue, purple)
RAINBOW_HUES = (0, 12, 27, 55, 85, 105, 135)

# light palette: used to wash the whole table
LIGHT_SATURATION = 45
LIGHT_VALUE = 255

# medium palette: used to highlight the header row / first column
MEDIUM_SATURATION = 110
MEDIUM_VALUE = 245

# textual rendering of the automatic (host default) color; this is the value
# understood by WordprocessingML for w:shd/@w:fill and w:color/@w:val
AUTOMATIC_COLOR_TEXT = "auto"

# named colors accepted in theme files, in rgb format
NAMED_COLORS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "lightgray": (211, 211, 211),
    "lightgrey": (211, 211, 211),
    "navy": (0, 0, 128),
    "teal": (0, 128, 128),
}

SAT_MIN = 0
SAT_MAX = 255
VAL_MIN = 0
VAL_MAX = 255
HUE_MIN = 0
HUE_MAX = 179

# run some checks
assert all(HUE_MIN <= h <= HUE_MAX for h in RAINBOW_HUES), \
    "Some rainbow hues are not in the correct range! Note that we adopt" \
    " opencv's convention: hue is in [0, 179]."

assert all(
    map(
        lambda x: (SAT_MIN <= x[0] <= SAT_MAX) & (VAL_MIN <= x[1] <= VAL_MAX),
        [(LIGHT_SATURATION, LIGHT_VALUE), (MEDIUM_SATURATION, MEDIUM_VALUE)]
    )
), "Palette saturation and value must be in [0, 255]."

assert LIGHT_SATURATION < MEDIUM_SATURATION, \
    "The light palette must be less saturated than the medium palette!"
