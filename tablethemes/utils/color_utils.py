import cv2
import numpy as np

from typing import Tuple


def rgb_to_hex(rgb_color: Tuple[int, int, int]) -> str:
    r"""convert rgb colors to hex

    @param rgb_color: a tuple of 3 values (r, g, b)

    @return: a hex string in `#RRGGBB` format (upper case)
    """
    rgb_color = tuple(int(c) % 256 for c in np.squeeze(rgb_color))

    if len(rgb_color) != 3:
        raise ValueError(
            "rgb color must consist of 3 positive numbers! "
            "got {}".format(len(rgb_color))
        )

    return "#%02X%02X%02X" % rgb_color


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    r"""convert hex colors to rgb

    @param hex_color: a hex string, with or without leading `#`; the three
        digit shorthand (e.g. `#FA0`) is expanded

    @return: a tuple of 3 values (r, g, b)
    """
    hex_color = hex_color.strip().lstrip('#')

    if len(hex_color) == 3:
        hex_color = ''.join(c * 2 for c in hex_color)

    if len(hex_color) != 6:
        raise ValueError(
            "hex color must consist of 6 hex digits! got {}".format(hex_color)
        )

    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def hsv_to_rgb(hsv_color: Tuple[int, int, int]) -> Tuple[int, int, int]:
    r"""convert hsv colors to rgb

    @param hsv_color: a tuple of 3 values (h, s, v), opencv convention

    @return: a tuple of 3 values (r, g, b)
    """
    hsv_color_uint8 = np.uint8(hsv_color)

    if len(hsv_color_uint8.shape) != 1 or hsv_color_uint8.shape[0] != 3:
        raise ValueError(
            "hsv color has shape {}; this function expects hsv_color to be "
            "a tuple of 3 values".format(hsv_color_uint8.shape)
        )

    hsv_color_uint8 = np.expand_dims(hsv_color_uint8, axis=[0, 1])

    return tuple(
        cv2.cvtColor(hsv_color_uint8, cv2.COLOR_HSV2RGB)
        .squeeze()
        .astype(int)
        .tolist()
    )
