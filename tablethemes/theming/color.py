import dataclasses
from typing import Optional, Tuple, Union

from tablethemes.exceptions import ThemeDefinitionError
from tablethemes.utils.color_utils import rgb_to_hex, hex_to_rgb, hsv_to_rgb

import settings.colors as color_settings


@dataclasses.dataclass(frozen=True)
class Color:
    r"""An optional rgb color. A color without rgb value is the automatic
    color, i.e. no explicit color is set and the host default applies.
    """

    rgb: Optional[Tuple[int, int, int]] = None

    def __post_init__(self):
        if self.rgb is None:
            return

        if len(self.rgb) != 3 or not all(
                isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
                for c in self.rgb
        ):
            raise ThemeDefinitionError(f"Invalid rgb value: {self.rgb}")

        # normalize lists and other sequences so that colors stay hashable
        object.__setattr__(self, "rgb", tuple(self.rgb))

    @property
    def is_automatic(self) -> bool:
        return self.rgb is None

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        r""" Parse a color from text.

        @param value: `#RRGGBB`, `RRGGBB`, `#RGB`, a named color from
            settings.colors.NAMED_COLORS, or `auto` / `automatic`

        @return: the parsed color
        """
        if not isinstance(value, str) or not value.strip():
            raise ThemeDefinitionError(f"Invalid color value: {value!r}")

        text = value.strip().lower()
        if text in (color_settings.AUTOMATIC_COLOR_TEXT, "automatic"):
            return AUTOMATIC

        if text in color_settings.NAMED_COLORS:
            return cls(rgb=color_settings.NAMED_COLORS[text])

        try:
            return cls(rgb=hex_to_rgb(text))
        except ValueError as e:
            raise ThemeDefinitionError(
                f"Invalid color value: {value!r}"
            ) from e

    @classmethod
    def from_hsv(cls, hsv_color: Tuple[int, int, int]) -> "Color":
        return cls(rgb=hsv_to_rgb(hsv_color=hsv_color))

    @classmethod
    def coerce(cls, value: Union["Color", str, Tuple[int, int, int]]):
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        return cls(rgb=tuple(value))

    def to_hex(self) -> str:
        r""" Deterministic textual rendering: `#RRGGBB` or `auto`. """
        if self.rgb is None:
            return color_settings.AUTOMATIC_COLOR_TEXT
        return rgb_to_hex(rgb_color=self.rgb)

    def to_ooxml(self) -> str:
        r""" Rendering used in WordprocessingML attributes (no leading #). """
        return self.to_hex().lstrip('#')

    def __str__(self):
        return self.to_hex()


AUTOMATIC = Color()
