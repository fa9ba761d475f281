import dataclasses
from typing import Optional, Union

from tablethemes.exceptions import ThemeDefinitionError
from tablethemes.theming.color import Color, AUTOMATIC

__all__ = [
    'Unset',
    'Solid',
    'Rainbow',
    'UNSET',
    'RAINBOW',
    'Shading',
    'SolidShading',
    'FontSpec',
    'ThemeDefinition',
]


@dataclasses.dataclass(frozen=True)
class Unset:
    r""" No shading rule for this region. """

    @property
    def is_set(self) -> bool:
        return False


@dataclasses.dataclass(frozen=True)
class Solid:
    r""" A single concrete shading color. """

    color: Color

    def __post_init__(self):
        if not isinstance(self.color, Color):
            object.__setattr__(self, "color", Color.coerce(self.color))

        if self.color.is_automatic:
            raise ThemeDefinitionError(
                "A solid shading requires a concrete color, got automatic"
            )

    @property
    def is_set(self) -> bool:
        return True


@dataclasses.dataclass(frozen=True)
class Rainbow:
    r""" Procedural palette cycling fill; never shares a field value with a
    concrete color. """

    @property
    def is_set(self) -> bool:
        return True


UNSET = Unset()
RAINBOW = Rainbow()

Shading = Union[Unset, Solid, Rainbow]
SolidShading = Union[Unset, Solid]


@dataclasses.dataclass(frozen=True)
class FontSpec:
    r""" Font applied to the runs of a table cell.

    The foreground is the automatic color unless set explicitly.
    """

    family: str
    size: float
    bold: bool = False
    italic: bool = False
    underline: bool = False
    foreground: Color = AUTOMATIC

    def __post_init__(self):
        if not self.family or not isinstance(self.family, str):
            raise ThemeDefinitionError("Font family must be a non-empty string")

        if isinstance(self.size, bool) or not isinstance(self.size, (int, float)) \
                or self.size <= 0:
            raise ThemeDefinitionError(
                f"Font size must be a positive number, got {self.size!r}"
            )

        if not isinstance(self.foreground, Color):
            object.__setattr__(
                self, "foreground", Color.coerce(self.foreground)
            )


# fields which accept rainbow fills
RAINBOW_FIELDS = ("whole_table", "first_column", "header_row")

# fields which accept solid colors only
SOLID_FIELDS = (
    "last_column", "total_row",
    "header_first_cell", "header_last_cell",
    "total_first_cell", "total_last_cell",
    "first_row_stripe", "second_row_stripe",
    "first_column_stripe", "second_column_stripe",
)

FONT_FIELDS = (
    "header_font", "total_font", "first_column_font", "last_column_font",
    "default_font",
)


@dataclasses.dataclass(frozen=True)
class ThemeDefinition:
    r""" Immutable table theme: a named bundle of shading and font rules.

    Note: whole_table, first_column and header_row accept Unset, Solid or
        Rainbow; all other shading fields accept Unset or Solid only.
    """

    name: str = ""

    whole_table: Shading = UNSET
    first_column: Shading = UNSET
    header_row: Shading = UNSET

    last_column: SolidShading = UNSET
    total_row: SolidShading = UNSET
    header_first_cell: SolidShading = UNSET
    header_last_cell: SolidShading = UNSET
    total_first_cell: SolidShading = UNSET
    total_last_cell: SolidShading = UNSET

    first_row_stripe: SolidShading = UNSET
    second_row_stripe: SolidShading = UNSET
    first_column_stripe: SolidShading = UNSET
    second_column_stripe: SolidShading = UNSET

    header_font: Optional[FontSpec] = None
    total_font: Optional[FontSpec] = None
    first_column_font: Optional[FontSpec] = None
    last_column_font: Optional[FontSpec] = None
    default_font: Optional[FontSpec] = None

    def __post_init__(self):
        for field_name in RAINBOW_FIELDS:
            value = getattr(self, field_name)
            if not isinstance(value, (Unset, Solid, Rainbow)):
                raise ThemeDefinitionError(
                    f"Invalid shading for {field_name}: {value!r}"
                )

        for field_name in SOLID_FIELDS:
            value = getattr(self, field_name)
            if isinstance(value, Rainbow):
                raise ThemeDefinitionError(
                    f"{field_name} does not accept a rainbow fill"
                )
            if not isinstance(value, (Unset, Solid)):
                raise ThemeDefinitionError(
                    f"Invalid shading for {field_name}: {value!r}"
                )

        for field_name in FONT_FIELDS:
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, FontSpec):
                raise ThemeDefinitionError(
                    f"Invalid font for {field_name}: {value!r}"
                )

    @classmethod
    def clear(cls) -> "ThemeDefinition":
        r""" The clear pseudo-theme: all rules unset. """
        return cls(name="Clear")

    @property
    def has_row_stripes(self) -> bool:
        return self.first_row_stripe.is_set and self.second_row_stripe.is_set

    @property
    def has_column_stripes(self) -> bool:
        return (
                self.first_column_stripe.is_set
                and self.second_column_stripe.is_set
        )
