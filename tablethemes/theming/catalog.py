"""
Parsing of theme catalogs. A catalog is a list of mappings whose keys are the
field names of ThemeDefinition; shading values are color strings or `rainbow`,
and fonts are mappings with the keys family, size, bold, italic, underline and
foreground.

Example theme file:

    themes:
      - name: Blue Header
        header_row: "#1F4E79"
        first_row_stripe: white
        second_row_stripe: "#EDEDED"
        header_font: {family: Calibri, size: 11, bold: true, foreground: white}
"""
import pathlib
from typing import Any, Dict, List, Union

import yaml

from tablethemes.exceptions import ThemeDefinitionError
from tablethemes.theming.color import Color, AUTOMATIC
from tablethemes.theming.theme import (
    FONT_FIELDS, RAINBOW_FIELDS, SOLID_FIELDS,
    RAINBOW, UNSET, FontSpec, Solid, ThemeDefinition
)

import settings.themes as theme_settings

__all__ = [
    'parse_color',
    'parse_shading',
    'parse_font',
    'parse_theme',
    'parse_themes',
    'load_themes',
    'builtin_themes',
]

RAINBOW_TEXT = "rainbow"

FONT_KEYS = ("family", "size", "bold", "italic", "underline", "foreground")


def parse_color(value: Any, field_name: str = "") -> Color:
    r""" Parse a color value: a quoted color string or an rgb triple.

    Note: unquoted yaml scalars such as 001122 are read as numbers (here the
        octal 594) and are rejected instead of being reinterpreted as hex.
    """
    if isinstance(value, str):
        return Color.from_hex(value)

    if isinstance(value, (list, tuple)):
        return Color(rgb=tuple(value))

    raise ThemeDefinitionError(
        f"Invalid color for {field_name}: {value!r}; color values must be "
        f"quoted strings or rgb triples"
    )


def parse_shading(value: Any, allow_rainbow: bool, field_name: str = ""):
    r""" Parse a shading value.

    @param value: None, a color string, an rgb triple or `rainbow`
    @param allow_rainbow: whether the field accepts a rainbow fill
    @param field_name: used in error messages

    @return: UNSET, RAINBOW or a Solid shading
    """
    if value is None:
        return UNSET

    if isinstance(value, str) and value.strip().lower() == RAINBOW_TEXT:
        if not allow_rainbow:
            raise ThemeDefinitionError(
                f"{field_name} does not accept a rainbow fill"
            )
        return RAINBOW

    return Solid(parse_color(value, field_name=field_name))


def parse_font(value: Any, field_name: str = ""):
    r""" Parse a font mapping; None means no font rule. """
    if value is None:
        return None

    if not isinstance(value, dict):
        raise ThemeDefinitionError(
            f"{field_name} must be a mapping, got {type(value).__name__}"
        )

    unknown = set(value.keys()) - set(FONT_KEYS)
    if unknown:
        raise ThemeDefinitionError(
            f"Unknown font keys for {field_name}: {sorted(unknown)}"
        )

    if "family" not in value or "size" not in value:
        raise ThemeDefinitionError(
            f"{field_name} requires both family and size"
        )

    foreground = value.get("foreground")
    return FontSpec(
        family=value["family"],
        size=value["size"],
        bold=bool(value.get("bold", False)),
        italic=bool(value.get("italic", False)),
        underline=bool(value.get("underline", False)),
        foreground=parse_color(foreground, field_name=field_name)
        if foreground is not None else AUTOMATIC
    )


def parse_theme(data: Dict[str, Any]) -> ThemeDefinition:
    r""" Build a ThemeDefinition from a mapping.

    @param data: theme mapping

    @return: the theme definition
    """
    if not isinstance(data, dict):
        raise ThemeDefinitionError(
            f"A theme must be a mapping, got {type(data).__name__}"
        )

    known = {"name"} | set(RAINBOW_FIELDS) | set(SOLID_FIELDS) \
        | set(FONT_FIELDS)
    unknown = set(data.keys()) - known
    if unknown:
        raise ThemeDefinitionError(f"Unknown theme keys: {sorted(unknown)}")

    kwargs = {"name": str(data.get("name", ""))}

    for field_name in RAINBOW_FIELDS:
        kwargs[field_name] = parse_shading(
            data.get(field_name), allow_rainbow=True, field_name=field_name
        )

    for field_name in SOLID_FIELDS:
        kwargs[field_name] = parse_shading(
            data.get(field_name), allow_rainbow=False, field_name=field_name
        )

    for field_name in FONT_FIELDS:
        kwargs[field_name] = parse_font(
            data.get(field_name), field_name=field_name
        )

    return ThemeDefinition(**kwargs)


def parse_themes(data: Any) -> List[ThemeDefinition]:
    r""" Parse a catalog, either a list of theme mappings or a mapping with a
    top-level `themes` list. """
    if isinstance(data, dict):
        data = data.get("themes")

    if not isinstance(data, list):
        raise ThemeDefinitionError("A theme catalog must be a list of themes")

    return [parse_theme(d) for d in data]


def load_themes(fp: Union[str, pathlib.Path]) -> List[ThemeDefinition]:
    r""" Load a theme catalog from a yaml file. """
    fp = pathlib.Path(fp)
    with fp.open(mode='r') as f:
        data = yaml.safe_load(f)

    return parse_themes(data)


def builtin_themes() -> List[ThemeDefinition]:
    return parse_themes(theme_settings.BUILTIN_THEMES)
