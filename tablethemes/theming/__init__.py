# model
from .color import Color, AUTOMATIC
from .theme import (
    FontSpec, ThemeDefinition, Unset, Solid, Rainbow, UNSET, RAINBOW
)
from .grid import Cell, CellStyle, Grid
from .palettes import LIGHT_PALETTE, MEDIUM_PALETTE

# catalog
from .catalog import builtin_themes, load_themes, parse_theme
from .registry import CLEAR_THEME_INDEX, ThemeRegistry

# resolvers
from .shading import ShadingResolver, BASE_FILL_RULES, HIGHLIGHT_RULES
from .fonts import FontBounds, FontResolver, FONT_RULES, compute_font_bounds
from .clear import ClearEngine

# workflow
from .apply_theme import ThemeSelection, apply_table_theme, resolve_theme
