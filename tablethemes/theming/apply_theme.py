import dataclasses
import logging
from typing import List, Sequence, Tuple

from tablethemes.exceptions import (
    InvalidThemeIndexError, NoTableSelectedError, ThemeIndexOutOfRange
)
from tablethemes.theming.clear import ClearEngine
from tablethemes.theming.fonts import FontResolver
from tablethemes.theming.grid import Grid
from tablethemes.theming.registry import CLEAR_THEME_INDEX, ThemeRegistry
from tablethemes.theming.shading import ShadingResolver
from tablethemes.theming.theme import ThemeDefinition

__all__ = [
    'ThemeSelection',
    'resolve_theme',
    'apply_table_theme',
]

logger = logging.getLogger(name=__name__)


@dataclasses.dataclass(frozen=True)
class ThemeSelection:
    r""" The theme resolved from a selector. `clear` is set when the selector
    is the reserved clear sentinel. """
    theme: ThemeDefinition
    clear: bool


def resolve_theme(selector: int, registry: ThemeRegistry) -> ThemeSelection:
    r""" Resolve a theme selector to a theme.

    @param selector: a catalog index or CLEAR_THEME_INDEX
    @param registry: the theme catalog

    @return: the selected theme; the all-unset pseudo-theme for the clear
        sentinel

    @raise InvalidThemeIndexError: if the selector is neither a valid index
        nor the clear sentinel
    """
    if selector == CLEAR_THEME_INDEX:
        return ThemeSelection(theme=ThemeDefinition.clear(), clear=True)

    try:
        theme = registry.get_theme(selector)
    except ThemeIndexOutOfRange as e:
        raise InvalidThemeIndexError(
            selector=selector, count=registry.count
        ) from e

    return ThemeSelection(theme=theme, clear=False)


def apply_table_theme(
        grids: Sequence[Grid],
        selector: int,
        registry: ThemeRegistry,
        shading_resolver: ShadingResolver = None,
        font_resolver: FontResolver = None,
        clear_engine: ClearEngine = None
) -> Tuple[ThemeSelection, List[Grid]]:
    r""" Apply a theme (or clear formatting) to every grid.

    Note: both error conditions are checked before any grid is mutated. Grids
        are processed independently and sequentially; committing the mutated
        grids to the host is left to the caller.

    @param grids: the grids of the matched tables
    @param selector: a catalog index or CLEAR_THEME_INDEX
    @param registry: the theme catalog
    @param shading_resolver: resolver used for shading
    @param font_resolver: resolver used for fonts
    @param clear_engine: engine used for clearing

    @return: the theme selection and the mutated grids

    @raise NoTableSelectedError: if no grid is given
    @raise InvalidThemeIndexError: if the selector is invalid
    """
    if len(grids) == 0:
        raise NoTableSelectedError("No table selected")

    selection = resolve_theme(selector, registry)

    shading_resolver = shading_resolver or ShadingResolver()
    font_resolver = font_resolver or FontResolver()
    clear_engine = clear_engine or ClearEngine()

    for grid in grids:
        logger.debug(
            f"applying theme '{selection.theme.name}' to "
            f"{grid.row_count}x{grid.column_count} grid"
        )
        shading_resolver.fill(grid, selection.theme)

        if selection.clear:
            clear_engine.clear(grid)
        else:
            font_resolver.apply_fonts(grid, selection.theme)

    return selection, list(grids)
