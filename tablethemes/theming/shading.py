"""
Shading resolution for table themes.

Resolution runs in two stages. Stage 1 picks exactly one base fill (the first
rule of BASE_FILL_RULES that applies); stage 2 applies every applicable rule of
HIGHLIGHT_RULES in order, so that later rules win on overlapping cells. Corner
cells come last and therefore always win over row and column highlights.
"""
import dataclasses
import logging
from typing import Callable, Sequence, Tuple

from tablethemes.theming.color import Color
from tablethemes.theming.grid import Grid
from tablethemes.theming.palettes import (
    LIGHT_PALETTE, MEDIUM_PALETTE, palette_color
)
from tablethemes.theming.theme import Rainbow, Solid, ThemeDefinition

__all__ = [
    'ShadingRule',
    'ShadingResolver',
    'BASE_FILL_RULES',
    'HIGHLIGHT_RULES',
]

logger = logging.getLogger(name=__name__)


@dataclasses.dataclass(frozen=True)
class ShadingRule:
    r""" A named (predicate, action) pair.

    @param name: rule name, used for logging and inspection
    @param applies: predicate on the theme
    @param apply: action writing shading into the grid; receives the
        resolver so that it can access the palettes
    """
    name: str
    applies: Callable[[ThemeDefinition], bool]
    apply: Callable[["ShadingResolver", Grid, ThemeDefinition], None]


def _fill_all(grid: Grid, color_at: Callable[[int, int], Color]):
    for r in range(grid.row_count):
        for c in range(grid.column_count):
            grid[r][c].shading = color_at(r, c)


# stage 1: base fill ----------------------------------------------------------

def _rainbow_rows(resolver, grid, theme):
    _fill_all(grid, lambda r, c: palette_color(resolver.light_palette, r))


def _rainbow_columns(resolver, grid, theme):
    _fill_all(grid, lambda r, c: palette_color(resolver.light_palette, c))


def _row_stripes(resolver, grid, theme):
    c0 = theme.first_row_stripe.color
    c1 = theme.second_row_stripe.color
    _fill_all(grid, lambda r, c: c0 if r % 2 == 0 else c1)


def _column_stripes(resolver, grid, theme):
    c0 = theme.first_column_stripe.color
    c1 = theme.second_column_stripe.color
    _fill_all(grid, lambda r, c: c0 if c % 2 == 0 else c1)


def _whole_table(resolver, grid, theme):
    color = theme.whole_table.color
    _fill_all(grid, lambda r, c: color)


def _untouched(resolver, grid, theme):
    # no base fill; the host default applies
    pass


BASE_FILL_RULES: Tuple[ShadingRule, ...] = (
    ShadingRule(
        name="rainbow_rows",
        applies=lambda t: (
                isinstance(t.whole_table, Rainbow)
                and isinstance(t.first_column, Rainbow)
        ),
        apply=_rainbow_rows
    ),
    ShadingRule(
        name="rainbow_columns",
        applies=lambda t: (
                isinstance(t.whole_table, Rainbow)
                and isinstance(t.header_row, Rainbow)
        ),
        apply=_rainbow_columns
    ),
    ShadingRule(
        name="row_stripes",
        applies=lambda t: t.has_row_stripes,
        apply=_row_stripes
    ),
    ShadingRule(
        name="column_stripes",
        applies=lambda t: t.has_column_stripes,
        apply=_column_stripes
    ),
    ShadingRule(
        name="whole_table",
        applies=lambda t: isinstance(t.whole_table, Solid),
        apply=_whole_table
    ),
    ShadingRule(
        name="untouched",
        applies=lambda t: True,
        apply=_untouched
    ),
)


# stage 2: highlight overlay --------------------------------------------------

def _first_column(resolver, grid, theme):
    if isinstance(theme.first_column, Rainbow):
        for r in range(grid.row_count):
            grid[r][0].shading = palette_color(resolver.medium_palette, r)
    else:
        for r in range(grid.row_count):
            grid[r][0].shading = theme.first_column.color


def _last_column(resolver, grid, theme):
    for r in range(grid.row_count):
        grid[r][grid.last_column].shading = theme.last_column.color


def _header_row(resolver, grid, theme):
    if isinstance(theme.header_row, Rainbow):
        for c in range(grid.column_count):
            grid[0][c].shading = palette_color(resolver.medium_palette, c)
    else:
        for c in range(grid.column_count):
            grid[0][c].shading = theme.header_row.color


def _total_row(resolver, grid, theme):
    for c in range(grid.column_count):
        grid[grid.last_row][c].shading = theme.total_row.color


def _corner(field_name: str, at_last_row: bool, at_last_column: bool):
    def _apply(resolver, grid, theme):
        r = grid.last_row if at_last_row else 0
        c = grid.last_column if at_last_column else 0
        grid[r][c].shading = getattr(theme, field_name).color

    return _apply


HIGHLIGHT_RULES: Tuple[ShadingRule, ...] = (
    ShadingRule(
        name="first_column",
        applies=lambda t: t.first_column.is_set,
        apply=_first_column
    ),
    ShadingRule(
        name="last_column",
        applies=lambda t: t.last_column.is_set,
        apply=_last_column
    ),
    ShadingRule(
        name="header_row",
        applies=lambda t: t.header_row.is_set,
        apply=_header_row
    ),
    ShadingRule(
        name="total_row",
        applies=lambda t: t.total_row.is_set,
        apply=_total_row
    ),
    ShadingRule(
        name="header_first_cell",
        applies=lambda t: t.header_first_cell.is_set,
        apply=_corner("header_first_cell", False, False)
    ),
    ShadingRule(
        name="header_last_cell",
        applies=lambda t: t.header_last_cell.is_set,
        apply=_corner("header_last_cell", False, True)
    ),
    ShadingRule(
        name="total_first_cell",
        applies=lambda t: t.total_first_cell.is_set,
        apply=_corner("total_first_cell", True, False)
    ),
    ShadingRule(
        name="total_last_cell",
        applies=lambda t: t.total_last_cell.is_set,
        apply=_corner("total_last_cell", True, True)
    ),
)


class ShadingResolver:
    r""" Computes and writes the shading color of every cell of a grid.

    @param light_palette: palette for rainbow base fills
    @param medium_palette: palette for rainbow header row / first column
        highlights
    """

    def __init__(
            self,
            light_palette: Sequence[Color] = LIGHT_PALETTE,
            medium_palette: Sequence[Color] = MEDIUM_PALETTE
    ):
        if len(light_palette) == 0 or len(medium_palette) == 0:
            raise ValueError("Palettes must contain at least one color")

        self.light_palette = tuple(light_palette)
        self.medium_palette = tuple(medium_palette)

    def select_base_fill(self, theme: ThemeDefinition) -> ShadingRule:
        for rule in BASE_FILL_RULES:
            if rule.applies(theme):
                return rule

        # unreachable: the last base fill rule always applies
        raise RuntimeError("no base fill rule applies")

    def select_highlights(self, theme: ThemeDefinition) -> Tuple[ShadingRule, ...]:
        return tuple(rule for rule in HIGHLIGHT_RULES if rule.applies(theme))

    def fill(self, grid: Grid, theme: ThemeDefinition):
        r""" Resolve and write the shading of every cell.

        @param grid: the grid to mutate in place
        @param theme: the theme to resolve
        """
        if grid.is_empty:
            logger.debug("empty grid; nothing to shade")
            return

        # 1) base fill
        base_rule = self.select_base_fill(theme)
        logger.debug(f"base fill: {base_rule.name}")
        base_rule.apply(self, grid, theme)

        # 2) highlight overlay
        for rule in self.select_highlights(theme):
            logger.debug(f"highlight: {rule.name}")
            rule.apply(self, grid, theme)
