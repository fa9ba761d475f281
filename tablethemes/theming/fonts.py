"""
Font resolution for table themes.

The band fonts (header, total, first column, last column) each shrink the
interior region by one row or column; the regions written by FONT_RULES are
disjoint by construction of these bounds.
"""
import dataclasses
import logging
from typing import Callable, Iterator, Optional, Tuple

from tablethemes.theming.grid import CellStyle, Grid
from tablethemes.theming.theme import FontSpec, ThemeDefinition

__all__ = [
    'FontBounds',
    'FontRule',
    'FontResolver',
    'FONT_RULES',
    'compute_font_bounds',
]

logger = logging.getLogger(name=__name__)


@dataclasses.dataclass(frozen=True)
class FontBounds:
    r""" Half-open interior bounds: rows [min_row, max_row), columns
    [min_col, max_col). """

    min_row: int
    max_row: int
    min_col: int
    max_col: int

    def rows(self) -> range:
        return range(self.min_row, self.max_row)

    def columns(self) -> range:
        return range(self.min_col, self.max_col)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.min_row, self.max_row, self.min_col, self.max_col


def compute_font_bounds(
        theme: ThemeDefinition, row_count: int, column_count: int
) -> FontBounds:
    r""" Derive the interior bounds from the band fonts of a theme.

    @param theme: the theme
    @param row_count: number of grid rows
    @param column_count: number of grid columns

    @return: the bounds of the interior region
    """
    return FontBounds(
        min_row=0 if theme.header_font is None else 1,
        max_row=row_count - (0 if theme.total_font is None else 1),
        min_col=0 if theme.first_column_font is None else 1,
        max_col=column_count - (0 if theme.last_column_font is None else 1),
    )


@dataclasses.dataclass(frozen=True)
class FontRule:
    r""" A named font rule: which font of the theme, written to which region.

    @param name: rule name
    @param font: selects the rule's font from the theme (None = skip)
    @param region: yields the (row, column) positions of the rule's region
    """
    name: str
    font: Callable[[ThemeDefinition], Optional[FontSpec]]
    region: Callable[[Grid, FontBounds], Iterator[Tuple[int, int]]]


def _header_region(grid, bounds):
    for c in bounds.columns():
        yield 0, c


def _total_region(grid, bounds):
    for c in bounds.columns():
        yield grid.last_row, c


def _first_column_region(grid, bounds):
    for r in bounds.rows():
        yield r, 0


def _last_column_region(grid, bounds):
    for r in bounds.rows():
        yield r, grid.last_column


def _interior_region(grid, bounds):
    for r in bounds.rows():
        for c in bounds.columns():
            yield r, c


FONT_RULES: Tuple[FontRule, ...] = (
    FontRule(
        name="header_font",
        font=lambda t: t.header_font,
        region=_header_region
    ),
    FontRule(
        name="total_font",
        font=lambda t: t.total_font,
        region=_total_region
    ),
    FontRule(
        name="first_column_font",
        font=lambda t: t.first_column_font,
        region=_first_column_region
    ),
    FontRule(
        name="last_column_font",
        font=lambda t: t.last_column_font,
        region=_last_column_region
    ),
    FontRule(
        name="default_font",
        font=lambda t: t.default_font,
        region=_interior_region
    ),
)


class FontResolver:
    r""" Computes and writes the font style of the cells covered by the font
    rules of a theme. Cells outside of every rule's region are not touched.
    """

    def apply_fonts(self, grid: Grid, theme: ThemeDefinition):
        if grid.is_empty:
            logger.debug("empty grid; no fonts to apply")
            return

        bounds = compute_font_bounds(
            theme, row_count=grid.row_count, column_count=grid.column_count
        )
        logger.debug(f"font bounds: {bounds}")

        for rule in FONT_RULES:
            font = rule.font(theme)
            if font is None:
                continue

            style = CellStyle.from_font(font)
            for r, c in rule.region(grid, bounds):
                grid[r][c].apply_style(style)
