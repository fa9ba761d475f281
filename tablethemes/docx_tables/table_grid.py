import logging
from typing import Iterator, List, Optional, Sequence

from docx.document import Document as DocxDocument
from docx.oxml.ns import qn
from docx.oxml.table import CT_Tc
from docx.table import Table, _Cell

from tablethemes.exceptions import (
    ThemeDefinitionError, UnsupportedTableLayoutError
)
from tablethemes.theming.color import Color, AUTOMATIC
from tablethemes.theming.grid import Grid

import settings.colors as color_settings

__all__ = [
    'iter_tables',
    'select_tables',
    'read_cell_shading',
    'build_grid',
]

logger = logging.getLogger(name=__name__)


def _iter_table_tree(table: Table, include_nested: bool) -> Iterator[Table]:
    yield table

    if not include_nested:
        return

    # tables in cells; each tc is visited once, even if it spans several grid
    # columns or rows
    for tc in table._tbl.iter_tcs():
        for nested_table in _Cell(tc, table).tables:
            yield from _iter_table_tree(nested_table, include_nested)


def iter_tables(
        document: DocxDocument, include_nested: bool = True
) -> Iterator[Table]:
    r""" Iterate over the tables of a document in document order. Nested
    tables follow their parent table.

    @param document: the word document
    @param include_nested: whether to descend into tables inside table cells

    @return: iterator over tables
    """
    for table in document.tables:
        yield from _iter_table_tree(table, include_nested)


def select_tables(
        document: DocxDocument,
        indices: Optional[Sequence[int]] = None,
        include_nested: bool = True
) -> List[Table]:
    r""" Select the tables to be themed.

    @param document: the word document
    @param indices: indices into the document order of iter_tables; all tables
        are selected if None. Indices which do not match any table are ignored.
    @param include_nested: whether nested tables are candidates

    @return: the selected tables, in the order of `indices`
    """
    tables = list(iter_tables(document, include_nested=include_nested))

    if indices is None:
        return tables

    selected = []
    seen = set()
    for idx in indices:
        if not 0 <= idx < len(tables):
            logger.warning(
                f"table index {idx} does not match any table "
                f"(found {len(tables)} tables); ignoring"
            )
            continue

        if idx in seen:
            continue

        seen.add(idx)
        selected.append(tables[idx])

    return selected


def read_cell_shading(tc: CT_Tc) -> Color:
    r""" Read the fill color of a table cell.

    @param tc: the table cell element

    @return: the fill color, or AUTOMATIC if the cell defines no fill
    """
    tc_pr = tc.tcPr
    if tc_pr is None:
        return AUTOMATIC

    if (shd := tc_pr.find(qn('w:shd'))) is None:
        return AUTOMATIC

    fill = shd.get(qn('w:fill'))
    if fill is None or fill.lower() == color_settings.AUTOMATIC_COLOR_TEXT:
        return AUTOMATIC

    try:
        return Color.from_hex(fill)
    except ThemeDefinitionError:
        logger.debug(f"unreadable cell fill {fill!r}; treating as automatic")
        return AUTOMATIC


def build_grid(table: Table) -> Grid:
    r""" Build a grid for a word table. Each grid position refers to the
    python-docx cell covering it; merged cells appear at every position they
    span; commit_grid writes them through their first position only.

    @param table: the word table

    @return: the grid, with the current cell fills as initial shading

    @raise UnsupportedTableLayoutError: if the table does not map to a
        rectangular grid
    """
    row_count = len(table.rows)
    column_count = len(table.columns)
    cells = table._cells

    if len(cells) != row_count * column_count:
        raise UnsupportedTableLayoutError(
            f"table has {len(cells)} grid cells, expected "
            f"{row_count}x{column_count}"
        )

    refs = [
        cells[r * column_count:(r + 1) * column_count]
        for r in range(row_count)
    ]
    shadings = [[read_cell_shading(cell._tc) for cell in row] for row in refs]

    return Grid(
        row_count=row_count, column_count=column_count,
        refs=refs, shadings=shadings
    )
