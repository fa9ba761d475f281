import logging
from typing import Optional, Sequence

from docx.document import Document as DocxDocument

from tablethemes.docx_tables.commit import commit_grid
from tablethemes.docx_tables.table_grid import build_grid, select_tables
from tablethemes.exceptions import UnsupportedTableLayoutError
from tablethemes.theming.apply_theme import ThemeSelection, apply_table_theme
from tablethemes.theming.registry import ThemeRegistry

__all__ = [
    'apply_theme_to_document',
]

logger = logging.getLogger(name=__name__)


def apply_theme_to_document(
        document: DocxDocument,
        selector: int,
        registry: ThemeRegistry,
        table_indices: Optional[Sequence[int]] = None,
        include_nested: bool = True,
        shading_pattern: str = "clear"
) -> ThemeSelection:
    r""" Apply a table theme to the selected tables of a word document, or
    clear their formatting if the selector is the clear sentinel. The
    document is modified in place; saving it is left to the caller.

    @param document: the word document
    @param selector: a catalog index or CLEAR_THEME_INDEX
    @param registry: the theme catalog
    @param table_indices: tables to theme (see select_tables); all tables if
        None
    @param include_nested: whether nested tables are candidates
    @param shading_pattern: value of w:shd/@w:val for written fills

    @return: the applied theme selection

    @raise NoTableSelectedError: if no table matched the selection
    @raise InvalidThemeIndexError: if the selector is invalid
    """
    tables = select_tables(
        document, indices=table_indices, include_nested=include_nested
    )

    # tables which cannot be mapped to a grid are skipped before anything is
    # written, so they stay untouched
    grids = []
    for table in tables:
        try:
            grids.append(build_grid(table))
        except UnsupportedTableLayoutError as e:
            logger.warning(f"skipping table: {e.msg}")

    selection, grids = apply_table_theme(grids, selector, registry)

    for grid in grids:
        commit_grid(
            grid, shading_pattern=shading_pattern,
            strip_formatting=selection.clear
        )

    if selection.clear:
        logger.info(f"cleared formatting of {len(grids)} table(s)")
    else:
        logger.info(
            f"applied theme '{selection.theme.name}' to {len(grids)} table(s)"
        )

    return selection
