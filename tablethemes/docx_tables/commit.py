import logging
from typing import Iterator

from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor
from docx.table import _Cell
from docx.text.run import Run
from lxml import etree

from tablethemes.docx_tables.table_grid import read_cell_shading
from tablethemes.theming.color import Color
from tablethemes.theming.grid import CellStyle, Grid

import settings.colors as color_settings

__all__ = [
    'SHADING_PATTERNS',
    'shade_element',
    'unshade_element',
    'iter_cell_runs',
    'apply_cell_style',
    'clear_cell_formatting',
    'commit_grid',
]

logger = logging.getLogger(name=__name__)

# valid values for w:shd/@w:val
SHADING_PATTERNS = (
    "clear", "diagCross", "diagStripe", "horzCross", "horzStripe", "nil",
    "pct10", "pct12", "pct15", "pct20", "pct25", "pct30", "pct35", "pct37",
    "pct40", "pct45", "pct5", "pct50", "pct55", "pct60", "pct62", "pct65",
    "pct70", "pct75", "pct80", "pct85", "pct87", "pct90", "pct95", "solid",
    "reverseDiagStripe", "thinDiagCross", "thinDiagStripe",
    "thinHorzCross", "thinHorzStripe", "thinReverseDiagStripe",
    "thinVertStripe", "vertStripe",
)

# elements which must follow w:shd in w:tcPr
TC_PR_SHD_SUCCESSORS = (
    'w:noWrap', 'w:tcMar', 'w:textDirection', 'w:tcFitText', 'w:vAlign',
    'w:hideMark', 'w:headers', 'w:cellIns', 'w:cellDel', 'w:cellMerge',
    'w:tcPrChange',
)


def unshade_element(prop):
    r""" Remove all shading from a properties element """
    for shd in prop.findall(qn('w:shd')):
        prop.remove(shd)


def shade_element(prop, color: Color, val: str = "clear"):
    r""" Apply shading to a table cell properties element, replacing any
    existing shading. """
    unshade_element(prop)

    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), val)
    shd.set(qn("w:color"), color_settings.AUTOMATIC_COLOR_TEXT)
    shd.set(qn("w:fill"), color.to_ooxml())
    prop.insert_element_before(shd, *TC_PR_SHD_SUCCESSORS)


def iter_cell_runs(cell: _Cell) -> Iterator[Run]:
    r""" Iterate over the runs of the paragraphs directly contained in a cell,
    including runs inside hyperlinks. Runs of nested tables are excluded. """
    for par in cell.paragraphs:
        for r in par._p.xpath('./w:r | ./w:hyperlink/w:r'):
            yield Run(r, par)


def _set_run_color(run: Run, color: Color):
    if not color.is_automatic:
        run.font.color.rgb = RGBColor(*color.rgb)
        return

    # python-docx only accepts rgb values for w:color, so automatic is set on
    # the element directly
    r_pr = run._r.get_or_add_rPr()
    r_pr._remove_color()
    r_pr.get_or_add_color().set(
        qn('w:val'), color_settings.AUTOMATIC_COLOR_TEXT
    )


def apply_cell_style(cell: _Cell, style: CellStyle):
    r""" Write a cell style to every run of a cell.

    @param cell: the python-docx cell
    @param style: the resolved cell style
    """
    for run in iter_cell_runs(cell):
        font = run.font
        font.name = style.font_family
        font.size = Pt(float(style.font_size))
        font.bold = style.is_bold
        font.italic = style.is_italic
        font.underline = style.is_underline
        _set_run_color(run, style.color)


def clear_cell_formatting(cell: _Cell):
    r""" Remove direct formatting from a cell: run properties and paragraph
    shading. Cell shading is handled separately by commit_grid. """
    for par in cell.paragraphs:
        if (p_pr := par._p.pPr) is not None:
            unshade_element(p_pr)

        # run properties, including those of the paragraph mark
        etree.strip_elements(par._p, qn('w:rPr'), with_tail=False)


def commit_grid(
        grid: Grid,
        shading_pattern: str = "clear",
        strip_formatting: bool = False
):
    r""" Write the resolved grid back to the word table its cells refer to.

    Note: shading is only written where it differs from the current cell fill,
        unless formatting is stripped. Automatic shading removes the cell fill
        so that the host default applies. A merged cell spans several grid
        positions and is written only by the first of them (its top-left
        position in row-major order).

    @param grid: a grid built by build_grid
    @param shading_pattern: value of w:shd/@w:val for written fills
    @param strip_formatting: whether direct formatting is removed first
        (used when clearing a table)
    """
    if shading_pattern not in SHADING_PATTERNS:
        raise ValueError(
            f"Invalid shading pattern: {shading_pattern}. "
            f"Must be one of: {SHADING_PATTERNS}"
        )

    written = 0
    committed = set()
    for cell in grid.iter_cells():
        docx_cell = cell.ref
        if docx_cell is None:
            continue

        tc = docx_cell._tc
        if tc in committed:
            continue
        committed.add(tc)

        if strip_formatting:
            clear_cell_formatting(docx_cell)

        if strip_formatting or read_cell_shading(tc) != cell.shading:
            if cell.shading.is_automatic:
                if (tc_pr := tc.tcPr) is not None:
                    unshade_element(tc_pr)
            else:
                shade_element(
                    tc.get_or_add_tcPr(), color=cell.shading,
                    val=shading_pattern
                )
            written += 1

        if cell.style is not None:
            apply_cell_style(docx_cell, cell.style)

    logger.debug(f"committed grid; {written} cell fills written")
