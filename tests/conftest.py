"""
Pytest configuration for tablethemes
"""

import docx
import pytest

from tablethemes.theming import (
    Color, FontSpec, Grid, Solid, ThemeDefinition, ThemeRegistry, RAINBOW
)

RED = Color.from_hex("#FF0000")
BLUE = Color.from_hex("#0000FF")
WHITE = Color.from_hex("#FFFFFF")
GRAY = Color.from_hex("#808080")
GREEN = Color.from_hex("#00FF00")
BLACK = Color.from_hex("#000000")


@pytest.fixture
def grid():
    """A fresh 4x3 grid."""
    return Grid(4, 3)


@pytest.fixture
def header_font():
    return FontSpec(family="Arial", size=12, bold=True, foreground=WHITE)


@pytest.fixture
def body_font():
    return FontSpec(family="Calibri", size=10.5)


@pytest.fixture
def themes(header_font, body_font):
    """A small catalog covering solid, striped and rainbow themes."""
    return [
        ThemeDefinition(
            name="Header and Total",
            header_row=Solid(RED),
            total_row=Solid(BLUE),
            first_row_stripe=Solid(WHITE),
            second_row_stripe=Solid(GRAY),
            header_font=header_font,
            default_font=body_font,
        ),
        ThemeDefinition(
            name="Rainbow Rows",
            whole_table=RAINBOW,
            first_column=RAINBOW,
        ),
        ThemeDefinition(
            name="Green Wash",
            whole_table=Solid(GREEN),
            default_font=body_font,
        ),
    ]


@pytest.fixture
def registry(themes):
    return ThemeRegistry(themes)


@pytest.fixture
def word_doc():
    """In-memory word document with a 4x3 table with text in every cell."""
    document = docx.Document()
    table = document.add_table(rows=4, cols=3)
    for r, row in enumerate(table.rows):
        for c, cell in enumerate(row.cells):
            cell.text = f"r{r}c{c}"
    return document
