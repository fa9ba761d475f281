"""
This module contains the built-in table theme catalog. Themes use the same
schema as user theme files (see tablethemes.theming.catalog): shading values
are color strings or `rainbow`, fonts are mappings.
"""

BODY_FONT = {"family": "Calibri", "size": 11}
HEADER_FONT = {"family": "Calibri", "size": 11, "bold": True,
               "foreground": "#FFFFFF"}
DARK_HEADER_FONT = {"family": "Calibri", "size": 11, "bold": True}

BUILTIN_THEMES = [
    {
        "name": "Blue Header",
        "header_row": "#1F4E79",
        "header_font": HEADER_FONT,
        "default_font": BODY_FONT,
    },
    {
        "name": "Banded Rows Gray",
        "header_row": "#404040",
        "first_row_stripe": "#FFFFFF",
        "second_row_stripe": "#EDEDED",
        "header_font": HEADER_FONT,
        "default_font": BODY_FONT,
    },
    {
        "name": "Banded Columns Blue",
        "header_row": "#2E75B6",
        "first_column_stripe": "#DEEAF6",
        "second_column_stripe": "#FFFFFF",
        "header_font": HEADER_FONT,
        "default_font": BODY_FONT,
    },
    {
        "name": "Header and Total",
        "whole_table": "#F2F2F2",
        "header_row": "#C00000",
        "total_row": "#FBE4D5",
        "header_font": HEADER_FONT,
        "total_font": {"family": "Calibri", "size": 11, "bold": True,
                       "foreground": "#C00000"},
        "default_font": BODY_FONT,
    },
    {
        "name": "First Column Green",
        "first_column": "#548235",
        "first_row_stripe": "#E2EFDA",
        "second_row_stripe": "#FFFFFF",
        "first_column_font": HEADER_FONT,
        "default_font": BODY_FONT,
    },
    {
        "name": "Corner Accents",
        "whole_table": "#FFFFFF",
        "header_row": "#D9E2F3",
        "total_row": "#D9E2F3",
        "first_column": "#D9E2F3",
        "last_column": "#D9E2F3",
        "header_first_cell": "#2F5496",
        "header_last_cell": "#2F5496",
        "total_first_cell": "#2F5496",
        "total_last_cell": "#2F5496",
        "header_font": DARK_HEADER_FONT,
        "total_font": DARK_HEADER_FONT,
        "first_column_font": DARK_HEADER_FONT,
        "last_column_font": DARK_HEADER_FONT,
        "default_font": BODY_FONT,
    },
    {
        "name": "Rainbow Rows",
        "whole_table": "rainbow",
        "first_column": "rainbow",
        "first_column_font": DARK_HEADER_FONT,
    },
    {
        "name": "Rainbow Columns",
        "whole_table": "rainbow",
        "header_row": "rainbow",
        "header_font": DARK_HEADER_FONT,
    },
    {
        "name": "Rainbow Header",
        "header_row": "rainbow",
        "header_font": DARK_HEADER_FONT,
        "default_font": BODY_FONT,
    },
]
