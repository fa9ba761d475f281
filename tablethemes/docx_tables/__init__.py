from .table_grid import build_grid, iter_tables, read_cell_shading, select_tables
from .commit import apply_cell_style, clear_cell_formatting, commit_grid
from .document import apply_theme_to_document
