import dataclasses
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from tablethemes.theming.color import Color, AUTOMATIC
from tablethemes.theming.theme import FontSpec

__all__ = [
    'CellStyle',
    'Cell',
    'Grid',
    'format_font_size',
]


def format_font_size(size: float) -> str:
    r""" Format a font size with at most one decimal place, dropping a
    trailing zero (11.0 -> "11", 10.5 -> "10.5", 10.25 -> "10.3").
    """
    text = "{:.1f}".format(round(float(size) + 1e-9, 1))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclasses.dataclass(frozen=True)
class CellStyle:
    r""" The font style a resolver writes into a cell's style sink. """

    font_family: str
    font_size: str
    is_bold: bool
    is_italic: bool
    is_underline: bool
    color: Color

    @classmethod
    def from_font(cls, font: FontSpec) -> "CellStyle":
        return cls(
            font_family=font.family,
            font_size=format_font_size(font.size),
            is_bold=bool(font.bold),
            is_italic=bool(font.italic),
            is_underline=bool(font.underline),
            color=AUTOMATIC if font.foreground.is_automatic
            else font.foreground
        )


class Cell:
    r""" A single grid cell. The cell owns a mutable shading slot and a style
    sink; `ref` points to the host cell the caller will eventually write
    through and is never touched by the resolvers.
    """

    __slots__ = ("row", "column", "ref", "shading", "style")

    def __init__(
            self,
            row: int,
            column: int,
            ref: Any = None,
            shading: Color = AUTOMATIC
    ):
        self.row = row
        self.column = column
        self.ref = ref
        self.shading = shading
        self.style: Optional[CellStyle] = None

    def apply_style(self, style: CellStyle):
        self.style = style

    def reset(self):
        r""" Reset the cell to the state of a freshly created cell. """
        self.shading = AUTOMATIC
        self.style = None

    def state(self) -> Tuple[Color, Optional[CellStyle]]:
        return self.shading, self.style

    def __repr__(self):
        return f"Cell(row={self.row}, column={self.column}, " \
               f"shading={self.shading}, style={self.style})"


class Grid:
    r""" An addressable row_count x column_count matrix of cells, accessed as
    `grid[row][column]`.

    Note: row 0 is the header band, the last row the total band, column 0 the
        first column band and the last column the last column band; these are
        structural positions, independent of any rule targeting them.
    """

    def __init__(
            self,
            row_count: int,
            column_count: int,
            refs: Optional[Sequence[Sequence[Any]]] = None,
            shadings: Optional[Sequence[Sequence[Color]]] = None
    ):
        if row_count < 0 or column_count < 0:
            raise ValueError(
                f"Grid dimensions must be non-negative, got "
                f"{row_count}x{column_count}"
            )

        for name, matrix in (("refs", refs), ("shadings", shadings)):
            if matrix is None:
                continue
            if len(matrix) != row_count or any(
                    len(row) != column_count for row in matrix
            ):
                raise ValueError(
                    f"{name} must be a {row_count}x{column_count} matrix"
                )

        self._row_count = row_count
        self._column_count = column_count
        self._rows: List[List[Cell]] = [
            [
                Cell(
                    row=r, column=c,
                    ref=refs[r][c] if refs is not None else None,
                    shading=shadings[r][c] if shadings is not None
                    else AUTOMATIC
                )
                for c in range(column_count)
            ]
            for r in range(row_count)
        ]

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def last_row(self) -> int:
        return self._row_count - 1

    @property
    def last_column(self) -> int:
        return self._column_count - 1

    @property
    def is_empty(self) -> bool:
        return self._row_count == 0 or self._column_count == 0

    def __getitem__(self, row: int) -> List[Cell]:
        return self._rows[row]

    def cell(self, row: int, column: int) -> Cell:
        return self._rows[row][column]

    def __iter__(self) -> Iterator[List[Cell]]:
        return iter(self._rows)

    def iter_cells(self) -> Iterator[Cell]:
        for row in self._rows:
            yield from row

    def snapshot(self) -> Tuple[Tuple[Tuple[Color, Optional[CellStyle]], ...], ...]:
        r""" Immutable view of the (shading, style) assignments of all cells,
        row by row. """
        return tuple(tuple(cell.state() for cell in row) for row in self._rows)

    def shading_matrix(self) -> List[List[Color]]:
        return [[cell.shading for cell in row] for row in self._rows]

    def __repr__(self):
        return f"Grid(row_count={self._row_count}, " \
               f"column_count={self._column_count})"
