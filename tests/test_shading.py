import pytest

from tablethemes.theming import (
    AUTOMATIC, Grid, LIGHT_PALETTE, MEDIUM_PALETTE, RAINBOW, ShadingResolver,
    Solid, ThemeDefinition, BASE_FILL_RULES, HIGHLIGHT_RULES
)
from .conftest import BLACK, BLUE, GRAY, GREEN, RED, WHITE


def colors(grid):
    return grid.shading_matrix()


class TestBaseFill:

    def test_solid_whole_table(self, grid):
        ShadingResolver().fill(grid, ThemeDefinition(whole_table=Solid(GREEN)))

        assert all(cell.shading == GREEN for cell in grid.iter_cells())

    def test_row_stripes_depend_on_row_only(self):
        grid = Grid(5, 4)
        theme = ThemeDefinition(
            first_row_stripe=Solid(WHITE), second_row_stripe=Solid(GRAY)
        )
        ShadingResolver().fill(grid, theme)

        for r, row in enumerate(grid):
            expected = WHITE if r % 2 == 0 else GRAY
            assert [cell.shading for cell in row] == [expected] * 4

    def test_column_stripes_depend_on_column_only(self):
        grid = Grid(3, 5)
        theme = ThemeDefinition(
            first_column_stripe=Solid(RED), second_column_stripe=Solid(BLUE)
        )
        ShadingResolver().fill(grid, theme)

        for row in grid:
            assert [cell.shading for cell in row] == [RED, BLUE, RED, BLUE, RED]

    def test_row_stripes_win_over_column_stripes_and_wash(self, grid):
        theme = ThemeDefinition(
            whole_table=Solid(GREEN),
            first_row_stripe=Solid(WHITE), second_row_stripe=Solid(GRAY),
            first_column_stripe=Solid(RED), second_column_stripe=Solid(BLUE),
        )
        ShadingResolver().fill(grid, theme)

        assert colors(grid) == [[WHITE] * 3, [GRAY] * 3, [WHITE] * 3, [GRAY] * 3]

    def test_column_stripes_win_over_wash(self, grid):
        theme = ThemeDefinition(
            whole_table=Solid(GREEN),
            first_column_stripe=Solid(RED), second_column_stripe=Solid(BLUE),
        )
        ShadingResolver().fill(grid, theme)

        assert colors(grid) == [[RED, BLUE, RED]] * 4

    def test_single_stripe_color_leaves_cells_untouched(self, grid):
        theme = ThemeDefinition(first_row_stripe=Solid(RED))
        ShadingResolver().fill(grid, theme)

        assert all(cell.shading == AUTOMATIC for cell in grid.iter_cells())

    def test_unset_theme_keeps_existing_shading(self):
        grid = Grid(2, 2, shadings=[[RED, BLUE], [GREEN, AUTOMATIC]])
        ShadingResolver().fill(grid, ThemeDefinition())

        assert colors(grid) == [[RED, BLUE], [GREEN, AUTOMATIC]]

    def test_rainbow_rows(self):
        grid = Grid(10, 3)
        theme = ThemeDefinition(whole_table=RAINBOW, first_column=RAINBOW)
        ShadingResolver().fill(grid, theme)

        for r, row in enumerate(grid):
            light = LIGHT_PALETTE[r % len(LIGHT_PALETTE)]
            medium = MEDIUM_PALETTE[r % len(MEDIUM_PALETTE)]
            # column 0 is highlighted by the rainbow first column overlay
            assert [cell.shading for cell in row] == [medium, light, light]

    def test_rainbow_columns(self):
        grid = Grid(4, 9)
        theme = ThemeDefinition(whole_table=RAINBOW, header_row=RAINBOW)
        ShadingResolver().fill(grid, theme)

        for r, row in enumerate(grid):
            for c, cell in enumerate(row):
                if r == 0:
                    expected = MEDIUM_PALETTE[c % len(MEDIUM_PALETTE)]
                else:
                    expected = LIGHT_PALETTE[c % len(LIGHT_PALETTE)]
                assert cell.shading == expected

    def test_rainbow_rows_win_over_rainbow_columns(self):
        grid = Grid(3, 3)
        theme = ThemeDefinition(
            whole_table=RAINBOW, first_column=RAINBOW, header_row=RAINBOW
        )
        ShadingResolver().fill(grid, theme)

        assert grid[2][1].shading == LIGHT_PALETTE[2]
        assert grid[2][0].shading == MEDIUM_PALETTE[2]

    def test_rainbow_whole_table_alone_falls_through(self, grid):
        theme = ThemeDefinition(
            whole_table=RAINBOW,
            first_row_stripe=Solid(WHITE), second_row_stripe=Solid(GRAY)
        )
        ShadingResolver().fill(grid, theme)

        assert colors(grid)[:2] == [[WHITE] * 3, [GRAY] * 3]

    def test_custom_palettes(self):
        grid = Grid(3, 2)
        resolver = ShadingResolver(
            light_palette=[RED, BLUE], medium_palette=[GREEN]
        )
        resolver.fill(
            grid, ThemeDefinition(whole_table=RAINBOW, first_column=RAINBOW)
        )

        assert colors(grid) == [[GREEN, RED], [GREEN, BLUE], [GREEN, RED]]

    def test_empty_palette(self):
        with pytest.raises(ValueError):
            ShadingResolver(light_palette=[])


class TestHighlights:

    def test_header_and_total_over_stripes(self):
        grid = Grid(4, 3)
        theme = ThemeDefinition(
            header_row=Solid(RED), total_row=Solid(BLUE),
            first_row_stripe=Solid(WHITE), second_row_stripe=Solid(GRAY)
        )
        ShadingResolver().fill(grid, theme)

        assert colors(grid) == [
            [RED, RED, RED],
            [GRAY, GRAY, GRAY],
            [WHITE, WHITE, WHITE],
            [BLUE, BLUE, BLUE],
        ]

    def test_first_and_last_column(self, grid):
        theme = ThemeDefinition(
            whole_table=Solid(WHITE),
            first_column=Solid(RED), last_column=Solid(BLUE)
        )
        ShadingResolver().fill(grid, theme)

        assert colors(grid) == [[RED, WHITE, BLUE]] * 4

    def test_rows_win_over_columns(self, grid):
        theme = ThemeDefinition(
            first_column=Solid(RED), last_column=Solid(RED),
            header_row=Solid(BLUE), total_row=Solid(GREEN),
        )
        ShadingResolver().fill(grid, theme)

        assert colors(grid)[0] == [BLUE] * 3
        assert colors(grid)[3] == [GREEN] * 3
        assert colors(grid)[1] == [RED, AUTOMATIC, RED]

    def test_rainbow_first_column(self):
        grid = Grid(9, 2)
        theme = ThemeDefinition(whole_table=Solid(WHITE), first_column=RAINBOW)
        ShadingResolver().fill(grid, theme)

        for r in range(grid.row_count):
            assert grid[r][0].shading == MEDIUM_PALETTE[r % len(MEDIUM_PALETTE)]
            assert grid[r][1].shading == WHITE

    def test_rainbow_header_row(self):
        grid = Grid(2, 9)
        ShadingResolver().fill(grid, ThemeDefinition(header_row=RAINBOW))

        for c in range(grid.column_count):
            assert grid[0][c].shading == MEDIUM_PALETTE[c % len(MEDIUM_PALETTE)]
            assert grid[1][c].shading == AUTOMATIC

    @pytest.mark.parametrize("field_name,position", [
        ("header_first_cell", (0, 0)),
        ("header_last_cell", (0, 2)),
        ("total_first_cell", (3, 0)),
        ("total_last_cell", (3, 2)),
    ])
    def test_corner_wins(self, grid, field_name, position):
        theme = ThemeDefinition(
            whole_table=Solid(WHITE),
            header_row=RAINBOW, total_row=Solid(BLUE),
            first_column=Solid(RED), last_column=Solid(GREEN),
            **{field_name: Solid(BLACK)}
        )
        ShadingResolver().fill(grid, theme)

        r, c = position
        assert grid[r][c].shading == BLACK
        others = [
            cell.shading for cell in grid.iter_cells()
            if (cell.row, cell.column) != position
        ]
        assert BLACK not in others

    def test_single_cell_grid(self):
        grid = Grid(1, 1)
        theme = ThemeDefinition(
            header_row=Solid(RED), total_row=Solid(BLUE),
            total_last_cell=Solid(GREEN)
        )
        ShadingResolver().fill(grid, theme)

        assert grid[0][0].shading == GREEN


class TestShadingResolver:

    def test_rule_tables_are_ordered(self):
        assert [r.name for r in BASE_FILL_RULES] == [
            "rainbow_rows", "rainbow_columns", "row_stripes",
            "column_stripes", "whole_table", "untouched",
        ]
        assert [r.name for r in HIGHLIGHT_RULES] == [
            "first_column", "last_column", "header_row", "total_row",
            "header_first_cell", "header_last_cell", "total_first_cell",
            "total_last_cell",
        ]

    def test_select_rules(self):
        resolver = ShadingResolver()
        theme = ThemeDefinition(
            whole_table=Solid(WHITE), header_row=Solid(RED),
            total_last_cell=Solid(BLUE)
        )

        assert resolver.select_base_fill(theme).name == "whole_table"
        assert resolver.select_base_fill(ThemeDefinition()).name == "untouched"
        assert [r.name for r in resolver.select_highlights(theme)] == [
            "header_row", "total_last_cell"
        ]

    def test_idempotent(self, themes):
        resolver = ShadingResolver()
        for theme in themes:
            grid = Grid(6, 5)
            resolver.fill(grid, theme)
            first = grid.snapshot()
            resolver.fill(grid, theme)
            assert grid.snapshot() == first

    @pytest.mark.parametrize("shape", [(0, 0), (0, 3), (3, 0)])
    def test_empty_grid(self, themes, shape):
        grid = Grid(*shape)
        for theme in themes:
            ShadingResolver().fill(grid, theme)

        assert grid.shading_matrix() == [[]] * shape[0]

    def test_refs_are_not_touched(self):
        refs = [["a", "b"], ["c", "d"]]
        grid = Grid(2, 2, refs=refs)
        ShadingResolver().fill(grid, ThemeDefinition(whole_table=Solid(RED)))

        assert [[cell.ref for cell in row] for row in grid] == refs
