from tablethemes.theming.grid import Grid


class ClearEngine:
    r""" Resets a grid to the unstyled, unshaded state of freshly created
    cells. """

    def clear(self, grid: Grid):
        for cell in grid.iter_cells():
            cell.reset()
