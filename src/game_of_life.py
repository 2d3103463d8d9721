import logging

import numpy as np

from cell import Cell
from errors import BoardShapeError, CellOutOfBoundsError

logger = logging.getLogger(__name__)

# (dx, dy) offsets of the Moore neighbourhood
NEIGHBOR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Board:
    """Square grid of cells with hard edges.

    Coordinates are ``(x, y)`` where ``x`` is the column and ``y`` the row.
    Cells outside ``[0, size)`` do not exist, so neighbours past an edge are
    simply not counted.
    """

    def __init__(self, size, rows=None):
        if size < 0:
            raise BoardShapeError(f"board size must be non-negative, got {size}")
        self._size = size
        if rows is None:
            rows = [[Cell.DEAD] * size for _ in range(size)]
        if len(rows) != size or any(len(row) != size for row in rows):
            raise BoardShapeError(f"rows do not form a {size}x{size} grid")
        self.rows = [list(row) for row in rows]

    @property
    def size(self):
        return self._size

    @classmethod
    def create_empty(cls, size):
        return cls(size)

    @classmethod
    def create_random(cls, size, rng=None):
        """Each cell is alive or dead with probability 0.5, independently."""
        if rng is None:
            rng = np.random.default_rng()
        board = cls.from_array(rng.choice([0, 1], size=(size, size)))
        logger.debug("Created random %dx%d board with %d live cells", size, size, board.count_alive())
        return board

    @classmethod
    def from_array(cls, array):
        grid = np.asarray(array)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise BoardShapeError(f"expected a square 2D array, got shape {grid.shape}")
        rows = [[Cell.from_bool(value) for value in row] for row in grid]
        return cls(grid.shape[0], rows)

    def to_array(self):
        """Return the board as a (size, size) int array, 1 for alive."""
        grid = np.zeros((self.size, self.size), dtype=int)
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell.is_alive():
                    grid[y, x] = 1
        return grid

    def copy(self):
        return Board(self.size, self.rows)

    def is_valid_location(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def _check_location(self, x, y):
        # negative indices would silently wrap in a list
        if not self.is_valid_location(x, y):
            raise CellOutOfBoundsError(x, y, self.size)

    def is_cell_alive(self, x, y):
        self._check_location(x, y)
        return self.rows[y][x].is_alive()

    def set_cell(self, x, y, new_state):
        self._check_location(x, y)
        self.rows[y][x] = new_state

    def set_pattern(self, cells):
        """Mark every (x, y) in ``cells`` alive."""
        for x, y in cells:
            self.set_cell(x, y, Cell.ALIVE)

    def count_live_neighbors(self, x, y):
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            logger.debug("Check location %d, %d", nx, ny)
            if self.is_valid_location(nx, ny) and self.rows[ny][nx].is_alive():
                count += 1
        return count

    def count_alive(self):
        """Return number of live cells."""
        return sum(cell.is_alive() for row in self.rows for cell in row)

    def render(self, stream=None):
        """Print the board, one line of coloured glyphs per row."""
        for row in self.rows:
            print("".join(cell.colored() for cell in row), file=stream)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.rows == other.rows

    def __repr__(self):
        lines = ["".join(str(cell) for cell in row) for row in self.rows]
        return f"Board(size={self.size}, rows={lines!r})"
