class LifeError(Exception):
    """Base class for every error raised by the game."""


class InputError(LifeError):
    """Board size or round count could not be read."""


class CellOutOfBoundsError(LifeError, IndexError):
    def __init__(self, x, y, size):
        super().__init__(f"cell ({x}, {y}) is outside a {size}x{size} board")
        self.x = x
        self.y = y
        self.size = size


class BoardShapeError(LifeError, ValueError):
    pass
