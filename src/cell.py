from enum import Enum

from termcolor import colored

ALIVE_GLYPH = "X"
DEAD_GLYPH = "O"
ALIVE_COLOR = "green"
DEAD_COLOR = "white"


class Cell(Enum):
    ALIVE = "alive"
    DEAD = "dead"

    @classmethod
    def from_bool(cls, value):
        return cls.ALIVE if value else cls.DEAD

    def is_alive(self):
        return self is Cell.ALIVE

    @property
    def glyph(self):
        return ALIVE_GLYPH if self.is_alive() else DEAD_GLYPH

    @property
    def color(self):
        return ALIVE_COLOR if self.is_alive() else DEAD_COLOR

    def render(self):
        """Return the (glyph, color) pair used to draw this cell."""
        return self.glyph, self.color

    def colored(self):
        return colored(self.glyph, self.color)

    def __str__(self):
        return self.glyph
