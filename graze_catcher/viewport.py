"""
Viewport
=========
Arena size in world units. Spawn and despawn bounds read it at use
time, so a terminal resize takes effect on the next frame.
"""

from dataclasses import dataclass

from .config import CELL_WIDTH, CELL_HEIGHT

# Bottom terminal rows reserved for the HUD
HUD_ROWS = 3


@dataclass
class FixedViewport:
    """Constant arena size (tests and headless runs)."""
    width: float = 800.0
    height: float = 600.0


class TerminalViewport:
    """Arena backed by a live blessed Terminal, minus the HUD rows."""

    def __init__(self, term):
        self.term = term

    @property
    def columns(self) -> int:
        return self.term.width

    @property
    def rows(self) -> int:
        return max(1, self.term.height - HUD_ROWS)

    @property
    def width(self) -> float:
        return float(self.columns * CELL_WIDTH)

    @property
    def height(self) -> float:
        return float(self.rows * CELL_HEIGHT)
