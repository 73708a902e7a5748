"""
Rendering Engine
=================
Double-buffered terminal renderer with braille sub-pixels and screen shake.

Colors are hex strings ('#rrggbb'); blessed downgrades them to the
terminal's palette.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Tuple
import random

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")


NEON_PINK = '#ff5080'
NEON_CYAN = '#00ffff'
NEON_YELLOW = '#ffff50'
NEON_RED = '#ff3030'
NEON_GREEN = '#50ff80'

GRAY_LIGHT = '#d0d0d0'
GRAY_MED = '#8a8a8a'
GRAY_DARK = '#444444'
GRAY_DARKER = '#262626'

WHITE = '#ffffff'
DEFAULT_FG = '#c0c0c0'


@lru_cache(maxsize=512)
def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """'#ff5080' -> (255, 80, 128)."""
    value = color.lstrip('#')
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def dim(color: str, factor: float) -> str:
    """Scale a hex color toward black; factor 1.0 keeps it, 0.0 is black."""
    factor = max(0.0, min(1.0, factor))
    r, g, b = hex_to_rgb(color)
    return '#{:02x}{:02x}{:02x}'.format(int(r * factor), int(g * factor), int(b * factor))


@dataclass
class Cell:
    """A single cell in the render buffer."""
    char: str = ' '
    fg_color: str = DEFAULT_FG
    bg_color: str = ''  # '' = transparent/default

    def matches(self, other: 'Cell') -> bool:
        """Check if two cells are visually identical."""
        return (
            self.char == other.char and
            self.fg_color == other.fg_color and
            self.bg_color == other.bg_color
        )

    def reset(self):
        self.char = ' '
        self.fg_color = DEFAULT_FG
        self.bg_color = ''


class DoubleBuffer:
    """
    Double-buffered terminal renderer.

    Writes to a back buffer, then swaps to front buffer,
    only updating cells that changed. No screen clears needed.
    """

    def __init__(self, term: Terminal):
        self.term = term
        self.width = term.width
        self.height = term.height
        self.front: List[List[Cell]] = []
        self.back: List[List[Cell]] = []
        self._init_buffers()
        self._normal = term.normal

    def _init_buffers(self):
        self.front = [[Cell() for _ in range(self.width)] for _ in range(self.height)]
        self.back = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height
        self._init_buffers()

    def clear_back(self):
        """Clear the back buffer by resetting cells in-place."""
        for row in self.back:
            for cell in row:
                cell.reset()

    def put(self, x: int, y: int, char: str, fg_color: str = DEFAULT_FG, bg_color: str = ''):
        """Put a character in the back buffer at exact position."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.back[y][x]
            cell.char = char
            cell.fg_color = fg_color
            cell.bg_color = bg_color

    def put_string(self, x: int, y: int, text: str, fg_color: str = DEFAULT_FG, bg_color: str = ''):
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg_color, bg_color)

    def present(self) -> str:
        """Swap buffers and return the escape sequences for changed cells only."""
        output_parts = []
        normal = self._normal
        term = self.term

        for y in range(self.height):
            for x in range(self.width):
                back_cell = self.back[y][x]
                if back_cell.matches(self.front[y][x]):
                    continue
                output_parts.append(term.move_xy(x, y))
                # Reset colors to prevent bleed
                output_parts.append(normal)
                if back_cell.bg_color:
                    output_parts.append(term.on_color_rgb(*hex_to_rgb(back_cell.bg_color)))
                output_parts.append(term.color_rgb(*hex_to_rgb(back_cell.fg_color)))
                output_parts.append(back_cell.char or ' ')

        self.front, self.back = self.back, self.front

        return ''.join(output_parts)


class BrailleCanvas:
    """
    Sub-pixel rendering using Unicode Braille patterns.

    Each character cell maps to a 2x4 pixel grid, giving 8x
    the resolution of plain characters for particle effects.
    """

    # (column, row) -> bit value
    DOTS = {
        (0, 0): 0x01, (0, 1): 0x02, (0, 2): 0x04, (0, 3): 0x40,
        (1, 0): 0x08, (1, 1): 0x10, (1, 2): 0x20, (1, 3): 0x80,
    }
    BASE = 0x2800

    def __init__(self, char_width: int, char_height: int):
        self.char_width = char_width
        self.char_height = char_height
        self.pixel_width = char_width * 2
        self.pixel_height = char_height * 4
        self.canvas: List[List[int]] = []
        self.colors: List[List[str]] = []
        self.clear()

    def clear(self):
        self.canvas = [[0] * self.char_width for _ in range(self.char_height)]
        self.colors = [[WHITE] * self.char_width for _ in range(self.char_height)]

    def set_pixel(self, px: int, py: int, color: str = WHITE):
        """Set a sub-pixel dot at pixel coordinates."""
        if 0 <= px < self.pixel_width and 0 <= py < self.pixel_height:
            char_x, dot_x = divmod(px, 2)
            char_y, dot_y = divmod(py, 4)
            self.canvas[char_y][char_x] |= self.DOTS[(dot_x, dot_y)]
            self.colors[char_y][char_x] = color

    def get_char(self, cx: int, cy: int) -> Tuple[str, str]:
        """Get the braille character and color at a cell position."""
        if 0 <= cx < self.char_width and 0 <= cy < self.char_height:
            pattern = self.canvas[cy][cx]
            if pattern > 0:
                return chr(self.BASE + pattern), self.colors[cy][cx]
        return '', WHITE

    def blit_to_buffer(self, buffer: DoubleBuffer):
        """Render braille canvas onto the buffer. Only overlays empty cells."""
        for cy in range(min(self.char_height, buffer.height)):
            for cx in range(min(self.char_width, buffer.width)):
                char, color = self.get_char(cx, cy)
                if char and buffer.back[cy][cx].char == ' ':
                    buffer.put(cx, cy, char, color)


@dataclass
class GameRenderer:
    """
    Terminal renderer with screen shake.

    Shake offsets game-area coordinates when writing to the buffer;
    HUD rows bypass it.
    """
    term: Terminal
    hud_rows: int = 3
    buffer: DoubleBuffer = field(init=False)
    braille: BrailleCanvas = field(init=False)

    shake_x: int = 0
    shake_y: int = 0
    shake_frames: int = 0
    shake_intensity: int = 1

    show_fps: bool = False
    current_fps: float = 60.0

    def __post_init__(self):
        self.buffer = DoubleBuffer(self.term)
        self.braille = BrailleCanvas(self.term.width, self.game_height)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    @property
    def game_height(self) -> int:
        """Height of the playable area (excluding HUD rows)."""
        return max(1, self.buffer.height - self.hud_rows)

    def trigger_shake(self, intensity: int = 1, frames: int = 3):
        self.shake_intensity = intensity
        self.shake_frames = max(self.shake_frames, frames)

    def update_effects(self):
        """Tick the screen shake timer."""
        if self.shake_frames > 0:
            self.shake_x = random.randint(-self.shake_intensity, self.shake_intensity)
            self.shake_y = random.randint(-max(1, self.shake_intensity // 2),
                                          max(1, self.shake_intensity // 2))
            self.shake_frames -= 1
        else:
            self.shake_x = 0
            self.shake_y = 0

    def check_resize(self) -> bool:
        """Rebuild buffers if the terminal changed size."""
        if (self.term.width, self.term.height) == (self.buffer.width, self.buffer.height):
            return False
        self.buffer.resize(self.term.width, self.term.height)
        self.braille = BrailleCanvas(self.term.width, self.game_height)
        return True

    def begin_frame(self):
        self.buffer.clear_back()
        self.braille.clear()

    def end_frame(self) -> str:
        """Finalize frame: blit braille overlay and present."""
        self.braille.blit_to_buffer(self.buffer)
        self.update_effects()
        return self.buffer.present()

    def put(self, x: int, y: int, char: str, fg_color: str = DEFAULT_FG,
            with_shake: bool = True):
        if with_shake and y < self.game_height:
            x += self.shake_x
            y += self.shake_y
        self.buffer.put(x, y, char, fg_color)

    def put_string(self, x: int, y: int, text: str, fg_color: str = DEFAULT_FG,
                   with_shake: bool = True):
        if with_shake and y < self.game_height:
            x += self.shake_x
            y += self.shake_y
        self.buffer.put_string(x, y, text, fg_color)

    def put_braille_pixel(self, px: float, py: float, color: str = WHITE):
        """
        Set a sub-pixel braille dot at cell coordinates (fractional).

        Shake is applied here so braille particles jitter with everything else.
        """
        bx = int(px * 2) + self.shake_x * 2
        by = int(py * 4) + self.shake_y * 4
        self.braille.set_pixel(bx, by, color)

    def draw_box(self, x: int, y: int, w: int, h: int, color: str = GRAY_DARK,
                 char: str = '#', with_shake: bool = True):
        """Draw a rectangular border."""
        for i in range(w):
            self.put(x + i, y, char, color, with_shake)
            self.put(x + i, y + h - 1, char, color, with_shake)
        for j in range(1, h - 1):
            self.put(x, y + j, char, color, with_shake)
            self.put(x + w - 1, y + j, char, color, with_shake)
