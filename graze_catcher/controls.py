"""
Pointer Input
==============
Keyboard-driven pointer for terminals.

Terminals have no pointer-move events, so held movement keys steer a
target point that the player eases toward. Discrete triggers (start,
restart, quit, FPS toggle) are latched and consumed on read.
"""

import math
from typing import Tuple

KEY_DIRECTIONS = {
    'w': (0, -1), 'KEY_UP': (0, -1),
    's': (0, 1), 'KEY_DOWN': (0, 1),
    'a': (-1, 0), 'KEY_LEFT': (-1, 0),
    'd': (1, 0), 'KEY_RIGHT': (1, 0),
}


class PointerInput:
    """
    Input collaborator: a target point plus latched triggers.

    Uses frame-based timers to simulate key hold in terminals
    that don't support key-up events.
    """

    def __init__(self, hold_duration: int = 12, cursor_speed: float = 14.0):
        self.keys_held: dict = {}  # direction key -> frames remaining
        self.hold_duration = hold_duration
        self.cursor_speed = cursor_speed
        self.target_x = 0.0
        self.target_y = 0.0

        self._start_triggered = False
        self._restart_triggered = False
        self._quit_triggered = False
        self._toggle_fps = False

    def process_key(self, key) -> None:
        """Process a single key press from blessed's inkey()."""
        if key is None or not key:
            return

        name = key.name if key.is_sequence else None
        key_str = '' if key.is_sequence else str(key).lower()

        if key_str == 'q' or name == 'KEY_ESCAPE':
            self._quit_triggered = True
            return

        direction_key = name if name in KEY_DIRECTIONS else key_str
        if direction_key in KEY_DIRECTIONS:
            self.keys_held[direction_key] = self.hold_duration
        elif key_str == 'r':
            self._restart_triggered = True
        elif key_str == 'f' or name == 'KEY_F1':
            self._toggle_fps = True
        elif key_str == ' ' or name == 'KEY_ENTER':
            self._start_triggered = True

    def center(self, width: float, height: float):
        """Put the target in the middle of the arena."""
        self.target_x = width / 2
        self.target_y = height / 2
        self.keys_held.clear()

    def update(self, width: float, height: float) -> None:
        """Move the target by held keys and tick hold timers (once per frame)."""
        dx, dy = self.get_movement_vector()
        self.target_x = min(max(self.target_x + dx * self.cursor_speed, 0.0), width)
        self.target_y = min(max(self.target_y + dy * self.cursor_speed, 0.0), height)

        expired = []
        for key, frames in self.keys_held.items():
            self.keys_held[key] = frames - 1
            if self.keys_held[key] <= 0:
                expired.append(key)
        for key in expired:
            del self.keys_held[key]

    def get_movement_vector(self) -> Tuple[float, float]:
        """Current steering direction from held keys, normalized."""
        dx, dy = 0.0, 0.0
        for key in self.keys_held:
            kx, ky = KEY_DIRECTIONS[key]
            dx += kx
            dy += ky
        dx = max(-1.0, min(1.0, dx))
        dy = max(-1.0, min(1.0, dy))

        if dx != 0 and dy != 0:
            length = math.sqrt(dx * dx + dy * dy)
            dx /= length
            dy /= length

        return dx, dy

    @property
    def target(self) -> Tuple[float, float]:
        return self.target_x, self.target_y

    def consume_start(self) -> bool:
        triggered = self._start_triggered
        self._start_triggered = False
        return triggered

    def consume_restart(self) -> bool:
        triggered = self._restart_triggered
        self._restart_triggered = False
        return triggered

    def consume_quit(self) -> bool:
        triggered = self._quit_triggered
        self._quit_triggered = False
        return triggered

    def consume_toggle_fps(self) -> bool:
        triggered = self._toggle_fps
        self._toggle_fps = False
        return triggered
