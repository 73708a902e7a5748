"""
Beat Clock
===========
Frame-counted rhythm that opens a graze window on every beat.
"""

from dataclasses import dataclass, field

from .config import GameConfig


@dataclass
class BeatClock:
    """
    Beat timer plus the graze-mode state machine.

    The timer counts frames; once it reaches frames_per_beat it wraps to
    zero and graze mode opens for graze_duration ticks (the opening tick
    included). Graze mode can only reopen on the next wrap.
    """
    frames_per_beat: float
    graze_duration: int = 15
    timer: int = 0
    graze_active: bool = False
    graze_remaining: int = 0
    beats: int = field(default=0, init=False)

    @classmethod
    def from_config(cls, config: GameConfig) -> 'BeatClock':
        return cls(
            frames_per_beat=config.frames_per_beat,
            graze_duration=config.graze_duration,
        )

    def reset(self):
        self.timer = 0
        self.graze_active = False
        self.graze_remaining = 0
        self.beats = 0

    def tick(self) -> bool:
        """Advance one frame. Returns True on the frame a beat lands."""
        on_beat = False
        self.timer += 1
        if self.timer >= self.frames_per_beat:
            self.timer = 0
            self.beats += 1
            self.graze_active = True
            self.graze_remaining = self.graze_duration
            on_beat = True

        if self.graze_active:
            self.graze_remaining -= 1
            if self.graze_remaining <= 0:
                self.graze_remaining = 0
                self.graze_active = False

        return on_beat

    def force_graze(self, frames: int = None):
        """Open a graze window right now (debug / test hook)."""
        self.graze_active = True
        self.graze_remaining = self.graze_duration if frames is None else frames

    def is_graze_active(self) -> bool:
        return self.graze_active

    def beat_progress(self) -> float:
        """Fraction of the current beat elapsed, in [0, 1). Presentation only."""
        return self.timer / self.frames_per_beat
