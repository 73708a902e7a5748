"""
Game Configuration
===================
Every tuning constant of the graze loop in one dataclass.

All speeds, decays and frame counts are tuned for 60 simulation
steps per second.
"""

from dataclasses import dataclass
from typing import Tuple


# Terminal cell size in world units (cells are roughly twice as tall as wide)
CELL_WIDTH = 10
CELL_HEIGHT = 20

# Colors for effects spawned by the core (hex, mapped to ANSI by the renderer)
GRAZE_COLOR = '#ff5080'
BULLET_COLOR = '#00ffff'
PLAYER_COLOR = '#ffffff'

GRAZE_TEXT = 'GRAZE!'


@dataclass
class GameConfig:
    """Tuning values for one game session."""

    # Rhythm
    bpm: float = 130.0
    frame_rate: float = 60.0
    graze_duration: int = 15  # Frames of graze mode per beat

    # Player
    player_radius: float = 10.0
    graze_radius: float = 50.0
    smoothing: float = 0.2

    # Bullets
    bullet_radius: float = 6.0
    spawn_margin: float = 20.0
    despawn_margin: float = 100.0
    inward_speed: Tuple[float, float] = (2.0, 5.0)
    tangent_speed: Tuple[float, float] = (-1.0, 1.0)
    initial_bullets: int = 5
    ramp_interval: int = 60
    max_bullets: int = 50

    # Effects
    burst_count: int = 10
    particle_speed: float = 5.0
    particle_decay: float = 0.05
    label_decay: float = 0.02
    label_rise: float = 1.0

    # Scoring
    graze_score: int = 100

    def __post_init__(self):
        if self.bpm <= 0 or self.frame_rate <= 0:
            raise ValueError(
                f'bpm and frame_rate must be positive '
                f'(got bpm={self.bpm}, frame_rate={self.frame_rate})'
            )
        if self.despawn_margin <= self.spawn_margin:
            # Bullets would be born outside the live region
            raise ValueError(
                f'despawn_margin ({self.despawn_margin}) must exceed '
                f'spawn_margin ({self.spawn_margin})'
            )
        if self.ramp_interval <= 0:
            raise ValueError(f'ramp_interval must be positive (got {self.ramp_interval})')
        for name in ('graze_duration', 'initial_bullets', 'max_bullets', 'burst_count'):
            if getattr(self, name) < 0:
                raise ValueError(f'{name} must not be negative')
        low, high = self.inward_speed
        if low <= 0 or high < low:
            raise ValueError(f'inward_speed must be a positive range (got {self.inward_speed})')

    @property
    def frames_per_beat(self) -> float:
        """Frames between beats at the nominal frame rate."""
        return (60.0 / self.bpm) * self.frame_rate
