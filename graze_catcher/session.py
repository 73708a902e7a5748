"""
Game Session
=============
The single live session: phase machine, score and every entity pool.
"""

import logging
import random
from typing import List, Optional

from .ecs import World
from .beat import BeatClock
from .bullets import seed_bullets
from .components import BulletTag, ParticleTag, TextLabel
from .config import GameConfig
from .player import create_player

logger = logging.getLogger(__name__)

# Session phases
PHASE_TITLE = 'title'
PHASE_PLAYING = 'playing'
PHASE_GAME_OVER = 'gameover'


class GameSession:
    """
    Central session state. Passed to the simulation step and read by
    the render collaborator.

    Score listeners are any objects with on_score(score) and
    on_game_over(score); they are told about every score change and
    about the final score.
    """

    def __init__(self, viewport, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None, listeners=()):
        self.config = config or GameConfig()
        self.viewport = viewport
        self.rng = rng or random.Random()
        self.listeners: List = list(listeners)

        self.phase = PHASE_TITLE
        self.score = 0
        self.frame = 0
        self.beat = BeatClock.from_config(self.config)
        self.world = World()
        self.player_id: Optional[int] = None
        self.grazes = 0

    # -------------------------------------------------------------------------
    # Phase transitions
    # -------------------------------------------------------------------------

    def start(self):
        """Begin a fresh session. Every piece of session state is rebuilt."""
        self.world = World()
        self.score = 0
        self.frame = 0
        self.grazes = 0
        self.beat.reset()

        width, height = self.viewport.width, self.viewport.height
        self.player_id = create_player(self.world, width / 2, height / 2, self.config)
        seed_bullets(self.world, self.rng, width, height, self.config)

        self.phase = PHASE_PLAYING
        logger.info('Session started in %.0fx%.0f arena', width, height)
        self._notify_score()

    def restart(self):
        """Start again after game over (same full reset as start)."""
        logger.info('Session restarted (previous score %d)', self.score)
        self.start()

    def game_over(self):
        """Terminal transition for the current session."""
        if self.phase != PHASE_PLAYING:
            return
        self.phase = PHASE_GAME_OVER
        logger.info('Game over at frame %d with score %d', self.frame, self.score)
        for listener in self.listeners:
            listener.on_game_over(self.score)

    # -------------------------------------------------------------------------
    # Score
    # -------------------------------------------------------------------------

    def add_score(self, points: int) -> bool:
        """Award points. Ignored outside the playing phase."""
        if self.phase != PHASE_PLAYING:
            return False
        self.score += points
        self._notify_score()
        return True

    def add_listener(self, listener):
        self.listeners.append(listener)

    def _notify_score(self):
        for listener in self.listeners:
            listener.on_score(self.score)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def is_playing(self) -> bool:
        return self.phase == PHASE_PLAYING

    def bullet_count(self) -> int:
        return self.world.count(BulletTag)

    def particle_count(self) -> int:
        return self.world.count(ParticleTag)

    def label_count(self) -> int:
        return self.world.count(TextLabel)
