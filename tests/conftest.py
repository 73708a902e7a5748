import random

import pytest

from graze_catcher.components import (
    Position, Velocity, Renderable, BulletBody, BulletTag
)
from graze_catcher.config import GameConfig
from graze_catcher.session import GameSession
from graze_catcher.viewport import FixedViewport


class RecordingBoard:
    """Score listener that remembers every notification."""

    def __init__(self):
        self.scores = []
        self.game_overs = []

    def on_score(self, score):
        self.scores.append(score)

    def on_game_over(self, score):
        self.game_overs.append(score)


@pytest.fixture
def board():
    return RecordingBoard()


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def session(board, config):
    s = GameSession(FixedViewport(800, 600), config, random.Random(1234), listeners=[board])
    s.start()
    return s


@pytest.fixture
def big_session(board, config):
    """Arena large enough that edge bullets cannot reach the centre for ~150 frames."""
    s = GameSession(FixedViewport(4000, 3000), config, random.Random(99), listeners=[board])
    s.start()
    return s


def player_position(session):
    return session.world.get_component(session.player_id, Position)


def place_bullet(session, x, y, vx=0.0, vy=0.0):
    """Drop a bullet at an exact spot, bypassing edge spawning."""
    return session.world.create_entity(
        Position(x, y),
        Velocity(vx, vy),
        BulletBody(radius=session.config.bullet_radius),
        Renderable(char='o'),
        BulletTag(),
    )


def hold_still(session):
    """Pointer target that keeps the player where it is."""
    pos = player_position(session)
    return pos.x, pos.y
