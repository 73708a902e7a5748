"""
Player Module
==============
Player entity creation and pointer-follow smoothing.
"""

from typing import Tuple

from .ecs import World
from .components import Position, Renderable, PlayerBody, PlayerTag
from .config import GameConfig, PLAYER_COLOR


def create_player(world: World, x: float, y: float, config: GameConfig) -> int:
    """Create the player entity at (x, y)."""
    return world.create_entity(
        Position(x, y),
        PlayerBody(
            radius=config.player_radius,
            graze_radius=config.graze_radius,
            smoothing=config.smoothing,
        ),
        Renderable(char='@', color=PLAYER_COLOR, layer=10),
        PlayerTag(),
    )


def player_follow_system(world: World, target: Tuple[float, float]) -> None:
    """
    Ease the player toward the pointer target.

    Exponential smoothing: each frame closes a fixed fraction of the gap.
    No bounds are applied; the target itself decides where the player goes.
    """
    tx, ty = target
    for _, pos, body, _ in world.query(Position, PlayerBody, PlayerTag):
        pos.x += (tx - pos.x) * body.smoothing
        pos.y += (ty - pos.y) * body.smoothing
