"""
Collision Resolver
===================
Mode-dependent player/bullet contact test.
"""

from enum import Enum, auto

from .components import Position, PlayerBody, BulletBody
from .systems import get_distance


class CollisionOutcome(Enum):
    """Result of testing one bullet against the player."""
    NONE = auto()
    GRAZE = auto()  # Caught inside the graze radius while graze mode is on
    HIT = auto()    # Touched the core outside graze mode


def resolve_collision(
    player_pos: Position,
    body: PlayerBody,
    bullet_pos: Position,
    bullet: BulletBody,
    graze_active: bool,
) -> CollisionOutcome:
    """
    Test a bullet against the player.

    Graze mode swaps the core radius for the graze radius and turns
    contact into a catch. Both tests are strict: touching exactly at the
    radius sum is not contact.
    """
    if not bullet.active:
        return CollisionOutcome.NONE

    dist = get_distance(player_pos, bullet_pos)

    if graze_active:
        if dist < body.graze_radius + bullet.radius:
            return CollisionOutcome.GRAZE
    elif dist < body.radius + bullet.radius:
        return CollisionOutcome.HIT

    return CollisionOutcome.NONE
