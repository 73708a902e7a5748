"""
Simulation Step
================
Advances a playing session by exactly one frame, in a fixed order:

    beat -> ramp -> player -> bullets (move, bounds, collide) -> effects -> compact
"""

import logging
from typing import Tuple

from .bullets import ramp_system, is_out_of_bounds, retire_bullet
from .collision import CollisionOutcome, resolve_collision
from .components import Position, Velocity, BulletBody, BulletTag, PlayerBody
from .config import GRAZE_COLOR, GRAZE_TEXT
from .effects import effect_system, spawn_graze_effect
from .player import player_follow_system
from .session import GameSession

logger = logging.getLogger(__name__)


def bullet_system(session: GameSession, dt: float = 1.0) -> bool:
    """
    Move, bounds-check and collision-test every bullet once.

    Each bullet is tested right after its own move. A removed bullet is
    replaced in the same frame; replacements are not visited until the
    next frame. Returns False when a hit ended the session.
    """
    world = session.world
    config = session.config
    rng = session.rng
    width, height = session.viewport.width, session.viewport.height

    player_pos = world.get_component(session.player_id, Position)
    body = world.get_component(session.player_id, PlayerBody)
    graze_active = session.beat.is_graze_active()

    for eid, pos, vel, bullet, _ in world.query(Position, Velocity, BulletBody, BulletTag):
        pos.x += vel.x * dt
        pos.y += vel.y * dt

        if is_out_of_bounds(pos, width, height, config.despawn_margin):
            retire_bullet(world, eid, bullet, rng, width, height, config)
            continue

        outcome = resolve_collision(player_pos, body, pos, bullet, graze_active)

        if outcome is CollisionOutcome.GRAZE:
            session.grazes += 1
            session.add_score(config.graze_score)
            spawn_graze_effect(world, rng, pos.x, pos.y, GRAZE_COLOR, GRAZE_TEXT, config)
            logger.debug('Graze at (%.1f, %.1f), score %d', pos.x, pos.y, session.score)
            retire_bullet(world, eid, bullet, rng, width, height, config)

        elif outcome is CollisionOutcome.HIT:
            session.game_over()
            return False

    return True


def simulation_step(session: GameSession, target: Tuple[float, float], dt: float = 1.0) -> bool:
    """
    Run one frame of the graze loop.

    A no-op outside the playing phase. Returns True while the session
    is still playing after the step.
    """
    if not session.is_playing:
        return False

    session.frame += 1
    session.beat.tick()

    ramp_system(
        session.world, session.rng, session.frame,
        session.viewport.width, session.viewport.height, session.config
    )

    player_follow_system(session.world, target)

    bullet_system(session, dt)

    effect_system(session.world, dt)

    session.world.process_dead_entities()

    return session.is_playing
