"""
Bullet Pool
============
Edge spawning, bounds despawn and the population ramp.
"""

import logging
import random
from dataclasses import dataclass
from typing import Tuple

from .ecs import World
from .components import Position, Velocity, Renderable, BulletBody, BulletTag
from .config import GameConfig, BULLET_COLOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeSpec:
    """
    How to spawn from one screen edge.

    axis is the axis the bullet travels inward along ('x' or 'y');
    far is True for the right/bottom edge, whose inward direction is negative.
    """
    name: str
    axis: str
    far: bool

    @property
    def inward_sign(self) -> float:
        return -1.0 if self.far else 1.0


EDGES: Tuple[EdgeSpec, ...] = (
    EdgeSpec('top', 'y', far=False),
    EdgeSpec('right', 'x', far=True),
    EdgeSpec('bottom', 'y', far=True),
    EdgeSpec('left', 'x', far=False),
)


def spawn_bullet(
    world: World,
    rng: random.Random,
    width: float, height: float,
    config: GameConfig,
    edge: EdgeSpec = None,
) -> int:
    """
    Spawn a bullet just outside a random edge, heading into the arena.

    The inward speed is always positive, so every bullet has net motion
    toward the interior; the tangential drift is symmetric.
    """
    if edge is None:
        edge = rng.choice(EDGES)

    inward = rng.uniform(*config.inward_speed) * edge.inward_sign
    tangent = rng.uniform(*config.tangent_speed)

    if edge.axis == 'y':
        x = rng.uniform(0, width)
        y = height + config.spawn_margin if edge.far else -config.spawn_margin
        vx, vy = tangent, inward
    else:
        x = width + config.spawn_margin if edge.far else -config.spawn_margin
        y = rng.uniform(0, height)
        vx, vy = inward, tangent

    return world.create_entity(
        Position(x, y),
        Velocity(vx, vy),
        BulletBody(radius=config.bullet_radius),
        Renderable(char='o', color=BULLET_COLOR, layer=8),
        BulletTag(),
    )


def seed_bullets(world: World, rng: random.Random,
                 width: float, height: float, config: GameConfig):
    """Create the opening bullet population."""
    for _ in range(config.initial_bullets):
        spawn_bullet(world, rng, width, height, config)


def is_out_of_bounds(pos: Position, width: float, height: float, margin: float) -> bool:
    """True once a position leaves the arena padded by margin on every side."""
    return (
        pos.x < -margin or pos.x > width + margin or
        pos.y < -margin or pos.y > height + margin
    )


def ramp_system(world: World, rng: random.Random, frame: int,
                width: float, height: float, config: GameConfig) -> bool:
    """
    Difficulty ramp: one extra bullet every ramp_interval frames, up to the cap.

    Returns True when a bullet was added.
    """
    if frame % config.ramp_interval != 0:
        return False
    population = world.count(BulletTag)
    if population >= config.max_bullets:
        return False
    spawn_bullet(world, rng, width, height, config)
    logger.debug('Ramp spawn at frame %d, population now %d', frame, population + 1)
    return True


def retire_bullet(world: World, entity_id: int, bullet: BulletBody,
                  rng: random.Random, width: float, height: float,
                  config: GameConfig) -> int:
    """
    Deactivate and destroy a bullet, then respawn a replacement.

    Used for both bounds exits and graze consumption so the active
    population is unchanged across the swap. Returns the new bullet id.
    """
    bullet.active = False
    world.destroy_entity(entity_id)
    return spawn_bullet(world, rng, width, height, config)
