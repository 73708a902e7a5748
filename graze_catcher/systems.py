"""
ECS Systems
============
Shared per-frame systems. Each system queries the World for entities
with the components it needs and updates them.
"""

import math

from .ecs import World
from .components import Position, Velocity, Fade


def movement_system(world: World, *component_types, dt: float = 1.0):
    """
    Integrate position from velocity. Linear motion only.

    Extra component types narrow the query, e.g. movement_system(world,
    Fade) moves only fading effects.
    """
    for _, pos, vel, *_ in world.query(Position, Velocity, *component_types):
        pos.x += vel.x * dt
        pos.y += vel.y * dt


def fade_system(world: World):
    """Decay cosmetic life and destroy faded-out entities."""
    for entity_id, fade in world.query(Fade):
        fade.life -= fade.decay
        if fade.life <= 0:
            world.destroy_entity(entity_id)


def get_distance(pos1: Position, pos2: Position) -> float:
    """Euclidean distance between two positions."""
    dx = pos2.x - pos1.x
    dy = pos2.y - pos1.y
    return math.sqrt(dx * dx + dy * dy)
