"""
Effect System
==============
Cosmetic particle bursts and floating text labels.

Effects never influence gameplay: they move, fade and disappear.
"""

import random

from .ecs import World
from .components import (
    Position, Velocity, Renderable, Fade, TextLabel, ParticleTag
)
from .config import GameConfig
from .systems import movement_system, fade_system


def spawn_particle(
    world: World,
    x: float, y: float,
    vx: float, vy: float,
    color: str,
    decay: float = 0.05,
    char: str = '.',
) -> int:
    """Spawn a single particle entity."""
    return world.create_entity(
        Position(x, y),
        Velocity(vx, vy),
        Renderable(char=char, color=color, layer=5),
        Fade(life=1.0, decay=decay),
        ParticleTag(),
    )


def spawn_burst(
    world: World,
    rng: random.Random,
    x: float, y: float,
    color: str,
    count: int = 10,
    speed: float = 5.0,
    decay: float = 0.05,
):
    """Spawn count particles at (x, y), each with an independent random velocity."""
    for _ in range(count):
        spawn_particle(
            world, x, y,
            vx=rng.uniform(-speed, speed),
            vy=rng.uniform(-speed, speed),
            color=color,
            decay=decay,
        )


def spawn_label(
    world: World,
    x: float, y: float,
    text: str,
    color: str,
    rise: float = 1.0,
    decay: float = 0.02,
) -> int:
    """Spawn a text label that drifts upward and fades out."""
    return world.create_entity(
        Position(x, y),
        Velocity(0.0, -rise),
        Renderable(char=text[:1], color=color, layer=12),
        Fade(life=1.0, decay=decay),
        TextLabel(text),
    )


def spawn_graze_effect(world: World, rng: random.Random, x: float, y: float,
                       color: str, text: str, config: GameConfig):
    """Burst plus label for a successful graze."""
    spawn_burst(
        world, rng, x, y, color,
        count=config.burst_count,
        speed=config.particle_speed,
        decay=config.particle_decay,
    )
    spawn_label(
        world, x, y, text, color,
        rise=config.label_rise,
        decay=config.label_decay,
    )


def effect_system(world: World, dt: float = 1.0):
    """Move every fading effect, then decay it."""
    movement_system(world, Fade, dt=dt)
    fade_system(world)
