"""
Component Definitions
======================
All components are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


# =============================================================================
# PHYSICS COMPONENTS
# =============================================================================

@dataclass
class Position:
    """World position in world units."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity:
    """Movement velocity in world units per frame."""
    x: float = 0.0
    y: float = 0.0


# =============================================================================
# RENDERING COMPONENTS
# =============================================================================

@dataclass
class Renderable:
    """Visual attributes read by the render collaborator."""
    char: str = '?'
    color: str = '#ffffff'
    layer: int = 0  # Higher layers render on top
    visible: bool = True


@dataclass
class TextLabel:
    """Floating text drawn at the entity position."""
    text: str = ''


# =============================================================================
# GAMEPLAY COMPONENTS
# =============================================================================

@dataclass
class PlayerBody:
    """Player collision radii and follow smoothing. Fixed per session."""
    radius: float = 10.0
    graze_radius: float = 50.0
    smoothing: float = 0.2


@dataclass
class BulletBody:
    """Bullet collision radius and liveness."""
    radius: float = 6.0
    active: bool = True


@dataclass
class Fade:
    """Cosmetic life in [0, 1], reduced by decay every frame."""
    life: float = 1.0
    decay: float = 0.05


# =============================================================================
# TAG COMPONENTS (empty, used for queries)
# =============================================================================

@dataclass
class PlayerTag:
    """Marks the player entity."""
    pass


@dataclass
class BulletTag:
    """Marks a bullet entity."""
    pass


@dataclass
class ParticleTag:
    """Marks a burst particle entity."""
    pass
