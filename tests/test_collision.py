import pytest

from graze_catcher.collision import CollisionOutcome, resolve_collision
from graze_catcher.components import Position, PlayerBody, BulletBody

PLAYER = Position(400.0, 300.0)
BODY = PlayerBody(radius=10.0, graze_radius=50.0)


def outcome_at(distance, graze_active, active=True):
    bullet = BulletBody(radius=6.0, active=active)
    return resolve_collision(PLAYER, BODY, Position(400.0 + distance, 300.0), bullet, graze_active)


@pytest.mark.parametrize("distance, graze_active, expected", [
    (0.0, False, CollisionOutcome.HIT),
    (15.0, False, CollisionOutcome.HIT),
    (16.0 - 1e-9, False, CollisionOutcome.HIT),
    (16.0, False, CollisionOutcome.NONE),
    (40.0, False, CollisionOutcome.NONE),
    (0.0, True, CollisionOutcome.GRAZE),
    (15.0, True, CollisionOutcome.GRAZE),
    (55.9, True, CollisionOutcome.GRAZE),
    (56.0, True, CollisionOutcome.NONE),
    (80.0, True, CollisionOutcome.NONE),
])
def test_mode_dependent_contact(distance, graze_active, expected):
    assert outcome_at(distance, graze_active) is expected


def test_diagonal_distance_is_euclidean():
    bullet = BulletBody(radius=6.0)
    # 3-4-5 triangle scaled: distance exactly 20
    far = resolve_collision(PLAYER, BODY, Position(412.0, 316.0), bullet, False)
    assert far is CollisionOutcome.NONE
    near = resolve_collision(PLAYER, BODY, Position(409.0, 312.0), bullet, False)
    assert near is CollisionOutcome.HIT


def test_inactive_bullet_never_collides():
    assert outcome_at(0.0, False, active=False) is CollisionOutcome.NONE
    assert outcome_at(0.0, True, active=False) is CollisionOutcome.NONE
