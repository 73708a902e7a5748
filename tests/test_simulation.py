import pytest

from graze_catcher.components import Position, TextLabel
from graze_catcher.session import PHASE_GAME_OVER, PHASE_PLAYING, PHASE_TITLE
from graze_catcher.simulation import simulation_step

from conftest import place_bullet, player_position, hold_still


def close_graze_window(session):
    session.beat.graze_active = False
    session.beat.graze_remaining = 0


def test_graze_catch_scores_and_respawns(session, board):
    session.beat.force_graze()
    pos = player_position(session)
    eid = place_bullet(session, pos.x, pos.y)
    pool_before = session.bullet_count()

    simulation_step(session, hold_still(session))

    assert session.phase == PHASE_PLAYING
    assert session.score == 100
    assert not session.world.is_alive(eid)
    assert session.bullet_count() == pool_before
    assert session.particle_count() == 10
    assert session.label_count() == 1
    label = next(lbl for _, lbl in session.world.query(TextLabel))
    assert label.text == 'GRAZE!'
    assert board.scores == [0, 100]


def test_each_consumed_bullet_scores_once(session):
    session.beat.force_graze()
    pos = player_position(session)
    place_bullet(session, pos.x, pos.y)
    place_bullet(session, pos.x + 20, pos.y)

    simulation_step(session, hold_still(session))
    assert session.score == 200
    assert session.grazes == 2

    # Replacements spawn at the edges, nowhere near the player
    simulation_step(session, hold_still(session))
    assert session.score == 200


def test_core_hit_outside_graze_ends_session(session, board):
    pos = player_position(session)
    radius_sum = session.config.player_radius + session.config.bullet_radius
    place_bullet(session, pos.x + radius_sum - 1, pos.y)

    playing = simulation_step(session, hold_still(session))

    assert playing is False
    assert session.phase == PHASE_GAME_OVER
    assert session.score == 0
    assert board.game_overs == [0]


def test_touching_exactly_at_radius_sum_is_safe(session):
    pos = player_position(session)
    radius_sum = session.config.player_radius + session.config.bullet_radius
    place_bullet(session, pos.x + radius_sum, pos.y)

    simulation_step(session, hold_still(session))

    assert session.phase == PHASE_PLAYING


def test_hit_stops_processing_later_bullets(session):
    pos = player_position(session)
    place_bullet(session, pos.x, pos.y)
    later = place_bullet(session, 100.0, 100.0, vx=3.0, vy=3.0)

    simulation_step(session, hold_still(session))

    assert session.phase == PHASE_GAME_OVER
    later_pos = session.world.get_component(later, Position)
    assert (later_pos.x, later_pos.y) == (100.0, 100.0)


def test_step_is_noop_outside_playing(session):
    pos = player_position(session)
    place_bullet(session, pos.x, pos.y)
    simulation_step(session, hold_still(session))
    assert session.phase == PHASE_GAME_OVER

    frame = session.frame
    bullets = {eid: (p.x, p.y) for eid, p in session.world.query(Position)}
    assert simulation_step(session, (0.0, 0.0)) is False
    assert session.frame == frame
    assert {eid: (p.x, p.y) for eid, p in session.world.query(Position)} == bullets


def test_title_phase_is_passive(board, config):
    import random
    from graze_catcher.session import GameSession
    from graze_catcher.viewport import FixedViewport

    session = GameSession(FixedViewport(), config, random.Random(0), listeners=[board])
    assert session.phase == PHASE_TITLE
    assert simulation_step(session, (10.0, 10.0)) is False
    assert session.frame == 0
    assert session.add_score(100) is False
    assert session.score == 0
    assert board.scores == []


def test_player_eases_toward_target(session):
    pos = player_position(session)
    start_x, start_y = pos.x, pos.y

    simulation_step(session, (start_x + 100, start_y - 50))

    assert pos.x == pytest.approx(start_x + 20)
    assert pos.y == pytest.approx(start_y - 10)

    simulation_step(session, (start_x + 100, start_y - 50))
    assert pos.x == pytest.approx(start_x + 36)


def test_restart_resets_everything(session, board):
    session.beat.force_graze()
    pos = player_position(session)
    place_bullet(session, pos.x, pos.y)
    simulation_step(session, hold_still(session))
    assert session.score == 100

    close_graze_window(session)
    place_bullet(session, pos.x, pos.y)
    simulation_step(session, hold_still(session))
    assert session.phase == PHASE_GAME_OVER
    assert board.game_overs == [100]

    session.restart()

    assert session.phase == PHASE_PLAYING
    assert session.score == 0
    assert session.frame == 0
    assert session.grazes == 0
    assert session.bullet_count() == session.config.initial_bullets
    assert session.particle_count() == 0
    assert session.label_count() == 0
    assert session.beat.timer == 0
    assert not session.beat.is_graze_active()
    assert board.scores[-1] == 0
    new_pos = player_position(session)
    assert (new_pos.x, new_pos.y) == (400.0, 300.0)


def test_effects_fade_while_playing(big_session):
    big_session.beat.force_graze()
    pos = player_position(big_session)
    place_bullet(big_session, pos.x, pos.y)

    simulation_step(big_session, hold_still(big_session))
    assert big_session.particle_count() == 10

    for _ in range(25):
        simulation_step(big_session, hold_still(big_session))
    assert big_session.particle_count() == 0
    assert big_session.label_count() == 1

    for _ in range(30):
        simulation_step(big_session, hold_still(big_session))
    assert big_session.label_count() == 0
    assert big_session.is_playing
