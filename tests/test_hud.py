from graze_catcher.engine import BrailleCanvas, dim, hex_to_rgb
from graze_catcher.hud import ScoreBoard
from graze_catcher.simulation import simulation_step

from conftest import place_bullet, player_position, hold_still


def test_scoreboard_follows_session(session):
    board = ScoreBoard()
    session.add_listener(board)

    session.beat.force_graze()
    pos = player_position(session)
    place_bullet(session, pos.x, pos.y)
    simulation_step(session, hold_still(session))

    assert board.score == 100
    assert board.flash_timer == ScoreBoard.FLASH_FRAMES

    session.game_over()
    assert board.final_score == 100

    session.restart()
    assert board.score == 0
    assert board.best == 100
    assert board.final_score is None


def test_flash_timer_runs_down():
    board = ScoreBoard()
    board.on_score(100)
    for _ in range(ScoreBoard.FLASH_FRAMES + 5):
        board.tick()
    assert board.flash_timer == 0


def test_color_helpers():
    assert hex_to_rgb('#ff5080') == (255, 80, 128)
    assert dim('#ff5080', 1.0) == '#ff5080'
    assert dim('#ff5080', 0.5) == '#7f2840'
    assert dim('#ffffff', -1.0) == '#000000'


def test_braille_dots_share_a_cell():
    canvas = BrailleCanvas(4, 2)
    canvas.set_pixel(0, 0)
    canvas.set_pixel(1, 3)
    char, _ = canvas.get_char(0, 0)
    assert char == chr(0x2800 + 0x01 + 0x80)
    assert canvas.get_char(1, 1) == ('', '#ffffff')

    # Off-canvas pixels are ignored
    canvas.set_pixel(100, 100)
