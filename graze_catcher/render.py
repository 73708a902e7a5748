"""
Render Collaborator
====================
Draws a session onto the terminal renderer. Read-only: nothing here
writes back into simulation state.
"""

import math
import random

from .components import (
    Position, Renderable, Fade, TextLabel, ParticleTag,
    BulletBody, BulletTag, PlayerBody, PlayerTag
)
from .config import CELL_WIDTH, CELL_HEIGHT
from .engine import (
    GameRenderer, dim, NEON_PINK, NEON_CYAN, NEON_GREEN, NEON_RED,
    NEON_YELLOW, GRAY_MED, GRAY_DARK, GRAY_DARKER, WHITE
)
from .hud import ScoreBoard, render_hud
from .session import GameSession, PHASE_TITLE, PHASE_GAME_OVER

TITLE_ART = [
    r"  ___ ___    _   _______   ",
    r" / __| _ \  /_\ |_  / __|  ",
    r"| (_ |   / / _ \ / /| _|   ",
    r" \___|_|_\/_/ \_\/___|___| ",
]

GAME_OVER_ART = [
    ' ___   _   __  __ ___    _____   _____ ___ ',
    '/ __| /_\\ |  \\/  | __|  / _ \\ \\ / / __| _ \\',
    '| (_ |/ _ \\| |\\/| | _|  | (_) \\ V /| _||   /',
    ' \\___/_/ \\_\\_|  |_|___|  \\___/ \\_/ |___|_|_\\',
]


def to_cell(x: float, y: float):
    """World units -> fractional terminal cell coordinates."""
    return x / CELL_WIDTH, y / CELL_HEIGHT


def draw_ring(renderer: GameRenderer, x: float, y: float, radius: float, color: str):
    """Outline a world-space circle with braille dots."""
    # One braille dot is CELL_WIDTH / 2 world units wide
    steps = max(12, int(2 * math.pi * radius / (CELL_WIDTH / 2)))
    for i in range(steps):
        angle = 2 * math.pi * i / steps
        cx, cy = to_cell(x + math.cos(angle) * radius, y + math.sin(angle) * radius)
        renderer.put_braille_pixel(cx, cy, color)


def render_player(session: GameSession, renderer: GameRenderer):
    """Player core plus the graze ring (active) or the beat ring (charging)."""
    for _, pos, body, rend, _ in session.world.query(
        Position, PlayerBody, Renderable, PlayerTag
    ):
        if session.beat.is_graze_active():
            draw_ring(renderer, pos.x, pos.y, body.graze_radius, NEON_PINK)
        else:
            progress = session.beat.beat_progress()
            ring = max(body.radius, body.graze_radius * (1 - progress))
            draw_ring(renderer, pos.x, pos.y, ring, dim(WHITE, 0.5 * progress))

        cx, cy = to_cell(pos.x, pos.y)
        renderer.put(int(cx), int(cy), rend.char, rend.color)


def render_bullets(session: GameSession, renderer: GameRenderer):
    for _, pos, rend, bullet, _ in session.world.query(
        Position, Renderable, BulletBody, BulletTag
    ):
        if not bullet.active or not rend.visible:
            continue
        cx, cy = to_cell(pos.x, pos.y)
        renderer.put(int(cx), int(cy), rend.char, rend.color)


def render_particles(session: GameSession, renderer: GameRenderer):
    """Particles are braille dots dimmed by remaining life."""
    for _, pos, rend, fade, _ in session.world.query(
        Position, Renderable, Fade, ParticleTag
    ):
        if fade.life <= 0:
            continue
        cx, cy = to_cell(pos.x, pos.y)
        renderer.put_braille_pixel(cx, cy, dim(rend.color, fade.life))


def render_labels(session: GameSession, renderer: GameRenderer):
    for _, pos, rend, fade, label in session.world.query(
        Position, Renderable, Fade, TextLabel
    ):
        if fade.life <= 0:
            continue
        cx, cy = to_cell(pos.x, pos.y)
        x = int(cx) - len(label.text) // 2
        renderer.put_string(x, int(cy), label.text, dim(rend.color, fade.life))


def render_frame(session: GameSession, renderer: GameRenderer, board: ScoreBoard,
                 frame: int = 0) -> str:
    """Draw one frame and return the terminal output for it."""
    renderer.begin_frame()

    if session.phase == PHASE_TITLE:
        render_title_screen(renderer, frame)
    elif session.phase == PHASE_GAME_OVER:
        render_game_over_screen(renderer, board, frame)
    else:
        border = NEON_PINK if session.beat.is_graze_active() else GRAY_DARK
        renderer.draw_box(0, 0, renderer.width, renderer.game_height, border, '#')
        render_bullets(session, renderer)
        render_player(session, renderer)
        render_labels(session, renderer)
        render_particles(session, renderer)

    render_hud(renderer, session, board)
    board.tick()

    return renderer.end_frame()


def render_title_screen(renderer: GameRenderer, frame: int):
    width = renderer.width
    height = renderer.game_height

    art_y = height // 2 - 5
    for i, line in enumerate(TITLE_ART):
        x = width // 2 - len(line) // 2
        color = NEON_PINK if i % 2 == 0 else NEON_CYAN
        renderer.buffer.put_string(max(0, x), art_y + i, line, color)

    sub = 'CATCH BULLETS ON THE BEAT. DODGE THEM OFF IT.'
    renderer.buffer.put_string(width // 2 - len(sub) // 2, art_y + len(TITLE_ART) + 1, sub, GRAY_MED)

    # Blinking prompt
    if (frame // 30) % 2 == 0:
        prompt = '[ PRESS SPACE TO START ]'
        renderer.buffer.put_string(width // 2 - len(prompt) // 2,
                                   art_y + len(TITLE_ART) + 4, prompt, NEON_GREEN)

    controls = [
        'WASD / ARROWS - Steer the pointer',
        'Pink ring = graze window: touch bullets for +100',
        'Q/ESC - Quit     F - Toggle FPS',
    ]
    cy = art_y + len(TITLE_ART) + 6
    for i, line in enumerate(controls):
        renderer.buffer.put_string(width // 2 - len(line) // 2, cy + i, line, GRAY_DARK)

    renderer.draw_box(0, 0, width, height, GRAY_DARKER, '.', with_shake=False)


def render_game_over_screen(renderer: GameRenderer, board: ScoreBoard, frame: int):
    width = renderer.width
    height = renderer.game_height

    # Static noise background
    for _ in range(int(width * height * 0.02)):
        nx = random.randint(0, width - 1)
        ny = random.randint(0, height - 1)
        renderer.buffer.put(nx, ny, random.choice(['.', '*', '~']),
                            random.choice([GRAY_DARKER, GRAY_DARK]))

    art_y = height // 2 - 6
    for i, line in enumerate(GAME_OVER_ART):
        x = width // 2 - len(line) // 2
        renderer.buffer.put_string(max(0, x), art_y + i, line, NEON_RED)

    final = board.final_score if board.final_score is not None else board.score
    stats_y = art_y + len(GAME_OVER_ART) + 2
    for i, line in enumerate((f'FINAL SCORE: {final}', f'BEST: {board.best}')):
        renderer.buffer.put_string(width // 2 - len(line) // 2, stats_y + i, line, NEON_YELLOW)

    if (frame // 30) % 2 == 0:
        restart = '[ R - RESTART ]    [ Q - QUIT ]'
        renderer.buffer.put_string(width // 2 - len(restart) // 2, stats_y + 4, restart, NEON_CYAN)
