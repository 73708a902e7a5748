"""
HUD / Score Display
====================
Score listener plus the bottom three HUD rows.
"""

from .session import GameSession
from .engine import (
    GameRenderer, NEON_PINK, NEON_CYAN, NEON_YELLOW,
    GRAY_MED, GRAY_DARK, GRAY_DARKER, WHITE
)


class ScoreBoard:
    """
    Score display collaborator.

    Receives score notifications from the session; the HUD draws from
    here rather than reading session.score directly.
    """

    FLASH_FRAMES = 12

    def __init__(self):
        self.score = 0
        self.best = 0
        self.final_score = None
        self.flash_timer = 0

    def on_score(self, score: int):
        if score > self.score:
            self.flash_timer = self.FLASH_FRAMES
        if score == 0:
            self.final_score = None
        self.score = score
        self.best = max(self.best, score)

    def on_game_over(self, score: int):
        self.final_score = score
        self.best = max(self.best, score)

    def tick(self):
        """Advance the flash timer (once per rendered frame)."""
        if self.flash_timer > 0:
            self.flash_timer -= 1


def render_hud(renderer: GameRenderer, session: GameSession, board: ScoreBoard):
    """Render the HUD in the bottom 3 rows."""
    ui_y = renderer.game_height
    width = renderer.width

    sep = '=' * width
    renderer.buffer.put_string(0, ui_y, sep, GRAY_DARK)
    renderer.buffer.put_string(2, ui_y, ' GRAZE CATCHER ', NEON_PINK)

    status = f' BULLETS:{session.bullet_count()}  BEST:{board.best} '
    renderer.buffer.put_string(width - len(status) - 1, ui_y, status, NEON_YELLOW)

    # Row 1: score, beat meter, graze indicator
    row1_y = ui_y + 1
    score_color = WHITE if board.flash_timer > 0 else NEON_CYAN
    renderer.buffer.put_string(2, row1_y, 'SCORE:', GRAY_MED)
    renderer.buffer.put_string(9, row1_y, f'{board.score:>7}', score_color)

    bar_width = 20
    if session.beat.is_graze_active():
        bar = '#' * bar_width
        color = NEON_PINK
        label = ' GRAZE '
    else:
        filled = int(session.beat.beat_progress() * bar_width)
        bar = '|' * filled + '.' * (bar_width - filled)
        color = GRAY_MED
        label = '       '
    beat_x = max(20, width // 2 - 14)
    renderer.buffer.put_string(beat_x, row1_y, 'BEAT:', GRAY_MED)
    renderer.buffer.put_string(beat_x + 6, row1_y, f'[{bar}]', color)
    renderer.buffer.put_string(beat_x + 8 + bar_width, row1_y, label, NEON_PINK)

    # Row 2: controls
    controls = 'WASD/ARROWS:Move  R:Restart  F:FPS  Q:Quit'
    renderer.buffer.put_string(2, ui_y + 2, controls, GRAY_DARKER)

    if renderer.show_fps:
        fps_text = f'FPS:{renderer.current_fps:.0f}'
        renderer.buffer.put_string(width - len(fps_text) - 2, 0, fps_text, GRAY_MED)
