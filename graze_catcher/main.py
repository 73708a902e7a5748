#!/usr/bin/env python3
"""
GRAZE CATCHER - Terminal Rhythm Dodger
=======================================
Bullets pour in from every edge. On each beat a graze window opens:
touch bullets then to catch them for points. Touch one outside the
window and the run is over.

Controls:
    WASD / ARROWS  - Steer the pointer (the player eases toward it)
    SPACE          - Start
    R              - Restart after game over
    F              - Toggle FPS display
    Q/ESC          - Quit
"""

import argparse
import logging
import random
import sys
import time

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .config import GameConfig
from .controls import PointerInput
from .engine import GameRenderer
from .hud import ScoreBoard
from .render import render_frame
from .session import GameSession, PHASE_TITLE, PHASE_GAME_OVER
from .simulation import simulation_step
from .viewport import TerminalViewport, HUD_ROWS

logger = logging.getLogger(__name__)


TARGET_FPS = 60
FRAME_TIME = 1.0 / TARGET_FPS
MAX_TICKS_PER_LOOP = 4
MIN_WIDTH = 80
MIN_HEIGHT = 24


class GameApp:
    """Wires the session to the terminal collaborators."""

    def __init__(self, term: Terminal, config: GameConfig, rng: random.Random):
        self.term = term
        self.renderer = GameRenderer(term, hud_rows=HUD_ROWS)
        self.viewport = TerminalViewport(term)
        self.pointer = PointerInput()
        self.board = ScoreBoard()
        self.session = GameSession(self.viewport, config, rng, listeners=[self.board])

        self.running = True
        self.ui_frame = 0

    def begin(self):
        """Start or restart: recenter the pointer then reset the session."""
        self.pointer.center(self.viewport.width, self.viewport.height)
        if self.session.phase == PHASE_TITLE:
            self.session.start()
        else:
            self.session.restart()

    def handle_input(self):
        """Drain all pending input from the terminal."""
        key = self.term.inkey(timeout=0)
        while key:
            self.pointer.process_key(key)
            key = self.term.inkey(timeout=0)

        if self.pointer.consume_quit():
            self.running = False
            return

        if self.pointer.consume_toggle_fps():
            self.renderer.show_fps = not self.renderer.show_fps

        start = self.pointer.consume_start()
        restart = self.pointer.consume_restart()
        if self.session.phase == PHASE_TITLE and start:
            self.begin()
        elif self.session.phase == PHASE_GAME_OVER and (restart or start):
            self.begin()

    def update(self):
        """Run one fixed-timestep tick."""
        self.ui_frame += 1
        if not self.session.is_playing:
            return
        self.pointer.update(self.viewport.width, self.viewport.height)
        still_playing = simulation_step(self.session, self.pointer.target)
        if not still_playing:
            self.renderer.trigger_shake(intensity=3, frames=12)

    def render(self):
        if self.renderer.check_resize():
            logger.debug('Terminal resized to %dx%d', self.term.width, self.term.height)
            print(self.term.home + self.term.clear, end='', flush=True)
        output = render_frame(self.session, self.renderer, self.board, self.ui_frame)
        if output:
            print(output, end='', flush=True)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Graze Catcher: a terminal rhythm dodger')
    parser.add_argument('--bpm', type=float, default=130.0, help='Beats per minute (default: 130)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible run')
    parser.add_argument('--log-file', default=None, help='Write debug log to this file')
    return parser.parse_args(argv)


def setup_logging(log_file=None):
    """Log to a file when asked; the screen belongs to the renderer."""
    if log_file:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            filename=log_file,
        )
    else:
        logging.basicConfig(level=logging.WARNING)


def run(term: Terminal, app: GameApp):
    """Fixed-timestep loop: simulate at 60 Hz, render once per loop."""
    last_time = time.perf_counter()
    accumulator = 0.0
    fps_timer = 0.0
    fps_frame_count = 0

    print(term.home + term.clear, end='', flush=True)

    while app.running:
        now = time.perf_counter()
        delta = now - last_time
        last_time = now

        # Clamp delta to prevent spiral of death
        delta = min(delta, FRAME_TIME * 5)

        accumulator += delta
        fps_timer += delta

        app.handle_input()

        ticks = 0
        while accumulator >= FRAME_TIME and ticks < MAX_TICKS_PER_LOOP:
            app.update()
            accumulator -= FRAME_TIME
            ticks += 1
            fps_frame_count += 1

        app.render()

        if fps_timer >= 0.5:
            app.renderer.current_fps = fps_frame_count / fps_timer
            fps_frame_count = 0
            fps_timer = 0.0

        elapsed = time.perf_counter() - now
        sleep_time = FRAME_TIME - elapsed
        if sleep_time > 0.001:
            time.sleep(sleep_time * 0.9)


def main(argv=None):
    """Entry point. Sets up terminal and runs the 60 FPS game loop."""
    args = parse_args(argv)
    setup_logging(args.log_file)

    try:
        config = GameConfig(bpm=args.bpm)
    except ValueError as exc:
        print(f'Invalid settings: {exc}')
        sys.exit(2)

    term = Terminal()
    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        print(
            f'Terminal too small: {term.width}x{term.height}. '
            f'Minimum: {MIN_WIDTH}x{MIN_HEIGHT}'
        )
        sys.exit(1)

    rng = random.Random(args.seed)
    logger.info('Starting Graze Catcher (bpm=%s, seed=%s)', config.bpm, args.seed)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        app = GameApp(term, config, rng)
        try:
            run(term, app)
        finally:
            # Restore terminal
            print(term.normal, end='', flush=True)

    if app.board.final_score is not None:
        print(f'Final score: {app.board.final_score}  Best: {app.board.best}')


if __name__ == '__main__':
    main()
