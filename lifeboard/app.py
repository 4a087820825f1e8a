"""Interactive Game of Life session and its command-line driver."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from lifeboard.game import MAP_SIZE, Life
from lifeboard.screen import Screen
from lifeboard.ui import (
    Color,
    draw_exit_screen,
    draw_footer,
    draw_game_area,
    draw_header,
    draw_sidebar,
)

RUNNING_DELAY_MS = 500
PAUSED_DELAY_MS = 300
EXIT_DELAY_MS = 3000


class Session:
    """State of one run: the board, pause flag, cursor and whether it has ended."""

    def __init__(self, life: Life | None = None) -> None:
        self.life = Life() if life is None else life
        self.paused = False
        self.x_selected = 0
        self.y_selected = 0
        self.finished = False

    def handle_key(self, key: str) -> None:
        """Apply one keystroke; keys without a binding are ignored."""
        if self.finished:
            return
        if key == "z":
            self.y_selected = max(self.y_selected - 1, 0)
        elif key == "s":
            self.y_selected = min(self.y_selected + 1, MAP_SIZE - 1)
        elif key == "q":
            self.x_selected = max(self.x_selected - 1, 0)
        elif key == "d":
            self.x_selected = min(self.x_selected + 1, MAP_SIZE - 1)
        elif key == "e":
            if self.paused:
                self.life.toggle(self.x_selected, self.y_selected)
        elif key == "p":
            self.paused = not self.paused
        elif key == "x":
            self.finished = True

    def render(self, screen: Screen) -> None:
        """Draw the current frame; a running board then advances one generation."""
        if self.finished:
            draw_exit_screen(screen)
            return
        screen.clear(Color.BACKGROUND)
        draw_header(screen)
        draw_sidebar(screen, self.paused)
        draw_game_area(screen, self.life, self.paused, self.x_selected, self.y_selected)
        draw_footer(screen)
        if not self.paused:
            self.life.step()

    def delay_ms(self) -> int:
        """Milliseconds to wait before the next frame."""
        if self.finished:
            return EXIT_DELAY_MS
        return PAUSED_DELAY_MS if self.paused else RUNNING_DELAY_MS


def _board_text(life: Life) -> str:
    return "\n".join(
        "".join("#" if life.alive(x, y) else "." for x in range(MAP_SIZE))
        for y in range(MAP_SIZE)
    )


def main(argv: list[str] | None = None) -> int:
    """Play a session from a string of keystrokes, one per frame."""
    parser = argparse.ArgumentParser(
        prog="lifeboard",
        description="Run the Game of Life console, feeding one keystroke per frame.",
    )
    parser.add_argument(
        "keys",
        nargs="?",
        default="",
        help="keystrokes (z/q/s/d move, e toggle, p pause, x exit; others idle)",
    )
    parser.add_argument("-o", "--output", type=Path, help="write the last frame as a PPM image")
    parser.add_argument(
        "--realtime", action="store_true", help="wait between frames as the console does"
    )
    args = parser.parse_args(argv)

    session = Session()
    screen = Screen()
    for key in args.keys:
        session.render(screen)
        session.handle_key(key)
        if session.finished:
            session.render(screen)
        if args.realtime:
            time.sleep(session.delay_ms() / 1000)
        if session.finished:
            break

    if args.output is not None:
        args.output.write_bytes(screen.to_ppm())
    sys.stdout.write(_board_text(session.life) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())