"""Screens of the Game of Life console: header, sidebar, board, footer and end screens."""

from __future__ import annotations

from enum import IntEnum

from lifeboard.game import Life
from lifeboard.screen import Screen


class Color(IntEnum):
    """Palette of the interface, as 0xRRGGBB values."""

    BACKGROUND = 0x1A1A2E
    PRIMARY = 0x16213E
    SECONDARY = 0x0F3460
    ACCENT = 0x533483
    HIGHLIGHT = 0xE94560
    SUCCESS = 0x0FFF50
    WARNING = 0xFFA500
    TEXT_PRIMARY = 0xFFFFFF
    TEXT_SECONDARY = 0xBBBBBB
    CELL_ALIVE = 0x00FF88
    CELL_DEAD = 0x2A2A3E
    GRID = 0x444466
    CURSOR = 0xFF6B6B


HEADER_HEIGHT = 80
SIDEBAR_WIDTH = 200
FOOTER_HEIGHT = 40
GRID_SIZE = 400
GRID_CELLS = 10
CELL_SIZE = GRID_SIZE // GRID_CELLS

GAME_AREA_X = 20
GAME_AREA_Y = 90


def _game_area(screen: Screen) -> tuple[int, int, int, int]:
    return GAME_AREA_X, GAME_AREA_Y, screen.width - 230, screen.height - 150


def grid_origin(screen: Screen) -> tuple[int, int]:
    """Top-left pixel of the board grid on the given screen."""
    area_x, area_y, area_w, area_h = _game_area(screen)
    return area_x + (area_w - GRID_SIZE) // 2, area_y + (area_h - GRID_SIZE) // 2


def draw_panic(screen: Screen) -> None:
    """Draw the red gradient panic screen with its error box."""
    screen.clear(Color.HIGHLIGHT)
    for y in range(screen.height):
        # A one-pixel horizontal line across the full width.
        screen.draw_rect(0, y, screen.width + 1, 1, Color.HIGHLIGHT - y * 0x100)

    box_w, box_h = 400, 200
    box_x = screen.width // 2 - box_w // 2
    box_y = screen.height // 2 - box_h // 2

    screen.draw_rounded_rect(box_x, box_y, box_w, box_h, 20, Color.PRIMARY)
    screen.draw_empty_rect(box_x + 5, box_y + 5, box_w - 10, box_h - 10, Color.TEXT_PRIMARY)

    screen.draw_string(box_x + 50, box_y + 50, "SYSTEM PANIC", Color.TEXT_PRIMARY, 2, 25, True)
    screen.draw_string(
        box_x + 60, box_y + 100, "CRITICAL ERROR OCCURED", Color.TEXT_SECONDARY, 1, 18, False
    )
    screen.draw_string(box_x + 80, box_y + 140, "SYSTEM HALTED", Color.WARNING, 1, 18, False)


def draw_header(screen: Screen) -> None:
    """Draw the title bar with its shadowed title and version badge."""
    screen.draw_rounded_rect(0, 0, screen.width, HEADER_HEIGHT, 0, Color.PRIMARY)
    screen.draw_line(0, 75, screen.width, 75, Color.ACCENT, 5)

    screen.draw_string(32, 22, "GAME OS LIFE", Color.TEXT_SECONDARY, 2, 30, True)
    screen.draw_string(30, 20, "GAME OS LIFE", Color.TEXT_PRIMARY, 2, 30, True)

    badge_x = screen.width - 180
    screen.draw_rounded_rect(badge_x, 20, 150, 35, 17, Color.ACCENT)
    screen.draw_string(badge_x + 15, 30, "VER TWO", Color.TEXT_PRIMARY, 1, 15, True)


_CONTROLS = (
    ("ZQSD", Color.SUCCESS, "MOVE"),
    ("E", Color.SUCCESS, "TOGGLE"),
    ("P", Color.SUCCESS, "PAUSE"),
    ("X", Color.HIGHLIGHT, "EXIT"),
)


def draw_sidebar(screen: Screen, paused: bool) -> None:
    """Draw the status, controls and performance panels on the right."""
    sidebar_x = screen.width - SIDEBAR_WIDTH

    screen.draw_rounded_rect(
        sidebar_x, 90, SIDEBAR_WIDTH - 10, screen.height - 100, 15, Color.SECONDARY
    )

    screen.draw_rounded_rect(sidebar_x + 10, 110, SIDEBAR_WIDTH - 30, 100, 10, Color.PRIMARY)
    screen.draw_string(sidebar_x + 20, 120, "STATUS", Color.TEXT_PRIMARY, 1, 15, True)

    if paused:
        screen.draw_rounded_rect(sidebar_x + 20, 160, 100, 35, 12, Color.WARNING)
        screen.draw_string(sidebar_x + 25, 148, "PAUSED", Color.TEXT_PRIMARY, 1, 12, False)
    else:
        screen.draw_rounded_rect(sidebar_x + 20, 160, 100, 35, 12, Color.SUCCESS)
        screen.draw_string(sidebar_x + 25, 168, "RUNNING", Color.TEXT_PRIMARY, 1, 12, False)

    screen.draw_rounded_rect(sidebar_x + 10, 220, SIDEBAR_WIDTH - 30, 160, 10, Color.PRIMARY)
    screen.draw_string(sidebar_x + 20, 230, "CONTROLS", Color.TEXT_PRIMARY, 1, 15, True)

    for row, (key, key_color, action) in enumerate(_CONTROLS):
        y = 260 + row * 30
        screen.draw_string(sidebar_x + 20, y, key, key_color, 1, 15, True)
        screen.draw_string(sidebar_x + 90, y, action, Color.TEXT_SECONDARY, 1, 15, False)

    screen.draw_rounded_rect(sidebar_x + 10, 400, SIDEBAR_WIDTH - 30, 80, 10, Color.PRIMARY)
    screen.draw_string(sidebar_x + 20, 410, "PERFORMANCE", Color.TEXT_PRIMARY, 1, 15, True)
    screen.draw_string(sidebar_x + 20, 445, "MEM OK", Color.SUCCESS, 1, 15, False)


def draw_game_area(
    screen: Screen, life: Life, paused: bool, x_selected: int, y_selected: int
) -> None:
    """Draw the board grid, its live cells and, while paused, the cursor."""
    area_x, area_y, area_w, area_h = _game_area(screen)
    screen.draw_rounded_rect(area_x, area_y, area_w, area_h, 15, Color.SECONDARY)

    grid_x, grid_y = grid_origin(screen)
    screen.draw_rounded_rect(
        grid_x - 5, grid_y - 5, GRID_SIZE + 10, GRID_SIZE + 10, 10, Color.PRIMARY
    )

    for i in range(GRID_CELLS + 1):
        x = grid_x + i * CELL_SIZE
        y = grid_y + i * CELL_SIZE
        thickness = 2 if i in (0, GRID_CELLS) else 1
        screen.draw_line(grid_x, y, grid_x + GRID_SIZE, y, Color.GRID, thickness)
        screen.draw_line(x, grid_y, x, grid_y + GRID_SIZE, Color.GRID, thickness)

    for index, value in enumerate(life.cells):
        row, col = divmod(index, GRID_CELLS)
        cell_x = grid_x + col * CELL_SIZE
        cell_y = grid_y + row * CELL_SIZE

        if value == 1:
            screen.draw_rounded_rect(
                cell_x + 3, cell_y + 3, CELL_SIZE - 6, CELL_SIZE - 6, 6, Color.CELL_ALIVE
            )

        if paused and col == x_selected and row == y_selected:
            screen.draw_empty_rect(
                cell_x + 1, cell_y + 1, CELL_SIZE - 2, CELL_SIZE - 2, Color.CURSOR
            )
            screen.draw_empty_rect(
                cell_x + 2, cell_y + 2, CELL_SIZE - 4, CELL_SIZE - 4, Color.CURSOR
            )


def draw_footer(screen: Screen) -> None:
    """Draw the bottom bar with the title and exit hint."""
    footer_y = screen.height - FOOTER_HEIGHT
    screen.draw_line(0, footer_y, screen.width, footer_y, Color.ACCENT, 2)

    screen.draw_string(
        20, footer_y + 10, "CONWAY S GAME OF LIFE OS EDITION", Color.TEXT_SECONDARY, 1, 18, False
    )
    screen.draw_string(screen.width - 190, footer_y + 5, "X", Color.HIGHLIGHT, 1, 18, True)
    screen.draw_string(
        screen.width - 150, footer_y + 5, "TO EXIT", Color.TEXT_SECONDARY, 1, 18, False
    )


def draw_exit_screen(screen: Screen) -> None:
    """Draw the farewell box shown when the session ends."""
    screen.clear(Color.BACKGROUND)

    box_w, box_h = 600, 300
    box_x = screen.width // 2 - box_w // 2
    box_y = screen.height // 2 - box_h // 2

    screen.draw_rounded_rect(box_x, box_y, box_w, box_h, 25, Color.PRIMARY)
    screen.draw_empty_rect(box_x + 5, box_y + 5, box_w - 10, box_h - 10, Color.ACCENT)

    screen.draw_string(box_x + 150, box_y + 50, "THANK YOU", Color.TEXT_PRIMARY, 2, 25, True)
    screen.draw_string(
        box_x + 100, box_y + 100, "FOR USING GAME OF LIFE OS", Color.TEXT_SECONDARY, 1, 15, False
    )
    screen.draw_string(box_x + 200, box_y + 150, "GOODBYE", Color.ACCENT, 2, 20, True)

    for cx, cy in (
        (box_x + 50, box_y + 50),
        (box_x + box_w - 50, box_y + 50),
        (box_x + 50, box_y + box_h - 50),
        (box_x + box_w - 50, box_y + box_h - 50),
    ):
        screen.draw_circle(cx, cy, 20, Color.SUCCESS)