import pytest

from lifeboard import ui
from lifeboard.game import Life
from lifeboard.screen import Screen, swap_red_blue
from lifeboard.ui import Color


@pytest.fixture
def screen():
    return Screen()


def _cell_centre(screen, col, row):
    grid_x, grid_y = ui.grid_origin(screen)
    half = ui.CELL_SIZE // 2
    return grid_x + col * ui.CELL_SIZE + half, grid_y + row * ui.CELL_SIZE + half


def test_palette_values_reach_the_screen(screen):
    ui.draw_exit_screen(screen)
    assert screen.pixel(0, 0) == 0x1A1A2E

    other = Screen()
    ui.draw_game_area(other, Life(), False, 0, 0)
    # The initial board has a live cell at column 4, row 1.
    assert other.pixel(*_cell_centre(other, 4, 1)) == swap_red_blue(0x00FF88)


def test_header_fills_bar_and_accent_line(screen):
    ui.draw_header(screen)
    assert screen.pixel(0, 0) == swap_red_blue(Color.PRIMARY)
    assert screen.pixel(500, 77) == swap_red_blue(Color.ACCENT)


def test_header_title_drawn_over_shadow(screen):
    ui.draw_header(screen)
    # First stroke of "G" at x=30 with bold thickness covers the shadow.
    assert screen.pixel(31, 40) == swap_red_blue(Color.TEXT_PRIMARY)


def test_game_area_marks_live_and_dead_cells(screen):
    life = Life()
    ui.draw_game_area(screen, life, False, 0, 0)
    for row in range(10):
        for col in range(10):
            expected = Color.CELL_ALIVE if life.alive(col, row) else Color.PRIMARY
            assert screen.pixel(*_cell_centre(screen, col, row)) == swap_red_blue(expected)


def test_game_area_does_not_advance_board(screen):
    life = Life()
    before = list(life.cells)
    ui.draw_game_area(screen, life, False, 0, 0)
    assert life.cells == before


def test_cursor_only_shown_when_paused(screen):
    life = Life()
    grid_x, grid_y = ui.grid_origin(screen)
    x = grid_x + 3 * ui.CELL_SIZE + 1
    y = grid_y + 5 * ui.CELL_SIZE + 10
    ui.draw_game_area(screen, life, True, 3, 5)
    assert screen.pixel(x, y) == swap_red_blue(Color.CURSOR)

    other = Screen()
    ui.draw_game_area(other, life, False, 3, 5)
    assert other.pixel(x, y) != swap_red_blue(Color.CURSOR)
    assert other.pixel(x, y) == swap_red_blue(Color.PRIMARY)


@pytest.mark.parametrize(
    "paused, color", [(True, Color.WARNING), (False, Color.SUCCESS)]
)
def test_sidebar_status_badge(screen, paused, color):
    ui.draw_sidebar(screen, paused)
    sidebar_x = screen.width - ui.SIDEBAR_WIDTH
    assert screen.pixel(sidebar_x + 112, 178) == swap_red_blue(color)


def test_footer_accent_line(screen):
    ui.draw_footer(screen)
    y = screen.height - ui.FOOTER_HEIGHT
    assert screen.pixel(0, y) == swap_red_blue(Color.ACCENT)
    assert screen.pixel(screen.width - 1, y + 1) == swap_red_blue(Color.ACCENT)


def test_exit_screen_background_and_corner_circles(screen):
    ui.draw_exit_screen(screen)
    assert screen.pixel(0, 0) == Color.BACKGROUND
    box_x = screen.width // 2 - 300
    box_y = screen.height // 2 - 150
    assert screen.pixel(box_x + 50, box_y + 50) == swap_red_blue(Color.SUCCESS)
    assert screen.pixel(box_x + 550, box_y + 250) == swap_red_blue(Color.SUCCESS)


def test_panic_gradient_and_box(screen):
    ui.draw_panic(screen)
    assert screen.pixel(0, 0) == swap_red_blue(Color.HIGHLIGHT)
    assert screen.pixel(0, 1) != screen.pixel(0, 0)
    assert screen.pixel(screen.width - 1, 0) == screen.pixel(0, 0)
    box_x = screen.width // 2 - 200
    box_y = screen.height // 2 - 100
    assert screen.pixel(box_x + 20, box_y + 100) == swap_red_blue(Color.PRIMARY)