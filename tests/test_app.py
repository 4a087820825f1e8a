from lifeboard.app import Session, main
from lifeboard.game import Life
from lifeboard.screen import Screen
from lifeboard.ui import Color


def test_initial_state():
    session = Session()
    assert (session.paused, session.x_selected, session.y_selected) == (False, 0, 0)
    assert session.finished is False
    assert session.life.cells == Life().cells


def test_cursor_clamped_to_board():
    session = Session()
    session.handle_key("z")
    session.handle_key("q")
    assert (session.x_selected, session.y_selected) == (0, 0)
    for _ in range(12):
        session.handle_key("s")
        session.handle_key("d")
    assert (session.x_selected, session.y_selected) == (9, 9)
    session.handle_key("z")
    session.handle_key("q")
    assert (session.x_selected, session.y_selected) == (8, 8)


def test_toggle_only_while_paused():
    session = Session()
    session.handle_key("e")
    assert session.life.alive(0, 0) is False
    session.handle_key("p")
    session.handle_key("e")
    assert session.life.alive(0, 0) is True
    session.handle_key("e")
    assert session.life.alive(0, 0) is False


def test_pause_toggles_and_sets_delay():
    session = Session()
    assert session.delay_ms() == 500
    session.handle_key("p")
    assert session.paused is True
    assert session.delay_ms() == 300
    session.handle_key("p")
    assert session.paused is False


def test_exit_key_finishes_and_ignores_later_keys():
    session = Session()
    session.handle_key("x")
    assert session.finished is True
    assert session.delay_ms() == 3000
    session.handle_key("p")
    assert session.paused is False


def test_unknown_key_changes_nothing():
    session = Session()
    session.handle_key("k")
    assert (session.paused, session.x_selected, session.y_selected, session.finished) == (
        False, 0, 0, False,
    )


def test_render_paused_keeps_board():
    session = Session()
    session.handle_key("p")
    before = list(session.life.cells)
    session.render(Screen())
    assert session.life.cells == before


def test_render_finished_draws_exit_screen():
    session = Session()
    session.handle_key("x")
    before = list(session.life.cells)
    screen = Screen()
    session.render(screen)
    assert screen.pixel(0, 0) == Color.BACKGROUND
    assert session.life.cells == before


def test_main_prints_board_and_writes_frame(tmp_path, capsys):
    out = tmp_path / "frame.ppm"
    assert main(["pe", "--output", str(out)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert all(len(line) == 10 for line in lines)
    assert lines[0][0] == "#"
    assert out.read_bytes().startswith(b"P6\n1024 768\n255\n")


def test_main_without_keys_prints_initial_board(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    life = Life()
    assert sum(line.count("#") for line in lines) == sum(life.cells)
    assert lines[1][4] == "#"