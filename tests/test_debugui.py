from craftus.debugui import LINE_LENGTH, LOG_LINES, STATUS_LINES, DebugUI
from craftus.spritebatch import SpriteBatch


def test_text_formats_printf_style():
    ui = DebugUI()
    ui.text("%d FPS", 60)
    ui.text("%5.2f%%", 1.5)
    assert ui.status_lines[0] == "60 FPS"
    assert ui.status_lines[1] == " 1.50%"


def test_status_lines_are_limited():
    ui = DebugUI()
    for i in range(STATUS_LINES + 5):
        ui.text("line %d", i)
    assert ui.status_lines == tuple(f"line {i}" for i in range(STATUS_LINES))


def test_log_newest_first():
    ui = DebugUI()
    ui.log("a")
    ui.log("b")
    assert ui.log_lines[:2] == ("b", "a")
    assert len(ui.log_lines) == LOG_LINES


def test_log_drops_oldest():
    ui = DebugUI()
    for i in range(LOG_LINES + 5):
        ui.log("msg %d", i)
    assert ui.log_lines[0] == f"msg {LOG_LINES + 4}"
    assert ui.log_lines[-1] == "msg 5"


def test_lines_are_truncated():
    ui = DebugUI()
    ui.log("%s", "x" * 500)
    assert len(ui.log_lines[0]) == LINE_LENGTH - 1


def test_draw_pushes_text_and_clears_status():
    ui = DebugUI()
    batch = SpriteBatch()
    ui.text("ab")
    ui.log("cd")
    ui.draw(batch)
    assert len(batch.sprites) == 4
    assert batch.scale == 1
    assert ui.status_lines == ("",) * STATUS_LINES
    assert ui.log_lines[0] == "cd"
    ui.text("next")
    assert ui.status_lines[0] == "next"


def test_draw_places_log_below_status_area():
    ui = DebugUI()
    batch = SpriteBatch()
    ui.log("z")
    ui.draw(batch)
    (sprite,) = batch.sprites
    assert sprite.y0 >= batch.sprites[0].y0
    assert sprite.y0 > 0
    assert sprite.x0 == 0