from flagtower.engine.timer import TimerController
from flagtower.levels import LEVELS
from flagtower.render.labels import PillowLabelProvider, color_for
from flagtower.timing import ManualClock
from flagtower.ui.hud import build_hud, clock_digits, completion_labels, format_clock
from flagtower.ui.status_bar import WARN_CLOCK, NORMAL_CLOCK, clock_color
from flagtower.grid import ColumnCompletion

def test_format_clock():
    assert format_clock(0) == "00:00"
    assert format_clock(59.9) == "00:59"
    assert format_clock(61) == "01:01"
    assert format_clock(3600) == "60:00"
    assert format_clock(-5) == "00:00"
    assert clock_digits(125) == (2, 5)

def test_blitz_hud_counts_down_and_turns_red():
    level = LEVELS[4]
    clock = ManualClock(0)
    t = TimerController(level.timer, level.blitz_seconds, clock=clock, warn_seconds=30)
    t.start()
    hud = build_hud(level, t.reading())
    assert hud.clock_text == "03:00" and not hud.over_threshold
    assert clock_color(hud) == NORMAL_CLOCK
    clock.advance(150.5)
    hud = build_hud(level, t.reading())
    assert hud.clock_text == "00:30" and hud.over_threshold
    assert clock_color(hud) == WARN_CLOCK
    assert hud.title == level.title and hud.hint == level.hint

def test_untimed_level_has_no_clock():
    level = LEVELS[0]
    hud = build_hud(level, TimerController(level.timer).reading())
    assert hud.clock_text == ""
    assert hud.subtitle == "Level 1: Tourist Class"

def test_completion_labels():
    comp = [ColumnCompletion("Africa", 7, 10, 70), ColumnCompletion("Asia", 10, 10, 100)]
    assert completion_labels(comp) == [("Africa", "70%"), ("Asia", "100%")]

def test_label_provider_images():
    labels = PillowLabelProvider(size=(128, 64))
    img = labels.render_text("Europe", "40%")
    assert img.size == (128, 64) and img.mode == "RGBA"
    # cached per text pair
    assert labels.render_text("Europe", "40%") is img
    assert labels.render_text("Europe") is not img
    cube = labels.render_cube("fr", "Europe")
    assert cube.size == (64, 64)
    assert cube.getpixel((32, 2)) == color_for("Europe")
