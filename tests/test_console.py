import io

import pytest

from conftest import FIXED_TIME
from main import QUIT, PitchSignApp
from pitches.audio import NullAudioCue
from pitches.draw import PitchDraw
from ui import console


@pytest.fixture()
def app(make_state):
    # pitch index 0, row 2, col 3 on every draw
    return PitchSignApp({}, state=make_state([0, 2, 3]), audio_cue=NullAudioCue())


def test_render_grid_marks_zone_and_target():
    assert console.render_grid((0, 4)).splitlines() == [
        ". . . . X",
        ". # # # .",
        ". # # # .",
        ". # # # .",
        ". . . . .",
    ]


def test_render_sign():
    sign = PitchDraw("Cutter", "Fastballs", 1, 3, True, FIXED_TIME)
    assert console.render_sign(sign) == "Cutter (Fastballs)  row 2, col 4  STRIKE"
    assert console.render_sign(None).startswith("Press sign")


def test_render_history_lists_newest_first(make_state):
    state = make_state([0, 0, 0, 1, 2, 2])
    state.draw_sign()
    state.draw_sign()
    lines = console.render_history(state.history).splitlines()
    assert lines[0].startswith(" 1. 19:05:30  Sinker")
    assert lines[0].endswith("(3,3) S")
    assert "4-Seam FB" in lines[1]
    assert console.render_history([]) == "No pitches yet"


def test_render_catalog_shows_indices_and_total(state):
    text = console.render_catalog(state.categories)
    assert "[1] Breaking Balls" in text
    assert "    1. [ ] Slider" in text
    assert "    0. [x] 4-Seam FB" in text
    assert text.endswith("8 pitches selected")


def test_sign_command(app):
    out = app.handle("sign")
    assert "4-Seam FB (Fastballs)  row 3, col 4  STRIKE" in out
    assert app.state.current_location == (2, 3)


def test_empty_line_draws_sign(app):
    app.handle("\n")
    assert len(app.state.history) == 1


def test_count_commands(app):
    assert app.handle("b") == "Count  1-0"
    assert app.handle("k") == "Count  1-1"
    assert app.handle("reset") == "Count  0-0"


def test_toggle_and_combination_commands(app):
    app.handle("load 0")
    assert [p.name for p in app.state.get_selected_pitches()] == [
        "4-Seam FB", "Cutter", "Slider", "Splitter",
    ]
    app.handle("t 0 0")
    app.handle("name Short List")
    assert app.handle("save") == "Saved 'Short List': Cutter, Slider, Splitter"
    assert app.state.combination_name == ""
    assert app.handle("del 0") == "Deleted 'Power Pitcher'"
    assert "2. Short List" in app.handle("combos")


def test_quit_and_unknown(app):
    assert app.handle("q") is QUIT
    assert app.handle("bunt").startswith("Unknown command")


def test_run_reports_errors_and_continues(app):
    for category in app.state.categories:
        for pitch in category.pitches:
            pitch.selected = False
    stdin = io.StringIO("sign\nsave   \ndelete 9\ntoggle x\nt 0 0\nsign\nquit\nsign\n")
    stdout = io.StringIO()
    app.run(stdin, stdout)
    out = stdout.getvalue()
    assert "Error: Please select at least one pitch type" in out
    assert "Error: Please enter a name for this combination" in out
    assert "Error: No combination at index 9 (have 3)" in out
    assert "Error: expected 2 number(s), got 1" in out
    assert len(app.state.history) == 1


def test_app_builds_state_from_config():
    app = PitchSignApp({
        "session": {"history_size": 2, "seed": 5},
        "catalog": [{"name": "Only", "pitches": [{"name": "Knuckleball", "selected": True}]}],
        "presets": [],
    }, audio_cue=NullAudioCue())
    for _ in range(3):
        assert app.state.draw_sign().name == "Knuckleball"
    assert len(app.state.history) == 2
    assert app.state.saved_combinations == []
