import enum
from types import SimpleNamespace

import pytest

from arcadekit.dreamland_actors import Clock, Dreamer
from arcadekit.dreamland_menu import MenuUI, score_dots
from arcadekit.engine import Canvas


class _Screen(enum.Enum):
    MAIN_MENU = 0
    PRELUDE = 1
    GAME_MENU = 2
    GAME = 3
    SCORING = 4
    PAUSED = 5


def _state(screen, round_number=1, dreamer=0, time=0, spill=0, total=0):
    return SimpleNamespace(
        play_state=screen,
        round=round_number,
        dreamers=[Dreamer(0, 0, 60, []) for _ in range(4)],
        player=SimpleNamespace(clock=Clock(45.0)),
        dreamer_score=dreamer,
        time_score=time,
        spillage_score=spill,
        game_score=total,
    )


def _texts(canvas):
    return [t["text"] for t in canvas.commands_of("text")]


@pytest.mark.parametrize("title,score", [("dreamers", 5), ("time", 120), ("spillage", -12)])
def test_score_dots_lowercase_width(title, score):
    dots = score_dots(title, score)
    assert set(dots) <= {"."}
    assert len(title) + len(dots) + len(str(score)) == 20


def test_score_dots_capitalised_width():
    dots = score_dots("TOTAL", 340)
    assert len("TOTAL") + len(dots) + len("340") == 13


def test_score_dots_too_long_raises():
    with pytest.raises(ValueError):
        score_dots("TOTAL", 123456789)


def test_scoring_final_round_hides_continue():
    menu = MenuUI()
    canvas = Canvas()
    menu.draw(_state(_Screen.SCORING, round_number=7, total=100), canvas)
    assert menu.quit_button.hitbox[0] == 95
    assert "continue" not in _texts(canvas)
    assert "quit" in _texts(canvas)


def test_scoring_earlier_round_shows_continue():
    menu = MenuUI()
    canvas = Canvas()
    menu.draw(_state(_Screen.SCORING, round_number=3, total=100), canvas)
    assert menu.quit_button.hitbox[0] == 75
    assert "continue" in _texts(canvas)


def test_scoring_lines_and_clamped_night_total():
    menu = MenuUI()
    canvas = Canvas()
    menu.draw(_state(_Screen.SCORING, round_number=2, dreamer=-50, time=10, spill=-5, total=40), canvas)
    texts = _texts(canvas)
    night = next(t for t in texts if t.startswith("night 2"))
    assert night.endswith(".0")
    assert len(night) == 20
    prev = next(t for t in texts if t.startswith("prev nights"))
    assert prev.endswith("40")
    assert any(t.startswith("TOTAL") and len(t) == 13 for t in texts)


def test_game_menu_describes_round():
    menu = MenuUI()
    canvas = Canvas()
    menu.draw(_state(_Screen.GAME_MENU, round_number=2), canvas)
    texts = _texts(canvas)
    assert "NIGHT 2" in texts
    assert "4 dreamers" in texts
    assert "45 seconds" in texts


def test_game_screen_pause_icon_follows_hover():
    menu = MenuUI()
    canvas = Canvas()
    menu.pause_button.hover(240, 10)
    menu.draw(_state(_Screen.GAME), canvas)
    names = [s["name"] for s in canvas.commands_of("sprite")]
    assert names[-1] == "pause_icon_hover"


def test_main_menu_draws_play_button():
    menu = MenuUI()
    canvas = Canvas()
    menu.draw(_state(_Screen.MAIN_MENU), canvas)
    assert "play" in _texts(canvas)
    assert canvas.commands_of("sprite")[0]["name"] == "title"


def test_paused_draws_overlay_and_buttons():
    menu = MenuUI()
    canvas = Canvas()
    menu.draw(_state(_Screen.PAUSED), canvas)
    assert canvas.commands_of("rect")[0]["color"] == 0x000000BF
    texts = _texts(canvas)
    assert "quit" in texts and "resume" in texts


def test_unknown_state_raises():
    menu = MenuUI()
    with pytest.raises(ValueError):
        menu.draw(SimpleNamespace(play_state=SimpleNamespace(name="OTHER")), Canvas())