import pytest

from arcadekit.dreamland_feelings import (
    Feeling,
    FloatingText,
    UIButton,
    hit_test,
    nine_slice,
    rand01,
    random_feelings,
)
from arcadekit.engine import Canvas, Rng


@pytest.mark.parametrize(
    "mx, my, expected",
    [(10, 20, True), (40, 35, True), (25, 27, True), (9, 20, False), (41, 20, False), (10, 36, False)],
)
def test_hit_test_includes_edges(mx, my, expected):
    assert hit_test((10, 20, 30, 15), mx, my) is expected


def test_rand01_stays_in_unit_interval():
    rng = Rng(seed=7)
    values = [rand01(rng) for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_rand01_of_zero():
    assert rand01(Rng(values=[0])) == 0.0


def test_feeling_colors_and_sprites():
    assert Feeling.WONDER.color() == 0xA6884AFF
    assert Feeling.LOVE.color() == 0x9D405CFF
    assert Feeling.GLOOM.color() == 0x595652FF
    assert Feeling.RITUAL.sprite() == "ritual"
    assert Feeling.DAZE.sprite() == "daze"


def test_feeling_pools():
    assert Feeling.pool(3) == (Feeling.WONDER, Feeling.RITUAL, Feeling.DAZE)
    assert Feeling.pool(4) == (Feeling.WONDER, Feeling.LOVE, Feeling.RITUAL, Feeling.DAZE)
    five = (Feeling.WONDER, Feeling.LOVE, Feeling.RITUAL, Feeling.STRESS, Feeling.DAZE)
    assert Feeling.pool(5) == five
    assert Feeling.pool(9) == five


def test_random_feelings_draw_from_pool():
    result = random_feelings(20, 3, Rng(seed=1))
    assert len(result) == 20
    assert set(result) <= set(Feeling.pool(3))


def test_random_feelings_extremes():
    result = random_feelings(2, 4, Rng(values=[0, 99]))
    assert result == [Feeling.WONDER, Feeling.DAZE]


def test_button_hover_updates_flag():
    button = UIButton("play", (102, 165, 50, 15))
    assert button.hover(110, 170) is True
    assert button.hovered is True
    assert button.hover(0, 0) is False
    assert button.hovered is False


def test_button_draw_uses_hover_sprite_and_swaps_colors():
    button = UIButton("play", (102, 165, 50, 15))
    idle = Canvas()
    button.draw(idle)
    assert {c["name"] for c in idle.commands_of("sprite")} == {"button"}
    button.hovered = True
    hovered = Canvas()
    button.draw(hovered)
    assert {c["name"] for c in hovered.commands_of("sprite")} == {"button_hover"}
    idle_texts = idle.commands_of("text")
    hover_texts = hovered.commands_of("text")
    assert [t["text"] for t in idle_texts] == ["play", "play"]
    assert idle_texts[0]["y"] - idle_texts[1]["y"] == 1
    assert idle_texts[0]["color"] == hover_texts[1]["color"]
    assert idle_texts[1]["color"] == hover_texts[0]["color"]


def test_floating_text_colors_from_number():
    positive = FloatingText("+12", 0, 0, 0)
    assert positive.color == 0xFFFFFFFF
    assert positive.color2 == 0xA6884AFF
    negative = FloatingText("-3", 0, 0, 0)
    assert negative.color == 0x9D405CFF
    assert negative.color2 == 0xFFFFFFFF


def test_floating_text_non_number_keeps_given_color():
    text = FloatingText("-3.5", 0, 0, 0xAC3232FF)
    assert text.color == 0xAC3232FF
    assert text.color2 == 0xAC3232FF
    assert text.lifetime == 90


def test_floating_text_drifts_every_ten_frames():
    text = FloatingText("5", 10, 50, 0)
    for _ in range(9):
        text.update()
    assert text.y == 50
    text.update()
    assert text.y == 49
    assert text.timer == 10


def test_floating_text_draw_shadow_then_text():
    canvas = Canvas()
    text = FloatingText("7", 10, 50, 0)
    text.draw(canvas)
    shadow, front = canvas.commands_of("text")
    assert shadow["y"] == front["y"] + 1
    assert front["color"] == text.color


def test_nine_slice_draws_nine_parts():
    canvas = Canvas()
    nine_slice(canvas, "9slice", 5, 80, 55, 87, 65)
    sprites = canvas.commands_of("sprite")
    assert len(sprites) == 9
    assert all(s["name"] == "9slice" for s in sprites)
    corners = {(s["x"], s["y"]) for s in sprites if "repeat" not in s.params}
    assert corners == {(87, 65), (87 + 80 - 5, 65), (87, 65 + 55 - 5), (87 + 80 - 5, 65 + 55 - 5)}