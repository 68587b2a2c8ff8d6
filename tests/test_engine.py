import pytest

from arcadekit.engine import Button, Canvas, Font, Inputs, Rng


def test_button_press_cycle():
    button = Button()
    button.press()
    assert button.pressed() and button.just_pressed()
    button.advance()
    assert button.pressed() and not button.just_pressed()
    button.release()
    assert button.just_released() and not button.pressed()
    button.advance()
    assert not button.just_released()


def test_inputs_advance_clears_just_pressed():
    inputs = Inputs()
    inputs.gamepad(1).start.press()
    inputs.mouse.left.press()
    inputs.advance()
    assert not inputs.gamepad(1).start.just_pressed()
    assert not inputs.mouse.left.just_pressed()
    assert inputs.gamepad(1).start.pressed()


def test_gamepad_index_out_of_range():
    inputs = Inputs(players=2)
    with pytest.raises(IndexError):
        inputs.gamepad(2)


def test_inputs_require_a_player():
    with pytest.raises(ValueError):
        Inputs(players=0)


def test_canvas_records_commands():
    canvas = Canvas()
    canvas.clear(0x000000FF)
    canvas.rect(x=1, y=2, w=3, h=4)
    canvas.text("hi", font=Font.L)
    canvas.sprite("cat", x=5, fps="fast")
    assert [c.kind for c in canvas.commands] == ["clear", "rect", "text", "sprite"]
    assert canvas.commands_of("sprite")[0]["fps"] == "fast"
    assert canvas.commands_of("text")[0]["font"] is Font.L
    canvas.reset()
    assert canvas.commands == []


def test_canvas_camera():
    canvas = Canvas(384, 216)
    canvas.set_camera(10.0, 20.0)
    assert canvas.camera == (10.0, 20.0)


def test_canvas_rejects_bad_size():
    with pytest.raises(ValueError):
        Canvas(0, 10)


def test_rng_seed_is_deterministic():
    first = Rng(seed=7)
    second = Rng(seed=7)
    assert [first.next() for _ in range(5)] == [second.next() for _ in range(5)]


def test_rng_values_cycle_and_mask():
    rng = Rng(values=[3, 1 << 32 | 5])
    assert [rng.next() for _ in range(4)] == [3, 5, 3, 5]


def test_rng_values_in_range():
    rng = Rng(seed=1)
    assert all(0 <= rng.next() < 2**32 for _ in range(50))


def test_rng_empty_values_rejected():
    with pytest.raises(ValueError):
        Rng(values=[])