from arcadekit.engine import Canvas, Inputs, Rng
from arcadekit.pancake import Pancake, PancakeCat


def test_same_size_concentric_is_caught():
    assert Pancake(128.0, 112.0, 1.0, 8.0).caught_by(128.0, 112.0, 8.0)


def test_smaller_concentric_is_not_caught():
    assert not Pancake(131.0, 115.0, 1.0, 5.0).caught_by(128.0, 112.0, 8.0)


def test_far_pancake_is_not_caught():
    assert not Pancake(0.0, 0.0, 1.0, 8.0).caught_by(128.0, 112.0, 8.0)


def test_spawn_takes_values_from_rng():
    game = PancakeCat(rng=Rng(values=[0, 100, 2, 3]))
    game.update(Inputs(), Canvas())
    assert len(game.pancakes) == 1
    pancake = game.pancakes[0]
    assert pancake.x == 100.0
    assert pancake.vel == 3.0
    assert pancake.y == pancake.vel
    assert 5 <= pancake.radius < 15


def test_no_spawn_when_roll_misses():
    game = PancakeCat(rng=Rng(values=[1]))
    game.update(Inputs(), Canvas())
    assert game.pancakes == []
    assert game.frame == 1


def test_cat_moves_left_and_right():
    game = PancakeCat(rng=Rng(values=[1]))
    inputs = Inputs()
    inputs.gamepad(0).left.press()
    game.update(inputs, Canvas())
    assert game.cat_x == 128.0 - 2.0
    inputs.gamepad(0).left.release()
    inputs.gamepad(0).right.press()
    game.update(inputs, Canvas())
    assert game.cat_x == 128.0


def test_catch_scores_and_removes():
    game = PancakeCat(rng=Rng(values=[1]))
    game.pancakes.append(Pancake(game.cat_x, game.cat_y - 1.0, 1.0, game.cat_r))
    game.frame = 70
    canvas = Canvas()
    game.update(inputs=Inputs(), canvas=canvas)
    assert game.score == 1
    assert game.pancakes == []
    assert game.last_munch_at == 70
    assert any(t["text"] == "MUNCH!" for t in canvas.commands_of("text"))


def test_offscreen_pancake_removed():
    game = PancakeCat(rng=Rng(values=[1]))
    game.pancakes.append(Pancake(0.0, 200.0, 1.0, 5.0))
    game.update(Inputs(), Canvas())
    assert game.pancakes == []
    assert game.score == 0


def test_draw_background_and_score():
    game = PancakeCat(rng=Rng(values=[1]))
    canvas = Canvas()
    game.draw(canvas)
    assert len(canvas.commands_of("sprite")) == 9 * 6 + 1
    assert canvas.commands_of("text")[-1]["text"] == "Score: 0"
    assert all(t["text"] != "MUNCH!" for t in canvas.commands_of("text"))