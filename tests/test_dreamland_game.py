from types import SimpleNamespace

import pytest

from arcadekit.dreamland_feelings import Feeling
from arcadekit.dreamland_game import Dreamland, PlayState, round_config
from arcadekit.dreamland_vials import ObjState, Vial
from arcadekit.engine import Canvas


class _Btn:
    def __init__(self, pressed=False, released=False):
        self._pressed = pressed
        self._released = released

    def pressed(self):
        return self._pressed

    def just_pressed(self):
        return self._pressed

    def just_released(self):
        return self._released


def _mouse(x, y, pressed=False, released=False):
    return SimpleNamespace(position=(x, y), left=_Btn(pressed, released))


def _inputs(x=0, y=0, pressed=False, released=False):
    return SimpleNamespace(mouse=_mouse(x, y, pressed, released), gamepad=lambda index: None)


def _center(hitbox):
    x, y, w, h = hitbox
    return x + w // 2, y + h // 2


def _holding(game, contents=()):
    vial = Vial(0, 0)
    vial.state = ObjState.HELD
    vial.contents = list(contents)
    game.held_vial = vial
    return vial


def test_round_one_config():
    config = round_config(1)
    assert (config.dreamers, config.feelings_count, config.min_awake) == (4, 3, 1)
    assert (config.wake_intrvl, config.awake_timer) == (30, 60)
    assert config.time == 150.0


def test_late_rounds_share_config():
    assert round_config(0) == round_config(7) == round_config(42)
    assert round_config(9).dreamers == 8


def test_negative_round_rejected():
    with pytest.raises(ValueError):
        round_config(-1)


def test_default_game():
    game = Dreamland()
    assert game.play_state is PlayState.MAIN_MENU
    assert game.round == 0
    assert len(game.dreamers) == round_config(0).dreamers
    assert game.player.clock.limit == round_config(0).time
    assert game.held_vial is None


def test_prelude_moves_continue_button():
    game = Dreamland()
    game.switch_play_states(PlayState.PRELUDE)
    assert game.play_state is PlayState.PRELUDE
    assert game.menu.continue_button.hitbox == (102, 230, 50, 15)


def test_game_menu_builds_next_round_keeping_score():
    game = Dreamland()
    game.game_score = 77
    game.frame = 12
    game.switch_play_states(PlayState.GAME_MENU)
    assert game.play_state is PlayState.GAME_MENU
    assert game.round == 1
    assert game.game_score == 77
    assert game.frame == 0
    assert len(game.dreamers) == round_config(1).dreamers
    assert game.player.tween is not None and game.player.tween.end == 143


def test_entering_game_sets_night_and_wake_timer():
    game = Dreamland()
    game.switch_play_states(PlayState.GAME_MENU)
    game.switch_play_states(PlayState.GAME)
    assert game.ui.night_count == game.round
    assert game.wake_timer == game.frame + game.wake_intrvl * 60


def test_scoring_clamps_total_and_clears_vials():
    game = Dreamland()
    game.vials.append(Vial(10, 10))
    game.dreamer_score = -1000
    game.switch_play_states(PlayState.SCORING)
    assert game.game_score == 0
    assert game.vials == []
    assert game.time_score == game.player.clock.score_remaining()
    assert game.menu.continue_button.hitbox == (132, 165, 50, 15)


def test_scoring_adds_night_scores():
    game = Dreamland()
    game.game_score = 10
    game.dreamer_score = 20
    game.spillage_score = -3
    game.switch_play_states(PlayState.SCORING)
    assert game.game_score == 10 + 20 - 3 + game.time_score


def test_main_menu_resets_everything():
    game = Dreamland()
    game.switch_play_states(PlayState.GAME_MENU)
    game.game_score = 99
    game.switch_play_states(PlayState.MAIN_MENU)
    assert (game.round, game.game_score) == (0, 0)
    assert game.play_state is PlayState.MAIN_MENU


def test_click_on_rack_takes_vial():
    game = Dreamland()
    x, y = _center(game.player.vial_source.rack_hitbox)
    game.player_input(_mouse(x, y, pressed=True))
    assert game.player.vial_source.vials == 2
    assert game.held_vial is not None
    assert game.held_vial.state is ObjState.HELD


def test_empty_rack_gives_nothing():
    game = Dreamland()
    game.player.vial_source.vials = 0
    x, y = _center(game.player.vial_source.rack_hitbox)
    game.player_input(_mouse(x, y, pressed=True))
    assert game.held_vial is None


def test_release_nowhere_drops_loose_vial():
    game = Dreamland()
    vial = _holding(game)
    game.player_input(_mouse(250, 250, released=True))
    assert game.held_vial is None
    assert game.vials == [vial]
    assert vial.state is ObjState.LOOSE


def test_pick_up_loose_vial():
    game = Dreamland()
    vial = Vial(120, 200)
    game.vials.append(vial)
    x, y = _center(vial.hitbox)
    game.player_input(_mouse(x, y, pressed=True))
    assert game.held_vial is vial
    assert vial.state is ObjState.HELD
    assert game.vials == []


def test_release_on_trash_counts_spillage():
    game = Dreamland()
    _holding(game, [(Feeling.WONDER, 5.0)])
    x, y = _center(game.player.vial_source.trash_hitbox)
    game.player_input(_mouse(x, y, released=True))
    assert game.held_vial is None
    assert game.vials == []
    assert game.player.vial_source.vials == 4
    assert game.spillage_score == 5
    assert game.ui.floating_text[-1].text == "-5"


def test_release_on_tap_attaches_vial():
    game = Dreamland()
    _holding(game, [(Feeling.LOVE, 3.0)])
    tap = game.player.taps[0]
    x, y = _center(tap.spiggot_hitbox)
    game.player_input(_mouse(x, y, released=True))
    assert game.held_vial is None
    assert game.vials == []
    assert tap.vial is not None
    assert tap.vial.state is ObjState.ATTACHED
    assert tap.vial.hitbox[:2] == (tap.x + 8, tap.y + 18)
    assert tap.vial.contents == [(Feeling.LOVE, 3.0)]


def test_release_on_awake_dreamer_scores():
    game = Dreamland()
    dreamer = game.dreamers[0]
    dreamer.awake = True
    _holding(game, [(Feeling.WONDER, 10.0)])
    x, y = _center(dreamer.hitbox)
    game.player_input(_mouse(x, y, released=True))
    assert dreamer.sleeping and not dreamer.awake
    assert game.held_vial is None
    assert game.player.vial_source.vials == 4
    assert game.dreamer_score == int(game.ui.floating_text[-1].text)


def test_update_start_button_opens_prelude():
    game = Dreamland()
    x, y = _center(game.menu.start_button.hitbox)
    game.update(_inputs(x, y, pressed=True), Canvas())
    assert game.play_state is PlayState.PRELUDE
    assert game.frame == 1


def test_update_in_game_wakes_minimum_dreamers():
    game = Dreamland()
    game.switch_play_states(PlayState.GAME_MENU)
    game.switch_play_states(PlayState.GAME)
    game.update(_inputs(0, 0), Canvas())
    assert sum(d.awake for d in game.dreamers) == game.min_awake
    assert game.play_state is PlayState.GAME
    assert game.frame == 1


def test_update_resume_from_pause():
    game = Dreamland()
    game.switch_play_states(PlayState.GAME_MENU)
    game.switch_play_states(PlayState.GAME)
    game.switch_play_states(PlayState.PAUSED)
    x, y = _center(game.menu.resume_button.hitbox)
    game.update(_inputs(x, y, pressed=True), Canvas())
    assert game.play_state is PlayState.GAME