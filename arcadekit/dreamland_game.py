"""Dreamland: fill vials with feeling-coloured sand and lull a sleepy town to dreams."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass
from typing import Any

from arcadekit.dreamland_actors import Dreamer, GameUI, PlayerArea
from arcadekit.dreamland_feelings import FloatingText, hit_test
from arcadekit.dreamland_menu import MenuUI
from arcadekit.dreamland_vials import ObjState, Vial
from arcadekit.engine import Canvas, Inputs, Rng

LAST_ROUND_WITH_CONTINUE = 6


class PlayState(enum.Enum):
    MAIN_MENU = "main_menu"
    PRELUDE = "prelude"
    GAME_MENU = "game_menu"
    GAME = "game"
    SCORING = "scoring"
    PAUSED = "paused"


@dataclass(frozen=True)
class RoundConfig:
    """How a night is set up."""

    dreamers: int
    feelings_count: int
    min_awake: int
    wake_intrvl: int
    awake_timer: int

    @property
    def time(self) -> float:
        """Seconds on the clock: just enough for every dreamer to give up on their own."""
        extra = self.dreamers - self.min_awake
        return float(
            self.awake_timer
            + extra * self.awake_timer
            - self.wake_intrvl
            - (extra - 1) * self.wake_intrvl
        )


_ROUNDS = {
    1: RoundConfig(4, 3, 1, 30, 60),
    2: RoundConfig(5, 3, 2, 30, 55),
    3: RoundConfig(5, 4, 2, 30, 55),
    4: RoundConfig(6, 4, 2, 25, 50),
    5: RoundConfig(6, 5, 2, 25, 50),
    6: RoundConfig(7, 5, 3, 25, 45),
}
_LATE_ROUND = RoundConfig(8, 5, 3, 25, 45)


def round_config(round_number: int) -> RoundConfig:
    """The set-up for the given night; nights beyond the sixth (and night 0) share one."""
    if round_number < 0:
        raise ValueError("round number must not be negative")
    return _ROUNDS.get(round_number, _LATE_ROUND)


def _format_amount(value: float) -> str:
    return f"{value:g}"


class Dreamland:
    """The whole game: state machine, player interaction and drawing."""

    def __init__(
        self,
        play_state: PlayState = PlayState.MAIN_MENU,
        round_number: int = 0,
        score: int = 0,
        rng: Rng | None = None,
    ) -> None:
        self.rng = rng or Rng()
        self._build(play_state, round_number, score)

    def _build(self, play_state: PlayState, round_number: int, score: int) -> None:
        config = round_config(round_number)
        self.frame = 0
        self.play_state = play_state
        self.menu = MenuUI()
        self.round = round_number
        self.player = PlayerArea(config.feelings_count, config.time)
        self.dreamers = Dreamer.spawn(config.dreamers, config.feelings_count, config.awake_timer, self.rng)
        self.min_awake = config.min_awake
        self.wake_timer = 0
        self.wake_intrvl = config.wake_intrvl
        self.vials: list[Vial] = []
        self.held_vial: Vial | None = None
        self.ui = GameUI()
        self.game_score = score
        self.dreamer_score = 0
        self.time_score = 0
        self.spillage_score = 0

    def switch_play_states(self, play_state: PlayState) -> None:
        """Move the state machine to ``play_state`` and start its transition."""
        if play_state is PlayState.MAIN_MENU:
            self._build(PlayState.MAIN_MENU, 0, 0)
        elif play_state is PlayState.PRELUDE:
            self.menu.continue_button.hitbox = (102, 230, 50, 15)
        elif play_state is PlayState.GAME_MENU:
            self._build(PlayState.MAIN_MENU, self.round + 1, self.game_score)
            self.player.tween_area(False)
        elif play_state is PlayState.GAME:
            if self.play_state is PlayState.GAME_MENU:
                self.ui.night_count = self.round
                self.wake_timer = self.frame + self.wake_intrvl * 60
            self.ui.tween_vignette(False)
        elif play_state is PlayState.SCORING:
            self.menu.continue_button.hitbox = (132, 165, 50, 15)
            self.vials = []
            self.time_score = self.player.clock.score_remaining()
            self.game_score += self.dreamer_score + self.time_score + self.spillage_score
            self.game_score = max(self.game_score, 0)
            self.ui.tween_vignette(True)
            self.player.tween_area(True)
        else:
            self.ui.tween_vignette(True)
        self.play_state = play_state

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        """Run one frame: game logic, then drawing."""
        self._game(inputs.mouse)
        self.draw(canvas)
        self.frame += 1

    def _clicked(self, button: Any, mouse: Any, mx: int, my: int) -> bool:
        return button.hover(mx, my) and mouse.left.just_pressed()

    def _game(self, mouse: Any) -> None:
        mx, my = mouse.position
        self.player.update()
        menu = self.menu
        state = self.play_state

        if state is PlayState.MAIN_MENU:
            if self._clicked(menu.start_button, mouse, mx, my):
                self.switch_play_states(PlayState.PRELUDE)
        elif state is PlayState.PRELUDE:
            if self._clicked(menu.continue_button, mouse, mx, my):
                self.switch_play_states(PlayState.GAME_MENU)
        elif state is PlayState.GAME_MENU:
            if self._clicked(menu.game_button, mouse, mx, my):
                self.switch_play_states(PlayState.GAME)
        elif state is PlayState.GAME:
            if self._clicked(menu.pause_button, mouse, mx, my):
                self.switch_play_states(PlayState.PAUSED)
            self._play(mouse, mx, my)
        elif state is PlayState.SCORING:
            if self.round <= LAST_ROUND_WITH_CONTINUE and self._clicked(self.menu.continue_button, mouse, mx, my):
                self.switch_play_states(PlayState.GAME_MENU)
            if self._clicked(self.menu.quit_button, mouse, mx, my):
                self.switch_play_states(PlayState.MAIN_MENU)
        else:
            if self._clicked(self.menu.resume_button, mouse, mx, my):
                self.switch_play_states(PlayState.GAME)
            if self._clicked(self.menu.quit_button, mouse, mx, my):
                self.switch_play_states(PlayState.MAIN_MENU)

        self.ui.update(self.dreamer_score)

    def _play(self, mouse: Any, mx: int, my: int) -> None:
        self.player_input(mouse)

        if self.player.clock.running:
            self.player.clock.update(self.dreamers)
        else:
            self.switch_play_states(PlayState.SCORING)

        awake = 0
        for dreamer in self.dreamers:
            dreamer.update(self.ui, mx, my)
            if not dreamer.sleeping and not dreamer.awake:
                if awake < self.min_awake or self.frame > self.wake_timer:
                    dreamer.awake = True
                    awake += 1
                    self.wake_timer = self.frame + self.wake_intrvl * 60
            elif dreamer.awake:
                awake += 1

        if self.held_vial is not None:
            self.held_vial.update(mx, my)
        else:
            for vial in self.vials:
                vial.update(mx, my)

        holding = self.held_vial is not None
        for tap in self.player.taps:
            spills = tap.update(holding, mx, my, self.frame)
            if spills < 0:
                self.spillage_score += spills
                self.ui.floating_text.append(FloatingText(str(spills), tap.x + 20, tap.y + 48, 0))
            if tap.state is ObjState.HELD:
                tap.change_flow(mx)

        self.player.vial_source.update(mx, my, holding)

    def player_input(self, mouse: Any) -> None:
        """Handle picking up, attaching, giving and throwing away vials, and tap handles."""
        mx, my = mouse.position
        if mouse.left.just_pressed():
            self._press(mx, my)
        if mouse.left.just_released():
            self._release(mx, my)

    def _press(self, mx: int, my: int) -> None:
        for index, vial in enumerate(self.vials):
            if vial.hover(mx, my):
                vial.state = ObjState.HELD
                self.held_vial = self.vials.pop(index)
                break

        if self.held_vial is not None:
            return

        for tap in self.player.taps:
            if hit_test(tap.handle_hitbox, mx, my):
                tap.state = ObjState.HELD
                break
            if hit_test(tap.spiggot_hitbox, mx, my) and tap.vial is not None:
                vial = tap.vial
                vial.state = ObjState.HELD
                vial.contents = [(feeling, float(int(amount))) for feeling, amount in vial.contents]
                vial.filling = False
                self.held_vial = vial
                tap.vial = None

        source = self.player.vial_source
        if hit_test(source.rack_hitbox, mx, my) and source.vials > 0:
            source.vials -= 1
            vial = Vial(mx, my)
            vial.state = ObjState.HELD
            self.held_vial = vial

    def _release(self, mx: int, my: int) -> None:
        held = self.held_vial
        retain = True
        if held is not None:
            for tap in self.player.taps:
                if hit_test(tap.spiggot_hitbox, mx, my) and tap.vial is None:
                    attached = copy.deepcopy(held)
                    attached.state = ObjState.ATTACHED
                    _, _, w, h = attached.hitbox
                    attached.hitbox = (tap.x + 8, tap.y + 18, w, h)
                    tap.vial = attached
                    retain = False

            for dreamer in self.dreamers:
                if dreamer.hover(mx, my) and dreamer.awake and held.state is ObjState.HELD:
                    score = dreamer.sleep(copy.deepcopy(held))
                    self.dreamer_score += score
                    if score > 0:
                        color, label = 0xFFFFFFFF, f"+{score}"
                    else:
                        color, label = 0xAC3232FF, str(score)
                    self.ui.floating_text.append(
                        FloatingText(label, dreamer.hitbox[0] + 28, dreamer.hitbox[1], color)
                    )
                    self.player.vial_source.vials += 1
                    retain = False

            source = self.player.vial_source
            if hit_test(source.trash_hitbox, mx, my):
                retain = False
                source.vials += 1
                spilled = -held.contents[0][1] if held.contents else 0.0
                self.spillage_score -= int(spilled)
                self.ui.floating_text.append(
                    FloatingText(_format_amount(spilled), source.trash_hitbox[0], source.trash_hitbox[1], 0)
                )

            if retain:
                held.state = ObjState.LOOSE
                self.vials.append(held)
            self.held_vial = None

        for tap in self.player.taps:
            if tap.state is ObjState.HELD:
                tap.state = ObjState.LOOSE

    def draw(self, canvas: Canvas) -> None:
        canvas.clear(0x000000FF)
        canvas.sprite("bg", x=0, y=0)
        for dreamer in self.dreamers:
            dreamer.draw_home(canvas)
        self.ui.draw_bottom(canvas)
        for dreamer in self.dreamers:
            if dreamer.selected:
                dreamer.draw_dreamer(canvas)
        self.player.draw(canvas)
        self.ui.draw_top(canvas)
        self.menu.draw(self, canvas)
        if self.held_vial is not None:
            self.held_vial.draw(canvas)
        for vial in self.vials:
            vial.draw(canvas)