"""Menu screens of Dreamland: title, tutorial, night intro, scoring and pause."""

from __future__ import annotations

from typing import Any

from arcadekit.dreamland_feelings import UIButton, nine_slice
from arcadekit.engine import Canvas, Font

_LIGHT = 0xCCDEE3FF
_DARK = 0x323B42FF


def score_dots(title: str, score: int) -> str:
    """Dots that pad a score line to a fixed width (narrower for capitalised titles)."""
    width = 13 if title[:1].isupper() else 20
    count = width - len(title) - len(str(score))
    if count < 0:
        raise ValueError("title and score are too long for the score line")
    return "." * count


def _score_line(title: str, score: int) -> str:
    return f"{title}{score_dots(title, score)}{score}"


class MenuUI:
    """The buttons of every menu screen, drawn according to the play state."""

    def __init__(self) -> None:
        self.start_button = UIButton("play", (102, 165, 50, 15))
        self.how_to_button = UIButton("how to", (182, 165, 50, 15))
        self.game_button = UIButton("begin", (102, 126, 50, 15))
        self.continue_button = UIButton("continue", (132, 165, 50, 15))
        self.quit_button = UIButton("quit", (72, 165, 50, 15))
        self.pause_button = UIButton("", (235, 5, 15, 15))
        self.resume_button = UIButton("resume", (132, 165, 50, 15))

    def draw(self, state: Any, canvas: Canvas) -> None:
        """Draw the screen for ``state.play_state`` (matched by member name)."""
        screen = state.play_state.name
        if screen == "MAIN_MENU":
            self._draw_main(canvas)
        elif screen == "PRELUDE":
            self._draw_prelude(canvas)
        elif screen == "GAME_MENU":
            self._draw_game_menu(state, canvas)
        elif screen == "GAME":
            self.pause_button.draw(canvas)
            icon = "pause_icon_hover" if self.pause_button.hovered else "pause_icon"
            canvas.sprite(icon, x=235, y=5)
        elif screen == "SCORING":
            self._draw_scoring(state, canvas)
        elif screen == "PAUSED":
            canvas.rect(w=255, h=255, x=0, y=0, color=0x000000BF)
            canvas.sprite("paused", x=50, y=64, sw=157, fps="medium")
            self.quit_button.draw(canvas)
            self.resume_button.draw(canvas)
        else:
            raise ValueError(f"unknown play state {screen}")

    def _draw_main(self, canvas: Canvas) -> None:
        canvas.sprite("title", x=6, y=64, sw=246, fps="medium")
        canvas.text("made with", x=90, y=121, font=Font.L, color=_LIGHT)
        canvas.text("made with", x=90, y=120, font=Font.L, color=_DARK)
        canvas.text("Turbo!", x=105, y=131, font=Font.L, color=_LIGHT)
        canvas.text("Turbo!", x=105, y=130, font=Font.L, color=_DARK)
        self.start_button.draw(canvas)

    def _draw_prelude(self, canvas: Canvas) -> None:
        canvas.sprite("bed_time", x=34, y=8, sw=188, fps="medium")
        nine_slice(canvas, "9slice", 5, 180, 150, 37, 75)
        for y, line in (
            (83, "The sleepy town below yearns for"),
            (91, "sweet dreams. "),
            (99, "Concoct sleep by pouring sand"),
            (107, "into vials, and give one to"),
            (115, "each dreamer before daybreak."),
        ):
            canvas.text(line, x=45, y=y)

        nine_slice(canvas, "9slice", 5, 78, 78, 47, 123)
        canvas.sprite("gif_dreamers", x=50, y=126, sw=72, fps="medium")
        canvas.text("Hover over awake", x=46, y=202, font=Font.S)
        canvas.text("dreamers to see", x=48, y=208, font=Font.S)
        canvas.text("their feelings", x=50, y=214, font=Font.S)

        nine_slice(canvas, "9slice", 5, 78, 78, 129, 123)
        canvas.sprite("gif_vial", x=132, y=126, sw=72, fps="medium")
        canvas.text("Attach vials to", x=132, y=202, font=Font.S)
        canvas.text("taps to fill,", x=136, y=208, font=Font.S)
        canvas.text("give to dreamers", x=129, y=214, font=Font.S)

        self.continue_button.draw(canvas)

    def _draw_game_menu(self, state: Any, canvas: Canvas) -> None:
        canvas.sprite("bed_time", x=34, y=8, sw=188, fps="medium")
        nine_slice(canvas, "9slice", 5, 80, 55, 87, 65)
        feelings = {1: 3, 2: 4}.get(state.round, 5)
        canvas.text(f"NIGHT {state.round}", x=94, y=72, font=Font.L)
        canvas.text(f"{len(state.dreamers)} dreamers", x=99, y=84)
        canvas.text(f"{feelings} feelings", x=99, y=94)
        canvas.text(f"{int(state.player.clock.limit)} seconds", x=99, y=104)
        self.game_button.draw(canvas)

    def _draw_scoring(self, state: Any, canvas: Canvas) -> None:
        canvas.sprite("score", x=61, y=8, sw=133, fps="medium")
        nine_slice(canvas, "9slice", 5, 120, 95, 67, 65)
        canvas.text(f"NIGHT {state.round}/7", x=74, y=72, font=Font.L)

        spillage = int(state.spillage_score)
        canvas.text(_score_line("dreamers", state.dreamer_score), x=77, y=85)
        canvas.text(_score_line("time", state.time_score), x=77, y=95)
        canvas.text(_score_line("spillage", spillage), x=77, y=105)
        canvas.rect(x=72, w=106, y=116, h=1)

        night_total = max(0, state.dreamer_score + state.time_score + spillage)
        canvas.text(_score_line(f"night {state.round}", night_total), x=77, y=120)
        canvas.text(_score_line("prev nights", state.game_score - night_total), x=77, y=130)
        canvas.text(_score_line("TOTAL", state.game_score), x=74, y=142, font=Font.L)

        _, qy, qw, qh = self.quit_button.hitbox
        if state.round <= 6:
            self.quit_button.hitbox = (75, qy, qw, qh)
            self.continue_button.draw(canvas)
        else:
            self.quit_button.hitbox = (95, qy, qw, qh)
        self.quit_button.draw(canvas)