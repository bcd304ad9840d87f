"""Adapters that let the tooltip engine drive an arcade window.

The window plays both frame and display: engine coordinates are window
pixels measured from the top-left, arcade's are measured from the
bottom-left, so every adapter flips ``y`` on the way in and out.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import arcade

from postip import constants
from postip.components.render_command import RenderCommand
from postip.styles.colors import lookup_color
from postip.utils.text_metrics import measure_text


@dataclass(eq=False, slots=True)
class ArcadeFrame:
    """Frame backed by an arcade window, with a fixed font cell."""

    window: Any
    char_width: int = constants.DEFAULT_CHAR_WIDTH
    char_height: int = constants.DEFAULT_CHAR_HEIGHT
    line_spacing: int = constants.DEFAULT_LINE_SPACING
    window_id: str = ""

    @property
    def display_width(self) -> int:
        return int(self.window.width)

    @property
    def display_height(self) -> int:
        return int(self.window.height)


@dataclass(slots=True)
class TextPanelViewport:
    """Lines of fixed-pitch text drawn from ``(left, top)``, scrolled by ``first_line``."""

    frame: ArcadeFrame
    lines: list[str] = field(default_factory=list)
    left: int = 0
    top: int = 0
    visible_rows: int = 20
    first_line: int = 0
    has_header: bool = False

    def glyph_box(self, position: tuple[int, int]) -> tuple[int, int, int] | None:
        line, column = position
        row = line - self.first_line
        if row < 0 or row >= self.visible_rows or line >= len(self.lines):
            return None
        cell_h = self.frame.char_height + self.frame.line_spacing
        return column * self.frame.char_width, row * cell_h, cell_h


class ArcadePointer:
    """Tracks the mouse from window events and warps it on request."""

    def __init__(self, frame: ArcadeFrame) -> None:
        self.frame = frame
        self._x: int | None = None
        self._y: int | None = None

    def on_mouse_motion(self, x: float, y: float) -> None:
        self._x = int(x)
        self._y = int(self.frame.display_height - y)

    def position(self) -> tuple[ArcadeFrame, int, int] | None:
        if self._x is None or self._y is None:
            return None
        return self.frame, self._x, self._y

    def warp(self, frame: Any, x: int, y: int) -> None:
        self._x = int(x)
        self._y = int(y)
        self.frame.window.set_mouse_position(int(x), int(self.frame.display_height - y))


class ArcadeTimerFacility:
    """Timers on arcade's shared clock.

    Each scheduled call gets its own wrapper function, and the wrapper is the
    handle: ``arcade.unschedule`` removes exactly that wrapper and leaves
    everything else on the clock alone.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> Callable[[float], None]:
        def _fire(delta_time: float) -> None:
            callback()

        arcade.schedule_once(_fire, float(delay))
        return _fire

    def cancel(self, handle: Callable[[float], None] | None) -> None:
        if handle is not None:
            arcade.unschedule(handle)


class ArcadeTooltipRenderer:
    """Keeps the last render command and draws it during ``on_draw``."""

    font_size = 11

    def __init__(self, frame: ArcadeFrame) -> None:
        self.frame = frame
        self.command: RenderCommand | None = None

    def show(self, command: RenderCommand) -> None:
        self.command = command

    def hide(self) -> None:
        self.command = None

    def draw(self) -> None:
        command = self.command
        if command is None:
            return
        options = command.options
        border = int(options.get("border_width", 0))
        pad = int(options.get("internal_border_width", 0))
        extent = measure_text(command.text)
        cell_h = self.frame.char_height + self.frame.line_spacing
        width = extent.columns * self.frame.char_width + 2 * (border + pad)
        height = extent.rows * cell_h + 2 * (border + pad)
        screen_h = self.frame.display_height
        left = command.left
        top = screen_h - command.top
        bottom = top - height
        background = to_rgba(options.get("background_color"), constants.DEFAULT_BACKGROUND)
        foreground = to_rgba(options.get("foreground_color"), constants.DEFAULT_FOREGROUND)
        arcade.draw_lrbt_rectangle_filled(left, left + width, bottom, top, background)
        if border > 0:
            arcade.draw_lrbt_rectangle_outline(left, left + width, bottom, top, foreground, border)
        text_x = left + border + pad
        text_y = top - border - pad - self.frame.char_height
        for line in command.text.splitlines() or [""]:
            arcade.draw_text(line, text_x, text_y, foreground, self.font_size)
            text_y -= cell_h


def to_rgba(value: Any, fallback: str) -> tuple[int, int, int, int]:
    """Convert a colour accepted by the style registry into an RGBA tuple."""

    color = lookup_color(fallback if value is None else value)
    if color is None:
        color = lookup_color(fallback)
    return tuple(color)
