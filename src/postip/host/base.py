from __future__ import annotations

from typing import Any, Callable, Protocol

from postip.components.render_command import RenderCommand


class Frame(Protocol):
    """Top-level window the tooltip belongs to."""

    window_id: str
    char_width: int
    char_height: int
    line_spacing: int
    display_width: int
    display_height: int


class Viewport(Protocol):
    """Scrollable region of a frame, positioned in frame pixels."""

    left: int
    top: int
    has_header: bool

    def glyph_box(self, position: Any) -> tuple[int, int, int | None] | None:
        """Return ``(x, y, height)`` of ``position`` relative to the viewport, or ``None`` if not visible."""
        ...


class FrameInspector(Protocol):
    def report(self, frame: Any) -> str:
        ...


class Renderer(Protocol):
    def show(self, command: RenderCommand) -> None:
        ...

    def hide(self) -> None:
        ...


class Pointer(Protocol):
    def position(self) -> tuple[Any, Any, Any] | None:
        """Return ``(frame, x, y)`` in absolute pixels, or ``None``."""
        ...

    def warp(self, frame: Any, x: int, y: int) -> None:
        ...


class TimerFacility(Protocol):
    """Host timer list shared with unrelated scheduled work."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...
