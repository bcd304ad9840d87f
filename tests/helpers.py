from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from postip.components.render_command import RenderCommand


def xwininfo_report(x: int, y: int) -> str:
    return (
        "\n"
        "xwininfo: Window id: 0x3a00007 \"demo\"\n"
        "\n"
        f"  Absolute upper-left X:  {x}\n"
        f"  Absolute upper-left Y:  {y}\n"
        "  Relative upper-left X:  0\n"
        "  Relative upper-left Y:  0\n"
        "  Width: 800\n"
        "  Height: 600\n"
    )


@dataclass(eq=False)
class FakeFrame:
    window_id: str = "0x3a00007"
    char_width: int = 8
    char_height: int = 16
    line_spacing: int = 0
    display_width: int = 1920
    display_height: int = 1080


@dataclass
class FakeViewport:
    """Viewport whose glyph boxes are looked up in a dict; missing keys are scrolled out."""

    left: int = 0
    top: int = 0
    has_header: bool = False
    boxes: dict[Any, tuple[int, int, int | None]] = field(default_factory=dict)

    def glyph_box(self, position):
        return self.boxes.get(position)


class FakeInspector:
    def __init__(self, report: str = "") -> None:
        self.reports = [report]
        self.calls: list[Any] = []

    def set_report(self, report: str) -> None:
        self.reports = [report]

    def report(self, frame: Any) -> str:
        self.calls.append(frame)
        return self.reports[-1]


class FakePointer:
    def __init__(self, frame: Any = None, x: Any = None, y: Any = None) -> None:
        self.frame = frame
        self.x = x
        self.y = y
        self.warps: list[tuple[Any, int, int]] = []

    def position(self):
        if self.frame is None:
            return None
        return self.frame, self.x, self.y

    def warp(self, frame: Any, x: int, y: int) -> None:
        self.warps.append((frame, x, y))
        self.x = x
        self.y = y


class RecordingRenderer:
    def __init__(self, events: list[str] | None = None) -> None:
        self.commands: list[RenderCommand] = []
        self.hide_calls = 0
        self.visible = False
        self.events = events if events is not None else []

    def show(self, command: RenderCommand) -> None:
        self.commands.append(command)
        self.visible = True
        self.events.append("render")

    def hide(self) -> None:
        self.hide_calls += 1
        self.visible = False
        self.events.append("hide")

    @property
    def last(self) -> RenderCommand:
        return self.commands[-1]
