"""Demo host for the positioned tooltip engine.

Opens an arcade window showing a scrollable text panel. Clicking a character
shows a tooltip anchored to it; right click hides it, the arrow keys scroll
the panel and move the visible tooltip with its anchor.
"""
import logging

from arcade import Window, color, key, run, set_background_color, draw_text, MOUSE_BUTTON_RIGHT

from postip.components.anchor import Anchor
from postip.components.frame_origin import FrameOrigin
from postip.config import TooltipConfig
from postip.events.bus import EVENT_TOOLTIP_HIDDEN, EVENT_TOOLTIP_SHOWN, EventBus
from postip.host.arcade_host import (
    ArcadeFrame,
    ArcadePointer,
    ArcadeTimerFacility,
    ArcadeTooltipRenderer,
    TextPanelViewport,
)
from postip.systems.tooltip_system import TooltipSystem
from postip.world import create_world

logger = logging.getLogger(__name__)

SAMPLE_LINES = [
    f"{n:3d}  " + text
    for n, text in enumerate(
        [
            "def solve(anchor, overlay_size=None):",
            "    x, y = anchor_point(anchor)",
            "    return clamp(x), flip(y)",
            "",
            "# Wide characters count as two columns: 表示幅",
            "Click any character to anchor a tooltip to it.",
            "Tooltips near the bottom edge open above the line.",
        ]
        * 6,
        start=1,
    )
]

# The window is its own frame; its top-left is the origin.
WINDOW_ORIGIN = FrameOrigin(0, 0)


class TooltipDemoWindow(Window):
    def __init__(self):
        super().__init__(800, 600, "Positioned tooltips")
        self.event_bus = EventBus()
        self.world = create_world()
        self.frame = ArcadeFrame(self)
        self.viewport = TextPanelViewport(
            self.frame,
            lines=SAMPLE_LINES,
            left=16,
            top=16,
            visible_rows=(self.height - 32) // self.frame.char_height,
        )
        self.pointer = ArcadePointer(self.frame)
        self.renderer = ArcadeTooltipRenderer(self.frame)
        self.tooltip_system = TooltipSystem(
            self.world,
            self.event_bus,
            self.renderer,
            pointer=self.pointer,
            timers=ArcadeTimerFacility(),
            config=TooltipConfig(default_timeout=4.0, max_columns=40, max_rows=6),
        )
        self.event_bus.subscribe(EVENT_TOOLTIP_SHOWN, self._on_tooltip_shown)
        self.event_bus.subscribe(EVENT_TOOLTIP_HIDDEN, self._on_tooltip_hidden)
        set_background_color(color.WHITE_SMOKE)

    def on_draw(self):
        self.clear()
        cell_h = self.frame.char_height + self.frame.line_spacing
        first = self.viewport.first_line
        for row, line in enumerate(self.viewport.lines[first:first + self.viewport.visible_rows]):
            y = self.height - self.viewport.top - (row + 1) * cell_h
            draw_text(line, self.viewport.left, y, color.BLACK, 11)
        self.renderer.draw()

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.pointer.on_mouse_motion(x, y)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if button == MOUSE_BUTTON_RIGHT:
            self.tooltip_system.hide()
            return
        cell_h = self.frame.char_height + self.frame.line_spacing
        row = int((self.height - y - self.viewport.top) // cell_h)
        column = max(0, int((x - self.viewport.left) // self.frame.char_width))
        line = self.viewport.first_line + row
        if row < 0 or line >= len(self.viewport.lines):
            return
        anchor = Anchor(self.frame, self.viewport, (line, column))
        text = f"Line {line + 1}, column {column + 1}\n{self.viewport.lines[line].strip()}"
        self.tooltip_system.show_auto_sized(text, anchor=anchor, frame_origin=WINDOW_ORIGIN)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.DOWN:
            limit = max(0, len(self.viewport.lines) - self.viewport.visible_rows)
            self.viewport.first_line = min(limit, self.viewport.first_line + 1)
        elif symbol == key.UP:
            self.viewport.first_line = max(0, self.viewport.first_line - 1)
        else:
            return
        self.tooltip_system.reposition()

    def _on_tooltip_shown(self, sender, **payload):
        logger.info(f"Tooltip at ({payload.get('x')}, {payload.get('y')})")

    def _on_tooltip_hidden(self, sender, **payload):
        logger.info(f"Tooltip hidden ({payload.get('reason')})")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = TooltipDemoWindow()
    run()

if __name__ == "__main__":
    main()
