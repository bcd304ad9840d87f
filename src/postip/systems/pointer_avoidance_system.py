from __future__ import annotations

import logging
from numbers import Real
from typing import Any

from postip import constants
from postip.components.screen_rect import ScreenRect
from postip.events.bus import EVENT_POINTER_WARPED, EventBus

logger = logging.getLogger(__name__)


class PointerAvoidanceSystem:
    """Moves the pointer off a tooltip rectangle before the tooltip covers it."""

    def __init__(self, event_bus: EventBus, pointer) -> None:
        self.event_bus = event_bus
        self.pointer = pointer

    def avoid(self, rect: ScreenRect, frame: Any) -> tuple[int, int] | None:
        sample = self.pointer.position() if self.pointer is not None else None
        if sample is None:
            return None
        pointer_frame, mx, my = sample
        if pointer_frame is not frame:
            return None
        if not _is_number(mx) or not _is_number(my):
            return None
        mx = int(mx)
        my = int(my)

        display_w = int(frame.display_width)
        display_h = int(frame.display_height)
        margin = constants.POINTER_EDGE_MARGIN
        # Sentinel for edges at the display boundary: moving past them is not an option.
        far = display_w + display_h
        dl = mx - rect.left + 1 if rect.left > margin else far
        dr = rect.right - mx if rect.right + 1 < display_w else far
        dt = my - rect.top + 1 if rect.top > margin else far
        db = rect.bottom - my if rect.bottom + 1 < display_h else far
        d = min(dl, dr, dt, db)
        if d <= constants.POINTER_INSIDE_THRESHOLD or d >= far:
            return None

        x, y = mx, my
        if d == dl:
            x = rect.left - margin
        elif d == dr:
            x = rect.right + 1
        elif d == dt:
            y = rect.top - margin
        else:
            y = rect.bottom + 1
        self.pointer.warp(frame, x, y)
        logger.debug(f"Pointer moved from ({mx}, {my}) to ({x}, {y}) to clear tooltip")
        self.event_bus.emit(EVENT_POINTER_WARPED, frame=frame, x=x, y=y, from_x=mx, from_y=my)
        return x, y


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
