from __future__ import annotations

import logging
from typing import Any

from postip.components.anchor import Anchor
from postip.components.frame_origin import FrameOrigin
from postip.components.overlay_size import OverlaySize
from postip.systems.frame_origin_system import FrameOriginSystem

logger = logging.getLogger(__name__)


class PositionSolver:
    """Turns an anchor inside a viewport into the tooltip's absolute top-left corner.

    The tooltip goes below the anchor line, clamped horizontally to the
    display. If it would run off the bottom it is flipped above the line
    instead; it is never moved sideways to make room.
    """

    def __init__(self, origin_system: FrameOriginSystem, *, header_height_fallback: bool = True) -> None:
        self.origin_system = origin_system
        self.header_height_fallback = header_height_fallback

    def solve(
        self,
        anchor: Anchor,
        overlay_size: OverlaySize | None = None,
        frame_origin: FrameOrigin | None = None,
        dx: int | None = None,
    ) -> tuple[int, int]:
        ax, ay, char_height = self.anchor_point(anchor, frame_origin, dx)
        frame = anchor.frame
        display_w = int(frame.display_width)
        display_h = int(frame.display_height)
        width = overlay_size.width_px if overlay_size is not None else 0
        height = overlay_size.height_px if overlay_size is not None else 0

        x = max(0, min(ax, display_w - width))
        y = ay + char_height
        if y + height > display_h:
            y = max(0, ay - height)
        return x, y

    def anchor_point(
        self,
        anchor: Anchor,
        frame_origin: FrameOrigin | None = None,
        dx: int | None = None,
    ) -> tuple[int, int, int]:
        """Return the anchor line's absolute top-left and its pixel height."""

        frame = anchor.frame
        viewport = anchor.viewport
        origin = frame_origin if frame_origin is not None else self.origin_system.get_origin(frame)
        rel_x, rel_y, glyph_height = self._glyph_box(anchor)
        offset = dx if dx is not None else (anchor.dx or 0)
        ax = origin.x + int(viewport.left) + rel_x + offset
        ay = origin.y + int(viewport.top) + rel_y
        return ax, ay, self._char_height(frame, viewport, glyph_height)

    def _glyph_box(self, anchor: Anchor) -> tuple[int, int, int | None]:
        box = anchor.viewport.glyph_box(anchor.position)
        if box is None:
            logger.debug(f"Anchor {anchor.position!r} is not visible; using viewport corner")
            return 0, 0, None
        rel_x, rel_y, height = box
        return int(rel_x), int(rel_y), (int(height) if height else None)

    def _char_height(self, frame: Any, viewport: Any, glyph_height: int | None) -> int:
        nominal = int(frame.char_height)
        if glyph_height is None:
            return nominal
        if self.header_height_fallback and viewport.has_header:
            return nominal
        return glyph_height
