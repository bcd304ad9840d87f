from __future__ import annotations

from dataclasses import dataclass

from postip.components.overlay_size import OverlaySize


@dataclass(frozen=True, slots=True)
class ScreenRect:
    """Rectangle in absolute screen pixels (right/bottom inclusive)."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_point(cls, x: int, y: int, size: OverlaySize) -> "ScreenRect":
        return cls(left=x, top=y, right=x + size.width_px, bottom=y + size.height_px)

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom
