from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class FrameOrigin:
    """Absolute screen offset of a frame's top-left corner."""

    x: int
    y: int


@dataclass(slots=True)
class FrameOriginCache:
    """Last origin reported for each frame, keyed by frame identity."""

    origins: Dict[int, FrameOrigin] = field(default_factory=dict)
    frames: Dict[int, Any] = field(default_factory=dict)
    last_frame: Any = None

    def store(self, frame: Any, origin: FrameOrigin) -> None:
        key = id(frame)
        self.origins[key] = origin
        self.frames[key] = frame
        self.last_frame = frame

    def get(self, frame: Any) -> FrameOrigin | None:
        return self.origins.get(id(frame))

    def drop(self, frame: Any | None = None) -> None:
        if frame is None:
            self.origins.clear()
            self.frames.clear()
            self.last_frame = None
            return
        key = id(frame)
        self.origins.pop(key, None)
        self.frames.pop(key, None)
        if self.last_frame is frame:
            self.last_frame = None
