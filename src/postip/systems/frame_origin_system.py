from __future__ import annotations

import logging
import re
from typing import Any

from esper import World

from postip import constants
from postip.components.frame_origin import FrameOrigin, FrameOriginCache
from postip.events.bus import EVENT_FRAME_ORIGIN_UPDATED, EventBus

logger = logging.getLogger(__name__)

_X_PATTERN = re.compile(r"^\s*" + re.escape(constants.ORIGIN_MARKER_X) + r"\s*(-?\d+)", re.MULTILINE)
_Y_PATTERN = re.compile(r"^\s*" + re.escape(constants.ORIGIN_MARKER_Y) + r"\s*(-?\d+)", re.MULTILINE)


class OriginLookupError(RuntimeError):
    """The absolute offset of a frame could not be determined."""


def parse_origin_report(report: str) -> FrameOrigin:
    """Extract the absolute upper-left corner from an inspector report."""

    x_match = _X_PATTERN.search(report or "")
    y_match = _Y_PATTERN.search(report or "")
    if x_match is None or y_match is None:
        raise OriginLookupError("Frame inspector report has no absolute upper-left coordinates")
    return FrameOrigin(x=int(x_match.group(1)), y=int(y_match.group(1)))


class FrameOriginSystem:
    """Looks up frame origins and keeps the last answer per frame in the world."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        inspector=None,
        inspector_timeout: float = constants.INSPECTOR_TIMEOUT,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        if inspector is None:
            from postip.host.xwininfo import XwininfoInspector

            inspector = XwininfoInspector(timeout=inspector_timeout)
        self.inspector = inspector
        self._cache = self._ensure_cache()

    def _ensure_cache(self) -> FrameOriginCache:
        entries = list(self.world.get_component(FrameOriginCache))
        if entries:
            return entries[0][1]
        entity = self.world.create_entity(FrameOriginCache())
        return self.world.component_for_entity(entity, FrameOriginCache)

    def get_origin(self, frame: Any, *, refresh: bool = True) -> FrameOrigin:
        if not refresh:
            cached = self._cache.get(frame)
            if cached is not None:
                return cached
        report = self.inspector.report(frame)
        try:
            origin = parse_origin_report(report)
        except OriginLookupError:
            logger.error(f"Could not parse frame origin for {frame!r}")
            raise
        previous = self._cache.get(frame)
        self._cache.store(frame, origin)
        if previous != origin:
            logger.debug(f"Frame origin for {frame!r}: ({origin.x}, {origin.y})")
        self.event_bus.emit(EVENT_FRAME_ORIGIN_UPDATED, frame=frame, origin=origin)
        return origin

    def cached_origin(self, frame: Any) -> FrameOrigin | None:
        return self._cache.get(frame)

    def invalidate(self, frame: Any | None = None) -> None:
        self._cache.drop(frame)
