from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so handlers owned by short-lived systems keep receiving events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# FRAME GEOMETRY
# ============================================================================
EVENT_FRAME_ORIGIN_UPDATED = "frame_origin_updated"  # payload: frame, origin=FrameOrigin


# ============================================================================
# POINTER
# ============================================================================
EVENT_POINTER_WARPED = "pointer_warped"            # payload: frame, x, y, from_x, from_y


# ============================================================================
# TOOLTIP LIFECYCLE
# ============================================================================
EVENT_TOOLTIP_SHOWN = "tooltip_shown"              # payload: text, frame, x, y, width, height, timeout
EVENT_TOOLTIP_HIDDEN = "tooltip_hidden"            # payload: reason=str ("hide" | "timeout")
