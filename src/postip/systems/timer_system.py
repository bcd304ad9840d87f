from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable

from postip.events.bus import EVENT_TICK, EventBus

_handle_ids = itertools.count(1)


@dataclass(eq=False, slots=True)
class TimerHandle:
    """Identity of one scheduled callback. Compared by identity only."""

    delay: float
    callback: Callable[[], None] = field(repr=False)
    due: float = 0.0
    id: int = field(default_factory=lambda: next(_handle_ids))
    cancelled: bool = False
    fired: bool = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class TickTimerFacility:
    """One-shot timers advanced by ``EVENT_TICK`` on the event bus.

    Any number of unrelated callbacks can be pending; ``cancel`` only ever
    touches the handle it is given.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus
        self._elapsed: float = 0.0
        self._timers: list[TimerHandle] = []
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(delay=float(delay), callback=callback, due=self._elapsed + max(0.0, float(delay)))
        self._timers.append(handle)
        return handle

    def cancel(self, handle: TimerHandle | None) -> None:
        if handle is None:
            return
        handle.cancelled = True
        self._timers = [timer for timer in self._timers if timer is not handle]

    def pending(self) -> list[TimerHandle]:
        return [timer for timer in self._timers if timer.active]

    def on_tick(self, sender, **payload):
        dt = payload.get("dt", 1 / 60)
        try:
            dt_val = float(dt)
        except (TypeError, ValueError):
            dt_val = 1 / 60
        self.advance(dt_val)

    def advance(self, dt: float) -> None:
        self._elapsed += max(0.0, dt)
        due = [timer for timer in self._timers if timer.active and timer.due <= self._elapsed]
        if not due:
            return
        self._timers = [timer for timer in self._timers if timer not in due]
        for timer in sorted(due, key=lambda t: (t.due, t.id)):
            # An earlier callback in this batch may have cancelled this one.
            if timer.cancelled:
                continue
            timer.fired = True
            timer.callback()
