from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class AutoHideSystem:
    """Keeps at most one pending tooltip dismissal on a shared timer facility."""

    def __init__(self, timers) -> None:
        self.timers = timers
        self._pending: Any = None

    @property
    def pending(self) -> Any:
        return self._pending

    def schedule(self, timeout: float | None, callback: Callable[[], None]) -> Any:
        """Replace any pending dismissal with ``callback`` after ``timeout`` seconds.

        A missing or non-positive timeout schedules nothing and only cancels
        the pending dismissal.
        """
        self.cancel_pending()
        if timeout is None or timeout <= 0:
            return None

        def _dismiss() -> None:
            if self._pending is handle_ref[0]:
                self._pending = None
            callback()

        handle_ref: list[Any] = [None]
        handle = self.timers.call_later(float(timeout), _dismiss)
        handle_ref[0] = handle
        self._pending = handle
        logger.debug(f"Tooltip dismissal scheduled in {timeout}s")
        return handle

    def cancel_pending(self) -> None:
        if self._pending is None:
            return
        handle, self._pending = self._pending, None
        self.timers.cancel(handle)
        logger.debug("Pending tooltip dismissal cancelled")
