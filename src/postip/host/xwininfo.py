from __future__ import annotations

import logging
import subprocess
from typing import Any, Sequence

from postip import constants
from postip.systems.frame_origin_system import OriginLookupError

logger = logging.getLogger(__name__)


class XwininfoInspector:
    """Reports a frame's window geometry by running ``xwininfo -id <window>``."""

    def __init__(
        self,
        *,
        command: str = constants.INSPECTOR_COMMAND,
        timeout: float = constants.INSPECTOR_TIMEOUT,
        extra_args: Sequence[str] = (),
    ) -> None:
        self.command = command
        self.timeout = timeout
        self.extra_args = tuple(extra_args)

    def build_args(self, frame: Any) -> list[str]:
        window_id = getattr(frame, "window_id", None)
        if window_id is None or window_id == "":
            raise OriginLookupError(f"Frame {frame!r} has no window id to inspect")
        return [self.command, *self.extra_args, "-id", str(window_id)]

    def report(self, frame: Any) -> str:
        args = self.build_args(frame)
        logger.debug(f"Querying frame origin: {' '.join(args)}")
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except FileNotFoundError as exc:
            raise OriginLookupError(f"{self.command} is not available: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise OriginLookupError(f"{self.command} timed out after {self.timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            raise OriginLookupError(f"{self.command} failed ({exc.returncode}): {stderr}") from exc
        return completed.stdout
