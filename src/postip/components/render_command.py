from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class RenderCommand:
    """Everything a renderer needs to put a tooltip on screen.

    ``options`` carries ``border_width``, ``internal_border_width``, ``left``
    and ``top`` and, only when valid overrides were given,
    ``foreground_color`` / ``background_color``.
    """

    text: str
    frame: Any
    options: Dict[str, Any] = field(default_factory=dict)
    timeout: float | None = None

    @property
    def left(self) -> int:
        return int(self.options.get("left", 0))

    @property
    def top(self) -> int:
        return int(self.options.get("top", 0))
