from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Anchor:
    """Logical content position a tooltip attaches to.

    ``position`` is whatever the viewport understands (a ``(line, column)``
    pair, a content offset, ...); the engine only hands it back to
    ``viewport.glyph_box``.
    """

    frame: Any
    viewport: Any
    position: Any = None
    dx: int | None = None
