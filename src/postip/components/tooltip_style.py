from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TooltipStyle:
    """Colours and border widths for a tooltip.

    ``None`` fields are filled in from the named style, then from the
    hardcoded defaults (see ``postip.styles.registry.resolve_style``).
    """

    foreground: Any = None
    background: Any = None
    border_width: int | None = None
    internal_border_width: int | None = None
