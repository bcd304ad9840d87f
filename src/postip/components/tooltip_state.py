from dataclasses import dataclass
from typing import Any

from postip.components.anchor import Anchor
from postip.components.frame_origin import FrameOrigin
from postip.components.overlay_size import OverlaySize
from postip.components.tooltip_style import TooltipStyle


@dataclass(slots=True)
class TooltipState:
    """Single tooltip session shared across the engine."""

    visible: bool = False
    text: str = ""
    x: int = 0
    y: int = 0
    size: OverlaySize | None = None
    frame: Any = None
    anchor: Anchor | None = None
    origin: FrameOrigin | None = None
    style: TooltipStyle | str | None = None
    timeout: float | None = None
    dismiss_handle: Any = None
