from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OverlaySize:
    """Pixel size of the rendered overlay, borders included."""

    width_px: int
    height_px: int
