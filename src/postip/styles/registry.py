from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from postip import constants
from postip.components.tooltip_style import TooltipStyle
from postip.styles.colors import is_valid_color

logger = logging.getLogger(__name__)


class StyleRegistry:
    """In-memory collection of named tooltip styles."""

    def __init__(self) -> None:
        self._styles: dict[str, TooltipStyle] = {}

    def register(self, name: str, style: TooltipStyle, *, replace: bool = False) -> None:
        if name in self._styles and not replace:
            raise ValueError(f"Style '{name}' already registered")
        self._styles[name] = style

    def get(self, name: str) -> TooltipStyle:
        try:
            return self._styles[name]
        except KeyError as exc:
            raise KeyError(f"Style '{name}' is not registered") from exc

    def has(self, name: str) -> bool:
        return name in self._styles

    def names(self) -> Iterable[str]:
        return tuple(self._styles)


default_style_registry = StyleRegistry()
default_style_registry.register(
    constants.DEFAULT_STYLE_NAME,
    TooltipStyle(
        foreground=constants.DEFAULT_FOREGROUND,
        background=constants.DEFAULT_BACKGROUND,
    ),
)


def register_style(name: str, style: TooltipStyle, *, replace: bool = False) -> None:
    default_style_registry.register(name, style, replace=replace)


@dataclass(frozen=True, slots=True)
class ResolvedStyle:
    """Style with every field decided.

    ``foreground``/``background`` stay ``None`` when no layer supplies a
    valid colour, so the renderer keeps its own default.
    """

    foreground: Any
    background: Any
    border_width: int
    internal_border_width: int


def resolve_style(
    style: TooltipStyle | str | None,
    *,
    registry: StyleRegistry | None = None,
    default_name: str = constants.DEFAULT_STYLE_NAME,
    border_width: int = constants.DEFAULT_BORDER_WIDTH,
    internal_border_width: int = constants.DEFAULT_INTERNAL_BORDER_WIDTH,
) -> ResolvedStyle:
    """Layer an explicit style over the named style and the hardcoded defaults."""

    registry = registry or default_style_registry
    base = _named_style(registry, default_name)
    explicit: TooltipStyle | None
    if isinstance(style, str):
        explicit = _named_style(registry, style)
    else:
        explicit = style

    layers = [layer for layer in (explicit, base) if layer is not None]
    foreground = _first_color(layers, "foreground")
    background = _first_color(layers, "background")
    bw = _first_set(layers, "border_width", border_width)
    ibw = _first_set(layers, "internal_border_width", internal_border_width)
    return ResolvedStyle(
        foreground=foreground,
        background=background,
        border_width=int(bw),
        internal_border_width=int(ibw),
    )


def _named_style(registry: StyleRegistry, name: str) -> TooltipStyle | None:
    try:
        return registry.get(name)
    except KeyError:
        logger.warning(f"Unknown tooltip style '{name}', using defaults")
        return None


def _first_color(layers: list[TooltipStyle], attr: str) -> Any:
    for layer in layers:
        value = getattr(layer, attr)
        if value is None:
            continue
        if is_valid_color(value):
            return value
        logger.warning(f"Ignoring invalid {attr} colour {value!r}")
    return None


def _first_set(layers: list[TooltipStyle], attr: str, fallback: int) -> int:
    for layer in layers:
        value = getattr(layer, attr)
        if value is not None:
            return value
    return fallback
