"""Colour lookup on top of arcade's colour table and hex parsing.

Names are matched against ``arcade.color`` ignoring case, spaces, hyphens and
underscores, so ``"lightblue"``, ``"Light Blue"`` and ``"LIGHT_BLUE"`` are the
same colour.
"""
from __future__ import annotations

import re
from typing import Any

import arcade
from arcade.types import Color

_NAME_NOISE = re.compile(r"[\s_\-]+")

_NAMED_COLORS: dict[str, Color] = {
    name.replace("_", ""): value
    for name, value in vars(arcade.color).items()
    if name.isupper() and isinstance(value, Color)
}


def _normalize_name(name: str) -> str:
    return _NAME_NOISE.sub("", name).upper()


def lookup_color(value: Any) -> Color | None:
    """Return the RGBA colour for ``value``, or ``None`` if it is not a colour.

    Accepts arcade colour names, ``#``-prefixed hex strings and RGB(A) tuples
    of ints in ``0..255``.
    """

    if isinstance(value, str):
        if value.startswith("#"):
            try:
                return Color.from_hex_string(value)
            except ValueError:
                return None
        return _NAMED_COLORS.get(_normalize_name(value)) if value.strip() else None
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        if all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value):
            return Color(*value)
    return None


def is_valid_color(value: Any) -> bool:
    return lookup_color(value) is not None
