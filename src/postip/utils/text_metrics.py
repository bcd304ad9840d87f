from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from postip import constants
from postip.components.overlay_size import OverlaySize

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class TextExtent:
    """Size of a block of text in character cells."""

    columns: int
    rows: int


def char_width(ch: str) -> int:
    """Return how many cells ``ch`` occupies on a fixed-pitch surface."""

    if ch == "\t":
        # Handled by string_width, which knows the current column.
        return 1
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in ("Mn", "Me", "Cf", "Cc"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def string_width(line: str, tab_width: int = constants.TAB_WIDTH) -> int:
    """Display width of a single line."""

    column = 0
    for ch in line:
        if ch == "\t":
            column += tab_width - (column % tab_width)
        else:
            column += char_width(ch)
    return column


def split_lines(text: str) -> list[str]:
    return _LINE_BREAK.split(text)


def measure_text(text: str) -> TextExtent:
    """Return the widest line's width and the number of lines in ``text``."""

    lines = split_lines(text or "")
    return TextExtent(columns=max(string_width(line) for line in lines), rows=len(lines))


def compute_pixel_width(columns: int, char_width: int, border_width: int, internal_border_width: int) -> int:
    return columns * char_width + 2 * (border_width + internal_border_width)


def compute_pixel_height(
    rows: int,
    char_height: int,
    line_spacing: int,
    border_width: int,
    internal_border_width: int,
) -> int:
    return rows * (char_height + line_spacing) + 2 * (border_width + internal_border_width)


def to_pixels(
    columns: int,
    rows: int,
    char_width_px: int,
    char_height_px: int,
    line_spacing_px: int,
    border_width_px: int,
    internal_border_width_px: int,
) -> OverlaySize:
    return OverlaySize(
        width_px=compute_pixel_width(columns, char_width_px, border_width_px, internal_border_width_px),
        height_px=compute_pixel_height(
            rows, char_height_px, line_spacing_px, border_width_px, internal_border_width_px
        ),
    )


def wrap_text(text: str, max_columns: int) -> str:
    """Word-wrap each paragraph of ``text`` to ``max_columns`` display cells.

    Blank lines are kept. Words wider than the limit are split at character
    boundaries so no produced line exceeds ``max_columns``.
    """

    if max_columns < 1:
        raise ValueError("max_columns must be positive")
    wrapped: list[str] = []
    for paragraph in split_lines(text or ""):
        words = paragraph.split()
        if not words:
            wrapped.append("")
            continue
        current = ""
        current_width = 0
        for word in words:
            for piece in _split_word(word, max_columns):
                piece_width = string_width(piece)
                if not current:
                    current, current_width = piece, piece_width
                elif current_width + 1 + piece_width <= max_columns:
                    current += " " + piece
                    current_width += 1 + piece_width
                else:
                    wrapped.append(current)
                    current, current_width = piece, piece_width
        wrapped.append(current)
    return "\n".join(wrapped)


def _split_word(word: str, max_columns: int) -> list[str]:
    if string_width(word) <= max_columns:
        return [word]
    pieces: list[str] = []
    current = ""
    width = 0
    for ch in word:
        w = char_width(ch)
        if current and width + w > max_columns:
            pieces.append(current)
            current, width = "", 0
        current += ch
        width += w
    if current:
        pieces.append(current)
    return pieces


def truncate_rows(text: str, max_rows: int) -> str:
    """Keep at most ``max_rows`` lines of ``text``."""

    if max_rows < 1:
        raise ValueError("max_rows must be positive")
    lines = split_lines(text or "")
    return "\n".join(lines[:max_rows])
