"""Syntax colouring and auto-indent for style sheet text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import groupby
from typing import Optional

Rgba = tuple[int, int, int, int]

SELECTOR_COLOR: Rgba = (222, 49, 99, 255)
KEY_COLOR: Rgba = (151, 49, 197, 255)
VALUE_COLOR: Rgba = (204, 85, 0, 255)
COMMENT_COLOR: Rgba = (119, 136, 153, 255)
UNIT_COLOR: Rgba = (62, 106, 198, 255)
STRING_COLOR: Rgba = (80, 200, 120, 255)

_BLACK: Rgba = (0, 0, 0, 255)
_WHITE_RGB = (255, 255, 255)

_RULES: list[tuple[re.Pattern[str], Rgba]] = [
    (re.compile(r"^\s*[\w#\.>:\-, ]+\{", re.ASCII), SELECTOR_COLOR),
    (re.compile(r"[-\w]+(?=\s*:[^:])", re.ASCII), KEY_COLOR),
    (re.compile(r"(?<=:)\s*[-#\w\d% \(\)\., '\"]+", re.ASCII), VALUE_COLOR),
    (re.compile(r"/\*.*?\*/", re.ASCII), COMMENT_COLOR),
    (re.compile(r"(?<=\d)[a-zA-Z]{1,2}\b", re.ASCII), UNIT_COLOR),
    (re.compile(r"('.*?'|\".*?\")", re.ASCII), STRING_COLOR),
]

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{3,8}\b", re.ASCII)
_FUNC_COLOR = re.compile(r"([argb]+)\(([\d, \.]+)\)", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_LEADING_SPACE = re.compile(r"\s*", re.ASCII)


@dataclass(frozen=True)
class Span:
    """A run of characters drawn in one foreground colour."""

    start: int
    length: int
    color: Rgba

    @property
    def end(self) -> int:
        return self.start + self.length


def _parse_hex(digits: str) -> Rgba:
    if len(digits) == 3:
        r, g, b = (int(ch * 2, 16) for ch in digits)
        return (r, g, b, 255)
    if len(digits) == 6:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), 255)
    if len(digits) == 8:
        return (int(digits[2:4], 16), int(digits[4:6], 16),
                int(digits[6:8], 16), int(digits[0:2], 16))
    return _BLACK


def _to_int(value: str) -> int:
    return int(value) if _INTEGER.fullmatch(value) else 0


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


def _clamp(value: int) -> int:
    return max(0, min(value, 255))


def _parse_function(mode: str, values: str) -> Rgba:
    channels = {"r": 0, "g": 0, "b": 0, "a": 255}
    parts = [part.strip() for part in values.split(",") if part]
    for channel, value in zip(mode, parts):
        if channel == "a":
            channels["a"] = _clamp(int(255 * _to_float(value)))
        else:
            channels[channel] = _clamp(_to_int(value))
    return (channels["r"], channels["g"], channels["b"], channels["a"])


class _Formats:
    def __init__(self, length: int) -> None:
        self.colors: list[Optional[Rgba]] = [None] * length

    def paint(self, start: int, count: int, color: Optional[Rgba]) -> None:
        if start < 0 or start >= len(self.colors):
            return
        end = min(start + count, len(self.colors))
        self.colors[start:end] = [color] * (end - start)

    def at(self, position: int) -> Optional[Rgba]:
        if 0 <= position < len(self.colors):
            return self.colors[position]
        return None

    def paint_color_literal(self, match: re.Match[str], color: Rgba) -> None:
        end = match.end()
        previous = self.at(end)
        # The colour run is painted with the match end as its length, then the
        # character formats from the end onwards are reset to what followed.
        self.paint(match.start(), end, color)
        self.paint(end, end, previous)

    def spans(self) -> list[Span]:
        result = []
        for color, run in groupby(enumerate(self.colors), key=lambda pair: pair[1]):
            positions = [index for index, _ in run]
            if color is not None:
                result.append(Span(positions[0], len(positions), color))
        return result


def highlight(text: str) -> list[Span]:
    """Colour one line of style sheet text; uncoloured characters have no span."""
    formats = _Formats(len(text))
    for pattern, color in _RULES:
        for match in pattern.finditer(text):
            formats.paint(match.start(), match.end() - match.start(), color)

    for match in _HEX_COLOR.finditer(text):
        color = _parse_hex(match.group()[1:])
        if color[:3] == _WHITE_RGB and color[3] == 255:
            color = _BLACK
        formats.paint_color_literal(match, color)

    for match in _FUNC_COLOR.finditer(text):
        color = _parse_function(match.group(1), match.group(2))
        if color[:3] == _WHITE_RGB:
            color = _BLACK
        formats.paint_color_literal(match, color)

    return formats.spans()


def continuation_indent(text: str, position: int) -> str:
    """Indent to insert after Enter, given the cursor position after the newline."""
    left = text[: position - 1] if position >= 1 else text
    line = left[left.rfind("\n") + 1:]
    return _LEADING_SPACE.match(line).group()