"""Integer points and rectangles, plus alignment and distribution of item rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _round(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, factor: float) -> Point:
        return Point(_round(self.x * factor), _round(self.y * factor))

    __rmul__ = __mul__

    def manhattan_length(self) -> int:
        """Sum of the absolute coordinates."""
        return abs(self.x) + abs(self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom are the last pixel inside."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_points(cls, first: Point, second: Point) -> Rect:
        """The rectangle spanned by two corner points, both included."""
        left, right = sorted((first.x, second.x))
        top, bottom = sorted((first.y, second.y))
        return cls(left, top, right - left + 1, bottom - top + 1)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(_trunc_div(self.left + self.right, 2), _trunc_div(self.top + self.bottom, 2))

    def is_empty(self) -> bool:
        """True when the rectangle covers no pixel."""
        return self.width <= 0 or self.height <= 0

    def contains(self, point: Point) -> bool:
        """True when the point lies inside, edges included."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def moved_to(self, x: int, y: int) -> Rect:
        """The same size placed with its top-left corner at (x, y)."""
        return Rect(x, y, self.width, self.height)

    def translated(self, delta: Point) -> Rect:
        """The same size shifted by ``delta``."""
        return Rect(self.x + delta.x, self.y + delta.y, self.width, self.height)


class Alignment(Enum):
    """Ways to line up several rectangles."""

    TOP = "top"
    MIDDLE = "middle"  # centres on one horizontal line
    BOTTOM = "bottom"
    LEFT = "left"
    CENTER = "center"  # centres on one vertical line
    RIGHT = "right"


class Axis(Enum):
    """Direction along which rectangles are spread out."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def align(rects: Iterable[Rect], alignment: Alignment | str) -> list[Rect]:
    """Line up rectangles; the result keeps the input order and sizes."""
    alignment = Alignment(alignment)
    rects = list(rects)
    if not rects:
        return []

    if alignment is Alignment.TOP:
        top = min(rect.top for rect in rects)
        return [rect.moved_to(rect.x, top) for rect in rects]
    if alignment is Alignment.BOTTOM:
        bottom = max(rect.bottom for rect in rects)
        return [rect.moved_to(rect.x, bottom - rect.height) for rect in rects]
    if alignment is Alignment.LEFT:
        left = min(rect.left for rect in rects)
        return [rect.moved_to(left, rect.y) for rect in rects]
    if alignment is Alignment.RIGHT:
        right = max(rect.right for rect in rects)
        return [rect.moved_to(right - rect.width, rect.y) for rect in rects]
    if alignment is Alignment.MIDDLE:
        anchor = min(rects, key=lambda rect: rect.left)
        line = anchor.center.y
        return [rect.moved_to(rect.x, line - _trunc_div(rect.height, 2)) for rect in rects]
    anchor = min(rects, key=lambda rect: rect.top)
    line = anchor.center.x
    return [rect.moved_to(line - _trunc_div(rect.width, 2), rect.y) for rect in rects]


def distribute(rects: Iterable[Rect], axis: Axis | str) -> list[Rect]:
    """Space rectangles evenly along an axis; the result keeps the input order."""
    axis = Axis(axis)
    rects = list(rects)
    if not rects:
        return []

    horizontal = axis is Axis.HORIZONTAL
    order = sorted(range(len(rects)), key=lambda i: rects[i].x if horizontal else rects[i].y)
    first, last = rects[order[0]], rects[order[-1]]

    if horizontal:
        bar = last.right - first.left - sum(rect.width for rect in rects)
    else:
        bar = last.bottom - first.top - sum(rect.height for rect in rects)
    gap = _trunc_div(bar, max(1, len(rects) - 1))

    result = list(rects)
    cursor = first.x if horizontal else first.y
    for index in order:
        rect = rects[index]
        if horizontal:
            result[index] = rect.moved_to(cursor, rect.y)
            cursor += rect.width + gap
        else:
            result[index] = rect.moved_to(rect.x, cursor)
            cursor += rect.height + gap
    return result