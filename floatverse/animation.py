"""Progress-driven animations for a colour circle and a counting number."""

from __future__ import annotations

from dataclasses import dataclass, field

ZOOM = 1.25
DURATION_MS = 500


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass
class CircleAnimation:
    """A colour circle that swells and blends to a new colour over progress 0–100."""

    color: Color = Color(255, 255, 255, 0)
    split: bool = False
    split_color: Color = Color(255, 255, 255)
    _delta: tuple[int, int, int, int] = field(default=(0, 0, 0, 0), repr=False)

    def set_main_color(self, color: Color) -> None:
        """Switch to a new colour, remembering the difference to blend from."""
        self._delta = (
            color.r - self.color.r,
            color.g - self.color.g,
            color.b - self.color.b,
            color.a - self.color.a,
        )
        self.color = color

    def color_at(self, progress: int) -> Color:
        """Colour shown at the given animation progress."""
        if not 0 <= progress < 100:
            return self.color
        remaining = 100 - progress
        channels = (self.color.r, self.color.g, self.color.b, self.color.a)
        return Color(*(
            value - _trunc_div(delta * remaining, 100)
            for value, delta in zip(channels, self._delta)
        ))

    def diameter(self, width: int, height: int, progress: int) -> int:
        """Circle diameter inside a widget of this size at the given progress."""
        dia = int((height if width > height else width) / ZOOM)
        if progress <= 50:
            dia = int(dia + dia * 0.25 * progress / 50)
        elif progress < 100:
            dia = int(dia + dia * 0.25 * (100 - progress) / 50)
        return dia


@dataclass
class NumberAnimation:
    """A number that counts from its old value to a new one over progress 0–100."""

    number: int = 0
    delta: int = 0

    def set_number(self, value: int) -> None:
        """Set a new target number."""
        self.delta = value - self.number
        self.number = value

    def value_at(self, progress: int) -> int:
        """Number displayed at the given animation progress."""
        return self.number - _trunc_div(self.delta * (100 - progress), 100)