"""Easing functions that shape the progress of an animation."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable


class EasingVariety(enum.Enum):
    """The curve an easing follows, which tunes its acceleration."""

    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    QUARTIC = "quartic"
    QUINTIC = "quintic"
    EXPONENTIAL = "exponential"
    CIRCULAR = "circular"
    SIN = "sin"


_POWERS = {
    EasingVariety.QUADRATIC: 2,
    EasingVariety.CUBIC: 3,
    EasingVariety.QUARTIC: 4,
    EasingVariety.QUINTIC: 5,
}


def _ease_in(variety: EasingVariety, x: float) -> float:
    if variety in _POWERS:
        return x ** _POWERS[variety]
    if variety is EasingVariety.EXPONENTIAL:
        return 0.0 if x == 0.0 else 2.0 ** (10.0 * x - 10.0)
    if variety is EasingVariety.CIRCULAR:
        return 1.0 - math.sqrt(1.0 - x**2)
    return 1.0 - math.cos((x * math.pi) / 2.0)


def _ease_out(variety: EasingVariety, x: float) -> float:
    if variety in _POWERS:
        return 1.0 - (1.0 - x) ** _POWERS[variety]
    if variety is EasingVariety.EXPONENTIAL:
        return 1.0 if x == 1.0 else 1.0 - 2.0 ** (-10.0 * x)
    if variety is EasingVariety.CIRCULAR:
        return math.sqrt(1.0 - (x - 1.0) ** 2)
    return math.sin((x * math.pi) / 2.0)


def _ease_in_out(variety: EasingVariety, x: float) -> float:
    if variety in _POWERS:
        power = _POWERS[variety]
        if x < 0.5:
            return 2.0 ** (power - 1) * x**power
        return 1.0 - (-2.0 * x + 2.0) ** power / 2.0
    if variety is EasingVariety.EXPONENTIAL:
        if x == 0.0:
            return 0.0
        if x == 1.0:
            return 1.0
        if x < 0.5:
            return 2.0 ** (20.0 * x - 10.0) / 2.0
        return (2.0 - 2.0 ** (-20.0 * x + 10.0)) / 2.0
    if variety is EasingVariety.CIRCULAR:
        if x < 0.5:
            return (1.0 - math.sqrt(1.0 - (2.0 * x) ** 2)) / 2.0
        return (math.sqrt(1.0 - (-2.0 * x + 2.0) ** 2) + 1.0) / 2.0
    return -((math.cos(x * math.pi) - 1.0) / 2.0)


_KINDS: dict[str, Callable[[EasingVariety, float], float]] = {
    "in": _ease_in,
    "out": _ease_out,
    "in_out": _ease_in_out,
}


@dataclass(frozen=True)
class Easing:
    """The easing of an animation.

    ``kind`` is one of ``"linear"`` (the default), ``"in"`` (slow start),
    ``"out"`` (slow end) or ``"in_out"`` (fast at both ends, slow in the
    middle). Every kind but linear takes an :class:`EasingVariety`.
    """

    kind: str = "linear"
    variety: EasingVariety | None = None

    def __post_init__(self) -> None:
        if self.kind == "linear":
            if self.variety is not None:
                raise ValueError("a linear easing takes no variety")
        elif self.kind in _KINDS:
            if not isinstance(self.variety, EasingVariety):
                raise ValueError(f"easing {self.kind!r} needs an EasingVariety")
        else:
            raise ValueError(f"unknown easing kind {self.kind!r}")

    def get(self, x: float) -> float:
        """Apply the easing to ``x``, clamped to [0, 1]; the result is in [0, 1]."""
        x = min(max(float(x), 0.0), 1.0)
        if self.kind == "linear":
            return x
        return _KINDS[self.kind](self.variety, x)