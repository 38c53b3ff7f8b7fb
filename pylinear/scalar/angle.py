"""Angle value types used by the transform constructors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Radian:
    """Angle in radians."""
    value: float

    @classmethod
    def from_degree(cls, angle: Degree) -> Radian:
        return cls(angle.value * math.pi / 180.0)

    def sin(self) -> float:
        return math.sin(self.value)

    def cos(self) -> float:
        return math.cos(self.value)

    def sin_cos(self) -> tuple[float, float]:
        return math.sin(self.value), math.cos(self.value)


@dataclass(frozen=True)
class Degree:
    """Angle in degrees."""
    value: float

    @classmethod
    def from_radian(cls, angle: Radian) -> Degree:
        return cls(angle.value * 180.0 / math.pi)

    def sin(self) -> float:
        return Radian.from_degree(self).sin()

    def cos(self) -> float:
        return Radian.from_degree(self).cos()

    def sin_cos(self) -> tuple[float, float]:
        return Radian.from_degree(self).sin_cos()


def as_radian(angle: Radian | Degree | float) -> Radian:
    """Normalize an angle argument; bare numbers are taken as radians."""
    if isinstance(angle, Radian):
        return angle
    if isinstance(angle, Degree):
        return Radian.from_degree(angle)
    return Radian(float(angle))
