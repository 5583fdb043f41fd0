"""Roots of the quadratic equation a*x**2 + b*x + c = 0."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Roots:
    """The two roots; complex conjugates when the discriminant is negative."""

    x1: float | complex
    x2: float | complex

    @property
    def is_real(self) -> bool:
        return not isinstance(self.x1, complex)

    @property
    def is_repeated(self) -> bool:
        return self.x1 == self.x2


def solve_quadratic(a: float, b: float, c: float) -> Roots:
    """Solve a quadratic equation; ``a`` must not be zero."""
    if a == 0:
        raise ValueError("coefficient a must be non-zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return Roots((-b + root) / (2 * a), (-b - root) / (2 * a))
    if discriminant == 0:
        x = -b / (2 * a)
        return Roots(x, x)
    real = -b / (2 * a)
    imaginary = math.sqrt(-discriminant) / (2 * a)
    return Roots(complex(real, imaginary), complex(real, -imaginary))