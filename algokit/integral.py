"""Definite integrals by Simpson's rule with step halving."""

from __future__ import annotations

import math
import warnings
from typing import Callable

Function = Callable[[float], float]

_MIN_RELATIVE_STEP = 1e-10


def adaptive_simpson(func: Function, a: float, b: float, epsilon: float) -> float:
    """Integrate ``func`` over [a, b], halving the step until two estimates
    differ by no more than ``epsilon``.

    Emits a RuntimeWarning and returns the last estimate if the step becomes
    smaller than a tiny fraction of the interval first.
    """
    h = (b - a) / 2
    odd_sum = func(a + h)
    even_sum = 0.0
    ends = func(a) + func(b)
    integral = (ends + 4 * odd_sum) * h / 3
    previous = 0.0
    intervals = 2

    while abs(integral - previous) > epsilon:
        previous = integral
        h /= 2
        new_odd = math.fsum(func(a + (2 * i + 1) * h) for i in range(intervals))
        intervals *= 2
        even_sum += odd_sum
        odd_sum = new_odd
        integral = (ends + 4 * odd_sum + 2 * even_sum) * h / 3
        if h < (b - a) * _MIN_RELATIVE_STEP:
            warnings.warn(
                "step limit reached before the requested precision",
                RuntimeWarning,
                stacklevel=2,
            )
            break
    return integral


class Integral:
    """An integrand with a precision; ``result`` holds the latest integral."""

    def __init__(self, func: Function, a: float, b: float, epsilon: float) -> None:
        self.func = func
        self.a = a
        self.b = b
        self.epsilon = epsilon
        self.result = adaptive_simpson(func, a, b, epsilon)

    def compute(self, a: float, b: float) -> float:
        """Integrate over new limits, store and return the result."""
        self.a = a
        self.b = b
        self.result = adaptive_simpson(self.func, a, b, self.epsilon)
        return self.result

    def __repr__(self) -> str:
        return (
            f"Integral(a={self.a!r}, b={self.b!r}, "
            f"epsilon={self.epsilon!r}, result={self.result!r})"
        )