"""Logistic activation and its derivative."""
from __future__ import annotations

import math


def sigmoid(x: float) -> float:
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    # exp(-x) overflows for very negative x
    z = math.exp(x)
    return z / (1.0 + z)


def dsigmoid(y: float) -> float:
    """Derivative of :func:`sigmoid` expressed through its output ``y``."""

    return y * (1.0 - y)


__all__ = ["sigmoid", "dsigmoid"]
