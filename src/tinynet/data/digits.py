"""Synthetic datasets for exercising the network.

The digit patterns are crude 28x28 renderings of ``0``, ``1`` and ``2``
that stand in for hand-drawn input. They are enough to check that the
network separates three visually distinct classes; they are not a
substitute for a real digit corpus.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import List

from ..core.errors import InvalidArgument

IMAGE_SIZE = 28
INPUT_SIZE = IMAGE_SIZE * IMAGE_SIZE
DIGIT_CLASSES = 3

_CENTER = 14


@dataclass(frozen=True, slots=True)
class Example:
    """One training pair of an input vector and its target vector."""

    inputs: tuple[float, ...]
    target: tuple[float, ...]


def _set(pixels: List[float], row: int, col: int) -> None:
    pixels[row * IMAGE_SIZE + col] = 1.0


def digit_pattern(digit: int) -> List[float]:
    """Return a flat row-major ``28 * 28`` binary image of ``digit``."""

    pixels = [0.0 for _ in range(INPUT_SIZE)]
    if digit == 0:
        for row in range(6, 22):
            for col in range(6, 22):
                dist = math.hypot(row - _CENTER, col - _CENTER)
                if 5.0 < dist < 8.0:
                    _set(pixels, row, col)
    elif digit == 1:
        for row in range(4, 24):
            _set(pixels, row, 14)
            _set(pixels, row, 15)
    elif digit == 2:
        for col in range(8, 20):
            _set(pixels, 6, col)
            _set(pixels, 22, col)
        for i in range(16):
            _set(pixels, 6 + i, 19 - i)
    else:
        raise InvalidArgument(f"no pattern for digit {digit!r}; expected 0, 1 or 2")
    return pixels


def one_hot(index: int, size: int) -> List[float]:
    if size <= 0:
        raise InvalidArgument("size must be positive")
    if not 0 <= index < size:
        raise InvalidArgument(f"index {index} out of range for {size} classes")
    encoded = [0.0 for _ in range(size)]
    encoded[index] = 1.0
    return encoded


def demo_dataset() -> List[Example]:
    """The three digit patterns paired with one-hot class targets."""

    return [
        Example(tuple(digit_pattern(digit)), tuple(one_hot(digit, DIGIT_CLASSES)))
        for digit in range(DIGIT_CLASSES)
    ]


def xor_dataset() -> List[Example]:
    return [
        Example((0.0, 0.0), (0.0,)),
        Example((0.0, 1.0), (1.0,)),
        Example((1.0, 0.0), (1.0,)),
        Example((1.0, 1.0), (0.0,)),
    ]


__all__ = [
    "IMAGE_SIZE",
    "INPUT_SIZE",
    "DIGIT_CLASSES",
    "Example",
    "digit_pattern",
    "one_hot",
    "demo_dataset",
    "xor_dataset",
]
