"""Exceptions raised when an operation's preconditions are violated."""
from __future__ import annotations


class TinyNetError(ValueError):
    """Base class for precondition failures in the matrix engine and network."""


class InvalidDimension(TinyNetError):
    """A matrix or layer size is not a positive integer."""


class DimensionMismatch(TinyNetError):
    """Operand shapes are incompatible for the requested operation."""


class InvalidArgument(TinyNetError):
    """A caller-supplied value does not fit the configured network."""


__all__ = [
    "TinyNetError",
    "InvalidDimension",
    "DimensionMismatch",
    "InvalidArgument",
]
