"""Matrix engine, activations and error types."""

from .activations import dsigmoid, sigmoid
from .errors import DimensionMismatch, InvalidArgument, InvalidDimension, TinyNetError
from .matrix import Matrix

__all__ = [
    "Matrix",
    "sigmoid",
    "dsigmoid",
    "TinyNetError",
    "InvalidDimension",
    "DimensionMismatch",
    "InvalidArgument",
]
