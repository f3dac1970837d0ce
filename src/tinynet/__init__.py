"""Minimal feed-forward neural network on a hand-written matrix engine.

The package is split into:

- ``core``: the dense :class:`~tinynet.core.matrix.Matrix`, the logistic
  activation and the error types;
- ``models``: :class:`~tinynet.models.network.NeuralNetwork` and its config;
- ``training``: a caller-owned :class:`~tinynet.training.session.TrainingSession`;
- ``data``: toy datasets used by the demo script and tests.
"""

from .core import (
    DimensionMismatch,
    InvalidArgument,
    InvalidDimension,
    Matrix,
    TinyNetError,
    dsigmoid,
    sigmoid,
)
from .models import NetworkConfig, NeuralNetwork
from .training import EpochReport, TrainingHistory, TrainingInProgress, TrainingSession

__all__ = [
    "Matrix",
    "sigmoid",
    "dsigmoid",
    "TinyNetError",
    "InvalidDimension",
    "DimensionMismatch",
    "InvalidArgument",
    "NetworkConfig",
    "NeuralNetwork",
    "EpochReport",
    "TrainingHistory",
    "TrainingInProgress",
    "TrainingSession",
]
