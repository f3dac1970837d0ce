"""Configuration dataclass for the neural network."""
from __future__ import annotations

from dataclasses import dataclass
import math

from ..core.errors import InvalidArgument, InvalidDimension

DEFAULT_LEARNING_RATE = 0.15


@dataclass(slots=True)
class NetworkConfig:
    """Layer sizes and optimisation settings for :class:`NeuralNetwork`.

    Parameters
    ----------
    input_size:
        Length of the input vector, e.g. ``784`` for a 28x28 image.
    hidden_size:
        Number of units in the single hidden layer.
    output_size:
        Length of the output vector. Classification targets are one-hot
        encoded over this many classes.
    learning_rate:
        Scalar applied to every gradient step. Fixed for the lifetime of the
        network.
    seed:
        Optional seed for a private random generator used during weight
        initialisation. When omitted the process-wide :mod:`random` state is
        used.
    """

    input_size: int
    hidden_size: int
    output_size: int
    learning_rate: float = DEFAULT_LEARNING_RATE
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("input_size", "hidden_size", "output_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimension(f"{name} must be a positive integer")
        if not math.isfinite(self.learning_rate) or self.learning_rate <= 0.0:
            raise InvalidArgument("learning_rate must be positive and finite")
