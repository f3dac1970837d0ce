"""Network definitions."""

from .config import NetworkConfig
from .network import NeuralNetwork

__all__ = [
    "NetworkConfig",
    "NeuralNetwork",
]
