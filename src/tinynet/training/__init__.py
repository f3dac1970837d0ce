"""Training drivers."""

from .session import EpochReport, TrainingHistory, TrainingInProgress, TrainingSession

__all__ = [
    "EpochReport",
    "TrainingHistory",
    "TrainingInProgress",
    "TrainingSession",
]
