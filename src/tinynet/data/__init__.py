"""Toy datasets for training demos."""

from .digits import (
    DIGIT_CLASSES,
    IMAGE_SIZE,
    INPUT_SIZE,
    Example,
    demo_dataset,
    digit_pattern,
    one_hot,
    xor_dataset,
)

__all__ = [
    "DIGIT_CLASSES",
    "IMAGE_SIZE",
    "INPUT_SIZE",
    "Example",
    "demo_dataset",
    "digit_pattern",
    "one_hot",
    "xor_dataset",
]
