import random

import pytest

from tinynet.core import InvalidArgument
from tinynet.data import (
    DIGIT_CLASSES,
    IMAGE_SIZE,
    INPUT_SIZE,
    demo_dataset,
    digit_pattern,
    one_hot,
    xor_dataset,
)
from tinynet.models import NeuralNetwork
from tinynet.training import TrainingSession


@pytest.mark.parametrize("digit", [0, 1, 2])
def test_digit_patterns_are_binary_images(digit) -> None:
    pixels = digit_pattern(digit)
    assert len(pixels) == INPUT_SIZE == IMAGE_SIZE * IMAGE_SIZE
    assert set(pixels) == {0.0, 1.0}


def test_digit_one_is_a_vertical_bar() -> None:
    pixels = digit_pattern(1)
    lit = {(index // IMAGE_SIZE, index % IMAGE_SIZE) for index, value in enumerate(pixels) if value}
    assert lit == {(row, col) for row in range(4, 24) for col in (14, 15)}


def test_digit_zero_is_a_ring_around_the_centre() -> None:
    pixels = digit_pattern(0)
    row = 14 * IMAGE_SIZE
    # distances 0, 5, 6, 7 and 8 from the centre along row 14
    assert [pixels[row + col] for col in (14, 9, 8, 7, 6)] == [0.0, 0.0, 1.0, 1.0, 0.0]


def test_digit_two_has_top_and_bottom_strokes() -> None:
    pixels = digit_pattern(2)
    assert all(pixels[6 * IMAGE_SIZE + col] == 1.0 for col in range(8, 20))
    assert all(pixels[22 * IMAGE_SIZE + col] == 1.0 for col in range(8, 20))
    assert pixels[21 * IMAGE_SIZE + 4] == 1.0


@pytest.mark.parametrize("digit", [-1, 3, 9])
def test_unknown_digit_is_rejected(digit) -> None:
    with pytest.raises(InvalidArgument):
        digit_pattern(digit)


def test_one_hot() -> None:
    assert one_hot(2, 3) == [0.0, 0.0, 1.0]
    with pytest.raises(InvalidArgument):
        one_hot(3, 3)
    with pytest.raises(InvalidArgument):
        one_hot(0, 0)


def test_datasets_have_consistent_shapes() -> None:
    digits = demo_dataset()
    assert len(digits) == DIGIT_CLASSES
    for index, example in enumerate(digits):
        assert len(example.inputs) == INPUT_SIZE
        assert example.target == tuple(one_hot(index, DIGIT_CLASSES))
    xor = xor_dataset()
    assert [example.target for example in xor] == [(0.0,), (1.0,), (1.0,), (0.0,)]


def test_network_separates_digit_patterns() -> None:
    network = NeuralNetwork(INPUT_SIZE, 8, DIGIT_CLASSES, rng=random.Random(0))
    session = TrainingSession(network, demo_dataset())
    history = session.run(100)
    assert history.losses[-1] < history.losses[0]
    for digit, example in enumerate(session.examples):
        outputs = session.predict(example.inputs)
        assert max(range(DIGIT_CLASSES), key=outputs.__getitem__) == digit
