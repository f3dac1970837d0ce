"""Single-hidden-layer network trained by manual backpropagation."""
from __future__ import annotations

import logging
import random
from typing import Sequence

from ..core.activations import dsigmoid, sigmoid
from ..core.errors import InvalidArgument
from ..core.matrix import Matrix, Vector
from .config import DEFAULT_LEARNING_RATE, NetworkConfig

logger = logging.getLogger(__name__)


class NeuralNetwork:
    """Input -> hidden -> output network with logistic activations.

    Parameters are Xavier/Glorot initialised at construction and only ever
    changed by :meth:`train`. Each call to :meth:`train` performs one forward
    pass, one backward pass and one in-place update of both weight matrices
    and both bias columns, so the network is not safe to train from several
    threads at once.

    The weight and bias properties return copies; callers that render the
    network can read them freely without touching the live parameters.
    """

    def __init__(
        self,
        input_size: int,
        hidden_size: int,
        output_size: int,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        *,
        rng: random.Random | None = None,
    ) -> None:
        # Validates sizes and learning rate; the config itself is not kept.
        NetworkConfig(input_size, hidden_size, output_size, learning_rate)

        self.input_size = input_size
        self.hidden_size = hidden_size
        self.output_size = output_size
        self.learning_rate = float(learning_rate)

        self._weights_ih = Matrix(hidden_size, input_size)
        self._weights_ho = Matrix(output_size, hidden_size)
        self._bias_h = Matrix(hidden_size, 1)
        self._bias_o = Matrix(output_size, 1)
        for param in (self._weights_ih, self._weights_ho, self._bias_h, self._bias_o):
            param.randomize_uniform(rng)

        logger.debug(
            "initialised network %d-%d-%d with learning rate %g",
            input_size,
            hidden_size,
            output_size,
            self.learning_rate,
        )

    @classmethod
    def from_config(cls, config: NetworkConfig) -> NeuralNetwork:
        rng = random.Random(config.seed) if config.seed is not None else None
        return cls(
            config.input_size,
            config.hidden_size,
            config.output_size,
            config.learning_rate,
            rng=rng,
        )

    def __repr__(self) -> str:
        return (
            f"<NeuralNetwork {self.input_size}-{self.hidden_size}-{self.output_size} "
            f"learning_rate={self.learning_rate:g}>"
        )

    # ------------------------------------------------------------------
    # read-only parameter access
    # ------------------------------------------------------------------
    @property
    def weights_ih(self) -> Matrix:
        """Input -> hidden weights, shape ``(hidden_size, input_size)``."""

        return self._weights_ih.copy()

    @property
    def weights_ho(self) -> Matrix:
        """Hidden -> output weights, shape ``(output_size, hidden_size)``."""

        return self._weights_ho.copy()

    @property
    def bias_h(self) -> Matrix:
        return self._bias_h.copy()

    @property
    def bias_o(self) -> Matrix:
        return self._bias_o.copy()

    def parameters(self) -> dict[str, Matrix]:
        return {
            "weights_ih": self.weights_ih,
            "weights_ho": self.weights_ho,
            "bias_h": self.bias_h,
            "bias_o": self.bias_o,
        }

    # ------------------------------------------------------------------
    # inference and training
    # ------------------------------------------------------------------
    def predict(self, inputs: Sequence[float]) -> Vector:
        """Return the output activations for ``inputs``, each in (0, 1)."""

        self._check_length(inputs, self.input_size, "inputs")
        _, output = self._forward(Matrix.from_vector(inputs))
        return output.to_vector()

    def train(self, inputs: Sequence[float], targets: Sequence[float]) -> float:
        """Run one backpropagation step on a single example.

        Returns the mean squared error of the outputs computed *before* the
        update.
        """

        self._check_length(inputs, self.input_size, "inputs")
        self._check_length(targets, self.output_size, "targets")

        input_matrix = Matrix.from_vector(inputs)
        hidden, outputs = self._forward(input_matrix)

        output_errors = Matrix.subtract(Matrix.from_vector(targets), outputs)

        gradients = Matrix.map_to_new(outputs, dsigmoid)
        gradients.multiply_matrix(output_errors)
        gradients.multiply_scalar(self.learning_rate)

        # Must see the output weights as they were during the forward pass.
        hidden_errors = Matrix.matmul(Matrix.transpose(self._weights_ho), output_errors)

        weight_ho_deltas = Matrix.matmul(gradients, Matrix.transpose(hidden))
        self._weights_ho.add_matrix(weight_ho_deltas)
        self._bias_o.add_matrix(gradients)

        hidden_gradient = Matrix.map_to_new(hidden, dsigmoid)
        hidden_gradient.multiply_matrix(hidden_errors)
        hidden_gradient.multiply_scalar(self.learning_rate)

        weight_ih_deltas = Matrix.matmul(hidden_gradient, Matrix.transpose(input_matrix))
        self._weights_ih.add_matrix(weight_ih_deltas)
        self._bias_h.add_matrix(hidden_gradient)

        errors = output_errors.to_vector()
        return sum(error * error for error in errors) / self.output_size

    def _forward(self, inputs: Matrix) -> tuple[Matrix, Matrix]:
        hidden = Matrix.matmul(self._weights_ih, inputs)
        hidden.add_matrix(self._bias_h)
        hidden.map_in_place(sigmoid)

        output = Matrix.matmul(self._weights_ho, hidden)
        output.add_matrix(self._bias_o)
        output.map_in_place(sigmoid)
        return hidden, output

    @staticmethod
    def _check_length(values: Sequence[float], expected: int, name: str) -> None:
        if len(values) != expected:
            raise InvalidArgument(f"{name} must have length {expected}, got {len(values)}")


__all__ = ["NeuralNetwork"]
