"""Caller-owned training state and epoch drivers.

A :class:`TrainingSession` bundles the pieces a training front-end needs to
keep between calls: the network, its dataset, a rolling window of recent
epoch losses, and whether a run is in progress. Long runs are split into
batches of epochs so the caller can hand control back to an event loop or
redraw a chart between batches; :meth:`TrainingSession.iter_epochs` does this
synchronously and :meth:`TrainingSession.run_async` on top of ``asyncio``.
"""
from __future__ import annotations

import asyncio
from collections import deque
from dataclasses import dataclass, field
import logging
from typing import Callable, Deque, Iterator, Optional, Sequence

from ..core.errors import InvalidArgument
from ..data.digits import Example
from ..models.network import NeuralNetwork

logger = logging.getLogger(__name__)

ReportCallback = Callable[["EpochReport"], None]


class TrainingInProgress(RuntimeError):
    """Raised when a run is started while another run is still going."""


@dataclass(frozen=True, slots=True)
class EpochReport:
    """Loss after a completed epoch. ``epoch`` is one-indexed."""

    epoch: int
    loss: float


@dataclass
class TrainingHistory:
    """Every epoch loss collected during :meth:`TrainingSession.run`."""

    losses: list[float] = field(default_factory=list)


class TrainingSession:
    """Drive epochs of single-example training over a fixed dataset.

    Parameters
    ----------
    network:
        The network to train. The session does not copy it; predictions made
        through the network object see every update.
    examples:
        Training pairs visited in order once per epoch.
    history_size:
        Number of most recent epoch losses kept in :attr:`loss_history`.
    """

    def __init__(
        self,
        network: NeuralNetwork,
        examples: Sequence[Example],
        *,
        history_size: int = 100,
    ) -> None:
        if len(examples) == 0:
            raise InvalidArgument("examples must not be empty")
        if history_size <= 0:
            raise InvalidArgument("history_size must be positive")
        self.network = network
        self.examples = list(examples)
        self.history_size = history_size
        self.epochs_completed = 0
        self.is_training = False
        self._losses: Deque[float] = deque(maxlen=history_size)

    @property
    def loss_history(self) -> tuple[float, ...]:
        return tuple(self._losses)

    def predict(self, inputs: Sequence[float]) -> list[float]:
        return self.network.predict(inputs)

    def run_epoch(self) -> float:
        """Train once on every example and return the mean loss."""

        total = 0.0
        for example in self.examples:
            total += self.network.train(example.inputs, example.target)
        loss = total / len(self.examples)
        self._losses.append(loss)
        self.epochs_completed += 1
        return loss

    def iter_epochs(self, epochs: int, *, report_every: int = 5) -> Iterator[EpochReport]:
        """Run ``epochs`` epochs, yielding a report at each batch boundary.

        A report is produced for the first epoch of every ``report_every``
        sized batch and for the final epoch. Closing the generator early stops
        training after the epoch in flight.
        """

        steps = self._epochs(epochs, report_every)
        try:
            for _, report in steps:
                if report is not None:
                    yield report
        finally:
            steps.close()

    def run(
        self,
        epochs: int,
        *,
        report_every: int = 5,
        on_report: Optional[ReportCallback] = None,
    ) -> TrainingHistory:
        """Train synchronously and return every epoch loss of this run."""

        history = TrainingHistory()
        for loss, report in self._epochs(epochs, report_every):
            history.losses.append(loss)
            if report is not None and on_report is not None:
                on_report(report)
        return history

    async def run_async(
        self,
        epochs: int,
        *,
        report_every: int = 5,
        on_report: Optional[ReportCallback] = None,
    ) -> list[EpochReport]:
        """Train while yielding to the running event loop after each report."""

        reports: list[EpochReport] = []
        for report in self.iter_epochs(epochs, report_every=report_every):
            reports.append(report)
            if on_report is not None:
                on_report(report)
            await asyncio.sleep(0)
        return reports

    def _epochs(
        self, epochs: int, report_every: int
    ) -> Iterator[tuple[float, Optional[EpochReport]]]:
        if epochs <= 0:
            raise InvalidArgument("epochs must be positive")
        if report_every <= 0:
            raise InvalidArgument("report_every must be positive")
        if self.is_training:
            raise TrainingInProgress("a training run is already in progress")

        self.is_training = True
        try:
            for index in range(epochs):
                loss = self.run_epoch()
                report = None
                if index % report_every == 0 or index == epochs - 1:
                    report = EpochReport(epoch=self.epochs_completed, loss=loss)
                    logger.debug("epoch %d loss %.5f", report.epoch, report.loss)
                yield loss, report
        finally:
            self.is_training = False


__all__ = [
    "EpochReport",
    "TrainingHistory",
    "TrainingInProgress",
    "TrainingSession",
]
