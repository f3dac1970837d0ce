import asyncio
import random

import pytest

from tinynet.core import InvalidArgument
from tinynet.data import xor_dataset
from tinynet.models import NeuralNetwork
from tinynet.training import EpochReport, TrainingInProgress, TrainingSession


def make_session(**kwargs) -> TrainingSession:
    network = NeuralNetwork(2, 4, 1, 0.3, rng=random.Random(0))
    return TrainingSession(network, xor_dataset(), **kwargs)


def test_run_epoch_returns_mean_loss_and_counts_epochs() -> None:
    session = make_session()
    loss = session.run_epoch()
    assert loss >= 0.0
    assert session.epochs_completed == 1
    assert session.loss_history == (loss,)


def test_rolling_history_keeps_most_recent_losses() -> None:
    session = make_session(history_size=3)
    history = session.run(5)
    assert len(history.losses) == 5
    assert session.loss_history == tuple(history.losses[-3:])


def test_iter_epochs_reports_at_batch_boundaries() -> None:
    session = make_session()
    reports = list(session.iter_epochs(12, report_every=5))
    assert [report.epoch for report in reports] == [1, 6, 11, 12]
    assert session.epochs_completed == 12
    assert not session.is_training


def test_closing_iterator_stops_training() -> None:
    session = make_session()
    epochs = session.iter_epochs(10, report_every=1)
    next(epochs)
    assert session.is_training
    epochs.close()
    assert not session.is_training
    assert session.epochs_completed == 1


def test_concurrent_runs_are_rejected() -> None:
    session = make_session()
    epochs = session.iter_epochs(3, report_every=1)
    next(epochs)
    with pytest.raises(TrainingInProgress):
        session.run(1)
    epochs.close()
    assert session.run(1).losses


def test_run_invokes_report_callback() -> None:
    session = make_session()
    seen: list[EpochReport] = []
    session.run(4, report_every=2, on_report=seen.append)
    assert [report.epoch for report in seen] == [1, 3, 4]


def test_run_async_yields_reports() -> None:
    session = make_session()
    reports = asyncio.run(session.run_async(7, report_every=3))
    assert [report.epoch for report in reports] == [1, 4, 7]
    assert reports[-1].loss == session.loss_history[-1]


def test_training_reduces_epoch_loss() -> None:
    session = make_session()
    history = session.run(300)
    assert history.losses[-1] < history.losses[0]


def test_session_validates_arguments() -> None:
    network = NeuralNetwork(2, 2, 1)
    with pytest.raises(InvalidArgument):
        TrainingSession(network, [])
    with pytest.raises(InvalidArgument):
        TrainingSession(network, xor_dataset(), history_size=0)
    session = TrainingSession(network, xor_dataset())
    with pytest.raises(InvalidArgument):
        session.run(0)
    with pytest.raises(InvalidArgument):
        list(session.iter_epochs(3, report_every=0))
    assert not session.is_training
