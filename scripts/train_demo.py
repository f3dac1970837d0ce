"""Train the network on the XOR table or the synthetic digit patterns."""

from __future__ import annotations

import argparse
import logging
from typing import List

from tinynet.data import INPUT_SIZE, DIGIT_CLASSES, Example, demo_dataset, xor_dataset
from tinynet.models import NetworkConfig, NeuralNetwork
from tinynet.training import EpochReport, TrainingSession

TASKS = ("digits", "xor")


def _dataset(task: str) -> tuple[List[Example], int, int]:
    if task == "xor":
        return xor_dataset(), 2, 1
    return demo_dataset(), INPUT_SIZE, DIGIT_CLASSES


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train the single-hidden-layer demo network")
    parser.add_argument("--task", choices=TASKS, default="digits")
    parser.add_argument("--hidden-size", type=int, default=None, help="defaults to 48 (digits) or 4 (xor)")
    parser.add_argument("--learning-rate", type=float, default=0.15)
    parser.add_argument("--epochs", type=int, default=200)
    parser.add_argument("--report-every", type=int, default=5)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    examples, input_size, output_size = _dataset(args.task)
    hidden_size = args.hidden_size or (48 if args.task == "digits" else 4)
    config = NetworkConfig(
        input_size=input_size,
        hidden_size=hidden_size,
        output_size=output_size,
        learning_rate=args.learning_rate,
        seed=args.seed,
    )
    network = NeuralNetwork.from_config(config)
    session = TrainingSession(network, examples)
    print(f"Training {network!r} on {len(examples)} {args.task} examples for {args.epochs} epochs")

    def report(entry: EpochReport) -> None:
        print(f"Epoch {entry.epoch}: loss={entry.loss:.5f}")

    history = session.run(args.epochs, report_every=args.report_every, on_report=report)
    print(f"Final loss: {history.losses[-1]:.5f}")

    for index, example in enumerate(examples):
        outputs = session.predict(example.inputs)
        formatted = ", ".join(f"{value:.3f}" for value in outputs)
        print(f"Example {index} target={list(example.target)} prediction=[{formatted}]")


if __name__ == "__main__":
    main()
