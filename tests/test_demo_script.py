import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = REPO_ROOT / "src"


def _env_with_src() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_PATH)
    return env


def test_demo_script_trains_xor() -> None:
    cmd = [
        sys.executable,
        "scripts/train_demo.py",
        "--task",
        "xor",
        "--epochs",
        "20",
        "--report-every",
        "10",
        "--seed",
        "3",
    ]
    result = subprocess.run(
        cmd,
        cwd=REPO_ROOT,
        env=_env_with_src(),
        check=True,
        capture_output=True,
        text=True,
    )
    lines = result.stdout.splitlines()
    assert lines[0].startswith("Training <NeuralNetwork 2-4-1")
    assert [line.split(":")[0] for line in lines if line.startswith("Epoch")] == [
        "Epoch 1",
        "Epoch 11",
        "Epoch 20",
    ]
    assert sum(line.startswith("Example") for line in lines) == 4


def test_demo_script_rejects_unknown_task() -> None:
    result = subprocess.run(
        [sys.executable, "scripts/train_demo.py", "--task", "mnist"],
        cwd=REPO_ROOT,
        env=_env_with_src(),
        capture_output=True,
        text=True,
    )
    assert result.returncode != 0
    assert "invalid choice" in result.stderr
