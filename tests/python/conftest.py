import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from biosim.sim.core.gene import ACTION_INDEX, OUTPUT_NODE_COUNT  # noqa: E402
from biosim.sim.core.rng import DeterministicRng  # noqa: E402


class FixedRng(DeterministicRng):
    """Rng whose uniform draws and integer picks are pinned for decision-step tests."""

    def __init__(self, value: float = 0.0, pick: int = 0):
        super().__init__(0)
        self.value = value
        self.pick = pick

    def next_float(self) -> float:
        return self.value

    def next_int(self, max_value: int) -> int:
        return self.pick % max_value


class FixedNet:
    """Network stand-in that records sensor vectors and reports fixed outputs."""

    def __init__(self, actions=None):
        self.outputs = np.zeros(OUTPUT_NODE_COUNT, dtype=np.float32)
        for node, value in (actions or {}).items():
            self.outputs[ACTION_INDEX[node]] = value
        self.inputs = []

    def feed_forward(self, inputs) -> None:
        self.inputs.append([float(value) for value in inputs])


@pytest.fixture
def rng() -> DeterministicRng:
    return DeterministicRng(1234)


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-config-tests",
        action="store_true",
        default=False,
        help="run tests that are intended only for configuration changes",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "config_change: marks tests that should only run when configuration files change",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-config-tests"):
        return

    skip_marker = pytest.mark.skip(
        reason="Run only when configuration is modified (use --run-config-tests)",
    )

    for item in items:
        if "config_change" in item.keywords:
            item.add_marker(skip_marker)
