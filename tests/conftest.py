import time
from pathlib import Path

import pytest

from temper import Temper

FIXTURES = Path(__file__).parent / "fixtures"


class FakeModules:
    """Stand-in for importlib.import_module with a controllable set of modules."""

    def __init__(self, *available: str):
        self.available = {name: object() for name in available}
        self.calls: list[str] = []

    def install(self, name: str) -> None:
        self.available[name] = object()

    def __call__(self, name: str):
        self.calls.append(name)
        if name not in self.available:
            raise ImportError(f"No module named {name!r}")
        return self.available[name]


def wait_until(predicate, timeout: float = 2.0, interval: float = 0.01) -> bool:
    """Poll until predicate() is true or the timeout passes."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def fixtures() -> Path:
    return FIXTURES


@pytest.fixture
def temper():
    instance = Temper()
    yield instance
    instance.destroy()
