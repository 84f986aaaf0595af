import pytest

import core.store as store_mod


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def patched_monotonic(monkeypatch, clock):
    monkeypatch.setattr(store_mod.time, "monotonic", clock)
    return clock
