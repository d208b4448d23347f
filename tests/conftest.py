import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from asciiliens.simulation import Engine  # noqa: E402


class StepSource:
    """Deterministic random source cycling through fixed picks."""

    def __init__(self, *picks: int):
        self.picks = list(picks) or [0]
        self.calls = 0

    def randrange(self, stop: int) -> int:
        value = self.picks[self.calls % len(self.picks)]
        self.calls += 1
        return value % stop


@pytest.fixture
def rng():
    return StepSource(0)


@pytest.fixture
def engine(rng):
    return Engine(rng=rng)


@pytest.fixture
def make_rng():
    return StepSource
