import os
import random

import pytest

# pygame is imported by the front-end modules; keep it headless
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from snake_adventure.session import Session


class ScriptedRng:
    """randrange() stand-in that replays fixed values, then falls back to a seeded rng."""

    def __init__(self, values, seed=0):
        self.values = list(values)
        self.fallback = random.Random(seed)

    def randrange(self, n):
        if self.values:
            return self.values.pop(0)
        return self.fallback.randrange(n)


@pytest.fixture
def session():
    s = Session(random.Random(1234))
    s.start()
    return s
