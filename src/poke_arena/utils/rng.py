import math
import random
from typing import Iterable, Protocol


class RandomSource(Protocol):
    """Anything with a ``random()`` returning a uniform float in [0, 1). ``random.Random`` qualifies."""

    def random(self) -> float: ...


def default_source(seed: int | None = None) -> RandomSource:
    return random.Random(seed)


def rand_int(source: RandomSource, low: int, high: int) -> int:
    """Return a random integer in [low, high] inclusive using one draw: low + floor(r * span)."""
    return low + math.floor(source.random() * (high - low + 1))


def choice_index(source: RandomSource, count: int) -> int:
    """Return a random index in range [0, count) using one draw.

    Caller must ensure count > 0.
    """
    if count <= 0:
        return -1
    return math.floor(source.random() * count)


class ScriptedRandom:
    """Replays a fixed sequence of draws, for deterministic tests and replays.

    Raises RuntimeError once the sequence is exhausted so an unexpected extra draw
    is never silently satisfied. ``calls`` counts draws taken so far.
    """

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted draw {value!r} is outside [0, 1)")
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._values):
            raise RuntimeError(f"ScriptedRandom exhausted after {self.calls} draws")
        value = self._values[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self.calls
