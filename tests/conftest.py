"""Shared fixtures for the pgdevroye test suite."""

from collections import deque

import numpy as np
import pytest


class ScriptedEngine:
    """
    Engine replaying fixed draws, one queue per draw operation.

    Used to pin the exact control flow of the samplers. Running out of
    scripted draws fails the test instead of looping forever.
    """

    def __init__(self, uniforms=(), exponentials=(), gammas=(), walds=()):
        self._queues = {
            'random': deque(uniforms),
            'standard_exponential': deque(exponentials),
            'standard_gamma': deque(gammas),
            'wald': deque(walds),
        }
        self.calls = []

    def _next(self, name, *args):
        queue = self._queues[name]
        if not queue:
            raise AssertionError(f"scripted engine ran out of {name} draws")
        self.calls.append((name, args))
        return queue.popleft()

    def random(self):
        return self._next('random')

    def standard_exponential(self):
        return self._next('standard_exponential')

    def standard_gamma(self, shape):
        return self._next('standard_gamma', shape)

    def wald(self, mean, scale):
        return self._next('wald', mean, scale)

    @property
    def exhausted(self):
        return all(not queue for queue in self._queues.values())


@pytest.fixture
def scripted_engine():
    """Factory for :class:`ScriptedEngine` instances."""
    return ScriptedEngine


@pytest.fixture
def rng():
    """Seeded numpy Generator."""
    return np.random.default_rng(20240917)
