"""
Random variate engine used by all samplers.

Samplers never own randomness: they receive an engine exposing four draw
operations and call it sequentially. The method names match
:class:`numpy.random.Generator`, so a Generator can be passed directly;
tests substitute scripted engines to pin exact control flow.
"""

from typing import Protocol, Union, runtime_checkable

import numpy as np


@runtime_checkable
class RandomEngine(Protocol):
    """
    Minimal interface of a stateful random variate source.

    Each call consumes and advances the engine's hidden state. Engines are
    not shared between threads; use one engine per thread or task.
    """

    def random(self) -> float:
        """Uniform draw on :math:`[0, 1)`."""
        ...

    def standard_exponential(self) -> float:
        """Exponential draw with rate 1."""
        ...

    def standard_gamma(self, shape: float) -> float:
        """Gamma draw with the given shape and rate 1."""
        ...

    def wald(self, mean: float, scale: float) -> float:
        """Inverse Gaussian draw with mean ``mean`` and shape ``scale``."""
        ...


RandomStateLike = Union[None, int, np.random.SeedSequence, RandomEngine]


def resolve_engine(random_state: RandomStateLike = None) -> RandomEngine:
    """
    Turn a ``random_state`` argument into an engine.

    Parameters
    ----------
    random_state : None, int, SeedSequence or RandomEngine
        ``None`` gives a freshly seeded :class:`numpy.random.Generator`,
        an int or :class:`numpy.random.SeedSequence` gives a Generator
        seeded with it, and any engine (including a Generator) is used as is.

    Returns
    -------
    engine : RandomEngine
        Engine to draw from.

    Examples
    --------
    >>> engine = resolve_engine(42)
    >>> isinstance(engine, np.random.Generator)
    True
    """
    if random_state is None:
        return np.random.default_rng()
    if isinstance(random_state, (int, np.integer, np.random.SeedSequence)):
        return np.random.default_rng(random_state)
    return random_state
