"""
Base class for the univariate distributions in this package.

Provides the shared scipy-like surface:

- **Construction**: :meth:`Distribution.from_classical_params`
- **Parameters**: :attr:`Distribution.classical_params` (frozen dataclass, cached)
- **Random sampling**: :meth:`Distribution.rvs`
- **Moments**: :meth:`mean`, :meth:`var`, :meth:`std`
- **Distribution function**: :meth:`cdf`, :meth:`sf`

Subclasses implement ``_set_from_classical``, ``_compute_classical_params``
and ``_draw``, the latter producing a single variate from an engine.
"""

import dataclasses
from abc import ABC, abstractmethod
from functools import cached_property
from typing import Callable, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .engine import RandomEngine, RandomStateLike, resolve_engine


class Distribution(ABC):
    """
    Abstract base class for univariate distributions.

    Parameters are set through :meth:`from_classical_params` or
    :meth:`set_classical_params`; the instance is unusable before that.
    """

    _cached_attrs: Tuple[str, ...] = ('classical_params',)

    def __init__(self):
        self._fitted = False

    # ============================================================
    # Parameters
    # ============================================================

    @classmethod
    def from_classical_params(cls, **kwargs) -> 'Distribution':
        """
        Create distribution from classical parameters.

        Parameters
        ----------
        **kwargs
            Distribution-specific classical parameters,
            e.g. ``h=1.0, z=0.5`` for :class:`PolyaGamma`.

        Returns
        -------
        dist : Distribution
            Distribution instance with parameters set.
        """
        instance = cls()
        instance.set_classical_params(**kwargs)
        return instance

    def set_classical_params(self, **kwargs) -> 'Distribution':
        """
        Set parameters from classical parametrization.

        Returns
        -------
        self : Distribution
            Returns self for method chaining.
        """
        if not kwargs:
            return self

        self._set_from_classical(**kwargs)
        return self

    @abstractmethod
    def _set_from_classical(self, **kwargs) -> None:
        """
        Validate and store classical parameters.

        Implementations raise ``ValueError`` on invalid values, set
        ``self._fitted = True`` and call ``self._invalidate_cache()``.
        """
        pass

    @abstractmethod
    def _compute_classical_params(self):
        """Build the frozen dataclass of classical parameters."""
        pass

    @cached_property
    def classical_params(self):
        """Classical parameters as a frozen dataclass (cached)."""
        self._check_fitted()
        return self._compute_classical_params()

    def _invalidate_cache(self) -> None:
        for attr in self._cached_attrs:
            self.__dict__.pop(attr, None)

    def _check_fitted(self) -> None:
        if not self._fitted:
            raise ValueError("Parameters not set. Use from_classical_params().")

    # ============================================================
    # Random variate generation
    # ============================================================

    @abstractmethod
    def _draw(self, engine: RandomEngine) -> float:
        """Draw a single variate."""
        pass

    def rvs(self, size=None, random_state: RandomStateLike = None):
        """
        Generate random samples.

        Parameters
        ----------
        size : int or tuple of ints, optional
            Shape of samples to generate. ``None`` returns a single float.
        random_state : int, SeedSequence, Generator or RandomEngine, optional
            Random number generator seed or instance.

        Returns
        -------
        samples : float or ndarray
            Random samples from the distribution.
        """
        self._check_fitted()
        return self._fill(self._draw, size, random_state)

    @staticmethod
    def _fill(
        draw: Callable[[RandomEngine], float],
        size,
        random_state: RandomStateLike,
    ) -> Union[float, NDArray[np.floating]]:
        """Call ``draw`` once per requested element, in C order."""
        engine = resolve_engine(random_state)
        if size is None:
            return float(draw(engine))

        out = np.empty(size, dtype=float)
        flat = out.reshape(-1)
        for i in range(flat.size):
            flat[i] = draw(engine)
        return out

    # ============================================================
    # Moments and distribution function
    # ============================================================

    @abstractmethod
    def mean(self) -> float:
        """Mean of the distribution."""
        pass

    @abstractmethod
    def var(self) -> float:
        """Variance of the distribution."""
        pass

    def std(self) -> float:
        """Standard deviation of the distribution."""
        return float(np.sqrt(self.var()))

    def cdf(self, x: ArrayLike) -> Union[float, NDArray[np.floating]]:
        """
        Cumulative distribution function.

        Parameters
        ----------
        x : array_like
            Points at which to evaluate the CDF.

        Returns
        -------
        cdf : float or ndarray
            Cumulative probability at each point.
        """
        raise NotImplementedError("CDF not implemented for this distribution")

    def sf(self, x: ArrayLike) -> Union[float, NDArray[np.floating]]:
        """Survival function, ``1 - cdf(x)``."""
        return 1.0 - self.cdf(x)

    @staticmethod
    def _apply(func: Callable[[float], float], x: ArrayLike) -> Union[float, NDArray[np.floating]]:
        """Evaluate a scalar function elementwise, keeping scalars scalar."""
        x = np.asarray(x, dtype=float)
        result = np.array([func(float(v)) for v in x.reshape(-1)], dtype=float).reshape(x.shape)
        if x.shape == ():
            return float(result)
        return result

    # ============================================================
    # String representation
    # ============================================================

    def __repr__(self) -> str:
        """String representation of the distribution."""
        if not self._fitted:
            return f"{self.__class__.__name__}(not fitted)"

        classical = self.classical_params
        param_str = ", ".join(
            f"{f.name}={getattr(classical, f.name):.4f}"
            for f in dataclasses.fields(classical)
        )
        return f"{self.__class__.__name__}({param_str})"
