"""
Polya-Gamma distribution :math:`PG(h, z)`.

A Polya-Gamma random variable is an infinite convolution of Gamma variates:

.. math::
    X = \\frac{1}{2\\pi^2} \\sum_{k=1}^{\\infty}
    \\frac{g_k}{(k - 1/2)^2 + z^2 / (4\\pi^2)},
    \\qquad g_k \\sim \\text{Gamma}(h, 1)

for shape :math:`h > 0` and tilt :math:`z \\in \\mathbb{R}`. The distribution
depends on :math:`z` only through :math:`|z|`.

Moments:

- :math:`E[X] = \\frac{h}{2z}\\tanh(z/2)`
- :math:`\\text{Var}[X] = \\frac{h}{4z^3}\\frac{\\sinh z - z}{\\cosh^2(z/2)}`

with limits :math:`h/4` and :math:`h/24` at :math:`z = 0`.

Sampling methods:

- ``'devroye'``: exact, integer :math:`h` only
  (:func:`pgdevroye.samplers.sample_devroye`).
- ``'gamma_conv'``: any :math:`h > 0`, truncated convolution
  (:func:`pgdevroye.samplers.sample_gamma_convolution`). Biased downwards.

References
----------
Polson, N. G., Scott, J. G. & Windle, J. (2013). Bayesian inference for
logistic models using Polya-Gamma latent variables. JASA, 108(504),
1339-1349.
"""

import math
import warnings

from pgdevroye.base import Distribution
from pgdevroye.base.engine import RandomEngine, RandomStateLike
from pgdevroye.params import PolyaGammaParams
from pgdevroye.samplers import (
    GAMMA_CONVOLUTION_TERMS,
    gamma_convolution_mean,
    sample_devroye,
    sample_gamma_convolution,
)

# Relative mean bias of the truncated convolution above which rvs warns.
GAMMA_CONVOLUTION_BIAS_TOL = 1e-2

# Below this |z| the moments use their Taylor expansions.
_SMALL_Z = 1e-3

_METHODS = ('devroye', 'gamma_conv')


class PolyaGamma(Distribution):
    """
    Polya-Gamma distribution :math:`PG(h, z)`.

    Parameters
    ----------
    h : float, optional
        Shape parameter :math:`h > 0`. Use ``from_classical_params(h=..., z=...)``.
    z : float, optional
        Tilting parameter. Use ``from_classical_params(h=..., z=...)``.

    Notes
    -----
    No closed-form CDF is provided; ``cdf`` and ``sf`` raise
    ``NotImplementedError``.

    Examples
    --------
    >>> dist = PolyaGamma.from_classical_params(h=1.0, z=0.0)
    >>> dist.mean()
    0.25
    >>> x = dist.rvs(size=1000, random_state=42)

    >>> # Non-integer shape falls back to the Gamma convolution
    >>> x = PolyaGamma.from_classical_params(h=2.5, z=1.0).rvs(size=10)
    """

    def __init__(self):
        super().__init__()
        self._h = None
        self._z = None

    def _set_from_classical(self, *, h, z=0.0) -> None:
        """Set internal state from classical parameters."""
        if not h > 0:
            raise ValueError(f"Shape h must be positive, got {h}")
        if not math.isfinite(h):
            raise ValueError(f"Shape h must be finite, got {h}")
        if not math.isfinite(z):
            raise ValueError(f"Tilt z must be finite, got {z}")
        self._h = float(h)
        self._z = float(z)
        self._fitted = True
        self._invalidate_cache()

    def _compute_classical_params(self):
        """Return frozen dataclass of classical parameters."""
        return PolyaGammaParams(h=self._h, z=self._z)

    @property
    def _kernel_z(self) -> float:
        """Tilt on the Jacobi kernel scale, :math:`|z| / 2`."""
        return 0.5 * abs(self._z)

    # ============================================================
    # Random variate generation
    # ============================================================

    def _resolve_method(self, method):
        if method is None:
            return 'devroye' if self._h == int(self._h) else 'gamma_conv'
        if method not in _METHODS:
            raise ValueError(f"Unknown method: {method}. Use 'devroye' or 'gamma_conv'.")
        if method == 'devroye' and self._h != int(self._h):
            raise ValueError(
                f"The 'devroye' method requires an integer shape, got h={self._h}"
            )
        return method

    def _draw(self, engine: RandomEngine) -> float:
        return sample_devroye(engine, int(self._h), self._kernel_z)

    def rvs(self, size=None, random_state: RandomStateLike = None, method=None,
            n_terms: int = GAMMA_CONVOLUTION_TERMS):
        """
        Generate random samples from the Polya-Gamma distribution.

        Parameters
        ----------
        size : int or tuple of ints, optional
            Shape of samples to generate.
        random_state : int, SeedSequence, Generator or RandomEngine, optional
            Random number generator seed or instance.
        method : {'devroye', 'gamma_conv'}, optional
            Sampling method. Defaults to ``'devroye'`` for integer ``h``
            and ``'gamma_conv'`` otherwise.
        n_terms : int, optional
            Number of Gamma terms for ``'gamma_conv'``. Default is 200.

        Returns
        -------
        samples : float or ndarray
            Random samples from the distribution.

        Warns
        -----
        RuntimeWarning
            If ``'gamma_conv'`` is used with a term count whose relative mean
            bias exceeds ``GAMMA_CONVOLUTION_BIAS_TOL``.
        """
        self._check_fitted()
        method = self._resolve_method(method)

        if method == 'devroye':
            return self._fill(self._draw, size, random_state)

        h, z = self._h, self._kernel_z
        bias = 1.0 - gamma_convolution_mean(h, z, n_terms) / self.mean()
        if bias > GAMMA_CONVOLUTION_BIAS_TOL:
            warnings.warn(
                f"Gamma convolution truncated to {n_terms} terms underestimates "
                f"the mean by {bias:.2%}; increase n_terms",
                RuntimeWarning,
                stacklevel=2,
            )
        return self._fill(
            lambda engine: sample_gamma_convolution(engine, h, z, n_terms),
            size,
            random_state,
        )

    # ============================================================
    # Moments
    # ============================================================

    def mean(self) -> float:
        """
        Mean of the Polya-Gamma distribution.

        .. math::
            E[X] = \\frac{h}{2z}\\tanh\\left(\\frac{z}{2}\\right)

        Returns
        -------
        mean : float
            Mean of the distribution.
        """
        self._check_fitted()
        z = abs(self._z)
        if z < _SMALL_Z:
            return self._h * (0.25 - z * z / 48.0)
        return self._h * math.tanh(0.5 * z) / (2.0 * z)

    def var(self) -> float:
        """
        Variance of the Polya-Gamma distribution.

        .. math::
            \\text{Var}[X] = \\frac{h}{4z^3}
            \\left(2\\tanh\\frac{z}{2} - z\\,\\text{sech}^2\\frac{z}{2}\\right)

        which equals :math:`\\frac{h}{4z^3}(\\sinh z - z)/\\cosh^2(z/2)` and
        stays finite for large :math:`z`.

        Returns
        -------
        var : float
            Variance of the distribution.
        """
        self._check_fitted()
        z = abs(self._z)
        if z < _SMALL_Z:
            return self._h * (1.0 / 24.0 - z * z / 120.0)
        e = math.exp(-z)
        sech2 = 4.0 * e / ((1.0 + e) * (1.0 + e))
        return self._h * (2.0 * math.tanh(0.5 * z) - z * sech2) / (4.0 * z ** 3)
