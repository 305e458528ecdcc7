"""
Inverse Gaussian distribution truncated from above.

:math:`X \\sim \\text{IG}(\\mu, \\lambda)` conditioned on :math:`X < t` has PDF

.. math::
    p(x|\\mu, \\lambda, t) = \\frac{1}{F(t)} \\sqrt{\\frac{\\lambda}{2\\pi x^3}}
    \\exp\\left(-\\frac{\\lambda(x-\\mu)^2}{2\\mu^2 x}\\right),
    \\quad 0 < x < t

where :math:`F` is the untruncated CDF. With :math:`\\mu = 1/z`,
:math:`\\lambda = 1` and :math:`t = 2/\\pi` this is the left proposal
component of the :math:`J^*(1, z)` sampler.
"""

import math

from numpy.typing import ArrayLike
from scipy.integrate import quad

from pgdevroye.base import Distribution
from pgdevroye.base.engine import RandomEngine
from pgdevroye.params import RightTruncatedInverseGaussianParams
from pgdevroye.samplers import sample_right_bounded_inverse_gaussian
from pgdevroye.utils import inverse_gaussian_cdf


class RightTruncatedInverseGaussian(Distribution):
    """
    Inverse Gaussian with mean ``mean`` and shape ``shape`` truncated to :math:`x < t`.

    Parameters
    ----------
    mean : float, optional
        Mean :math:`\\mu > 0` of the untruncated distribution.
    shape : float, optional
        Shape :math:`\\lambda > 0`.
    upper : float, optional
        Truncation point :math:`t > 0`.

    Examples
    --------
    >>> dist = RightTruncatedInverseGaussian.from_classical_params(
    ...     mean=2.0, shape=1.0, upper=0.5)
    >>> x = dist.rvs(size=100, random_state=0)
    >>> bool((x < 0.5).all())
    True
    """

    def __init__(self):
        super().__init__()
        self._mu = None
        self._lambda = None
        self._upper = None

    def _set_from_classical(self, *, mean, shape, upper) -> None:
        """Set internal state from classical parameters."""
        if not mean > 0:
            raise ValueError(f"Mean must be positive, got {mean}")
        if not shape > 0:
            raise ValueError(f"Shape must be positive, got {shape}")
        if not upper > 0:
            raise ValueError(f"Truncation point must be positive, got {upper}")
        self._mu = float(mean)
        self._lambda = float(shape)
        self._upper = float(upper)
        self._fitted = True
        self._invalidate_cache()

    def _compute_classical_params(self):
        """Return frozen dataclass of classical parameters."""
        return RightTruncatedInverseGaussianParams(
            mean=self._mu, shape=self._lambda, upper=self._upper
        )

    def _draw(self, engine: RandomEngine) -> float:
        return sample_right_bounded_inverse_gaussian(engine, self._mu, self._lambda, self._upper)

    def _untruncated_pdf(self, x: float) -> float:
        mu, lam = self._mu, self._lambda
        return math.sqrt(lam / (2.0 * math.pi * x ** 3)) * math.exp(
            -lam * (x - mu) ** 2 / (2.0 * mu * mu * x)
        )

    def pdf(self, x: ArrayLike):
        """Probability density, zero outside :math:`(0, t)`."""
        self._check_fitted()
        norm = inverse_gaussian_cdf(self._upper, self._mu, self._lambda)

        def _pdf(v: float) -> float:
            if v <= 0.0 or v >= self._upper:
                return 0.0
            return self._untruncated_pdf(v) / norm

        return self._apply(_pdf, x)

    def cdf(self, x: ArrayLike):
        """
        Cumulative distribution function :math:`F(x) / F(t)` for :math:`0 < x < t`.
        """
        self._check_fitted()
        norm = inverse_gaussian_cdf(self._upper, self._mu, self._lambda)

        def _cdf(v: float) -> float:
            if v <= 0.0:
                return 0.0
            if v >= self._upper:
                return 1.0
            return inverse_gaussian_cdf(v, self._mu, self._lambda) / norm

        return self._apply(_cdf, x)

    def _moment(self, order: int) -> float:
        norm = inverse_gaussian_cdf(self._upper, self._mu, self._lambda)
        value, _ = quad(lambda v: v ** order * self._untruncated_pdf(v), 0.0, self._upper)
        return value / norm

    def mean(self) -> float:
        """Mean of the truncated distribution, by numerical integration."""
        self._check_fitted()
        return self._moment(1)

    def var(self) -> float:
        """Variance of the truncated distribution, by numerical integration."""
        self._check_fitted()
        return self._moment(2) - self._moment(1) ** 2
