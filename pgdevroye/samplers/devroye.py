"""
Polya-Gamma samplers built on the Jacobi kernel.

- :func:`sample_devroye`: exact draws from :math:`PG(n, \\cdot)` for integer
  :math:`n` as a rescaled sum of :math:`n` independent :math:`J^*` draws.
- :func:`sample_gamma_convolution`: approximate draws for any shape
  :math:`h > 0` from a truncated infinite convolution of Gamma variates.

Both functions take ``z`` on the scale of the Jacobi kernel. For the usual
Polya-Gamma tilt :math:`c` pass :math:`z = |c| / 2`, since
:math:`PG(h, c) = \\frac{1}{4} J^*(h, c / 2)`;
:class:`pgdevroye.distributions.univariate.PolyaGamma` does this
conversion. Arguments are not validated.
"""

import math

from pgdevroye.base.engine import RandomEngine
from pgdevroye.samplers.jacobi import (
    PI2,
    TRUNCATION_POINT,
    SamplingContext,
    initialize_jacobi_config,
    sample_jacobi,
    sample_jacobi_zero,
)
from pgdevroye.utils.special import inverse_gaussian_cdf

# Default number of Gamma terms kept in the convolution sampler.
GAMMA_CONVOLUTION_TERMS = 200

_LOG_PI_2 = math.log(0.5 * math.pi)
_LOG_2 = math.log(2.0)


def proposal_mixture_ratio(z: float, mu: float, k: float) -> float:
    """
    Probability of the Inverse Gaussian component in the :math:`J^*(1, z)` proposal.

    The component masses are

    .. math::
        p = 2 e^{-z} F_{IG}(T \\mid \\mu, 1), \\qquad
        q = \\frac{\\pi}{2} \\frac{e^{-k T}}{k},

    and the weight is :math:`p / (p + q)`, evaluated from the log masses so
    that large ``z`` does not turn it into :math:`0/0`.

    Parameters
    ----------
    z : float
        Kernel tilt, ``z > 0``.
    mu : float
        :math:`1/z`.
    k : float
        :math:`\\pi^2/8 + z^2/2`.

    Returns
    -------
    ratio : float
        Mixture weight in :math:`[0, 1]`.
    """
    log_q = _LOG_PI_2 - k * TRUNCATION_POINT - math.log(k)
    log_p = _LOG_2 - z + math.log(inverse_gaussian_cdf(TRUNCATION_POINT, mu, 1.0))
    return 1.0 / (1.0 + math.exp(log_q - log_p))


def sample_devroye(engine: RandomEngine, n: int, z: float) -> float:
    """
    Draw from :math:`PG(n, 2z)` with Devroye's alternating series method.

    .. math::
        X = \\frac{1}{4} \\sum_{i=1}^{n} J^*_i(1, z)

    Parameters
    ----------
    engine : RandomEngine
        Source of random variates.
    n : int
        Positive integer shape.
    z : float
        Kernel tilt, ``z >= 0``.

    Returns
    -------
    x : float
        Positive variate.

    Examples
    --------
    >>> import numpy as np
    >>> x = sample_devroye(np.random.default_rng(0), 1, 0.0)
    >>> x > 0
    True
    """
    ctx = SamplingContext()
    out = 0.0

    if z == 0:
        for _ in range(n):
            out += sample_jacobi_zero(engine, ctx)
        return 0.25 * out

    initialize_jacobi_config(ctx, z)
    ctx.ratio = proposal_mixture_ratio(z, ctx.mu, ctx.k)
    for _ in range(n):
        out += sample_jacobi(engine, ctx)
    return 0.25 * out


def sample_gamma_convolution(
    engine: RandomEngine,
    h: float,
    z: float,
    n_terms: int = GAMMA_CONVOLUTION_TERMS,
) -> float:
    """
    Approximate draw from :math:`PG(h, 2z)` by a truncated Gamma convolution.

    .. math::
        X \\approx \\frac{1}{2} \\sum_{n=0}^{N-1}
        \\frac{g_n}{\\pi^2 (n + \\tfrac12)^2 + z^2},
        \\qquad g_n \\sim \\text{Gamma}(h, 1)

    Dropping the tail of the series biases draws downwards; see
    :func:`gamma_convolution_mean` for the size of the bias.

    Parameters
    ----------
    engine : RandomEngine
        Source of Gamma variates.
    h : float
        Shape, ``h > 0``.
    z : float
        Kernel tilt.
    n_terms : int, optional
        Number of terms :math:`N` kept. Default is 200.

    Returns
    -------
    x : float
        Positive variate.
    """
    z2 = z * z
    out = 0.0
    for n in reversed(range(n_terms)):
        c = n + 0.5
        out += engine.standard_gamma(h) / (PI2 * c * c + z2)
    return 0.5 * out


def gamma_convolution_mean(h: float, z: float, n_terms: int = GAMMA_CONVOLUTION_TERMS) -> float:
    """Mean of the truncated sum drawn by :func:`sample_gamma_convolution`."""
    z2 = z * z
    total = 0.0
    for n in reversed(range(n_terms)):
        c = n + 0.5
        total += 1.0 / (PI2 * c * c + z2)
    return 0.5 * h * total
