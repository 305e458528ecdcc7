"""
Samplers for the Jacobi kernel :math:`J^*(1, z)`.

:math:`J^*(1, z)` is the distribution whose rescaled sums give the
Polya-Gamma distribution, :math:`PG(n, z) = \\frac{1}{4}\\sum_{i=1}^n J^*_i(1, z)`.
Its density has no closed form but admits the alternating series

.. math::
    f(x) = \\sum_{n=0}^{\\infty} (-1)^n a_n(x),

whose partial sums alternately bound :math:`f(x)` from above and below.
Candidates drawn from a two-component proposal mixture split at the
truncation point :math:`T = 2/\\pi` are accepted or rejected by comparing a
single uniform against these tightening bounds (Devroye, 2009), so the full
series is never evaluated.

References
----------
Devroye, L. (2009). On exact simulation algorithms for some distributions
related to Jacobi theta functions. Statistics & Probability Letters,
79(21), 2251-2259.

Polson, N. G., Scott, J. G. & Windle, J. (2013). Bayesian inference for
logistic models using Polya-Gamma latent variables. JASA, 108(504),
1339-1349.
"""

import math
import operator
from dataclasses import dataclass
from typing import Callable

from pgdevroye.base.engine import RandomEngine
from pgdevroye.samplers.truncated import sample_right_bounded_inverse_gaussian

# Truncation point separating the two proposal families and series forms.
TRUNCATION_POINT = 2.0 / math.pi

PI2 = 9.869604401089358  # pi^2
PI2_8 = 1.233700550136169  # pi^2 / 8
LOG_PI_2 = 0.4515827052894548  # log(pi / 2)

# Unnormalized masses of the two J*(1, 0) proposal components.
_ZERO_LEFT_MASS = 0.422599094
_ZERO_RIGHT_MASS = 0.57810262346829443
_ZERO_RATIO = _ZERO_LEFT_MASS / (_ZERO_LEFT_MASS + _ZERO_RIGHT_MASS)


@dataclass(slots=True)
class SamplingContext:
    """
    Values shared by the draws of a single Polya-Gamma sampling call.

    Attributes
    ----------
    mu : float
        Mean of the Inverse Gaussian proposal, :math:`1/z`.
    k : float
        Rate of the exponential tail proposal, :math:`\\pi^2/8 + z^2/2`.
    ratio : float
        Probability of proposing from the Inverse Gaussian component.
    x : float
        Current candidate.
    logx : float
        Cached :math:`\\log x` of the current candidate.
    """
    mu: float = 0.0
    k: float = 0.0
    ratio: float = 0.0
    x: float = 0.0
    logx: float = 0.0


def series_term(n: int, ctx: SamplingContext) -> float:
    """
    Coefficient :math:`a_n(x \\mid T)` of the alternating series at ``ctx.x``.

    .. math::
        a_n(x) = \\begin{cases}
        \\pi (n + \\tfrac12) \\exp\\left(-\\tfrac12 x \\pi^2 (n + \\tfrac12)^2\\right) & x > T \\\\
        \\pi (n + \\tfrac12) \\left(\\tfrac{2}{\\pi x}\\right)^{3/2}
        \\exp\\left(-\\tfrac{2 (n + \\tfrac12)^2}{x}\\right) & 0 < x \\le T
        \\end{cases}

    The two branches are the same function under the Jacobi theta
    transformation; the split keeps every exponent bounded. Returns 0 for
    :math:`x \\le 0`.

    Parameters
    ----------
    n : int
        Term index, ``n >= 0``.
    ctx : SamplingContext
        Context holding ``x`` and ``logx``.

    Returns
    -------
    a_n : float
        Value of the ``n``-th term.
    """
    n_plus_half = n + 0.5
    n_plus_halfpi = math.pi * n_plus_half
    x = ctx.x

    if x > TRUNCATION_POINT:
        return n_plus_halfpi * math.exp(-0.5 * x * n_plus_halfpi * n_plus_halfpi)
    elif x > 0.0:
        return n_plus_halfpi * math.exp(
            -1.5 * (LOG_PI_2 + ctx.logx) - 2.0 * n_plus_half * n_plus_half / x
        )
    return 0.0


def _accept_by_series(
    engine: RandomEngine,
    ctx: SamplingContext,
    below: Callable[[float, float], bool],
) -> bool:
    """
    Alternating series test for the candidate ``ctx.x``.

    After each odd step the partial sum is a lower bound of the target
    density and after each even step an upper bound; ``below`` is the
    odd-step comparison between the uniform and the lower bound.
    """
    ctx.logx = math.log(ctx.x)
    s = series_term(0, ctx)
    u = engine.random() * s
    i = 1
    while True:
        if i & 1:
            s -= series_term(i, ctx)
            if below(u, s):
                return True
        else:
            s += series_term(i, ctx)
            if u > s:
                return False
        i += 1


def sample_jacobi_zero(engine: RandomEngine, ctx: SamplingContext) -> float:
    """
    Draw from :math:`J^*(1, 0)` (Devroye, 2009, p. 7).

    With probability :math:`p/(p+q)` the candidate is
    :math:`T / (1 + T e_1)^2` where :math:`e_1` is conditioned on
    :math:`e_1^2 \\le \\pi e_2`; otherwise it is
    :math:`T + 8 E / \\pi^2`. The odd-step acceptance is strict.

    Parameters
    ----------
    engine : RandomEngine
        Source of uniform and exponential variates.
    ctx : SamplingContext
        Scratch context; ``x`` and ``logx`` are overwritten.

    Returns
    -------
    x : float
        Positive variate.
    """
    while True:
        if engine.random() < _ZERO_RATIO:
            while True:
                e1 = engine.standard_exponential()
                e2 = engine.standard_exponential()
                # 2 / T == pi
                if e1 * e1 <= math.pi * e2:
                    break
            x = 1.0 + TRUNCATION_POINT * e1
            ctx.x = TRUNCATION_POINT / (x * x)
        else:
            ctx.x = TRUNCATION_POINT + 8.0 * engine.standard_exponential() / PI2
        if _accept_by_series(engine, ctx, operator.lt):
            return ctx.x


def initialize_jacobi_config(ctx: SamplingContext, z: float) -> None:
    """Set the proposal parameters ``mu = 1/z`` and ``k = pi^2/8 + z^2/2``."""
    ctx.mu = 1.0 / z
    ctx.k = PI2_8 + 0.5 * z * z


def sample_jacobi(engine: RandomEngine, ctx: SamplingContext) -> float:
    """
    Draw from :math:`J^*(1, z)` for :math:`z \\ne 0` (Polson et al., 2013).

    With probability ``ctx.ratio`` the candidate is an
    :math:`\\text{IG}(\\mu, 1)` variate truncated below :math:`T`; otherwise
    it is :math:`T + E / k`. The series test uses :math:`a_n(x \\mid T)`
    rather than the tilted :math:`a_n(x \\mid z, T)`: the tilting factor is
    common to the density and both bounds, and it overflows for large
    :math:`z`. The odd-step acceptance is non-strict.

    Parameters
    ----------
    engine : RandomEngine
        Source of uniform, exponential and Wald variates.
    ctx : SamplingContext
        Context prepared by :func:`initialize_jacobi_config` with ``ratio``
        set; ``x`` and ``logx`` are overwritten.

    Returns
    -------
    x : float
        Positive variate.
    """
    while True:
        if engine.random() < ctx.ratio:
            ctx.x = sample_right_bounded_inverse_gaussian(
                engine, ctx.mu, 1.0, TRUNCATION_POINT
            )
        else:
            ctx.x = TRUNCATION_POINT + engine.standard_exponential() / ctx.k
        if _accept_by_series(engine, ctx, operator.le):
            return ctx.x
