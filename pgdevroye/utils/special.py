"""
Special function approximations used by the Polya-Gamma samplers.

This module provides fast scalar implementations of the special functions
needed to evaluate acceptance probabilities and proposal mixture weights:

- :func:`erfc`: complementary error function
- :func:`inverse_gaussian_cdf`: CDF of the Inverse Gaussian distribution
- :func:`log_gamma`: logarithm of the gamma function
- :func:`upper_incomplete_gamma_q`: regularized upper incomplete gamma function

All functions operate on Python floats and are tuned for about :math:`10^{-9}`
relative accuracy, which is plenty for rejection tests and mixture weights.
Arguments are not validated; out-of-domain inputs give undefined results.

References
----------
Cody, W. J. (1969). Rational Chebyshev approximations for the error function.
Math. Comp. 23, 631-637.

Cody, W. & Hillstrom, K. (1967). Chebyshev approximations for the natural
logarithm of the gamma function. Math. Comp. 21(98), 198-203.

Temme, N. (1994). A set of algorithms for the incomplete gamma functions.
Probability in the Engineering and Informational Sciences, 8(2), 291-307.
"""

import math
import sys

from scipy.special import gammaincc

_EPS = sys.float_info.epsilon
_TINY = sys.float_info.min

_ONE_SQRTPI = 0.5641895835477563  # 1 / sqrt(pi)
_LOG_SQRT_2PI = 0.9189385332046727  # log(sqrt(2 * pi))
_NEG_LOG_TINY = 708.3964202663686  # -log(DBL_MIN)

# erfc saturates to 2 below this point and to 0 above the upper one.
_ERFC_LOWER = -6.003636680306125
_ERFC_UPPER = 26.615717509251258

# log((k - 1)!) for k = 1, ..., 126
LOG_FACTORIAL = (
    0.000000000000000, 0.0000000000000000, 0.69314718055994529,
    1.791759469228055, 3.1780538303479458, 4.7874917427820458,
    6.5792512120101012, 8.5251613610654147, 10.604602902745251,
    12.801827480081469, 15.104412573075516, 17.502307845873887,
    19.987214495661885, 22.552163853123425, 25.19122118273868,
    27.89927138384089, 30.671860106080672, 33.505073450136891,
    36.395445208033053, 39.339884187199495, 42.335616460753485,
    45.380138898476908, 48.471181351835227, 51.606675567764377,
    54.784729398112319, 58.003605222980518, 61.261701761002001,
    64.557538627006338, 67.88974313718154, 71.257038967168015,
    74.658236348830158, 78.092223553315307, 81.557959456115043,
    85.054467017581516, 88.580827542197682, 92.136175603687093,
    95.719694542143202, 99.330612454787428, 102.96819861451381,
    106.63176026064346, 110.32063971475739, 114.03421178146171,
    117.77188139974507, 121.53308151543864, 125.3172711493569,
    129.12393363912722, 132.95257503561632, 136.80272263732635,
    140.67392364823425, 144.5657439463449, 148.47776695177302,
    152.40959258449735, 156.3608363030788, 160.3311282166309,
    164.32011226319517, 168.32744544842765, 172.35279713916279,
    176.39584840699735, 180.45629141754378, 184.53382886144948,
    188.6281734236716, 192.7390472878449, 196.86618167289001,
    201.00931639928152, 205.1681994826412, 209.34258675253685,
    213.53224149456327, 217.73693411395422, 221.95644181913033,
    226.1905483237276, 230.43904356577696, 234.70172344281826,
    238.97838956183432, 243.26884900298271, 247.57291409618688,
    251.89040220972319, 256.22113555000954, 260.56494097186322,
    264.92164979855278, 269.29109765101981, 273.67312428569369,
    278.06757344036612, 282.4742926876304, 286.89313329542699,
    291.32395009427029, 295.76660135076065, 300.22094864701415,
    304.68685676566872, 309.1641935801469, 313.65282994987905,
    318.1526396202093, 322.66349912672615, 327.1852877037752,
    331.71788719692847, 336.26118197919845, 340.81505887079902,
    345.37940706226686, 349.95411804077025, 354.53908551944079,
    359.1342053695754, 363.73937555556347, 368.35449607240474,
    372.97946888568902, 377.61419787391867, 382.25858877306001,
    386.91254912321756, 391.57598821732961, 396.24881705179155,
    400.93094827891576, 405.6222961611449, 410.32277652693733,
    415.03230672824964, 419.75080559954472, 424.47819341825709,
    429.21439186665157, 433.95932399501481, 438.71291418612117,
    443.47508812091894, 448.24577274538461, 453.02489623849613,
    457.81238798127816, 462.60817852687489, 467.4121995716082,
    472.22438392698058, 477.04466549258564, 481.87297922988796,
)


def erfc(x: float) -> float:
    """
    Complementary error function :math:`\\operatorname{erfc}(x)`.

    Piecewise rational Chebyshev approximation (Cody, 1969) over the
    intervals :math:`[\\varepsilon, 0.5)`, :math:`[0.5, 4)` and
    :math:`[4, 26.6157)`, with the reflection
    :math:`\\operatorname{erfc}(-x) = 2 - \\operatorname{erfc}(x)` for
    negative arguments. Outside :math:`[-6.0036, 26.6157)` the result
    saturates to 2 or 0.

    The maximum relative error against a reference implementation is about
    :math:`1.08 \\times 10^{-9}`.

    Parameters
    ----------
    x : float
        Argument.

    Returns
    -------
    value : float
        :math:`\\operatorname{erfc}(x) \\in [0, 2]`.

    Examples
    --------
    >>> erfc(0.0)
    1.0
    >>> erfc(30.0)
    0.0
    """
    if x < _ERFC_LOWER:
        return 2.0
    elif x < -_EPS:
        return 2.0 - erfc(-x)
    elif x < _EPS:
        return 1.0
    elif x < 0.5:
        z = x * x
        num = (((1.85777706184603153e-01 * z + 3.16112374387056560e+00) * z
                + 1.13864154151050156e+02) * z + 3.77485237685302021e+02) * z \
            + 3.20937758913846947e+03
        den = ((((z + 2.36012909523441209e+01) * z + 2.44024637934444173e+02) * z
                + 1.28261652607737228e+03) * z + 2.84423683343917062e+03)
        return 1.0 - x * num / den
    elif x < 4.0:
        num = (((4.3187787405e-05 * x + 5.6316961891e-01) * x
                + 3.0317993362) * x + 6.8650184849) * x + 7.3738883116
        den = (((x + 5.3542167949) * x + 1.2795529509e+01) * x
               + 1.5184908190e+01) * x + 7.3739608908
        return math.exp(-x * x) * num / den
    elif x < _ERFC_UPPER:
        z = x * x
        y = math.exp(-z)
        # The division below would leave a spurious denormal otherwise.
        if x * _TINY > y * _ONE_SQRTPI:
            return 0.0
        z = 1.0 / z
        z *= ((-5.16882262185e-02 * z - 1.96068973726e-01) * z
              - 4.25799643553e-02) / ((z + 9.21452411694e-01) * z
                                      + 1.50942070545e-01)
        return y * (_ONE_SQRTPI + z) / x
    return 0.0


def inverse_gaussian_cdf(x: float, mu: float, lam: float) -> float:
    """
    CDF of the Inverse Gaussian distribution with mean ``mu`` and shape ``lam``.

    .. math::
        F(x) = \\frac{1}{2}\\left[
        \\operatorname{erfc}(a - b) +
        e^{2\\lambda/\\mu}\\operatorname{erfc}(a + b)\\right],
        \\quad a = \\sqrt{\\lambda / (2x)},\\; b = a x / \\mu

    The second term is dropped when :math:`\\operatorname{erfc}(a + b)`
    underflows, so :math:`e^{\\lambda/\\mu}` is only evaluated where it is
    finite.

    Parameters
    ----------
    x : float
        Point at which to evaluate the CDF (must be > 0).
    mu : float
        Mean :math:`\\mu > 0`.
    lam : float
        Shape :math:`\\lambda > 0`.

    Returns
    -------
    cdf : float
        :math:`P(X \\le x)`.
    """
    a = math.sqrt(0.5 * lam / x)
    b = a * (x / mu)
    tail = erfc(b + a)
    if tail == 0.0:
        return 0.5 * erfc(a - b)
    c = math.exp(lam / mu)
    return 0.5 * (erfc(a - b) + c * tail * c)


def log_gamma(z: float) -> float:
    """
    Logarithm of the gamma function :math:`\\log\\Gamma(z)` for :math:`z > 0`.

    Evaluation strategy:

    - Integers :math:`1 \\le z \\le 126`: lookup in :data:`LOG_FACTORIAL`.
    - :math:`z > 12`: Stirling series with three correction terms.
    - :math:`[4, 12]`, :math:`(1.5, 4)`, :math:`[0.5, 1.5]`: rational
      approximations of Cody & Hillstrom (1967).
    - :math:`(\\varepsilon, 0.5)`: :math:`\\log\\Gamma(z + 1) - \\log z`.
    - :math:`z \\le \\varepsilon`: :math:`-\\log z`, saturating at
      :math:`-\\log(\\text{DBL\\_MIN})`.

    The maximum relative error is about :math:`9.4 \\times 10^{-10}`.

    Parameters
    ----------
    z : float
        Argument (must be > 0).

    Returns
    -------
    value : float
        :math:`\\log\\Gamma(z)`.

    Examples
    --------
    >>> log_gamma(5.0)
    3.1780538303479458
    """
    if 1.0 <= z < 127.0 and z == int(z):
        return LOG_FACTORIAL[int(z) - 1]
    elif z > 12.0:
        z2 = z * z
        out = (z - 0.5) * math.log(z) - z + _LOG_SQRT_2PI
        out += 0.08333333333333333 / z - 0.002777777777777778 / (z2 * z) \
            + 0.0007936507936507937 / (z2 * z2 * z)
        return out
    elif z >= 4.0:
        num = (((-2.29660729780e+03 * z - 4.02621119975e+04) * z
                + 2.74647644705e+04) * z + 2.30661510616e+05) * z \
            - 2.12159572323e+05
        den = (((z - 5.70691009324e+02) * z - 2.42357409629e+04) * z
               - 1.46025937511e+05) * z - 1.16328495004e+05
        return num / den
    elif z > 1.5:
        num = (((4.16438922228 * z + 7.86994924154e+01) * z
                + 1.37519416416e+02) * z - 1.42046296688e+02) * z \
            - 7.83359299449e+01
        den = (((z + 4.33400022514e+01) * z + 2.63505074721e+02) * z
               + 3.13399215894e+02) * z + 4.70668766060e+01
        return (z - 2.0) * num / den
    elif z >= 0.5:
        return (z - 1.0) * _log_gamma_unit_ratio(z)
    elif z > _EPS:
        return z * _log_gamma_unit_ratio(z + 1.0) - math.log(z)
    elif z > _TINY:
        return -math.log(z)
    return _NEG_LOG_TINY


def _log_gamma_unit_ratio(z: float) -> float:
    """Rational factor R(z) with log Gamma(z) ~ (z - 1) R(z) on [0.5, 1.5]."""
    num = (((3.13060547623 * z + 1.11667541262e+01) * z
            - 2.19698958928e+01) * z - 2.44387534237e+01) * z - 2.66685511495
    den = (((z + 1.52346874070e+01) * z + 3.14690115749e+01) * z
           + 1.19400905721e+01) * z + 6.07771387771e-01
    return num / den


def upper_incomplete_gamma_q(s: float, x: float) -> float:
    """
    Regularized upper incomplete gamma function :math:`Q(s, x) = \\Gamma(s, x) / \\Gamma(s)`.

    For integer and half-integer shapes below 30 the finite closed forms

    .. math::
        Q(n, x) = e^{-x} \\sum_{k=0}^{n-1} \\frac{x^k}{k!}

    .. math::
        Q(n + \\tfrac{1}{2}, x) = \\operatorname{erfc}(\\sqrt{x}) +
        \\frac{e^{-x}}{\\sqrt{\\pi x}} \\sum_{k=1}^{n}
        \\frac{x^k}{\\prod_{j=1}^{k} (j - \\tfrac{1}{2})}

    are used. All other shapes are delegated to
    :func:`scipy.special.gammaincc`.

    Parameters
    ----------
    s : float
        Shape parameter (must be > 0).
    x : float
        Lower integration limit (must be >= 0).

    Returns
    -------
    q : float
        :math:`Q(s, x) \\in [0, 1]`.
    """
    if s < 30.0:
        n = int(s)
        if s == n:
            term = total = 1.0
            for k in range(1, n):
                term *= x / k
                total += term
            return math.exp(-x) * total
        elif s == n + 0.5:
            if x == 0.0:
                return 1.0
            sqrt_x = math.sqrt(x)
            term = 1.0
            total = 0.0
            for k in range(1, n + 1):
                term *= x / (k - 0.5)
                total += term
            return erfc(sqrt_x) + math.exp(-x) * _ONE_SQRTPI * total / sqrt_x
    return float(gammaincc(s, x))
