"""
pgdevroye: exact Polya-Gamma random variates.

Implements Devroye's alternating series rejection sampler for the
Polya-Gamma distribution PG(h, z) with integer shape, a truncated Gamma
convolution sampler for general shape, and the supporting special
functions and truncated Gamma / Inverse Gaussian samplers.

Key features:
- Exact PG(n, z) draws for integer n (``method='devroye'``)
- Injected random engines; any numpy Generator works
- Fast scalar erfc, log-gamma and incomplete gamma approximations
- Frozen dataclass parameter containers (pgdevroye.params)
"""

from pgdevroye.params import (
    PolyaGammaParams,
    LeftTruncatedGammaParams,
    RightTruncatedInverseGaussianParams,
)
from pgdevroye.distributions import (
    PolyaGamma,
    LeftTruncatedGamma,
    RightTruncatedInverseGaussian,
)
from pgdevroye.samplers import sample_devroye, sample_gamma_convolution

__version__ = "0.1.0"

__all__ = [
    # Distributions
    "PolyaGamma",
    "LeftTruncatedGamma",
    "RightTruncatedInverseGaussian",
    # Parameter dataclasses
    "PolyaGammaParams",
    "LeftTruncatedGammaParams",
    "RightTruncatedInverseGaussianParams",
    # Samplers
    "sample_devroye",
    "sample_gamma_convolution",
]
