"""Utility functions for pgdevroye package."""

from .special import (
    LOG_FACTORIAL,
    erfc,
    inverse_gaussian_cdf,
    log_gamma,
    upper_incomplete_gamma_q,
)

__all__ = [
    'LOG_FACTORIAL',
    'erfc', 'inverse_gaussian_cdf', 'log_gamma', 'upper_incomplete_gamma_q',
]
