"""Polya-Gamma samplers and their truncated proposal samplers."""

from .truncated import sample_left_bounded_gamma, sample_right_bounded_inverse_gaussian
from .jacobi import (
    TRUNCATION_POINT,
    SamplingContext,
    initialize_jacobi_config,
    sample_jacobi,
    sample_jacobi_zero,
    series_term,
)
from .devroye import (
    GAMMA_CONVOLUTION_TERMS,
    gamma_convolution_mean,
    proposal_mixture_ratio,
    sample_devroye,
    sample_gamma_convolution,
)

__all__ = [
    'sample_left_bounded_gamma', 'sample_right_bounded_inverse_gaussian',
    'TRUNCATION_POINT', 'SamplingContext', 'initialize_jacobi_config',
    'sample_jacobi', 'sample_jacobi_zero', 'series_term',
    'GAMMA_CONVOLUTION_TERMS', 'gamma_convolution_mean', 'proposal_mixture_ratio',
    'sample_devroye', 'sample_gamma_convolution',
]
