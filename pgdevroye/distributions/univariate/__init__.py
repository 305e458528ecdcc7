"""Univariate distributions."""

from .polya_gamma import PolyaGamma
from .truncated_gamma import LeftTruncatedGamma
from .truncated_inverse_gaussian import RightTruncatedInverseGaussian

__all__ = ['PolyaGamma', 'LeftTruncatedGamma', 'RightTruncatedInverseGaussian']
