"""Distributions exposed by pgdevroye."""

from .univariate import LeftTruncatedGamma, PolyaGamma, RightTruncatedInverseGaussian

__all__ = ['PolyaGamma', 'LeftTruncatedGamma', 'RightTruncatedInverseGaussian']
