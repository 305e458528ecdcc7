"""
Tests for the PolyaGamma distribution class.

Covers parameter validation, method selection, the gamma convolution
bias warning, output shapes and the closed-form moments.
"""

import math
import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pgdevroye import PolyaGamma, PolyaGammaParams
from pgdevroye.distributions.univariate.polya_gamma import GAMMA_CONVOLUTION_BIAS_TOL


class TestParameters:
    def test_from_classical_params(self):
        dist = PolyaGamma.from_classical_params(h=2.0, z=1.5)
        params = dist.classical_params
        assert isinstance(params, PolyaGammaParams)
        assert params.h == 2.0
        assert params.z == 1.5

    def test_default_tilt(self):
        dist = PolyaGamma.from_classical_params(h=1.0)
        assert dist.classical_params.z == 0.0

    @pytest.mark.parametrize("h", [0.0, -1.0, float('nan'), float('inf')])
    def test_invalid_shape(self, h):
        with pytest.raises(ValueError):
            PolyaGamma.from_classical_params(h=h, z=0.0)

    def test_infinite_shape_message(self):
        with pytest.raises(ValueError, match="finite"):
            PolyaGamma.from_classical_params(h=float('inf'), z=1.0)

    def test_no_cdf(self):
        dist = PolyaGamma.from_classical_params(h=1.0, z=0.0)
        with pytest.raises(NotImplementedError):
            dist.cdf(0.5)
        with pytest.raises(NotImplementedError):
            dist.sf(0.5)

    @pytest.mark.parametrize("z", [float('inf'), -float('inf'), float('nan')])
    def test_invalid_tilt(self, z):
        with pytest.raises(ValueError):
            PolyaGamma.from_classical_params(h=1.0, z=z)

    def test_not_fitted(self):
        dist = PolyaGamma()
        with pytest.raises(ValueError, match="Parameters not set"):
            dist.rvs()
        with pytest.raises(ValueError, match="Parameters not set"):
            dist.mean()
        assert repr(dist) == "PolyaGamma(not fitted)"

    def test_reset_invalidates_cache(self):
        dist = PolyaGamma.from_classical_params(h=1.0, z=0.0)
        assert dist.classical_params.h == 1.0
        dist.set_classical_params(h=3.0, z=2.0)
        assert dist.classical_params.h == 3.0
        assert dist.classical_params.z == 2.0

    def test_repr(self):
        dist = PolyaGamma.from_classical_params(h=1.0, z=0.5)
        assert repr(dist) == "PolyaGamma(h=1.0000, z=0.5000)"


class TestMoments:
    def test_zero_tilt(self):
        dist = PolyaGamma.from_classical_params(h=3.0, z=0.0)
        assert dist.mean() == 0.75
        assert dist.var() == pytest.approx(3.0 / 24.0, rel=1e-15)

    @pytest.mark.parametrize("z", [0.5, 2.0, 10.0])
    def test_closed_forms(self, z):
        h = 2.0
        dist = PolyaGamma.from_classical_params(h=h, z=z)
        assert_allclose(dist.mean(), h * math.tanh(z / 2) / (2 * z), rtol=1e-14)
        expected_var = h / (4 * z ** 3) * (math.sinh(z) - z) / math.cosh(z / 2) ** 2
        assert_allclose(dist.var(), expected_var, rtol=1e-10)

    def test_continuous_at_series_switch(self):
        below = PolyaGamma.from_classical_params(h=1.0, z=0.999e-3)
        above = PolyaGamma.from_classical_params(h=1.0, z=1.001e-3)
        assert_allclose(below.mean(), above.mean(), rtol=1e-9)
        assert_allclose(below.var(), above.var(), rtol=1e-8)

    def test_symmetric_in_tilt(self):
        pos = PolyaGamma.from_classical_params(h=1.0, z=3.0)
        neg = PolyaGamma.from_classical_params(h=1.0, z=-3.0)
        assert pos.mean() == neg.mean()
        assert pos.var() == neg.var()

    def test_large_tilt_finite(self):
        dist = PolyaGamma.from_classical_params(h=1.0, z=1e4)
        assert_allclose(dist.mean(), 0.5e-4, rtol=1e-12)
        assert math.isfinite(dist.var())
        assert dist.var() > 0
        assert_allclose(dist.std(), math.sqrt(dist.var()))


class TestMethodSelection:
    def test_integer_shape_defaults_to_devroye(self, scripted_engine):
        dist = PolyaGamma.from_classical_params(h=1.0, z=0.0)
        engine = scripted_engine(uniforms=[0.9, 0.5], exponentials=[0.5])
        dist.rvs(random_state=engine)
        assert engine.exhausted

    def test_fractional_shape_defaults_to_gamma_conv(self, scripted_engine):
        dist = PolyaGamma.from_classical_params(h=2.5, z=1.0)
        engine = scripted_engine(gammas=[1.0] * 200)
        dist.rvs(random_state=engine)
        assert engine.calls == [('standard_gamma', (2.5,))] * 200

    def test_devroye_requires_integer_shape(self):
        dist = PolyaGamma.from_classical_params(h=2.5, z=1.0)
        with pytest.raises(ValueError, match="integer"):
            dist.rvs(method='devroye')

    def test_unknown_method(self):
        dist = PolyaGamma.from_classical_params(h=1.0, z=1.0)
        with pytest.raises(ValueError, match="Unknown method"):
            dist.rvs(method='saddlepoint')

    def test_gamma_conv_for_integer_shape(self):
        dist = PolyaGamma.from_classical_params(h=2.0, z=1.0)
        x = dist.rvs(size=10, random_state=0, method='gamma_conv')
        assert np.all(x > 0)


class TestGammaConvolutionWarning:
    def test_warns_for_few_terms(self):
        dist = PolyaGamma.from_classical_params(h=1.5, z=0.0)
        with pytest.warns(RuntimeWarning, match="n_terms"):
            dist.rvs(size=2, random_state=0, n_terms=10)

    def test_silent_with_default_terms(self):
        dist = PolyaGamma.from_classical_params(h=1.5, z=1.0)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            dist.rvs(size=2, random_state=0)

    def test_tolerance(self):
        assert GAMMA_CONVOLUTION_BIAS_TOL == 1e-2


class TestSampling:
    def test_scalar(self):
        x = PolyaGamma.from_classical_params(h=1.0, z=0.0).rvs(random_state=1)
        assert isinstance(x, float)
        assert x > 0

    @pytest.mark.parametrize("size, shape", [(5, (5,)), ((2, 3), (2, 3)), ((0,), (0,))])
    def test_shapes(self, size, shape):
        x = PolyaGamma.from_classical_params(h=1.0, z=1.0).rvs(size=size, random_state=1)
        assert x.shape == shape

    def test_reproducible(self):
        dist = PolyaGamma.from_classical_params(h=2.0, z=0.5)
        a = dist.rvs(size=50, random_state=123)
        b = dist.rvs(size=50, random_state=123)
        np.testing.assert_array_equal(a, b)

    def test_generator_is_advanced(self):
        dist = PolyaGamma.from_classical_params(h=1.0, z=0.5)
        rng = np.random.default_rng(4)
        a = dist.rvs(size=20, random_state=rng)
        b = dist.rvs(size=20, random_state=rng)
        assert not np.array_equal(a, b)

    @pytest.mark.parametrize("h, z", [(1.0, 2.0), (3.0, -1.5), (2.0, 0.0)])
    def test_sample_moments(self, h, z):
        dist = PolyaGamma.from_classical_params(h=h, z=z)
        x = dist.rvs(size=20000, random_state=42)
        se = math.sqrt(dist.var() / x.size)
        assert abs(x.mean() - dist.mean()) < 5 * se
        assert_allclose(x.var(), dist.var(), rtol=0.1)

    def test_gamma_conv_sample_mean(self):
        dist = PolyaGamma.from_classical_params(h=0.5, z=1.0)
        x = dist.rvs(size=4000, random_state=8)
        se = math.sqrt(dist.var() / x.size)
        assert abs(x.mean() - dist.mean()) < 5 * se
