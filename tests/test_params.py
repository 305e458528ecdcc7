"""
Tests for frozen dataclass parameter containers.

Tests that each parameter dataclass:
- Can be constructed with valid values
- Is frozen (raises FrozenInstanceError on attribute assignment)
- Supports dataclasses.asdict() for dict conversion
- Supports dict-style access
"""

import dataclasses
import pytest

from pgdevroye.params import (
    PolyaGammaParams,
    LeftTruncatedGammaParams,
    RightTruncatedInverseGaussianParams,
)


class TestPolyaGammaParams:
    def test_construction(self):
        p = PolyaGammaParams(h=1.0, z=0.5)
        assert p.h == 1.0
        assert p.z == 0.5

    def test_frozen(self):
        p = PolyaGammaParams(h=1.0, z=0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.h = 3.0

    def test_asdict(self):
        p = PolyaGammaParams(h=1.0, z=0.5)
        d = dataclasses.asdict(p)
        assert d == {"h": 1.0, "z": 0.5}

    def test_slots(self):
        p = PolyaGammaParams(h=1.0, z=0.5)
        assert not hasattr(p, "__dict__")

    def test_dict_access(self):
        p = PolyaGammaParams(h=2.0, z=-1.0)
        assert p["h"] == 2.0
        assert "z" in p
        assert list(p.keys()) == ["h", "z"]
        assert list(p.values()) == [2.0, -1.0]
        assert dict(p.items()) == {"h": 2.0, "z": -1.0}

    def test_missing_key(self):
        p = PolyaGammaParams(h=2.0, z=-1.0)
        with pytest.raises(KeyError):
            p["shape"]


class TestLeftTruncatedGammaParams:
    def test_construction(self):
        p = LeftTruncatedGammaParams(shape=2.0, rate=1.5, lower=0.5)
        assert p.shape == 2.0
        assert p.rate == 1.5
        assert p.lower == 0.5

    def test_frozen(self):
        p = LeftTruncatedGammaParams(shape=2.0, rate=1.5, lower=0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.lower = 3.0

    def test_asdict(self):
        p = LeftTruncatedGammaParams(shape=2.0, rate=1.5, lower=0.5)
        d = dataclasses.asdict(p)
        assert d == {"shape": 2.0, "rate": 1.5, "lower": 0.5}


class TestRightTruncatedInverseGaussianParams:
    def test_construction(self):
        p = RightTruncatedInverseGaussianParams(mean=2.0, shape=1.0, upper=0.64)
        assert p.mean == 2.0
        assert p.shape == 1.0
        assert p.upper == 0.64

    def test_frozen(self):
        p = RightTruncatedInverseGaussianParams(mean=2.0, shape=1.0, upper=0.64)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.mean = 5.0

    def test_field_names(self):
        fields = {f.name for f in dataclasses.fields(RightTruncatedInverseGaussianParams)}
        assert fields == {"mean", "shape", "upper"}


class TestFromDistributions:
    def test_classical_params_roundtrip(self):
        from pgdevroye import LeftTruncatedGamma, RightTruncatedInverseGaussian

        gamma = LeftTruncatedGamma.from_classical_params(shape=2.0, rate=1.5, lower=0.5)
        assert gamma.classical_params == LeftTruncatedGammaParams(shape=2.0, rate=1.5, lower=0.5)

        ig = RightTruncatedInverseGaussian.from_classical_params(mean=2.0, shape=1.0, upper=0.64)
        assert ig.classical_params == RightTruncatedInverseGaussianParams(
            mean=2.0, shape=1.0, upper=0.64
        )
