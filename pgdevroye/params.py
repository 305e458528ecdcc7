"""
Frozen dataclass parameter containers for all distributions.

Each distribution's classical parameters are represented as a frozen dataclass
with ``slots=True``. This provides:

- **IDE autocompletion**: ``params.h`` instead of ``params['h']``
- **Immutability**: Prevents accidental mutation of parameters
- **Dict conversion**: ``dataclasses.asdict(params)`` when needed

Examples
--------
>>> from pgdevroye.params import PolyaGammaParams
>>> p = PolyaGammaParams(h=1.0, z=0.5)
>>> p.h
1.0
>>> p.h = 3.0  # Raises FrozenInstanceError

>>> import dataclasses
>>> dataclasses.asdict(p)
{'h': 1.0, 'z': 0.5}
"""

from dataclasses import dataclass, fields


class _ParamsBase:
    """Mixin providing dict-style access on frozen dataclass params.

    Allows both ``params.h`` and ``params['h']`` access styles,
    plus ``items()``, ``keys()``, ``values()`` for iteration.
    """

    __slots__ = ()

    def __getitem__(self, key: str):
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key)

    def __contains__(self, key: str) -> bool:
        return hasattr(self, key)

    def keys(self):
        """Yield field names."""
        return (f.name for f in fields(self))

    def values(self):
        """Yield field values."""
        return (getattr(self, f.name) for f in fields(self))

    def items(self):
        """Yield ``(name, value)`` pairs."""
        return ((f.name, getattr(self, f.name)) for f in fields(self))


@dataclass(frozen=True, slots=True)
class PolyaGammaParams(_ParamsBase):
    """
    Classical parameters for the Polya-Gamma distribution :math:`PG(h, z)`.

    Attributes
    ----------
    h : float
        Shape parameter :math:`h > 0`.
    z : float
        Tilting parameter :math:`z \\in \\mathbb{R}`.
    """
    h: float
    z: float


@dataclass(frozen=True, slots=True)
class LeftTruncatedGammaParams(_ParamsBase):
    """
    Classical parameters for a Gamma distribution truncated to :math:`x > t`.

    Attributes
    ----------
    shape : float
        Shape parameter :math:`a > 0`.
    rate : float
        Rate parameter :math:`b > 0`.
    lower : float
        Truncation point :math:`t > 0`.
    """
    shape: float
    rate: float
    lower: float


@dataclass(frozen=True, slots=True)
class RightTruncatedInverseGaussianParams(_ParamsBase):
    """
    Classical parameters for an Inverse Gaussian truncated to :math:`x < t`.

    Attributes
    ----------
    mean : float
        Mean parameter :math:`\\mu > 0` of the untruncated distribution.
    shape : float
        Shape parameter :math:`\\lambda > 0`.
    upper : float
        Truncation point :math:`t > 0`.
    """
    mean: float
    shape: float
    upper: float


__all__ = [
    "PolyaGammaParams",
    "LeftTruncatedGammaParams",
    "RightTruncatedInverseGaussianParams",
]
