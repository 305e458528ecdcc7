"""Base classes and the random engine interface."""

from .engine import RandomEngine, resolve_engine
from .distribution import Distribution

__all__ = [
    "Distribution",
    "RandomEngine",
    "resolve_engine",
]
