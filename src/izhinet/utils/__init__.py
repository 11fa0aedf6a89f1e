"""Utility helpers: random source and numerical validation."""

from izhinet.utils.numerical_validation import (
    is_numerical_validation_enabled,
    set_numerical_validation,
    validate_finite,
)
from izhinet.utils.rng import RandomSource

__all__ = [
    "RandomSource",
    "is_numerical_validation_enabled",
    "set_numerical_validation",
    "validate_finite",
]
