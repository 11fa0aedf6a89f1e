"""Utility functions for numerical validation of neuron state."""

from __future__ import annotations

import math

from izhinet.errors import NumericalInstabilityError


# Module-level flag for numerical validation (mutable by design)
# ruff: noqa: N816 (allow lowercase module-level variable)
_enable_numerical_validation = True
"""Global flag to enable/disable numerical validation.

Set to False only for benchmarking after thorough testing.
"""


def set_numerical_validation(enabled: bool) -> None:
    """Enable or disable numerical validation globally.

    Args:
        enabled: True to enable validation, False to disable
    """
    global _enable_numerical_validation  # noqa: PLW0603
    _enable_numerical_validation = enabled


def is_numerical_validation_enabled() -> bool:
    """Return whether numerical validation is currently enabled."""
    return _enable_numerical_validation


def validate_finite(
    value: float,
    name: str,
    time_step: int = -1,
    neuron_index: int = -1,
) -> None:
    """Validate that a numerical value is finite.

    Args:
        value: Value to validate
        name: State variable name for error message
        time_step: Tick at which the value was produced (for diagnostics)
        neuron_index: Index of the neuron owning the value (for diagnostics)

    Raises:
        NumericalInstabilityError: If value is NaN or Inf
    """
    if not _enable_numerical_validation:
        return

    if math.isnan(value):
        raise NumericalInstabilityError(
            f"Invalid {name} of neuron {neuron_index} at time step {time_step}: "
            f"NaN is not a valid value. "
            f"This usually indicates a numerical instability upstream.",
            time_step=time_step,
            neuron_index=neuron_index,
        )

    if math.isinf(value):
        raise NumericalInstabilityError(
            f"Invalid {name} of neuron {neuron_index} at time step {time_step}: "
            f"Inf is not a valid value. "
            f"This usually indicates a numerical overflow upstream.",
            time_step=time_step,
            neuron_index=neuron_index,
        )
