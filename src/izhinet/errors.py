"""
Custom exception classes for izhinet.

Exception Hierarchy:
====================
IzhinetError (base) - Base exception for all izhinet-specific errors
├── ConfigurationError - Invalid population sizes, durations or inputs
│   └── ConfigValidationError - Declarative config validation failures
└── NumericalInstabilityError - Non-finite neuron state after a tick

The engine has no recoverable errors during normal stepping. A tick either
completes for every neuron or the run is aborted with
NumericalInstabilityError, which the driver treats as fatal.
"""

from __future__ import annotations

# =============================================================================
# Exception Hierarchy
# =============================================================================


class IzhinetError(Exception):
    """Base exception for all izhinet-specific errors.

    All custom exceptions in izhinet inherit from this class, enabling
    code to catch izhinet errors specifically.
    """


class ConfigurationError(IzhinetError):
    """Invalid configuration parameters.

    Raised when population sizes, durations or worker counts are out of the
    valid range, or when a neuron receives a synaptic input vector that does
    not match the population size.
    """


class NumericalInstabilityError(IzhinetError):
    """Neuron state became NaN or infinite.

    Raised by the simulator after a tick in which any membrane potential or
    recovery variable is non-finite. The offending tick is not appended to
    the spike history.
    """

    def __init__(self, message: str, time_step: int = -1, neuron_index: int = -1):
        super().__init__(message)
        self.time_step = time_step
        self.neuron_index = neuron_index
