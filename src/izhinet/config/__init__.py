"""
Configuration for izhinet runs.
"""

from izhinet.config.base import BaseConfig
from izhinet.config.simulation_config import SimulationConfig
from izhinet.config.validation import (
    ConfigValidationError,
    ValidatedConfig,
    ValidatorRegistry,
    validate_population_sizes,
)

__all__ = [
    "BaseConfig",
    "SimulationConfig",
    "ConfigValidationError",
    "ValidatedConfig",
    "ValidatorRegistry",
    "validate_population_sizes",
]
