"""
Simulation run configuration.

Author: izhinet Project
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from izhinet.config.base import BaseConfig
from izhinet.config.validation import (
    ConfigValidationError,
    ValidatedConfig,
    validate_population_sizes,
)


@dataclass
class SimulationConfig(BaseConfig, ValidatedConfig):
    """Configuration of one network run.

    Defaults reproduce the classic 1000-neuron Izhikevich (2003) network
    (800 excitatory, 200 inhibitory) simulated for one second.
    """

    excitatory: int = 800
    """Number of excitatory neurons."""

    inhibitory: int = 200
    """Number of inhibitory neurons."""

    duration_ms: int = 1000
    """Number of 1 ms ticks to simulate."""

    n_workers: int = 1
    """Worker threads for the per-tick fan-out. 1 = serial on the caller."""

    progress_interval: int = 100
    """Log progress every this many ticks."""

    output_path: str = "spikes.png"
    """Where the raster plot is written by the command-line driver."""

    figure_size_px: Tuple[int, int] = (800, 1200)
    """Raster image size in pixels (width, height)."""

    _validation_rules = {
        'excitatory': ('non_negative_integer',),
        'inhibitory': ('non_negative_integer',),
        'duration_ms': ('non_negative_integer',),
        'n_workers': ('positive_integer',),
        'progress_interval': ('positive_integer',),
        'output_path': ('non_empty_string',),
    }

    @property
    def n_neurons(self) -> int:
        return self.excitatory + self.inhibitory

    def validate(self) -> None:
        """Validate all fields and the population-size contract.

        Raises:
            ConfigValidationError: If any field is invalid
        """
        self.validate_config()
        validate_population_sizes(self.excitatory, self.inhibitory)
        if self.device != "cpu":
            raise ConfigValidationError(f"device={self.device!r} is not supported, use 'cpu'")
