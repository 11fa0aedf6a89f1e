"""Tests for SimulationConfig validation."""

import pytest

from izhinet.config import (
    ConfigValidationError,
    SimulationConfig,
    ValidatorRegistry,
    validate_population_sizes,
)
from izhinet.errors import ConfigurationError


class TestSimulationConfig:
    """Test defaults and validation rules."""

    def test_defaults(self):
        config = SimulationConfig()

        assert (config.excitatory, config.inhibitory, config.duration_ms) == (800, 200, 1000)
        assert config.n_neurons == 1000
        assert config.output_path == "spikes.png"
        config.validate()

    def test_single_polarity_allowed(self):
        SimulationConfig(excitatory=0, inhibitory=5).validate()
        SimulationConfig(excitatory=5, inhibitory=0).validate()

    def test_zero_duration_allowed(self):
        SimulationConfig(duration_ms=0).validate()

    def test_empty_network_rejected(self):
        with pytest.raises(ConfigValidationError, match="at least one neuron"):
            SimulationConfig(excitatory=0, inhibitory=0).validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"excitatory": -1},
            {"inhibitory": -3},
            {"duration_ms": -1},
            {"n_workers": 0},
            {"progress_interval": 0},
            {"output_path": "  "},
            {"excitatory": 2.5},
            {"inhibitory": True},
        ],
    )
    def test_invalid_fields_rejected(self, overrides):
        with pytest.raises(ConfigValidationError):
            SimulationConfig(**overrides).validate()

    def test_all_errors_reported(self):
        with pytest.raises(ConfigValidationError) as excinfo:
            SimulationConfig(excitatory=-1, n_workers=0).validate()

        assert "excitatory" in str(excinfo.value)
        assert "n_workers" in str(excinfo.value)

    def test_unsupported_device(self):
        with pytest.raises(ConfigValidationError):
            SimulationConfig(device="cuda").validate()

    def test_validation_error_is_configuration_error(self):
        assert issubclass(ConfigValidationError, ConfigurationError)


class TestValidators:
    """Test the validator registry."""

    def test_unknown_rule(self):
        with pytest.raises(ValueError):
            ValidatorRegistry.get_validator("no_such_rule")

    def test_population_sizes(self):
        validate_population_sizes(1, 0)
        with pytest.raises(ConfigValidationError):
            validate_population_sizes(0, 0)
