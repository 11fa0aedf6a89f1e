"""
Configuration validation for izhinet.

Declarative validation: a dataclass mixes in ``ValidatedConfig`` and lists,
per field, the names of the validators that must pass.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

from izhinet.errors import ConfigurationError


class ConfigValidationError(ConfigurationError):
    """Raised when configuration validation fails."""


# =============================================================================
# DECLARATIVE VALIDATION FRAMEWORK
# =============================================================================


class ValidatorRegistry:
    """Registry of predefined validation rules.

    Usage:
        validator = ValidatorRegistry.get_validator('non_negative_integer')
        validator(3, 'excitatory')   # Passes
        validator(-1, 'excitatory')  # Raises ConfigValidationError
    """

    _validators: Dict[str, Callable[[Any, str], None]] = {}

    @classmethod
    def register(cls, name: str, validator: Callable[[Any, str], None]) -> None:
        """Register a validation function."""
        cls._validators[name] = validator

    @classmethod
    def get_validator(cls, rule: str) -> Callable[[Any, str], None]:
        """Get validator by name."""
        if rule in cls._validators:
            return cls._validators[rule]
        raise ValueError(f"Unknown validation rule: {rule}")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# Register predefined validators
def _register_builtin_validators() -> None:
    """Register standard validation rules."""

    def non_negative_integer(value: Any, name: str) -> None:
        """Value must be an integer >= 0."""
        if not _is_integer(value):
            raise ConfigValidationError(f"{name} must be integer, got {type(value)}")
        if value < 0:
            raise ConfigValidationError(f"{name}={value} must be non-negative")

    def positive_integer(value: Any, name: str) -> None:
        """Value must be an integer > 0."""
        if not _is_integer(value):
            raise ConfigValidationError(f"{name} must be integer, got {type(value)}")
        if value <= 0:
            raise ConfigValidationError(f"{name}={value} must be positive integer")

    def non_empty_string(value: Any, name: str) -> None:
        """Value must be a non-empty string."""
        if not isinstance(value, str):
            raise ConfigValidationError(f"{name} must be string, got {type(value)}")
        if not value.strip():
            raise ConfigValidationError(f"{name} must be non-empty string")

    ValidatorRegistry.register('non_negative_integer', non_negative_integer)
    ValidatorRegistry.register('positive_integer', positive_integer)
    ValidatorRegistry.register('non_empty_string', non_empty_string)


_register_builtin_validators()


class ValidatedConfig:
    """Mixin for declarative config validation.

    Usage:
        @dataclass
        class MyConfig(BaseConfig, ValidatedConfig):
            n_workers: int = 1

            _validation_rules = {
                'n_workers': ('positive_integer',),
            }
    """

    _validation_rules: Dict[str, Tuple[str, ...]] = {}

    def validate_config(self) -> None:
        """Validate configuration based on _validation_rules.

        Raises:
            ConfigValidationError: If any validation fails
        """
        errors: List[str] = []

        for field_name, rules in self._validation_rules.items():
            if not hasattr(self, field_name):
                errors.append(f"Validation rule for non-existent field: {field_name}")
                continue

            value = getattr(self, field_name)
            for rule in rules:
                try:
                    ValidatorRegistry.get_validator(rule)(value, field_name)
                except ConfigValidationError as e:
                    errors.append(str(e))

        if errors:
            error_msg = (
                f"{self.__class__.__name__} validation failed:\n" +
                "\n".join(f"  • {e}" for e in errors)
            )
            raise ConfigValidationError(error_msg)


def validate_population_sizes(excitatory: int, inhibitory: int) -> None:
    """Check the construction contract of a network.

    Both counts must be non-negative integers and at least one neuron must
    exist; an empty network is rejected.

    Raises:
        ConfigValidationError: If the sizes violate the contract
    """
    validator = ValidatorRegistry.get_validator('non_negative_integer')
    validator(excitatory, 'excitatory')
    validator(inhibitory, 'inhibitory')
    if excitatory + inhibitory < 1:
        raise ConfigValidationError(
            "Network needs at least one neuron (excitatory + inhibitory >= 1), "
            f"got excitatory={excitatory}, inhibitory={inhibitory}"
        )
