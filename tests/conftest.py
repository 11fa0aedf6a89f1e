"""Shared test fixtures and configuration."""

import pytest
import torch

from izhinet.utils.numerical_validation import set_numerical_validation
from izhinet.utils.rng import RandomSource


@pytest.fixture(autouse=True)
def enable_numerical_validation():
    """Every test starts with numerical validation switched on."""
    set_numerical_validation(True)
    yield
    set_numerical_validation(True)


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return RandomSource(seed=42)


@pytest.fixture
def n_excitatory():
    """Standard excitatory population size for tests."""
    return 40


@pytest.fixture
def n_inhibitory():
    """Standard inhibitory population size for tests."""
    return 10


@pytest.fixture
def n_timesteps():
    """Standard simulation duration (ms)."""
    return 50


class ConstantSource(RandomSource):
    """Random source whose thalamic noise is a fixed value for every neuron."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def standard_normal(self, n: int) -> torch.Tensor:
        return torch.full((n,), self.value, dtype=torch.float64)


@pytest.fixture
def constant_source():
    """Factory for random sources with constant thalamic noise."""
    return ConstantSource
