"""
Tests for dense E/I connectivity generation.
"""

import pytest
import torch

from izhinet.components.neurons.neuron_factory import create_population
from izhinet.components.synapses.weight_init import (
    WeightInitializer,
    assign_connectivity,
    generate_connectivity,
)
from izhinet.errors import ConfigurationError
from izhinet.utils.rng import RandomSource


class TestGenerateConnectivity:
    """Test the [post, pre] weight matrix."""

    @pytest.mark.parametrize("excitatory, inhibitory", [(1, 0), (0, 1), (8, 2), (3, 7), (30, 0)])
    def test_shape_and_zero_diagonal(self, excitatory, inhibitory, rng):
        n = excitatory + inhibitory
        weights = generate_connectivity(excitatory, inhibitory, rng)

        assert weights.shape == (n, n)
        assert weights.dtype == torch.float64
        assert torch.all(weights.diagonal() == 0.0)

    def test_weight_ranges_follow_presynaptic_polarity(self, rng):
        """Test excitatory columns lie in [0, 0.5) and inhibitory columns in (-1, 0]."""
        excitatory, inhibitory = 40, 10
        weights = generate_connectivity(excitatory, inhibitory, rng)

        excitatory_columns = weights[:, :excitatory]
        inhibitory_columns = weights[:, excitatory:]

        assert torch.all(excitatory_columns >= 0.0)
        assert torch.all(excitatory_columns < 0.5)
        assert torch.all(inhibitory_columns > -1.0)
        assert torch.all(inhibitory_columns <= 0.0)

    def test_off_diagonal_weights_are_populated(self, rng):
        weights = generate_connectivity(20, 20, rng)
        off_diagonal = ~torch.eye(40, dtype=torch.bool)

        assert (weights[off_diagonal] != 0.0).float().mean() > 0.99

    def test_seeded_generation_is_reproducible(self):
        first = generate_connectivity(10, 5, RandomSource(seed=11))
        second = generate_connectivity(10, 5, RandomSource(seed=11))

        torch.testing.assert_close(first, second, rtol=0, atol=0)

    def test_negative_sizes_rejected(self, rng):
        with pytest.raises(ConfigurationError):
            WeightInitializer.dense_excitatory_inhibitory(-1, 3, rng)


class TestAssignConnectivity:
    """Test that neuron i receives row i."""

    def test_row_assignment(self, rng):
        neurons = create_population(3, 2, rng)
        weights = generate_connectivity(3, 2, rng)

        assign_connectivity(neurons, weights)

        for i, neuron in enumerate(neurons):
            torch.testing.assert_close(neuron.connection_weights, weights[i], rtol=0, atol=0)

    def test_presynaptic_spike_selects_column(self, rng):
        """Test a spike of neuron j adds weights[i, j] to neuron i."""
        neurons = create_population(3, 2, rng)
        weights = generate_connectivity(3, 2, rng)
        assign_connectivity(neurons, weights)

        spikes = torch.tensor([False, False, False, True, False])

        for i, neuron in enumerate(neurons):
            assert neuron.synaptic_current(spikes) == weights[i, 3].item()

    def test_shape_mismatch_rejected(self, rng):
        neurons = create_population(2, 1, rng)
        with pytest.raises(ConfigurationError):
            assign_connectivity(neurons, torch.zeros(2, 2, dtype=torch.float64))
