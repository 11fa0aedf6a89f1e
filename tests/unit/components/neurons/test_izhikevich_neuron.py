"""Tests for the single-cell Izhikevich update rule."""

import math

import pytest
import torch

from izhinet.components.neurons.izhikevich_neuron import (
    IzhikevichNeuron,
    NeuronParameters,
    SynapseType,
)
from izhinet.errors import ConfigurationError

RS_PARAMS = NeuronParameters(a=0.02, b=0.2, c=-65.0, d=8.0)


def regular_spiking_oracle(n_ticks, current, a=0.02, b=0.2, c=-65.0, d=8.0):
    """Independent float recurrence of the two-half-step Izhikevich update."""
    v = -65.0
    u = b * v
    trajectory = []
    for _ in range(n_ticks):
        for _ in range(2):
            v = v + 0.5 * (0.04 * v * v + 5.0 * v + 140.0 - u + current)
        u = u + a * (b * v - u)
        spiked = v >= 30.0
        if spiked:
            v = c
            u = u + d
        trajectory.append((v, u, spiked))
    return trajectory


def make_isolated_neuron(params=RS_PARAMS, synapse_type=SynapseType.EXCITATORY):
    neuron = IzhikevichNeuron(params, synapse_type)
    neuron.connect(torch.zeros(1, dtype=torch.float64))
    return neuron


class TestIzhikevichNeuronState:
    """Test construction and weight assignment."""

    def test_default_initial_state(self):
        """Test neurons start at rest with u = b * v."""
        neuron = IzhikevichNeuron(RS_PARAMS, SynapseType.EXCITATORY)

        assert neuron.v == -65.0
        assert neuron.u == RS_PARAMS.b * -65.0
        assert neuron.connection_weights is None

    def test_parameters_are_immutable(self):
        """Test NeuronParameters cannot be modified after creation."""
        with pytest.raises(AttributeError):
            RS_PARAMS.a = 0.1

    def test_connect_only_once(self):
        """Test connection weights can be assigned exactly once."""
        neuron = IzhikevichNeuron(RS_PARAMS, SynapseType.EXCITATORY)
        neuron.connect(torch.zeros(3))

        with pytest.raises(ConfigurationError, match="once"):
            neuron.connect(torch.zeros(3))

    def test_connect_copies_weights(self):
        """Test later writes to the source row do not reach the neuron."""
        row = torch.tensor([0.0, 0.25, -0.5], dtype=torch.float64)
        neuron = IzhikevichNeuron(RS_PARAMS, SynapseType.EXCITATORY)
        neuron.connect(row)

        row[1] = 100.0

        assert neuron.connection_weights[1].item() == 0.25

    def test_connect_rejects_matrix(self):
        """Test a 2-D weight tensor is rejected."""
        neuron = IzhikevichNeuron(RS_PARAMS, SynapseType.EXCITATORY)
        with pytest.raises(ConfigurationError):
            neuron.connect(torch.zeros(2, 2))


class TestIzhikevichNeuronDynamics:
    """Test the integration and reset rule."""

    def test_regular_spiking_trajectory_matches_oracle(self):
        """Test a zero-weight RS neuron under constant drive follows the recurrence exactly."""
        neuron = make_isolated_neuron()
        oracle = regular_spiking_oracle(200, current=10.0)

        for v_expected, u_expected, spiked_expected in oracle:
            spiked = neuron.step(2.0, [False])  # 2.0 * 5 = 10 for excitatory cells
            assert spiked == spiked_expected
            assert neuron.v == v_expected
            assert neuron.u == u_expected

        assert any(spiked for _, _, spiked in oracle)

    def test_first_tick_values(self):
        """Test the first tick against hand-computed values."""
        neuron = make_isolated_neuron()

        spiked = neuron.step(2.0, [False])

        # v: -65 -> -61.5 -> -58.105; u: -13 + 0.02 * (0.2 * -58.105 + 13)
        assert not spiked
        assert neuron.v == pytest.approx(-58.105)
        assert neuron.u == pytest.approx(-12.97242)

    def test_spike_resets_v_and_increments_u(self):
        """Test v := c and u := u + d after crossing the apex."""
        params = NeuronParameters(a=0.02, b=0.2, c=-55.0, d=4.0)
        neuron = make_isolated_neuron(params)

        # Reproduce the integration to know u just before the spike check
        v, u, current = -65.0, 0.2 * -65.0, 100.0 * 5.0
        for _ in range(2):
            v = v + 0.5 * (0.04 * v * v + 5.0 * v + 140.0 - u + current)
        u_before_reset = u + params.a * (params.b * v - u)
        assert v >= 30.0

        spiked = neuron.step(100.0, [False])

        assert spiked
        assert neuron.v == params.c
        assert neuron.u == u_before_reset + params.d

    def test_inhibitory_thalamic_scaling(self):
        """Test inhibitory cells scale thalamic noise by 2 instead of 5."""
        excitatory = make_isolated_neuron(synapse_type=SynapseType.EXCITATORY)
        inhibitory = make_isolated_neuron(synapse_type=SynapseType.INHIBITORY)
        reference = make_isolated_neuron(synapse_type=SynapseType.EXCITATORY)

        inhibitory.step(5.0, [False])   # 5 * 2 = 10
        excitatory.step(2.0, [False])   # 2 * 5 = 10
        reference.step(5.0, [False])    # 5 * 5 = 25

        assert inhibitory.v == excitatory.v
        assert reference.v > excitatory.v

    def test_synaptic_input_adds_weights_of_spiking_sources(self):
        """Test only columns of spiking presynaptic neurons contribute."""
        neuron = IzhikevichNeuron(RS_PARAMS, SynapseType.EXCITATORY)
        neuron.connect(torch.tensor([0.0, 0.4, -0.7, 0.1], dtype=torch.float64))

        current = neuron.synaptic_current(torch.tensor([True, True, False, True]))

        assert current == pytest.approx(0.5)

    def test_synaptic_input_equivalent_to_thalamic_current(self):
        """Test synaptic current enters the same equation as thalamic current."""
        driven = IzhikevichNeuron(RS_PARAMS, SynapseType.EXCITATORY)
        driven.connect(torch.tensor([0.0, 0.5], dtype=torch.float64))
        reference = IzhikevichNeuron(RS_PARAMS, SynapseType.EXCITATORY)
        reference.connect(torch.zeros(2, dtype=torch.float64))

        driven.step(0.0, [False, True])
        reference.step(0.1, [False, False])  # 0.1 * 5 = 0.5

        assert driven.v == reference.v
        assert driven.u == reference.u

    def test_synaptic_input_length_mismatch(self):
        """Test a spike vector of the wrong length is rejected."""
        neuron = make_isolated_neuron()
        with pytest.raises(ConfigurationError):
            neuron.step(0.0, [False, False])

    def test_no_clamping_below_reset(self):
        """Test strongly negative input drives v below c without clamping."""
        neuron = make_isolated_neuron()

        neuron.step(-20.0, [False])  # -100 current

        assert neuron.v < RS_PARAMS.c
        assert math.isfinite(neuron.v)
