"""
IZHINET - Izhikevich spiking network simulator

Simulates a population of excitatory and inhibitory Izhikevich neurons under
random thalamic drive and dense recurrent coupling, and records which neurons
spike at every millisecond.

Quick Start:
============

    from izhinet import SimulationConfig, Simulator

    config = SimulationConfig(excitatory=800, inhibitory=200, seed=42)
    with Simulator.from_config(config) as sim:
        network = sim.run(config.duration_ms)

    for time_ms, neuron_id in network.spike_events():
        ...

Internal code should use explicit imports for clarity:

    from izhinet.components.neurons.izhikevich_neuron import IzhikevichNeuron
    from izhinet.core.network import NetworkState
"""

__version__ = "0.1.0"

# Configuration
from izhinet.config import SimulationConfig

# Neurons and connectivity
from izhinet.components.neurons import (
    IzhikevichNeuron,
    NeuronParameters,
    NeuronType,
    SynapseType,
    create_population,
    neuron_from_neuron_type,
    neuron_from_synapse_type,
)
from izhinet.components.synapses import WeightInitializer, generate_connectivity

# Engine
from izhinet.core import NetworkState, Simulator, simulate

# Errors and utilities
from izhinet.errors import ConfigurationError, IzhinetError, NumericalInstabilityError
from izhinet.utils import RandomSource, set_numerical_validation

__all__ = [
    "__version__",
    "SimulationConfig",
    "IzhikevichNeuron",
    "NeuronParameters",
    "NeuronType",
    "SynapseType",
    "create_population",
    "neuron_from_neuron_type",
    "neuron_from_synapse_type",
    "WeightInitializer",
    "generate_connectivity",
    "NetworkState",
    "Simulator",
    "simulate",
    "ConfigurationError",
    "IzhinetError",
    "NumericalInstabilityError",
    "RandomSource",
    "set_numerical_validation",
]
