"""
Izhikevich neuron model, archetype presets and construction factories.
"""

from izhinet.components.neurons.izhikevich_neuron import (
    NEURON_TYPE_PARAMS,
    NEURON_TYPE_SYNAPSE,
    IzhikevichNeuron,
    NeuronParameters,
    NeuronType,
    SynapseType,
)
from izhinet.components.neurons.neuron_constants import (
    THALAMIC_SCALE_EXCITATORY,
    THALAMIC_SCALE_INHIBITORY,
    V_PEAK,
    V_REST,
)
from izhinet.components.neurons.neuron_factory import (
    create_population,
    neuron_from_neuron_type,
    neuron_from_synapse_type,
    randomize_parameters,
)

__all__ = [
    # Neuron model
    "IzhikevichNeuron",
    "NeuronParameters",
    "NeuronType",
    "SynapseType",
    "NEURON_TYPE_PARAMS",
    "NEURON_TYPE_SYNAPSE",
    # Constants
    "V_REST",
    "V_PEAK",
    "THALAMIC_SCALE_EXCITATORY",
    "THALAMIC_SCALE_INHIBITORY",
    # Factories
    "create_population",
    "neuron_from_neuron_type",
    "neuron_from_synapse_type",
    "randomize_parameters",
]
