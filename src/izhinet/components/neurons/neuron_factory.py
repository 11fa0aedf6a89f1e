"""
Factory functions for creating Izhikevich neurons and populations.

Two construction paths return the same ``IzhikevichNeuron`` type:

- ``neuron_from_synapse_type``: coarse polarity only, used for bulk
  population generation.
- ``neuron_from_neuron_type``: explicit firing archetype (RS, IB, CH, FS,
  LTS), whose preset is re-randomized with the same polarity-dependent rule.

Usage:
======
    from izhinet.components.neurons import neuron_from_synapse_type, SynapseType
    from izhinet.utils import RandomSource

    rng = RandomSource(seed=7)
    cell = neuron_from_synapse_type(SynapseType.EXCITATORY, rng)
    population = create_population(excitatory=800, inhibitory=200, rng=rng)

Initial recovery value:
=======================
Both paths start at v = -65 mV. The synapse-type path sets u = b * v with the
neuron's own (randomized) b. The archetype path sets u from the *preset* b,
before inhibitory re-randomization replaces it. The two only differ for
inhibitory archetypes, and the difference is kept intentionally so that runs
remain comparable with earlier results.
"""

from __future__ import annotations

from typing import List

from izhinet.components.neurons.izhikevich_neuron import (
    IzhikevichNeuron,
    NeuronParameters,
    NeuronType,
    SynapseType,
)
from izhinet.components.neurons.neuron_constants import (
    EXCITATORY_A,
    EXCITATORY_B,
    EXCITATORY_C_BASE,
    EXCITATORY_C_SPAN,
    EXCITATORY_D_BASE,
    EXCITATORY_D_SPAN,
    INHIBITORY_A_BASE,
    INHIBITORY_A_SPAN,
    INHIBITORY_B_BASE,
    INHIBITORY_B_SPAN,
    INHIBITORY_C,
    INHIBITORY_D,
    V_REST,
)
from izhinet.errors import ConfigurationError
from izhinet.utils.rng import RandomSource


def randomize_parameters(
    synapse_type: SynapseType,
    r: float,
    a: float = EXCITATORY_A,
    b: float = EXCITATORY_B,
) -> NeuronParameters:
    """Apply the polarity-dependent randomization rule for one draw ``r``.

    Excitatory neurons keep ``a`` and ``b`` and get
    ``c = -65 + 15 r^2``, ``d = 8 - 6 r^2``; squaring r biases the population
    toward regular spiking rather than chattering.

    Inhibitory neurons get ``a = 0.02 + 0.08 r``, ``b = 0.25 - 0.05 r``,
    ``c = -65``, ``d = 2`` (fast-spiking derived); ``a`` and ``b`` arguments
    are ignored.

    Args:
        synapse_type: Polarity deciding which parameters are randomized
        r: Uniform sample in [0, 1)
        a: Recovery time scale kept for excitatory neurons
        b: Recovery sensitivity kept for excitatory neurons
    """
    if synapse_type is SynapseType.EXCITATORY:
        return NeuronParameters(
            a=a,
            b=b,
            c=EXCITATORY_C_BASE + EXCITATORY_C_SPAN * r * r,
            d=EXCITATORY_D_BASE - EXCITATORY_D_SPAN * r * r,
        )
    return NeuronParameters(
        a=INHIBITORY_A_BASE + INHIBITORY_A_SPAN * r,
        b=INHIBITORY_B_BASE - INHIBITORY_B_SPAN * r,
        c=INHIBITORY_C,
        d=INHIBITORY_D,
    )


def neuron_from_synapse_type(synapse_type: SynapseType, rng: RandomSource) -> IzhikevichNeuron:
    """Create a neuron from its polarity alone.

    Draws one uniform sample from ``rng``. The initial recovery variable uses
    the neuron's own ``b``.
    """
    params = randomize_parameters(synapse_type, rng.uniform())
    return IzhikevichNeuron(
        parameters=params,
        synapse_type=synapse_type,
        v=V_REST,
        u=params.b * V_REST,
    )


def neuron_from_neuron_type(neuron_type: NeuronType, rng: RandomSource) -> IzhikevichNeuron:
    """Create a neuron from a firing archetype.

    The preset's ``a`` and ``b`` seed the excitatory rule; inhibitory
    archetypes are fully re-randomized. The initial recovery variable is
    computed from the preset ``b`` (see module docstring).
    """
    preset = neuron_type.params
    synapse_type = neuron_type.synapse_type
    params = randomize_parameters(synapse_type, rng.uniform(), a=preset.a, b=preset.b)
    return IzhikevichNeuron(
        parameters=params,
        synapse_type=synapse_type,
        v=V_REST,
        u=preset.b * V_REST,
    )


def create_population(excitatory: int, inhibitory: int, rng: RandomSource) -> List[IzhikevichNeuron]:
    """Create ``excitatory`` then ``inhibitory`` neurons by polarity.

    Excitatory neurons occupy indices ``[0, excitatory)`` and inhibitory ones
    ``[excitatory, excitatory + inhibitory)``.

    Raises:
        ConfigurationError: If either count is negative
    """
    if excitatory < 0 or inhibitory < 0:
        raise ConfigurationError(
            f"Population sizes must be non-negative, got "
            f"excitatory={excitatory}, inhibitory={inhibitory}"
        )
    neurons = [neuron_from_synapse_type(SynapseType.EXCITATORY, rng) for _ in range(excitatory)]
    neurons += [neuron_from_synapse_type(SynapseType.INHIBITORY, rng) for _ in range(inhibitory)]
    return neurons
