"""Izhikevich Neuron Model - Biologically Plausible Spiking with Rich Dynamics.

The Izhikevich model combines computational efficiency with biological realism,
capable of reproducing the common cortical firing patterns:
- Regular spiking (RS), excitatory
- Intrinsically bursting (IB), excitatory
- Chattering (CH), excitatory
- Fast spiking (FS), inhibitory
- Low-threshold spiking (LTS), inhibitory

Model equations:
    dv/dt = 0.04*v^2 + 5*v + 140 - u + I
    du/dt = a*(b*v - u)

    if v >= 30 mV:
        v := c
        u := u + d

Parameters:
    a: recovery time constant (smaller = slower recovery)
    b: sensitivity of recovery variable u to voltage v
    c: after-spike reset value for voltage
    d: after-spike reset increment for recovery variable

Each IzhikevichNeuron is a single cell addressed by its index in the network.
Its connection weights are the *incoming* row of the connectivity matrix
(see izhinet.components.synapses.weight_init), so ``synaptic_input[j]`` being
True adds ``connection_weights[j]``, the weight of the edge j -> self.

Reference: Izhikevich, E.M. (2003). Simple model of spiking neurons.
IEEE Transactions on Neural Networks, 14(6), 1569-1572.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

import torch

from izhinet.components.neurons.neuron_constants import (
    CONSTANT_TERM,
    INTEGRATION_SUBSTEP_MS,
    LINEAR_COEFF,
    N_INTEGRATION_SUBSTEPS,
    QUADRATIC_COEFF,
    THALAMIC_SCALE_EXCITATORY,
    THALAMIC_SCALE_INHIBITORY,
    V_PEAK,
    V_REST,
)
from izhinet.errors import ConfigurationError

SpikeVector = Union[torch.Tensor, Sequence[bool]]


@dataclass(frozen=True)
class NeuronParameters:
    """Izhikevich morphology parameters of one neuron."""

    a: float
    """Time scale of the recovery variable u."""

    b: float
    """Sensitivity of u to the subthreshold fluctuations of v."""

    c: float
    """After-spike reset value of v (fast high-threshold K+ conductances)."""

    d: float
    """After-spike increment of u (slow high-threshold Na+ and K+ conductances)."""


class SynapseType(Enum):
    """Polarity of a neuron's outgoing synapses."""

    EXCITATORY = "excitatory"
    INHIBITORY = "inhibitory"


class NeuronType(Enum):
    """Cortical firing archetypes with fixed parameter presets."""

    REGULAR = "regular"
    INTRINSICALLY_BURSTING = "intrinsically_bursting"
    CHATTERING = "chattering"
    FAST_SPIKING = "fast_spiking"
    LOW_THRESHOLD_SPIKING = "low_threshold_spiking"

    @property
    def params(self) -> NeuronParameters:
        """Preset (a, b, c, d) for this archetype."""
        return NEURON_TYPE_PARAMS[self]

    @property
    def synapse_type(self) -> SynapseType:
        """Polarity implied by this archetype."""
        return NEURON_TYPE_SYNAPSE[self]


NEURON_TYPE_PARAMS = {
    NeuronType.REGULAR: NeuronParameters(a=0.02, b=0.2, c=-65.0, d=2.0),
    NeuronType.INTRINSICALLY_BURSTING: NeuronParameters(a=0.02, b=0.2, c=-55.0, d=4.0),
    NeuronType.CHATTERING: NeuronParameters(a=0.02, b=0.2, c=-50.0, d=2.0),
    NeuronType.FAST_SPIKING: NeuronParameters(a=0.1, b=0.2, c=-65.0, d=2.0),
    NeuronType.LOW_THRESHOLD_SPIKING: NeuronParameters(a=0.1, b=0.25, c=-55.0, d=2.0),
}

NEURON_TYPE_SYNAPSE = {
    NeuronType.REGULAR: SynapseType.EXCITATORY,
    NeuronType.INTRINSICALLY_BURSTING: SynapseType.EXCITATORY,
    NeuronType.CHATTERING: SynapseType.EXCITATORY,
    NeuronType.FAST_SPIKING: SynapseType.INHIBITORY,
    NeuronType.LOW_THRESHOLD_SPIKING: SynapseType.INHIBITORY,
}


class IzhikevichNeuron:
    """Single Izhikevich cell with mutable (v, u) state.

    Use the factories in ``izhinet.components.neurons.neuron_factory`` rather
    than calling the constructor directly; they take care of parameter
    randomization and the initial recovery value.
    """

    def __init__(
        self,
        parameters: NeuronParameters,
        synapse_type: SynapseType,
        v: float = V_REST,
        u: Optional[float] = None,
    ):
        """Initialize neuron.

        Args:
            parameters: Izhikevich (a, b, c, d)
            synapse_type: Polarity, used for scaling thalamic input
            v: Initial membrane potential (mV)
            u: Initial recovery variable; defaults to ``parameters.b * v``
        """
        self.parameters = parameters
        self.synapse_type = synapse_type
        self.v = float(v)
        self.u = float(parameters.b * v if u is None else u)
        self._connection_weights: Optional[torch.Tensor] = None

    @property
    def connection_weights(self) -> Optional[torch.Tensor]:
        """Incoming weights indexed by presynaptic neuron (read-only view)."""
        return self._connection_weights

    @property
    def thalamic_scale(self) -> float:
        if self.synapse_type is SynapseType.EXCITATORY:
            return THALAMIC_SCALE_EXCITATORY
        return THALAMIC_SCALE_INHIBITORY

    def connect(self, connection_weights: torch.Tensor) -> None:
        """Assign the incoming weight row. Allowed exactly once.

        Raises:
            ConfigurationError: If weights were already assigned or are not 1-D
        """
        if self._connection_weights is not None:
            raise ConfigurationError("Connection weights can only be assigned once")
        weights = torch.as_tensor(connection_weights, dtype=torch.float64)
        if weights.dim() != 1:
            raise ConfigurationError(
                f"Connection weights must be 1-D, got shape {tuple(weights.shape)}"
            )
        # Private copy so later writes to the source matrix cannot leak in
        weights = weights.clone()
        weights.requires_grad_(False)
        self._connection_weights = weights

    def synaptic_current(self, synaptic_input: SpikeVector) -> float:
        """Sum of incoming weights over presynaptic neurons that spiked."""
        spikes = torch.as_tensor(synaptic_input, dtype=torch.bool)
        n_weights = 0 if self._connection_weights is None else self._connection_weights.shape[0]
        if spikes.dim() != 1 or spikes.shape[0] != n_weights:
            raise ConfigurationError(
                f"Synaptic input has shape {tuple(spikes.shape)}, "
                f"expected ({n_weights},) to match connection weights"
            )
        if n_weights == 0:
            return 0.0
        return self._connection_weights[spikes].sum().item()

    def step(self, thalamic_input: float, synaptic_input: SpikeVector) -> bool:
        """Advance this neuron by one 1 ms tick.

        Args:
            thalamic_input: Gaussian noise sample for this tick
            synaptic_input: Previous tick's spike vector, one flag per neuron

        Returns:
            True if the neuron spiked this tick
        """
        # Excitatory cells receive stronger driving noise
        i = thalamic_input * self.thalamic_scale
        i += self.synaptic_current(synaptic_input)

        # Two half-steps for numerical stability; no clamping between them
        for _ in range(N_INTEGRATION_SUBSTEPS):
            self.v += INTEGRATION_SUBSTEP_MS * (
                (QUADRATIC_COEFF * self.v * self.v)
                + (LINEAR_COEFF * self.v)
                + CONSTANT_TERM
                - self.u
                + i
            )
        self.u += self.parameters.a * ((self.parameters.b * self.v) - self.u)

        if self.v >= V_PEAK:
            self.v = self.parameters.c
            self.u += self.parameters.d
            return True
        return False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.synapse_type.value}, "
            f"{self.parameters}, v={self.v:.3f}, u={self.u:.3f})"
        )
