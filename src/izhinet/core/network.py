"""
Network State - Neuron arena, connectivity and spike history.

The network is an index-addressed arena: neuron ``k`` lives at
``neurons[k]``, receives row ``k`` of the connectivity matrix, and owns
entry ``k`` of every spike vector. Excitatory neurons occupy indices
``[0, excitatory)``, inhibitory ones ``[excitatory, n_neurons)``.

Spike history
=============
``spike_history[t]`` is the boolean spike vector of simulated millisecond
``t``. Entry 0 is the all-false state before any integration. Only the
simulator appends to the history, one vector per tick, so that
``len(spike_history) == time_step + 1`` always holds.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, Union

import torch

from izhinet.components.neurons.izhikevich_neuron import IzhikevichNeuron, SynapseType
from izhinet.components.neurons.neuron_factory import create_population
from izhinet.components.synapses.weight_init import assign_connectivity, generate_connectivity
from izhinet.config.validation import validate_population_sizes
from izhinet.errors import ConfigurationError
from izhinet.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class NetworkState:
    """Population of Izhikevich neurons with dense recurrent connectivity."""

    def __init__(
        self,
        excitatory: int,
        inhibitory: int,
        rng: RandomSource,
        device: Union[str, torch.device] = "cpu",
    ):
        """Generate neurons and connectivity for an E/I population.

        Args:
            excitatory: Number of excitatory neurons
            inhibitory: Number of inhibitory neurons
            rng: Random source for parameter randomization and weights
            device: Device for spike and weight tensors

        Raises:
            ConfigurationError: If a count is negative or both are zero
        """
        validate_population_sizes(excitatory, inhibitory)

        neurons = create_population(excitatory, inhibitory, rng)
        connectivity = generate_connectivity(excitatory, inhibitory, rng)
        self._init_state(neurons, connectivity, excitatory, device)

        logger.info(
            "Created network: %d excitatory, %d inhibitory neurons (seed=%s)",
            excitatory,
            inhibitory,
            rng.seed,
        )

    @classmethod
    def from_neurons(
        cls,
        neurons: Sequence[IzhikevichNeuron],
        connectivity: torch.Tensor,
        device: Union[str, torch.device] = "cpu",
    ) -> "NetworkState":
        """Build a network from explicitly constructed neurons.

        Neurons must be ordered excitatory first. Each neuron receives its row
        of ``connectivity``, which must be [len(neurons), len(neurons)].

        Raises:
            ConfigurationError: If the population is empty or not E-then-I ordered
        """
        neurons = list(neurons)
        if not neurons:
            raise ConfigurationError("Network needs at least one neuron")

        excitatory = sum(1 for n in neurons if n.synapse_type is SynapseType.EXCITATORY)
        if any(n.synapse_type is not SynapseType.EXCITATORY for n in neurons[:excitatory]):
            raise ConfigurationError("Excitatory neurons must precede inhibitory neurons")

        network = cls.__new__(cls)
        network._init_state(neurons, torch.as_tensor(connectivity, dtype=torch.float64), excitatory, device)
        return network

    def _init_state(
        self,
        neurons: List[IzhikevichNeuron],
        connectivity: torch.Tensor,
        excitatory: int,
        device: Union[str, torch.device],
    ) -> None:
        assign_connectivity(neurons, connectivity)

        self.device = torch.device(device)
        self.neurons: List[IzhikevichNeuron] = neurons
        self.connectivity = connectivity.to(self.device)
        self.excitatory = excitatory
        self.inhibitory = len(neurons) - excitatory
        self.time_step = 0
        self._spike_history: List[torch.Tensor] = [
            torch.zeros(len(neurons), dtype=torch.bool, device=self.device)
        ]

    # =========================================================================
    # Population
    # =========================================================================

    @property
    def n_neurons(self) -> int:
        return len(self.neurons)

    def is_excitatory(self, index: int) -> bool:
        """Whether neuron ``index`` is excitatory."""
        return index < self.excitatory

    def membrane_potentials(self) -> torch.Tensor:
        """Current v of every neuron, indexed by neuron id."""
        return torch.tensor([n.v for n in self.neurons], dtype=torch.float64)

    def recovery_variables(self) -> torch.Tensor:
        """Current u of every neuron, indexed by neuron id."""
        return torch.tensor([n.u for n in self.neurons], dtype=torch.float64)

    # =========================================================================
    # Spike history
    # =========================================================================

    @property
    def spike_history(self) -> Tuple[torch.Tensor, ...]:
        """Spike vectors for ticks 0..time_step (read-only sequence)."""
        return tuple(self._spike_history)

    @property
    def last_spikes(self) -> torch.Tensor:
        """Spike vector of the most recent tick."""
        return self._spike_history[self.time_step]

    def record_spikes(self, spikes: torch.Tensor) -> None:
        """Append the spike vector of a completed tick and advance time.

        Called by the simulator once per tick, after every neuron update of
        that tick has finished.

        Raises:
            ConfigurationError: If ``spikes`` is not a length-N boolean vector
        """
        if spikes.dtype != torch.bool or tuple(spikes.shape) != (self.n_neurons,):
            raise ConfigurationError(
                f"Spike vector must be bool of shape ({self.n_neurons},), "
                f"got {spikes.dtype} {tuple(spikes.shape)}"
            )
        self._spike_history.append(spikes.to(self.device))
        self.time_step += 1

    def spike_raster(self) -> torch.Tensor:
        """Spike history stacked into a [time_step + 1, n_neurons] bool tensor."""
        return torch.stack(self._spike_history)

    def spike_events(self, start: int = 0, stop: Optional[int] = None) -> List[Tuple[int, int]]:
        """``(time_ms, neuron_id)`` pairs for every recorded spike.

        Args:
            start: First tick to include (negative counts from the end)
            stop: One past the last tick to include (default: all)
        """
        start, stop, _ = slice(start, stop).indices(self.time_step + 1)
        raster = self.spike_raster()[start:stop]
        times, neuron_ids = raster.nonzero(as_tuple=True)
        return [(int(t) + start, int(k)) for t, k in zip(times.tolist(), neuron_ids.tolist())]

    def spike_counts(self) -> torch.Tensor:
        """Number of spikes per neuron over the whole history."""
        return self.spike_raster().sum(dim=0)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(excitatory={self.excitatory}, "
            f"inhibitory={self.inhibitory}, time_step={self.time_step})"
        )
