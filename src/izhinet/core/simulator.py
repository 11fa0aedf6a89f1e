"""
Simulator - Discrete 1 ms stepping of a NetworkState.

One tick:
    1. Draw one N(0, 1) thalamic sample per neuron (calling thread).
    2. Snapshot the previous tick's spike vector as the shared synaptic input.
    3. Fan out ``neuron.step(noise[k], snapshot)`` over the population.
    4. Check every v/u is finite, then append the new spike vector.

Ticks are strictly sequential: tick t+1 starts only after every update of
tick t has completed and its spike vector has been recorded. Synaptic input
therefore always arrives with a one-tick delay.

Usage:
======
    from izhinet import SimulationConfig, Simulator

    with Simulator.from_config(SimulationConfig(seed=1, duration_ms=500)) as sim:
        network = sim.run(500)
    events = network.spike_events()
"""

from __future__ import annotations

import logging
from typing import Optional

import torch

from izhinet.config.simulation_config import SimulationConfig
from izhinet.core.network import NetworkState
from izhinet.core.parallel_executor import NeuronFanOut
from izhinet.errors import ConfigurationError
from izhinet.utils.numerical_validation import validate_finite
from izhinet.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class Simulator:
    """Drives a NetworkState tick by tick.

    The simulator is the only component that appends to the network's spike
    history. Random draws for thalamic noise come from ``rng`` unless a
    different source is passed to ``step``.
    """

    def __init__(
        self,
        network: NetworkState,
        rng: RandomSource,
        n_workers: int = 1,
        progress_interval: int = 100,
    ):
        """Initialize simulator.

        Args:
            network: Network to advance
            rng: Random source for thalamic noise
            n_workers: Worker threads for the per-tick fan-out
            progress_interval: Log progress every this many ticks
        """
        if progress_interval < 1:
            raise ConfigurationError(f"progress_interval={progress_interval} must be positive")
        self.network = network
        self.rng = rng
        self.progress_interval = progress_interval
        self._fan_out = NeuronFanOut(n_workers)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> "Simulator":
        """Validate ``config`` and build the network and simulator it describes."""
        config.validate()
        rng = RandomSource(config.seed)
        network = NetworkState(
            config.excitatory,
            config.inhibitory,
            rng,
            device=config.get_torch_device(),
        )
        return cls(
            network,
            rng,
            n_workers=config.n_workers,
            progress_interval=config.progress_interval,
        )

    @property
    def n_workers(self) -> int:
        return self._fan_out.n_workers

    def step(self, rng: Optional[RandomSource] = None) -> torch.Tensor:
        """Advance the network by one tick.

        Args:
            rng: Random source for this tick's noise (defaults to ``self.rng``)

        Returns:
            Spike vector of the new tick

        Raises:
            NumericalInstabilityError: If any neuron state became non-finite.
                The tick is not recorded.
        """
        network = self.network
        source = self.rng if rng is None else rng

        thalamic_input = source.standard_normal(network.n_neurons).tolist()
        synaptic_input = network.last_spikes.cpu()

        spikes = self._fan_out.step_all(network.neurons, thalamic_input, synaptic_input)

        next_step = network.time_step + 1
        for index, neuron in enumerate(network.neurons):
            validate_finite(neuron.v, "membrane potential", next_step, index)
            validate_finite(neuron.u, "recovery variable", next_step, index)

        network.record_spikes(spikes)
        logger.debug("t=%d ms: %d spikes", network.time_step, int(spikes.sum()))
        return spikes

    def run(self, duration_ms: int) -> NetworkState:
        """Step ``duration_ms`` times and return the network.

        A duration of 0 leaves the history untouched.

        Raises:
            ConfigurationError: If ``duration_ms`` is negative
        """
        if duration_ms < 0:
            raise ConfigurationError(f"duration_ms={duration_ms} must be non-negative")

        for t in range(duration_ms):
            if t % self.progress_interval == 0:
                logger.info("Time step: %d", t)
            self.step()

        logger.info(
            "Simulated %d ms, %d spikes total",
            duration_ms,
            int(self.network.spike_counts().sum()),
        )
        return self.network

    def close(self) -> None:
        """Release worker threads."""
        self._fan_out.shutdown()

    def __enter__(self) -> "Simulator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def simulate(
    excitatory: int,
    inhibitory: int,
    duration_ms: int,
    seed: Optional[int] = None,
    n_workers: int = 1,
) -> NetworkState:
    """Build a network, run it for ``duration_ms`` and return it."""
    config = SimulationConfig(
        excitatory=excitatory,
        inhibitory=inhibitory,
        duration_ms=duration_ms,
        seed=seed,
        n_workers=n_workers,
    )
    with Simulator.from_config(config) as simulator:
        return simulator.run(config.duration_ms)
