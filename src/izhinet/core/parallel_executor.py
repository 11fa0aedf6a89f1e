"""
Parallel fan-out of per-neuron updates within one tick.

Architecture:
=============

    ┌──────────────────────────────────────────────────────────┐
    │                   CALLING THREAD (Simulator)              │
    │  • Draws thalamic noise for the tick                      │
    │  • Snapshots the previous spike vector                    │
    │  • Submits one contiguous index range per worker          │
    │  • Waits for all ranges (tick barrier), concatenates      │
    └──────────────────────────────────────────────────────────┘
                               │
          ┌────────────────────┼────────────────────┐
          ▼                    ▼                    ▼
    ┌───────────┐        ┌───────────┐        ┌───────────┐
    │ neurons   │        │ neurons   │        │ neurons   │
    │ [0, k)    │        │ [k, 2k)   │        │ [2k, N)   │
    └───────────┘        └───────────┘        └───────────┘

Each neuron reads only its own state, the shared read-only snapshot and its
own noise sample, and writes only its own (v, u). Ranges are disjoint, so no
locking is needed and the result does not depend on the number of workers.

The per-neuron update is pure Python, so the GIL serialises the ranges: the
pool fixes the concurrency structure of a tick but does not make it faster.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

import torch

from izhinet.components.neurons.izhikevich_neuron import IzhikevichNeuron
from izhinet.errors import ConfigurationError


def partition_indices(n_items: int, n_parts: int) -> List[Tuple[int, int]]:
    """Split ``range(n_items)`` into at most ``n_parts`` contiguous ranges.

    Range sizes differ by at most one; empty ranges are omitted.
    """
    if n_parts < 1:
        raise ConfigurationError(f"n_parts={n_parts} must be positive")
    n_parts = min(n_parts, n_items)
    if n_parts == 0:
        return []
    base, extra = divmod(n_items, n_parts)
    ranges = []
    start = 0
    for part in range(n_parts):
        stop = start + base + (1 if part < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def _step_range(
    neurons: Sequence[IzhikevichNeuron],
    thalamic_input: Sequence[float],
    synaptic_input: torch.Tensor,
    start: int,
    stop: int,
) -> List[bool]:
    return [neurons[k].step(thalamic_input[k], synaptic_input) for k in range(start, stop)]


class NeuronFanOut:
    """Data-parallel map of ``IzhikevichNeuron.step`` over a population.

    With ``n_workers == 1`` every update runs on the calling thread and no
    pool is created.
    """

    def __init__(self, n_workers: int = 1):
        if n_workers < 1:
            raise ConfigurationError(f"n_workers={n_workers} must be positive")
        self.n_workers = n_workers
        self._pool: Optional[ThreadPoolExecutor] = None
        if n_workers > 1:
            self._pool = ThreadPoolExecutor(max_workers=n_workers, thread_name_prefix="izhinet")

    def step_all(
        self,
        neurons: Sequence[IzhikevichNeuron],
        thalamic_input: Sequence[float],
        synaptic_input: torch.Tensor,
    ) -> torch.Tensor:
        """Step every neuron once and collect spikes in index order.

        Args:
            neurons: Population, addressed by index
            thalamic_input: One noise sample per neuron
            synaptic_input: Read-only snapshot of the previous spike vector

        Returns:
            Bool tensor [len(neurons)] of this tick's spikes
        """
        n = len(neurons)
        if len(thalamic_input) != n:
            raise ConfigurationError(
                f"Got {len(thalamic_input)} thalamic samples for {n} neurons"
            )

        if self._pool is None:
            spikes = _step_range(neurons, thalamic_input, synaptic_input, 0, n)
        else:
            futures = [
                self._pool.submit(_step_range, neurons, thalamic_input, synaptic_input, start, stop)
                for start, stop in partition_indices(n, self.n_workers)
            ]
            # result() re-raises worker exceptions; waiting on all is the tick barrier
            spikes = []
            for future in futures:
                spikes.extend(future.result())

        return torch.tensor(spikes, dtype=torch.bool)

    def shutdown(self) -> None:
        """Release worker threads."""
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    def __enter__(self) -> "NeuronFanOut":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
