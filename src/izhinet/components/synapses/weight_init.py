"""Weight Initialization - Dense random recurrent connectivity.

Connectivity convention
=======================
The matrix returned by ``WeightInitializer.dense_excitatory_inhibitory`` is
indexed ``[post, pre]``:

- row ``i`` is the incoming weight vector of neuron ``i``, handed to it once
  through ``IzhikevichNeuron.connect``;
- column ``j`` belongs to presynaptic neuron ``j``, so a spike of ``j`` in the
  previous tick adds ``weights[i, j]`` to neuron ``i``'s input current.

The sign of a weight is therefore decided by the presynaptic neuron: columns
``j < n_excitatory`` hold weights in ``[0, 0.5)``, the remaining columns hold
weights in ``(-1, 0]``. The diagonal (autapses) is zero.
"""

from __future__ import annotations

from typing import Sequence

import torch

from izhinet.components.neurons.izhikevich_neuron import IzhikevichNeuron
from izhinet.components.neurons.neuron_constants import (
    WEIGHT_SCALE_EXCITATORY,
    WEIGHT_SCALE_INHIBITORY,
)
from izhinet.errors import ConfigurationError
from izhinet.utils.rng import RandomSource


class WeightInitializer:
    """
    Centralized weight initialization.

    All methods return float64 torch.Tensor, not nn.Parameter.
    """

    @staticmethod
    def dense_excitatory_inhibitory(
        n_excitatory: int,
        n_inhibitory: int,
        rng: RandomSource,
    ) -> torch.Tensor:
        """
        All-to-all connectivity split by presynaptic polarity.

        Args:
            n_excitatory: Number of excitatory neurons (indices [0, n_excitatory))
            n_inhibitory: Number of inhibitory neurons (the remaining indices)
            rng: Random source for the uniform draws

        Returns:
            Weight matrix [n_post, n_pre] with zero diagonal
        """
        if n_excitatory < 0 or n_inhibitory < 0:
            raise ConfigurationError("Population sizes must be non-negative.")

        n = n_excitatory + n_inhibitory
        uniform = rng.uniform_tensor(n, n)

        presynaptic_excitatory = torch.arange(n) < n_excitatory
        weights = torch.where(
            presynaptic_excitatory.unsqueeze(0),
            WEIGHT_SCALE_EXCITATORY * uniform,
            -WEIGHT_SCALE_INHIBITORY * uniform,
        )
        weights.fill_diagonal_(0.0)
        return weights


def generate_connectivity(excitatory: int, inhibitory: int, rng: RandomSource) -> torch.Tensor:
    """Build the [post, pre] weight matrix for an E/I population."""
    return WeightInitializer.dense_excitatory_inhibitory(excitatory, inhibitory, rng)


def assign_connectivity(neurons: Sequence[IzhikevichNeuron], weights: torch.Tensor) -> None:
    """Hand row ``i`` of ``weights`` to ``neurons[i]``.

    Raises:
        ConfigurationError: If the matrix is not [len(neurons), len(neurons)]
    """
    n = len(neurons)
    if tuple(weights.shape) != (n, n):
        raise ConfigurationError(
            f"Connectivity shape {tuple(weights.shape)} does not match population size {n}"
        )
    for i, neuron in enumerate(neurons):
        neuron.connect(weights[i])
