"""Synaptic connectivity generation."""

from izhinet.components.synapses.weight_init import (
    WeightInitializer,
    assign_connectivity,
    generate_connectivity,
)

__all__ = [
    "WeightInitializer",
    "assign_connectivity",
    "generate_connectivity",
]
