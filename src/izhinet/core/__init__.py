"""
Core engine: network state, per-tick fan-out and the simulator.
"""

from izhinet.core.network import NetworkState
from izhinet.core.parallel_executor import NeuronFanOut, partition_indices
from izhinet.core.simulator import Simulator, simulate

__all__ = [
    "NetworkState",
    "NeuronFanOut",
    "Simulator",
    "partition_indices",
    "simulate",
]
