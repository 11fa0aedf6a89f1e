"""
Base Configuration Classes.

This module provides the base configuration class with the fields shared by
every run configuration: device and random seed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import torch


@dataclass
class BaseConfig:
    """Base configuration with common fields for all components.

    - device: Hardware device for spike and weight tensors
    - seed: Random seed for reproducibility
    """

    device: str = "cpu"
    """Device to run on. Only 'cpu' is supported by the per-neuron engine."""

    seed: Optional[int] = None
    """Random seed for reproducibility. None = nondeterministic seed."""

    def get_torch_device(self) -> torch.device:
        """Get PyTorch device object."""
        return torch.device(self.device)
