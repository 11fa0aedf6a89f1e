"""Seedable random source shared by neuron factories, connectivity and noise."""

from __future__ import annotations

from typing import Optional

import torch


class RandomSource:
    """Explicitly owned random number generator.

    Wraps a CPU ``torch.Generator`` so that parameter randomization,
    connectivity generation and thalamic noise can all be driven from a
    single seed. Two sources built with the same seed produce the same
    sequence of draws.

    Draws are not thread-safe; the simulator only samples from the calling
    thread, before fanning work out to the worker pool.
    """

    def __init__(self, seed: Optional[int] = None):
        self.generator = torch.Generator(device="cpu")
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.seed = int(seed)
            self.generator.manual_seed(self.seed)

    def uniform(self) -> float:
        """Single uniform sample in [0, 1)."""
        return torch.rand((), generator=self.generator, dtype=torch.float64).item()

    def uniform_tensor(self, *shape: int) -> torch.Tensor:
        """Tensor of uniform samples in [0, 1) with the given shape."""
        return torch.rand(shape, generator=self.generator, dtype=torch.float64)

    def standard_normal(self, n: int) -> torch.Tensor:
        """``n`` independent samples from N(0, 1)."""
        return torch.randn(n, generator=self.generator, dtype=torch.float64)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
