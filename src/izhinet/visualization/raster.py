"""Raster plot visualization for spike histories."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import torch

from izhinet.visualization.constants import (
    DPI_DEFAULT,
    FIGURE_SIZE_PX_DEFAULT,
    SPIKE_ALPHA,
    SPIKE_COLOR,
    SPIKE_MARKER_SIZE,
)

SpikeHistory = Union[torch.Tensor, Sequence[torch.Tensor]]


def _as_raster(spikes: SpikeHistory) -> np.ndarray:
    if not isinstance(spikes, torch.Tensor):
        spikes = torch.stack(list(spikes))
    return spikes.detach().cpu().numpy().astype(bool)


def plot_raster(
    spikes: SpikeHistory,
    dt: float = 1.0,
    neuron_ids: Optional[list[int]] = None,
    title: Optional[str] = None,
    n_excitatory: Optional[int] = None,
    ax=None,
):
    """Create a raster plot of spike activity.

    Args:
        spikes: Spike history, shape (time, neurons) or a sequence of
            per-tick spike vectors
        dt: Timestep in ms for time axis
        neuron_ids: Subset of neuron indices to plot
        title: Plot title
        n_excitatory: If given, draw a line separating E and I neurons
        ax: Matplotlib axes (creates new if None)

    Returns:
        Matplotlib axes object
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib required for visualization. Install with: pip install matplotlib")

    raster = _as_raster(spikes)
    n_time, n_neurons = raster.shape

    if neuron_ids is not None:
        raster = raster[:, neuron_ids]
        n_neurons = len(neuron_ids)

    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 6))

    # Find spike times and neuron indices
    times, neurons = raster.nonzero()
    times = times * dt  # Convert to ms

    ax.scatter(
        times,
        neurons,
        s=SPIKE_MARKER_SIZE,
        c=SPIKE_COLOR,
        alpha=SPIKE_ALPHA,
        marker='o',
        linewidths=0,
    )
    if n_excitatory is not None and neuron_ids is None and 0 < n_excitatory < n_neurons:
        ax.axhline(n_excitatory - 0.5, color='grey', linewidth=0.5)

    ax.set_xlabel("Time (ms)")
    ax.set_ylabel("Neuron Index")
    if title:
        ax.set_title(title)
    ax.set_xlim(0, max(n_time - 1, 1) * dt)
    ax.set_ylim(-0.5, n_neurons - 0.5)

    return ax


def save_raster(
    spikes: SpikeHistory,
    path: Union[str, Path],
    figure_size_px: Tuple[int, int] = FIGURE_SIZE_PX_DEFAULT,
    dpi: int = DPI_DEFAULT,
    **plot_kwargs,
) -> Path:
    """Render ``spikes`` with :func:`plot_raster` and write it to ``path``.

    Returns:
        Path of the written image
    """
    import matplotlib.pyplot as plt

    width_px, height_px = figure_size_px
    fig, ax = plt.subplots(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
    try:
        plot_raster(spikes, ax=ax, **plot_kwargs)
        fig.tight_layout()
        path = Path(path)
        fig.savefig(path, dpi=dpi, facecolor='white')
    finally:
        plt.close(fig)
    return path
