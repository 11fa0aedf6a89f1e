#!/usr/bin/env python3
"""
Example: Basic Izhikevich Network

Builds the classic 800/200 excitatory/inhibitory network, simulates one
second, prints firing statistics per population and, optionally, archetype
neurons stepped in isolation.
"""

from izhinet import (
    NeuronType,
    RandomSource,
    SimulationConfig,
    Simulator,
    neuron_from_neuron_type,
)
from izhinet.visualization import save_raster


def main():
    # Configuration
    config = SimulationConfig(excitatory=800, inhibitory=200, duration_ms=1000, seed=42)

    print(f"Creating network: {config.excitatory} excitatory, {config.inhibitory} inhibitory")
    with Simulator.from_config(config) as simulator:
        print(f"Running simulation for {config.duration_ms} ms...")
        network = simulator.run(config.duration_ms)

    # Analyze results
    print("\n" + "=" * 50)
    print("Results:")
    print("=" * 50)

    counts = network.spike_counts()
    seconds = config.duration_ms / 1000.0
    exc_rate = counts[: network.excitatory].float().mean().item() / seconds
    inh_rate = counts[network.excitatory:].float().mean().item() / seconds
    print(f"\nExcitatory mean rate: {exc_rate:.1f} Hz")
    print(f"Inhibitory mean rate: {inh_rate:.1f} Hz")
    print(f"Total spikes: {int(counts.sum())}")

    path = save_raster(network.spike_raster(), "spikes.png", n_excitatory=network.excitatory)
    print(f"\nRaster plot written to {path}")

    # Archetypes under constant drive
    print("\nArchetypes, 200 ms at constant thalamic input 2.0:")
    rng = RandomSource(seed=0)
    for neuron_type in NeuronType:
        neuron = neuron_from_neuron_type(neuron_type, rng)
        neuron.connect([0.0])
        n_spikes = sum(neuron.step(2.0, [False]) for _ in range(200))
        print(f"  {neuron_type.value:<24s} {n_spikes:>3d} spikes")


if __name__ == "__main__":
    main()
