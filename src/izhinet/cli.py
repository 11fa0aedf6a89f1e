"""
Command-line driver for the Izhikevich network simulation.

Usage::

    izhinet
    izhinet --excitatory 400 --inhibitory 100 --milliseconds 2000 --seed 3
    python -m izhinet -e 80 -i 20 -m 500 --no-plot
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from izhinet import __version__
from izhinet.config.simulation_config import SimulationConfig
from izhinet.core.simulator import Simulator
from izhinet.errors import IzhinetError

logger = logging.getLogger("izhinet")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``izhinet`` command."""
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(
        prog="izhinet",
        description="Simulate a random Izhikevich spiking network and plot its spike raster.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-e", "--excitatory", type=int, default=defaults.excitatory,
        help="Number of excitatory neurons (default: %(default)s)",
    )
    parser.add_argument(
        "-i", "--inhibitory", type=int, default=defaults.inhibitory,
        help="Number of inhibitory neurons (default: %(default)s)",
    )
    parser.add_argument(
        "-m", "--milliseconds", type=int, default=defaults.duration_ms,
        help="Simulation duration in milliseconds (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    parser.add_argument(
        "--workers", type=int, default=defaults.n_workers,
        help="Worker threads per tick; results are identical for any count "
        "and threads give no speedup (default: %(default)s)",
    )
    parser.add_argument(
        "--progress-interval", type=int, default=defaults.progress_interval,
        help="Log progress every N ms (default: %(default)s)",
    )
    parser.add_argument(
        "-o", "--output", default=defaults.output_path,
        help="Raster image path (default: %(default)s)",
    )
    parser.add_argument("--no-plot", action="store_true", help="Skip writing the raster image")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        excitatory=args.excitatory,
        inhibitory=args.inhibitory,
        duration_ms=args.milliseconds,
        seed=args.seed,
        n_workers=args.workers,
        progress_interval=args.progress_interval,
        output_path=args.output,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    config = config_from_args(args)
    try:
        with Simulator.from_config(config) as simulator:
            network = simulator.run(config.duration_ms)
    except IzhinetError as e:
        logger.error("Simulation failed: %s", e)
        return 1

    if not args.no_plot:
        from izhinet.visualization.raster import save_raster

        path = save_raster(
            network.spike_raster(),
            config.output_path,
            figure_size_px=config.figure_size_px,
            n_excitatory=network.excitatory,
        )
        logger.info("Wrote raster plot to %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
