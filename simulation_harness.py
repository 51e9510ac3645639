# AITP Evaluation: Strategy Comparison Harness
#
# Sweeps the AITP, CAIP and NAP strategies over a range of network sizes and
# writes one CSV table per strategy and metric.
#
# HOW TO RUN:
#   python simulation_harness.py
#   python simulation_harness.py --nSta 200 --dpEpsilon 0.5
#   python simulation_harness.py --append --seed 7 --plot
#
# WHAT IT PRODUCES:
#   ./output/data/results_<strategy>_<metric>.csv   (header once, one row per run)
#   ./output/data/run_metadata.json

import os
import argparse
import datetime
import json
import logging
import random
import sys

from aitp.config import (
    DEFAULT_N_STA,
    DEFAULT_SIM_TIME,
    DEFAULT_DP_EPSILON,
    OUTPUT_DATA_DIR,
    OUTPUT_FIGURES_DIR,
)
from aitp.network import NetworkEnvironment
from aitp.params import ConfigurationError, ParameterSet
from aitp.result_sink import CsvResultSink
from aitp.sweep import run_sweep

logger = logging.getLogger("simulation_harness")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="AITP/CAIP/NAP comparative metric sweep")
    p.add_argument("--nSta", dest="n_sta", type=int, default=DEFAULT_N_STA,
                   help=f"number of stations (default: {DEFAULT_N_STA})")
    p.add_argument("--dpEpsilon", dest="dp_epsilon", type=float, default=DEFAULT_DP_EPSILON,
                   help=f"differential privacy budget (default: {DEFAULT_DP_EPSILON})")
    p.add_argument("--simTime", dest="sim_time", type=float, default=DEFAULT_SIM_TIME,
                   help=f"simulated seconds (default: {DEFAULT_SIM_TIME})")
    p.add_argument("--output-dir", default=OUTPUT_DATA_DIR)
    p.add_argument("--append", action="store_true",
                   help="accumulate rows into existing result tables")
    p.add_argument("--seed", type=int, default=None,
                   help="seed the robustness draws for a reproducible run")
    p.add_argument("--plot", action="store_true", help="render figures after the sweep")
    p.add_argument("--figures-dir", default=OUTPUT_FIGURES_DIR)
    return p.parse_args(argv)


def write_run_metadata(output_dir, params, seed):
    run_metadata = {
        "n_sta": params.n_sta,
        "sim_time": params.sim_time,
        "dp_epsilon": params.dp_epsilon,
        "strategies": list(params.strategies),
        "n_sta_values": list(params.n_sta_values),
        "seed": seed,
        "run_timestamp_utc": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }
    metadata_path = os.path.join(output_dir, "run_metadata.json")
    with open(metadata_path, "w") as f:
        json.dump(run_metadata, f, indent=4)
    return metadata_path


def run(args):
    params = ParameterSet.from_overrides(
        n_sta=args.n_sta, dp_epsilon=args.dp_epsilon, sim_time=args.sim_time
    )
    logger.info(
        "Running simulation with nSta=%d, dpEpsilon=%g", params.n_sta, params.dp_epsilon
    )

    network = NetworkEnvironment(n_sta=params.n_sta)
    network.build()

    sink = CsvResultSink(args.output_dir, accumulate=args.append)
    sink.ensure_output_dir()
    rng = random.Random(args.seed) if args.seed is not None else None
    written = run_sweep(params, sink, rng=rng)

    network.run(params.sim_time)
    metadata_path = write_run_metadata(args.output_dir, params, args.seed)
    print(f"\nWrote {len(written)} result tables to '{args.output_dir}'")
    print(f"Saved run metadata to '{metadata_path}'")
    return written


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("=" * 60 + "\n AITP Strategy Comparison \n" + "=" * 60)
    try:
        run(args)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.plot:
        from aitp.plot_results import plot_all

        plot_all(args.output_dir, args.figures_dir)

    print("\n" + "=" * 60 + "\n              Simulation Complete                  \n" + "=" * 60)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
