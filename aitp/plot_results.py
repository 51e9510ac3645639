"""
AITP Results Visualization
One line chart per metric: swept network size on x, one line per strategy.
Error bars show the confidence interval when several runs have accumulated.
"""

import argparse
import os

import numpy as np

# Set matplotlib backend before importing pyplot
os.environ.setdefault("MPLBACKEND", "Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .analyze_results import summarize_results  # noqa: E402
from .config import METRICS, OUTPUT_DATA_DIR, OUTPUT_FIGURES_DIR  # noqa: E402
from .labels import label_metric, label_strategy  # noqa: E402
from .viz_style import format_metric_axis, format_sweep_axis, paper_style  # noqa: E402

MARKERS = ["o", "s", "^", "d", "v"]


def plot_metric(summary, metric, figures_dir):
    """Plot one metric across strategies; returns the saved path or None."""
    data = summary[summary["metric"] == metric]
    if data.empty:
        return None

    with paper_style():
        fig, ax = plt.subplots(figsize=(9, 6))
        for i, (strategy, subset) in enumerate(data.groupby("strategy", sort=False)):
            subset = subset.sort_values("n_sta")
            means = subset["mean"].values
            # Create error bars (ensure no negative values)
            yerr_lower = np.maximum(0, means - subset["ci_lower"].values)
            yerr_upper = np.maximum(0, subset["ci_upper"].values - means)
            ax.errorbar(
                subset["n_sta"].values, means,
                yerr=np.vstack([yerr_lower, yerr_upper]),
                marker=MARKERS[i % len(MARKERS)],
                label=label_strategy(strategy),
            )
        format_sweep_axis(ax, sorted(data["n_sta"].unique()))
        format_metric_axis(ax, metric)
        ax.set_title(label_metric(metric), fontweight="bold")
        ax.legend()

        fig.tight_layout()
        filename = os.path.join(figures_dir, f"{metric}_vs_nsta.png")
        fig.savefig(filename, bbox_inches="tight")
        plt.close(fig)
    return filename


def plot_all(data_dir=OUTPUT_DATA_DIR, figures_dir=OUTPUT_FIGURES_DIR):
    os.makedirs(figures_dir, exist_ok=True)
    summary = summarize_results(data_dir)
    saved = []
    for metric in METRICS:
        print(f"Creating {metric} plot...")
        path = plot_metric(summary, metric, figures_dir)
        if path:
            saved.append(path)
    print(f"All plots saved to {figures_dir}/ directory")
    return saved


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot AITP result tables")
    ap.add_argument("--data-dir", default=OUTPUT_DATA_DIR)
    ap.add_argument("--figures-dir", default=OUTPUT_FIGURES_DIR)
    args = ap.parse_args(argv)
    plot_all(args.data_dir, args.figures_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
