# AITP Results Analysis
# Summarizes accumulated result tables and compares strategies to the reference

import argparse
import logging
import os
import sys

import numpy as np
import pandas as pd
from scipy import stats

from .config import (
    CONFIDENCE_LEVEL,
    HEADER_LABEL,
    METRICS,
    OUTPUT_DATA_DIR,
    REFERENCE_STRATEGY,
    RESULT_FILE_PREFIX,
    STRATEGIES,
)

logger = logging.getLogger(__name__)


def calculate_cis(data, confidence=CONFIDENCE_LEVEL):
    """
    Mean of the runs recorded for one swept size and its two-sided t interval.
    Fewer than two runs give a zero-width interval; no runs give zeros.
    """
    runs = np.asarray(data, dtype=float)
    if runs.size == 0:
        return 0.0, 0.0, 0.0
    mean = float(runs.mean())
    if runs.size < 2 or np.ptp(runs) == 0:
        return mean, mean, mean
    half = stats.sem(runs) * stats.t.ppf((1 + confidence) / 2.0, runs.size - 1)
    return mean, mean - half, mean + half


def print_table(headers, rows):
    """Text table: labels left-aligned, numeric cells right-aligned."""
    widths = [max(len(str(cell)) for cell in col) for col in zip(headers, *rows)]

    def fmt(cells):
        return " | ".join(
            f"{c:>{w}}" if isinstance(c, str) and c[:1] in "+-0123456789" else f"{str(c):<{w}}"
            for c, w in zip(cells, widths)
        )

    print(" | ".join(f"{h:<{w}}" for h, w in zip(headers, widths)))
    print("-+-".join("-" * w for w in widths))
    for row in rows:
        print(fmt(row))


def load_result_table(path):
    """
    Read one result table. Columns are the swept sizes (int), one row per run.
    Unnamed empty columns (trailing commas) are dropped.
    """
    df = pd.read_csv(path, index_col=False)
    df = df.loc[:, ~df.columns.str.startswith("Unnamed")]
    prefix = f"{HEADER_LABEL}="
    df.columns = [int(c[len(prefix):]) if c.startswith(prefix) else c for c in df.columns]
    return df


def summarize_results(data_dir=OUTPUT_DATA_DIR, strategies=STRATEGIES, metrics=METRICS,
                      prefix=RESULT_FILE_PREFIX, confidence=CONFIDENCE_LEVEL):
    """Long-form summary: one row per (strategy, metric, swept size)."""
    records = []
    for strategy in strategies:
        for metric in metrics:
            path = os.path.join(data_dir, f"{prefix}_{strategy}_{metric}.csv")
            if not os.path.exists(path):
                logger.warning("Missing result table '%s'", path)
                continue
            df = load_result_table(path)
            for n_sta in df.columns:
                values = df[n_sta].dropna().values
                m, lo, hi = calculate_cis(values, confidence)
                records.append({
                    "strategy": strategy,
                    "metric": metric,
                    "n_sta": n_sta,
                    "mean": float(m),
                    "ci_lower": float(lo),
                    "ci_upper": float(hi),
                    "runs": len(values),
                })
    return pd.DataFrame(
        records,
        columns=["strategy", "metric", "n_sta", "mean", "ci_lower", "ci_upper", "runs"],
    )


def relative_to_reference(summary, reference=REFERENCE_STRATEGY):
    """Percent change of each strategy's mean against the reference strategy."""
    if summary.empty:
        return pd.DataFrame(
            columns=["strategy", "metric", "n_sta", "mean", "reference_mean", "change_pct"]
        )
    ref = summary[summary["strategy"] == reference][["metric", "n_sta", "mean"]]
    if ref.empty:
        raise ValueError(f"reference strategy {reference!r} not in summary")
    ref = ref.rename(columns={"mean": "reference_mean"})
    out = summary.merge(ref, on=["metric", "n_sta"], how="left")
    out["change_pct"] = 100.0 * (out["mean"] - out["reference_mean"]) / out["reference_mean"]
    return out[["strategy", "metric", "n_sta", "mean", "reference_mean", "change_pct"]]


def write_summaries(data_dir=OUTPUT_DATA_DIR, out_dir=None):
    out_dir = out_dir or data_dir
    os.makedirs(out_dir, exist_ok=True)
    summary = summarize_results(data_dir)
    summary.to_csv(os.path.join(out_dir, "summary.csv"), index=False)
    comparison = relative_to_reference(summary)
    comparison.to_csv(os.path.join(out_dir, "comparison_vs_reference.csv"), index=False)
    print(f"Saved summaries to '{out_dir}'")
    return summary, comparison


def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize AITP result tables")
    ap.add_argument("--data-dir", default=OUTPUT_DATA_DIR)
    ap.add_argument("--out-dir", default=None)
    args = ap.parse_args(argv)

    try:
        summary, comparison = write_summaries(args.data_dir, args.out_dir)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    largest = comparison[comparison["n_sta"] == comparison["n_sta"].max()]
    rows = [
        [r.strategy, r.metric, f"{r.mean:.3f}", f"{r.change_pct:+.1f}%"]
        for r in largest.itertuples()
    ]
    if rows:
        print_table(["strategy", "metric", "mean", "vs_" + REFERENCE_STRATEGY], rows)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
