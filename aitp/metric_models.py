# aitp/metric_models.py
import random
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence

import numpy as np

from .config import STRATEGY_FACTORS
from .params import ConfigurationError, ParameterSet


@dataclass(frozen=True)
class StrategyFactors:
    latency: float
    throughput: float
    energy: float
    privacy: float
    robustness: float


FACTORS: Dict[str, StrategyFactors] = {
    name: StrategyFactors(*values) for name, values in STRATEGY_FACTORS.items()
}


def factors_for(strategy: str) -> StrategyFactors:
    try:
        return FACTORS[strategy]
    except KeyError:
        raise ConfigurationError(
            f"unrecognized strategy {strategy!r}; known: {', '.join(FACTORS)}"
        ) from None


def validate_strategies(strategies: Iterable[str]) -> None:
    """Fail before any table is written if a strategy has no factor entry."""
    missing = [s for s in strategies if s not in FACTORS]
    if missing:
        raise ConfigurationError(
            f"no strategy factors for {', '.join(map(repr, missing))}"
        )


# ---- Baselines (reference strategy values) ----

def _sizes(n_sta_values: Sequence[int]) -> np.ndarray:
    return np.asarray(n_sta_values, dtype=float)


def latency_baseline(n_sta_values: Sequence[int]) -> np.ndarray:
    return 10.0 + 200.0 / _sizes(n_sta_values)


def throughput_baseline(n_sta_values: Sequence[int]) -> np.ndarray:
    return 30.0 * np.log(1.0 + _sizes(n_sta_values) / 2.0)


def energy_baseline(n_sta_values: Sequence[int]) -> np.ndarray:
    return 0.4 * _sizes(n_sta_values)


def privacy_baseline(n_sta_values: Sequence[int], dp_epsilon: float) -> np.ndarray:
    # constant across n
    return np.full(len(n_sta_values), 2.0 / dp_epsilon)


def robustness_baseline(n_sta_values: Sequence[int], rng=None) -> np.ndarray:
    """
    1 - 0.5 * failure_rate, one uniform [0,1) draw per swept size.
    rng: anything with random(); defaults to the process-wide generator.
    """
    source = random if rng is None else rng
    failure_rate = np.array([source.random() for _ in n_sta_values], dtype=float)
    return 1.0 - 0.5 * failure_rate


# ---- Metric models ----

def compute_latency(params: ParameterSet, strategy: str) -> np.ndarray:
    return latency_baseline(params.n_sta_values) * factors_for(strategy).latency


def compute_throughput(params: ParameterSet, strategy: str) -> np.ndarray:
    return throughput_baseline(params.n_sta_values) * factors_for(strategy).throughput


def compute_energy_efficiency(params: ParameterSet, strategy: str) -> np.ndarray:
    return energy_baseline(params.n_sta_values) * factors_for(strategy).energy


def compute_privacy_loss(params: ParameterSet, strategy: str) -> np.ndarray:
    base = privacy_baseline(params.n_sta_values, params.dp_epsilon)
    return base * factors_for(strategy).privacy


def compute_robustness(params: ParameterSet, strategy: str, rng=None) -> np.ndarray:
    """Stochastic by design: repeated calls give different series unless rng is seeded."""
    factor = factors_for(strategy).robustness
    return robustness_baseline(params.n_sta_values, rng) * factor


METRIC_MODELS = {
    "latency": compute_latency,
    "throughput": compute_throughput,
    "energy": compute_energy_efficiency,
    "privacy": compute_privacy_loss,
    "robustness": compute_robustness,
}


def compute_metric(
    metric: str,
    params: ParameterSet,
    strategy: str,
    *,
    rng=None,
) -> np.ndarray:
    if metric == "robustness":
        return compute_robustness(params, strategy, rng)
    try:
        model = METRIC_MODELS[metric]
    except KeyError:
        raise ConfigurationError(f"unrecognized metric {metric!r}") from None
    return model(params, strategy)
