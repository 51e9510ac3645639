# aitp/sweep.py
import logging
from typing import List

from .config import METRICS
from .metric_models import compute_metric, validate_strategies
from .params import ParameterSet
from .result_sink import sweep_header

logger = logging.getLogger(__name__)


def table_id(strategy: str, metric: str) -> str:
    return f"{strategy}_{metric}"


def run_sweep(params: ParameterSet, sink, rng=None) -> List[str]:
    """
    Compute every metric for every strategy and hand each series to the sink.

    Strategies run in declared order, metrics in METRICS order. Returns the
    table ids in the order they were written.
    """
    validate_strategies(params.strategies)
    header = sweep_header(params.n_sta_values)

    written = []
    for strategy in params.strategies:
        for metric in METRICS:
            series = compute_metric(metric, params, strategy, rng=rng)
            tid = table_id(strategy, metric)
            sink.write(tid, header, series)
            written.append(tid)
        logger.info("Metrics logged for mode=%s", strategy)
    return written
