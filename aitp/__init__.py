"""
Comparative metric sweep for the AITP, CAIP and NAP strategies.
"""

from .metric_models import (
    FACTORS,
    METRIC_MODELS,
    StrategyFactors,
    compute_metric,
)
from .params import ConfigurationError, DomainError, ParameterSet
from .result_sink import CsvResultSink, sweep_header
from .sweep import run_sweep, table_id

__all__ = [
    "FACTORS",
    "METRIC_MODELS",
    "StrategyFactors",
    "compute_metric",
    "ConfigurationError",
    "DomainError",
    "ParameterSet",
    "CsvResultSink",
    "sweep_header",
    "run_sweep",
    "table_id",
]
