# aitp/params.py
import math
from dataclasses import dataclass, field, fields
from numbers import Integral, Real
from typing import Tuple

from .config import (
    DEFAULT_N_STA,
    DEFAULT_SIM_TIME,
    DEFAULT_DP_EPSILON,
    STRATEGIES,
    N_STA_VALUES,
)


class ConfigurationError(ValueError):
    """Invalid run parameter, strategy or output destination."""


class DomainError(ConfigurationError):
    """A swept size that a baseline formula cannot accept."""


def _is_int(x) -> bool:
    return isinstance(x, Integral) and not isinstance(x, bool)


def _is_real(x) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool) and math.isfinite(x)


@dataclass(frozen=True)
class ParameterSet:
    """
    Sweep configuration for one run. Read-only once constructed.

    n_sta and sim_time only feed the network scaffold and the status line;
    the metric models read dp_epsilon, strategies and n_sta_values.
    """
    n_sta: int = DEFAULT_N_STA
    sim_time: float = DEFAULT_SIM_TIME
    dp_epsilon: float = DEFAULT_DP_EPSILON
    strategies: Tuple[str, ...] = field(default_factory=lambda: tuple(STRATEGIES))
    n_sta_values: Tuple[int, ...] = field(default_factory=lambda: tuple(N_STA_VALUES))

    def __post_init__(self) -> None:
        if not _is_int(self.n_sta) or self.n_sta <= 0:
            raise ConfigurationError(f"nSta must be a positive integer, got {self.n_sta!r}")
        if not _is_real(self.sim_time) or self.sim_time <= 0:
            raise ConfigurationError(f"simTime must be a positive finite number, got {self.sim_time!r}")
        if not _is_real(self.dp_epsilon) or self.dp_epsilon <= 0:
            raise ConfigurationError(f"dpEpsilon must be a positive finite number, got {self.dp_epsilon!r}")

        # frozen: normalize sequences through object.__setattr__
        strategies = tuple(self.strategies)
        if not strategies:
            raise ConfigurationError("at least one strategy is required")
        if len(set(strategies)) != len(strategies):
            raise ConfigurationError(f"duplicate strategy in {strategies!r}")
        object.__setattr__(self, "strategies", strategies)

        sizes = tuple(self.n_sta_values)
        if not sizes:
            raise DomainError("n_sta_values must not be empty")
        for n in sizes:
            if not _is_int(n) or n <= 0:
                raise DomainError(f"swept size must be a positive integer, got {n!r}")
        if len(set(sizes)) != len(sizes):
            raise DomainError(f"duplicate swept size in {sizes!r}")
        object.__setattr__(self, "n_sta_values", sizes)

    @classmethod
    def from_overrides(cls, **overrides) -> "ParameterSet":
        """Defaults plus named overrides; unknown names are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(f"unrecognized parameter(s): {', '.join(unknown)}")
        return cls(**{k: v for k, v in overrides.items() if v is not None})
