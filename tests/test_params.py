import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aitp.config import N_STA_VALUES, STRATEGIES  # noqa: E402
from aitp.params import ConfigurationError, DomainError, ParameterSet  # noqa: E402


class TestParameterSet:
    """Test suite for run parameter validation."""

    def test_defaults(self):
        params = ParameterSet()
        assert params.n_sta == 500
        assert params.sim_time == 10.0
        assert params.dp_epsilon == 1.0
        assert params.strategies == tuple(STRATEGIES) == ("AITP", "CAIP", "NAP")
        assert params.n_sta_values == tuple(N_STA_VALUES) == (50, 100, 200, 300, 400, 500)

    def test_immutable(self):
        params = ParameterSet()
        with pytest.raises(AttributeError):
            params.dp_epsilon = 2.0

    def test_sequences_normalized_to_tuples(self):
        params = ParameterSet(strategies=["CAIP"], n_sta_values=[10, 20])
        assert params.strategies == ("CAIP",)
        assert params.n_sta_values == (10, 20)

    @pytest.mark.parametrize("n_sta", [0, -5, 2.5, True])
    def test_invalid_population(self, n_sta):
        with pytest.raises(ConfigurationError, match="nSta"):
            ParameterSet(n_sta=n_sta)

    @pytest.mark.parametrize("eps", [0, -1.0, float("nan"), float("inf"), float("-inf")])
    def test_invalid_privacy_budget(self, eps):
        """Offending value is reported."""
        with pytest.raises(ConfigurationError, match=str(eps)):
            ParameterSet(dp_epsilon=eps)

    @pytest.mark.parametrize("sim_time", [0.0, -2.0, float("nan"), float("inf")])
    def test_invalid_sim_time(self, sim_time):
        with pytest.raises(ConfigurationError, match="simTime"):
            ParameterSet(sim_time=sim_time)

    def test_duplicate_strategy(self):
        with pytest.raises(ConfigurationError):
            ParameterSet(strategies=("AITP", "AITP"))

    def test_empty_strategies(self):
        with pytest.raises(ConfigurationError):
            ParameterSet(strategies=())

    @pytest.mark.parametrize("sizes", [(0, 50), (50, -2), (50, 1.5), ()])
    def test_invalid_sweep_sizes(self, sizes):
        """Zero or negative sizes never reach a model."""
        with pytest.raises(DomainError):
            ParameterSet(n_sta_values=sizes)

    def test_duplicate_sweep_size(self):
        with pytest.raises(DomainError):
            ParameterSet(n_sta_values=(50, 50))

    def test_domain_error_is_configuration_error(self):
        assert issubclass(DomainError, ConfigurationError)
        assert issubclass(ConfigurationError, ValueError)


class TestOverrides:
    """Test suite for building parameters from named overrides."""

    def test_named_overrides(self):
        params = ParameterSet.from_overrides(n_sta=200, dp_epsilon=0.5)
        assert params.n_sta == 200
        assert params.dp_epsilon == 0.5
        assert params.sim_time == 10.0

    def test_none_keeps_default(self):
        params = ParameterSet.from_overrides(n_sta=None)
        assert params.n_sta == 500

    def test_unrecognized_override(self):
        with pytest.raises(ConfigurationError, match="nodes"):
            ParameterSet.from_overrides(nodes=10)

    def test_out_of_range_override(self):
        with pytest.raises(ConfigurationError):
            ParameterSet.from_overrides(dp_epsilon=-0.1)
