import json
import logging
import os
import sys

import pandas as pd
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import simulation_harness  # noqa: E402
from aitp.network import NetworkEnvironment  # noqa: E402
from aitp.params import ConfigurationError  # noqa: E402

STRATEGIES = ["AITP", "CAIP", "NAP"]
METRICS = ["latency", "throughput", "energy", "privacy", "robustness"]


def test_outputs_exist(tmp_path):
    """One table per strategy and metric plus run metadata."""
    assert simulation_harness.main(["--output-dir", str(tmp_path), "--seed", "1"]) == 0
    for s in STRATEGIES:
        for m in METRICS:
            assert (tmp_path / f"results_{s}_{m}.csv").exists()
    assert (tmp_path / "run_metadata.json").exists()


def test_table_shape(tmp_path):
    simulation_harness.main(["--output-dir", str(tmp_path)])
    df = pd.read_csv(tmp_path / "results_NAP_throughput.csv")
    assert list(df.columns) == [f"nSta={n}" for n in (50, 100, 200, 300, 400, 500)]
    assert len(df) == 1


def test_privacy_budget_override(tmp_path):
    simulation_harness.main(["--output-dir", str(tmp_path), "--dpEpsilon", "0.5"])
    df = pd.read_csv(tmp_path / "results_CAIP_privacy.csv")
    assert df.iloc[0].tolist() == [4.0] * 6
    meta = json.loads((tmp_path / "run_metadata.json").read_text())
    assert meta["dp_epsilon"] == 0.5
    assert meta["n_sta"] == 500


def test_seed_makes_robustness_reproducible(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    simulation_harness.main(["--output-dir", str(a), "--seed", "11"])
    simulation_harness.main(["--output-dir", str(b), "--seed", "11"])
    assert (a / "results_AITP_robustness.csv").read_text() == (
        b / "results_AITP_robustness.csv"
    ).read_text()


def test_append_accumulates_runs(tmp_path):
    for _ in range(3):
        simulation_harness.main(["--output-dir", str(tmp_path), "--append"])
    df = pd.read_csv(tmp_path / "results_CAIP_latency.csv")
    assert len(df) == 3
    assert df["nSta=50"].tolist() == [14.0] * 3


def test_fresh_run_replaces_table(tmp_path):
    simulation_harness.main(["--output-dir", str(tmp_path)])
    simulation_harness.main(["--output-dir", str(tmp_path)])
    assert len(pd.read_csv(tmp_path / "results_CAIP_latency.csv")) == 1


def test_invalid_budget_aborts_before_writing(tmp_path, capsys):
    assert simulation_harness.main(["--output-dir", str(tmp_path), "--dpEpsilon", "0"]) == 1
    assert "dpEpsilon" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_invalid_population_aborts(tmp_path):
    assert simulation_harness.main(["--output-dir", str(tmp_path), "--nSta", "-3"]) == 1
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("eps", ["nan", "inf"])
def test_non_finite_budget_aborts(tmp_path, eps):
    """nan or inf privacy budgets fail before any table is written."""
    assert simulation_harness.main(["--output-dir", str(tmp_path), "--dpEpsilon", eps]) == 1
    assert not (tmp_path / "results_CAIP_privacy.csv").exists()
    assert list(tmp_path.iterdir()) == []


def test_status_line_at_start(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="simulation_harness")
    simulation_harness.main(["--output-dir", str(tmp_path), "--nSta", "200", "--dpEpsilon", "0.5"])
    messages = [r.getMessage() for r in caplog.records if r.name == "simulation_harness"]
    assert messages == ["Running simulation with nSta=200, dpEpsilon=0.5"]


def test_unrecognized_option_rejected():
    with pytest.raises(SystemExit) as exc:
        simulation_harness.parse_args(["--nodes", "10"])
    assert exc.value.code == 2


def test_plot_flag_renders_figures(tmp_path):
    data, figs = tmp_path / "data", tmp_path / "figures"
    code = simulation_harness.main(
        ["--output-dir", str(data), "--figures-dir", str(figs), "--plot"]
    )
    assert code == 0
    for m in METRICS:
        assert (figs / f"{m}_vs_nsta.png").exists()


class TestNetworkEnvironment:
    """Test suite for the network scaffold."""

    def test_addresses(self):
        net = NetworkEnvironment(n_sta=3)
        net.build()
        assert net.addresses == {
            "sta0": "10.1.3.1",
            "sta1": "10.1.3.2",
            "sta2": "10.1.3.3",
            "ap": "10.1.3.4",
        }

    def test_run_requires_build(self):
        net = NetworkEnvironment(n_sta=3)
        with pytest.raises(ConfigurationError):
            net.run(10.0)

    def test_run(self):
        net = NetworkEnvironment(n_sta=5)
        net.build()
        assert net.run(10.0) == 10.0
        assert net.elapsed == 10.0
