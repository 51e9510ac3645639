# aitp/viz_style.py
import contextlib
from matplotlib import pyplot as plt
from matplotlib.ticker import StrMethodFormatter, FixedLocator

from .config import FIGURE_DPI
from .labels import label_metric

@contextlib.contextmanager
def paper_style(**overrides):
    """rc settings for the metric-vs-nSta line figures; keyword overrides win."""
    rc = {
        "figure.dpi": FIGURE_DPI,
        "savefig.dpi": FIGURE_DPI,
        "savefig.bbox": "tight",
        "font.size": 13,
        "axes.titlesize": 15,
        "axes.labelsize": 13,
        "xtick.labelsize": 11,
        "ytick.labelsize": 11,
        "legend.fontsize": 11,
        "legend.frameon": False,
        "lines.linewidth": 1.8,
        "lines.markersize": 6,
        "errorbar.capsize": 3,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": True,
        "axes.grid.axis": "y",
        "grid.alpha": 0.25,
    }
    rc.update(overrides)
    with plt.rc_context(rc):
        yield

def format_sweep_axis(ax, n_sta_values):
    ax.xaxis.set_major_locator(FixedLocator(list(n_sta_values)))
    ax.xaxis.set_major_formatter(StrMethodFormatter('{x:,.0f}'))
    ax.set_xlabel("Number of stations (nSta)")

def format_metric_axis(ax, metric):
    ax.yaxis.set_major_formatter(StrMethodFormatter('{x:,.2f}'))
    ax.set_ylabel(label_metric(metric))
