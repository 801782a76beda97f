
from .chart import (
    plot_results_over_time,
    plot_standings_bar,
    plot_time_hist,
    plot_time_vs_candidates,
)

__all__ = [
    "plot_results_over_time",
    "plot_standings_bar",
    "plot_time_hist",
    "plot_time_vs_candidates",
]
