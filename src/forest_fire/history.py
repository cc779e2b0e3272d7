"""Daily statistics history as a pandas DataFrame and a matplotlib plot."""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import pandas as pd

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from .model import ForestFireModel


HISTORY_COLUMNS = ["Date", "Lightnings", "Spawned", "Burnt", "Trees", "Burning"]


def stats_history(model: "ForestFireModel") -> pd.DataFrame:
    """Per-day statistics collected since the last reset, one row per day."""

    df = model.datacollector.get_model_vars_dataframe()
    if df.empty:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    return df[HISTORY_COLUMNS].reset_index(drop=True)


def plot_stats_history(
    history: pd.DataFrame,
    *,
    ax: "Axes | None" = None,
    title: str = "Forest history",
) -> "Figure":
    """Plot living trees, active fires and cumulative totals against the date.

    The cumulative counters go on a secondary axis so they do not flatten the
    daily tree and fire counts.
    """

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    x = history["Date"] if "Date" in history else history.index
    ax.plot(x, history["Trees"], color="forestgreen", label="Trees")
    ax.plot(x, history["Burning"], color="orangered", label="Burning")
    ax.set_ylabel("Cells")
    ax.set_title(title)

    totals = ax.twinx()
    totals.plot(x, history["Spawned"], color="seagreen", linestyle="--", label="Spawned (total)")
    totals.plot(x, history["Burnt"], color="black", linestyle="--", label="Burnt (total)")
    totals.plot(x, history["Lightnings"], color="goldenrod", linestyle=":", label="Lightnings (total)")
    totals.set_ylabel("Total")

    lines = ax.get_lines() + totals.get_lines()
    ax.legend(lines, [line.get_label() for line in lines], loc="upper left")
    fig.autofmt_xdate()
    return fig
