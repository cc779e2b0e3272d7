import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from forest_fire.config import RateParams
from forest_fire.history import HISTORY_COLUMNS, plot_stats_history, stats_history
from forest_fire.model import ForestFireModel


def test_history_has_one_row_per_day(start_date):
    model = ForestFireModel(
        width=10, height=10, start_date=start_date,
        params=RateParams(trees_per_month=300, lightnings_per_month=15), seed=2,
    )
    for _ in range(12):
        model.step()

    df = stats_history(model)
    assert list(df.columns) == HISTORY_COLUMNS
    assert len(df) == 12
    assert df["Date"].iloc[-1] == model.current_date
    assert df["Spawned"].iloc[-1] == model.stats.spawned
    assert df["Lightnings"].is_monotonic_increasing
    assert df["Burnt"].is_monotonic_increasing


def test_empty_history(start_date):
    model = ForestFireModel(width=3, height=3, start_date=start_date)
    df = stats_history(model)
    assert df.empty
    assert list(df.columns) == HISTORY_COLUMNS


def test_plot_stats_history(start_date):
    model = ForestFireModel(
        width=8, height=8, start_date=start_date,
        params=RateParams(trees_per_month=200, lightnings_per_month=10), seed=9,
    )
    for _ in range(30):
        model.step()

    fig = plot_stats_history(stats_history(model), title="Test")
    ax = fig.axes[0]
    assert ax.get_title() == "Test"
    assert len(fig.axes) == 2
    assert [text.get_text() for text in ax.get_legend().get_texts()] == [
        "Trees", "Burning", "Spawned (total)", "Burnt (total)", "Lightnings (total)",
    ]
    plt.close(fig)
