# plots.py
import matplotlib.pyplot as plt
import pandas as pd

from config import DEFAULT_PAPER_SIZE_CM, PLOT_STYLE, PREVIEW_DPI
from helpers import cm_to_inch


def plot_table(
    df: pd.DataFrame,
    x_col=None,
    y_cols=None,
    separate_axes: bool = False,
    title: str = "",
    ylabel: str = "",
    grid: bool = True,
    size_cm=DEFAULT_PAPER_SIZE_CM,
):
    """
    Create a line plot figure from table columns.

    Args:
        df: data, e.g. from load_table()
        x_col: column for the x axis; the row index if None
        y_cols: columns to plot; all other numeric columns if None
        separate_axes: one axes per column (stacked) instead of one shared axes

    Returns:
        Matplotlib figure.
    """
    x = df[x_col] if x_col is not None else pd.Series(df.index, index=df.index)
    if y_cols is None:
        y_cols = [c for c in df.select_dtypes("number").columns if c != x_col]
    if not y_cols:
        raise ValueError("No columns to plot")

    groups = [[c] for c in y_cols] if separate_axes else [list(y_cols)]
    fig, axes = plt.subplots(
        len(groups), 1,
        figsize=(cm_to_inch(size_cm[0]), cm_to_inch(size_cm[1])),
        dpi=PREVIEW_DPI,
        squeeze=False,
        sharex=True,
    )

    for ax, cols in zip(axes[:, 0], groups):
        for col in cols:
            ax.plot(x, df[col], label=str(col), **PLOT_STYLE)

        if len(x) > 1:
            ax.set_xlim(x.min(), x.max())
        ax.grid(grid)
        ax.set_ylabel(str(cols[0]) if separate_axes else ylabel)
        if len(cols) > 1:
            ax.legend(frameon=False)

    axes[0, 0].set_title(title)
    axes[-1, 0].set_xlabel(str(x_col) if x_col is not None else "")

    plt.tight_layout()
    return fig
