# materialize.py
import logging
import numbers
import pickle
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.gridspec import GridSpec

from errors import FigExportError, InvalidTargetError
from geometry import tight_box
from helpers import cm_to_inch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FigureTarget:
    figure: Figure


@dataclass(frozen=True)
class AxisTarget:
    axes: Axes


Target = Union[FigureTarget, AxisTarget]


def resolve_target(obj=None) -> Target:
    """
    Resolve what the caller wants to export.

    Accepts None (current pyplot figure), a pyplot figure number,
    a Figure or an Axes.
    """
    if obj is None:
        return FigureTarget(plt.gcf())
    if isinstance(obj, (FigureTarget, AxisTarget)):
        return obj
    if isinstance(obj, Figure):
        return FigureTarget(obj)
    if isinstance(obj, Axes):
        return AxisTarget(obj)
    if isinstance(obj, numbers.Integral) and not isinstance(obj, bool):
        if not plt.fignum_exists(obj):
            raise InvalidTargetError(f"No open figure with number {obj}")
        return FigureTarget(plt.figure(obj))
    raise InvalidTargetError(
        f"Invalid figure handle: expected a Figure or Axes, got {type(obj).__name__}"
    )


@contextmanager
def working_figure(fig):
    """Yield fig and close it on exit, also when the body raises."""
    try:
        yield fig
    finally:
        plt.close(fig)


def duplicate_figure(fig) -> Figure:
    """Deep copy of a figure through a pickle round trip."""
    try:
        return pickle.loads(pickle.dumps(fig))
    except (pickle.PicklingError, TypeError, AttributeError) as e:
        raise FigExportError(f"Figure cannot be duplicated: {e}") from e


def keep_only_axis(fig, index: int) -> Axes:
    """Remove every axes except fig.axes[index] and return the kept one."""
    keep = fig.axes[index]
    for ax in list(fig.axes):
        if ax is not keep:
            ax.remove()
    return keep


def disable_layout_engine(fig) -> None:
    """Stop tight/constrained layout from moving axes on the next draw."""
    fig.set_layout_engine("none")


def make_sole_cell(fig, ax) -> None:
    """Give a lone subplot a 1x1 gridspec so its cell is the whole figure."""
    if ax.get_subplotspec() is not None:
        ax.set_subplotspec(GridSpec(1, 1, figure=fig)[0])


def fit_figure_to_axis(fig, ax) -> None:
    """Shrink the figure to the axes' outer bounding box and let the axes fill it."""
    tight = tight_box(ax)
    pos = ax.get_position()
    width_in, height_in = fig.get_size_inches()

    fig.set_size_inches(tight.width * width_in, tight.height * height_in)
    make_sole_cell(fig, ax)
    ax.set_position([
        (pos.x0 - tight.x0) / tight.width,
        (pos.y0 - tight.y0) / tight.height,
        pos.width / tight.width,
        pos.height / tight.height,
    ])


def materialize(target: Target) -> Figure:
    """
    Create an owned working figure for the target.

    A figure is duplicated as a whole. An axes becomes a single-axes copy
    of its figure, sized to the axes' outer bounding box. The copy has no
    layout engine: axes positions set on it are final.
    The caller's objects are never modified.
    """
    if isinstance(target, FigureTarget):
        work = duplicate_figure(target.figure)
    else:
        source = target.axes.get_figure()
        index = source.axes.index(target.axes)
        work = duplicate_figure(source)
    try:
        disable_layout_engine(work)
        if isinstance(target, AxisTarget):
            fit_figure_to_axis(work, keep_only_axis(work, index))
    except BaseException:
        plt.close(work)
        raise
    return work


def strip_chrome(fig, ax) -> None:
    """Hide everything the TikZ markup redraws: frame, ticks, labels, grid, background."""
    fig.patch.set_alpha(0.0)
    ax.patch.set_visible(False)
    ax.set_axis_off()
    for loc in ("left", "center", "right"):
        ax.set_title("", loc=loc)
    for text in fig.texts:
        text.set_visible(False)
    for legend in fig.legends:
        legend.set_visible(False)


def isolate_axis(fig, index: int, geometry) -> Figure:
    """
    Copy fig.axes[index] into its own transparent, chrome-free figure.

    Axes and figure both get exactly geometry.width_cm x geometry.height_cm,
    so the rendered page is the axes box and nothing else.
    """
    iso = duplicate_figure(fig)
    try:
        disable_layout_engine(iso)
        ax = keep_only_axis(iso, index)
        # freeze limits before the box changes
        ax.set_xlim(ax.get_xlim())
        ax.set_ylim(ax.get_ylim())
        strip_chrome(iso, ax)

        iso.set_size_inches(cm_to_inch(geometry.width_cm), cm_to_inch(geometry.height_cm))
        make_sole_cell(iso, ax)
        ax.set_position([0, 0, 1, 1])
    except BaseException:
        plt.close(iso)
        raise
    logger.debug("Isolated axis %d at %.3g x %.3g cm", index, geometry.width_cm, geometry.height_cm)
    return iso
