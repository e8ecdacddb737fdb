# geometry.py
import logging
from dataclasses import dataclass

from matplotlib.gridspec import GridSpec
from matplotlib.transforms import Bbox

from config import INSET_PAD
from helpers import cm_to_inch, inch_to_cm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Inset:
    """Margins around an axes box, in figure fraction."""
    left: float
    bottom: float
    right: float
    top: float

    def padded(self, pad: float) -> "Inset":
        return Inset(self.left + pad, self.bottom + pad, self.right + pad, self.top + pad)


@dataclass(frozen=True)
class AxisGeometry:
    width_cm: float
    height_cm: float
    inset: Inset


def resolve_paper_size(fig, requested=None):
    """
    Return the export paper size (width, height) in centimeters.

    Args:
        fig: Matplotlib figure.
        requested: optional (width, height) in cm; defaults to the
            figure's current size.
    """
    if requested is None:
        width_in, height_in = fig.get_size_inches()
        return inch_to_cm(width_in), inch_to_cm(height_in)

    size = [float(v) for v in requested]
    if len(size) != 2 or min(size) <= 0:
        raise ValueError(f"Paper size must be two positive numbers in cm, got {requested!r}")
    return size[0], size[1]


def apply_paper_size(fig, size_cm) -> None:
    """Resize the figure; axes keep their normalized positions."""
    width_cm, height_cm = size_cm
    fig.set_size_inches(cm_to_inch(width_cm), cm_to_inch(height_cm))


def tight_box(ax) -> Bbox:
    """Bounding box of the axes including tick labels and titles, figure fraction."""
    fig = ax.get_figure()
    return ax.get_tightbbox().transformed(fig.transFigure.inverted())


def outer_box(ax) -> Bbox:
    """
    Region an axes may occupy together with its labels, figure fraction.

    Subplots get their gridspec cell without figure margins or spacing,
    free-standing axes keep their current tight box.
    """
    fig = ax.get_figure()
    spec = ax.get_subplotspec()
    if spec is None:
        return tight_box(ax)

    grid = spec.get_gridspec()
    if not isinstance(grid, GridSpec):
        # nested gridspec
        return spec.get_position(fig)

    nrows, ncols = grid.get_geometry()
    full = GridSpec(
        nrows, ncols,
        left=0, right=1, bottom=0, top=1, wspace=0, hspace=0,
        width_ratios=grid.get_width_ratios(),
        height_ratios=grid.get_height_ratios(),
    )
    rows = slice(spec.rowspan.start, spec.rowspan.stop)
    cols = slice(spec.colspan.start, spec.colspan.stop)
    return full[rows, cols].get_position(fig)


def tight_inset(ax) -> Inset:
    """Margin the axes reserves for tick labels, axis labels and title."""
    pos = ax.get_position()
    tight = tight_box(ax)
    return Inset(
        left=max(pos.x0 - tight.x0, 0.0),
        bottom=max(pos.y0 - tight.y0, 0.0),
        right=max(tight.x1 - pos.x1, 0.0),
        top=max(tight.y1 - pos.y1, 0.0),
    )


def resolve_axis_geometry(ax, *, reserve_inset: bool = True) -> AxisGeometry:
    """
    Lay out one axes inside its outer box and return its size in cm.

    The tight inset is padded by INSET_PAD. With reserve_inset the axes
    box is its outer box shrunk by that padded inset, so labels fit on the
    page. Without it the axes box fills the whole outer box; split export
    uses this because the labels are drawn by the typesetter instead.
    """
    fig = ax.get_figure()
    inset = tight_inset(ax).padded(INSET_PAD)
    box = outer_box(ax)

    if reserve_inset:
        width = box.width - inset.left - inset.right
        height = box.height - inset.bottom - inset.top
        if width > 0 and height > 0:
            ax.set_position([box.x0 + inset.left, box.y0 + inset.bottom, width, height])
        else:
            logger.debug("Inset %s does not fit into %s, keeping position", inset, box)
    else:
        ax.set_position(box)

    pos = ax.get_position()
    width_in, height_in = fig.get_size_inches()
    geometry = AxisGeometry(
        width_cm=inch_to_cm(pos.width * width_in),
        height_cm=inch_to_cm(pos.height * height_in),
        inset=inset,
    )
    logger.debug("Axis geometry: %s", geometry)
    return geometry
