# split_export.py
import logging
import warnings
from dataclasses import dataclass
from pathlib import Path

from errors import FigExportError, MultiAxisAdvisory
from export_utils import save_figure
from geometry import resolve_axis_geometry
from helpers import export_paths
from materialize import isolate_axis, working_figure
from tikz_markup import collect_axis_metadata, emit, write_markup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportPair:
    graphics: Path
    markup: Path


def _refuse_existing(plan) -> None:
    existing = [str(p) for pair in plan for p in pair if p.exists()]
    if existing:
        raise FileExistsError(f"Export files already exist: {', '.join(existing)}")


def export_split(fig, filename, geometries=None, *, overwrite: bool = True, stacklevel: int = 2):
    """
    Export every axes of fig as a PDF (lines only) plus a TikZ fragment.

    Args:
        fig: working figure, already laid out. It is not modified apart
            from axes positions when geometries is None.
        filename: markup path, e.g. "out.tikz". The PDF goes next to it.
        geometries: AxisGeometry per axes in fig.axes order; resolved
            here (axes filling their outer boxes) when omitted.
        overwrite: when False, fail before writing if any target exists.
        stacklevel: passed to warnings.warn so the advisory names the caller.

    Returns:
        List of ExportPair, one per axes.
    """
    axes = list(fig.axes)
    if not axes:
        raise FigExportError("Figure has no axes to export")
    if len(axes) > 1:
        warnings.warn(
            f"Figure has {len(axes)} axes; every axis is exported to its own TikZ + PDF file pair.",
            MultiAxisAdvisory,
            stacklevel=stacklevel,
        )

    if geometries is None:
        geometries = [resolve_axis_geometry(ax, reserve_inset=False) for ax in axes]
    if len(geometries) != len(axes):
        raise ValueError(f"Got {len(geometries)} geometries for {len(axes)} axes")

    plan = export_paths(filename, len(axes))
    if not overwrite:
        _refuse_existing(plan)

    pairs = []
    for index, (ax, geometry, (graphics, markup)) in enumerate(zip(axes, geometries, plan)):
        with working_figure(isolate_axis(fig, index, geometry)) as iso:
            save_figure(iso, graphics, transparent=True)

        meta = collect_axis_metadata(ax, geometry)
        # PDF sits next to the markup, so its name is the relative path
        write_markup(markup, emit(meta, graphics.name))
        pairs.append(ExportPair(graphics=graphics, markup=markup))

    logger.info("Split export wrote %d file pair(s) for %s", len(pairs), filename)
    return pairs
