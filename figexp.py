# figexp.py
"""
Export Matplotlib figures.

The file type depends on the extension. Graphics formats (.pdf, .png,
.svg, ...) save the whole figure. For .tikz and .tex the lines of every
axes are saved as a PDF, and TikZ/pgfplots code draws the axes, grid and
labels around it.

Example:
    x = np.linspace(-10, 10, 201)
    fig, ax = plt.subplots()
    ax.plot(x, x ** 2)
    export_figure("out.tikz", fig, paper_size=(10, 8))
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from config import DEFAULT_FONT_SIZE, MARKUP_EXTENSIONS
from errors import UnsupportedOutputError
from export_utils import graphics_extensions, save_figure
from geometry import apply_paper_size, resolve_axis_geometry, resolve_paper_size
from helpers import split_filename
from materialize import materialize, resolve_target, working_figure
from split_export import export_split
from styling import apply_font_size, apply_line_width, collect_lines

logger = logging.getLogger(__name__)


@dataclass
class ExportOptions:
    target: Any = None  # Figure, Axes, figure number or None (current figure)
    paper_size: Optional[Sequence[float]] = None  # (width, height) in cm
    font_size: float = DEFAULT_FONT_SIZE
    line_width: Union[None, float, Sequence[float]] = None
    overwrite: bool = True


def is_split_export(filename) -> bool:
    return split_filename(filename)[2] in MARKUP_EXTENSIONS


def check_output(filename) -> None:
    """Raise UnsupportedOutputError unless the extension is a markup or graphics format."""
    ext = split_filename(filename)[2]
    if not ext:
        raise UnsupportedOutputError(f"Output file {str(filename)!r} has no extension")
    if ext not in MARKUP_EXTENSIONS and ext not in graphics_extensions():
        raise UnsupportedOutputError(f"Unsupported output format {ext!r} for {filename}")


def _run(filename, options: ExportOptions, stacklevel: int):
    check_output(filename)
    target = resolve_target(options.target)
    split = is_split_export(filename)

    with working_figure(materialize(target)) as work:
        apply_paper_size(work, resolve_paper_size(work, options.paper_size))
        apply_font_size(work, options.font_size)

        # labels are typeset around the axes in split mode, so no inset there
        geometries = [resolve_axis_geometry(ax, reserve_inset=not split) for ax in work.axes]
        apply_line_width(collect_lines(work), options.line_width)

        if split:
            return export_split(
                work, filename, geometries, overwrite=options.overwrite, stacklevel=stacklevel
            )

        path = Path(filename)
        if not options.overwrite and path.exists():
            raise FileExistsError(f"Export file already exists: {path}")
        return save_figure(work, path)


def export_with_options(filename, options: ExportOptions):
    """
    Run an export described by options.

    Returns:
        list of ExportPair for .tikz/.tex, otherwise the written Path.
    """
    # export_split -> _run -> export_with_options -> caller
    return _run(filename, options, stacklevel=4)


def export_figure(
    filename,
    target=None,
    *,
    paper_size=None,
    font_size=DEFAULT_FONT_SIZE,
    line_width=None,
    overwrite: bool = True,
):
    """
    Export a figure or a single axes to filename.

    Args:
        filename: output path; .tikz/.tex gives PDF + TikZ pairs.
        target: Figure, Axes or pyplot figure number; defaults to the current figure.
        paper_size: (width, height) in cm; defaults to the figure size.
        font_size: font size for all texts; 0 keeps the figure's sizes.
        line_width: one width for all lines, or one width per line.
        overwrite: replace existing files (default) or raise FileExistsError.
    """
    options = ExportOptions(
        target=target,
        paper_size=paper_size,
        font_size=font_size,
        line_width=line_width,
        overwrite=overwrite,
    )
    return _run(filename, options, stacklevel=4)
