# tikz_markup.py
import logging
import re
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Tuple

from helpers import format_length, format_number

logger = logging.getLogger(__name__)


# matplotlib: text between unescaped $ is math, \$ is a literal dollar
_MATH = re.compile(r"(?<!\\)\$.*?(?<!\\)\$")
_UNESCAPED_DOLLAR = re.compile(r"(?<!\\)\$")
_TEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "_": r"\_",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "$": r"\$",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def _escape_plain(text: str) -> str:
    text = text.replace("\\$", "$")
    return "".join(_TEX_SPECIALS.get(c, c) for c in text)


def escape_tex(text: str) -> str:
    """
    Escape a matplotlib text for TeX, keeping $...$ math untouched.

    Examples:
        escape_tex("temp_c")      -> "temp\\_c"
        escape_tex("$t_1$ / 50%") -> "$t_1$ / 50\\%"
    """
    # an odd number of $ means matplotlib renders the text literally
    if len(_UNESCAPED_DOLLAR.findall(text)) % 2:
        return _escape_plain(text)

    parts = []
    pos = 0
    for match in _MATH.finditer(text):
        parts.append(_escape_plain(text[pos:match.start()]))
        parts.append(match.group(0))
        pos = match.end()
    parts.append(_escape_plain(text[pos:]))
    return "".join(parts)


@dataclass(frozen=True)
class AxisMetadata:
    width_cm: float
    height_cm: float
    xlim: Tuple[float, float]
    ylim: Tuple[float, float]
    x_grid: bool = False
    y_grid: bool = False
    title: str = ""
    xlabel: str = ""
    ylabel: str = ""


def grid_on(axis) -> bool:
    """True if the major grid of an XAxis/YAxis is shown."""
    return any(line.get_visible() for line in axis.get_gridlines())


def collect_axis_metadata(ax, geometry) -> AxisMetadata:
    """Read what the markup needs from an axes laid out to geometry."""
    return AxisMetadata(
        width_cm=geometry.width_cm,
        height_cm=geometry.height_cm,
        xlim=tuple(ax.get_xlim()),
        ylim=tuple(ax.get_ylim()),
        x_grid=grid_on(ax.xaxis),
        y_grid=grid_on(ax.yaxis),
        title=ax.get_title(),
        xlabel=ax.get_xlabel(),
        ylabel=ax.get_ylabel(),
    )


def emit(meta: AxisMetadata, graphics_path) -> str:
    """
    Build the TikZ/pgfplots fragment for one axis.

    The option order is fixed; pgfplots reads the embedded PDF with the
    same limits as the axis so both line up exactly.
    """
    xmin, xmax = (format_number(v) for v in meta.xlim)
    ymin, ymax = (format_number(v) for v in meta.ylim)
    graphics = PurePath(graphics_path).as_posix()

    lines = [
        "\\begin{tikzpicture}",
        "\\begin{axis} [",
        "scale only axis,",
    ]
    if meta.y_grid:
        lines.append("ymajorgrids,")
    if meta.x_grid:
        lines.append("xmajorgrids,")
    lines += [
        f"width={format_length(meta.width_cm)}cm,",
        f"height={format_length(meta.height_cm)}cm,",
        f"title={{{escape_tex(meta.title)}}},",
        f"ylabel={{{escape_tex(meta.ylabel)}}},",
        f"xlabel={{{escape_tex(meta.xlabel)}}},",
        f"xmin={xmin}, xmax={xmax},",
        f"ymin={ymin}, ymax={ymax},",
        "]",
        f"\\addplot graphics [xmin={xmin},xmax={xmax},ymin={ymin},ymax={ymax}]{{{graphics}}};",
        "\\end{axis}",
        "\\end{tikzpicture}",
    ]
    return "\n".join(lines) + "\n"


def write_markup(path, text: str) -> Path:
    """Create or overwrite path with text. OSError propagates."""
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    logger.info("Saved markup: %s", path)
    return path
