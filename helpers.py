# helpers.py
import re
from pathlib import Path

import numpy as np

from config import CM_PER_INCH, GRAPHICS_EXTENSION


def cm_to_inch(value: float) -> float:
    return value / CM_PER_INCH


def inch_to_cm(value: float) -> float:
    return value * CM_PER_INCH


def format_number(value) -> str:
    """
    Print a number for TikZ options without losing precision.
    Integral values have no decimal point (10, -10), others use the
    shortest positional form that reads back as the same float
    (7.75, 1000.25, 0.3333333333333333).
    """
    return np.format_float_positional(float(value), trim="-")


def format_length(value) -> str:
    """Print a length in cm, rounded to 1 µm (10.000000000000002 -> 10)."""
    return format_number(round(float(value), 4))


def split_filename(filename):
    """
    Split an output filename into (directory, stem, extension).
    The extension is lowercased, e.g. "plots/out.TikZ" -> (plots, "out", ".tikz").
    """
    path = Path(filename)
    return path.parent, path.stem, path.suffix.lower()


def export_paths(filename, count: int):
    """
    Plan the (graphics, markup) paths of a split export.

    One axis  -> <name>.pdf, <name><ext>
    N axes    -> <name>-1.pdf, <name>-1<ext>, ... <name>-N.pdf, <name>-N<ext>
    """
    directory, stem, _ = split_filename(filename)
    ext = Path(filename).suffix
    if count == 1:
        return [(directory / f"{stem}{GRAPHICS_EXTENSION}", Path(filename))]
    return [
        (directory / f"{stem}-{i}{GRAPHICS_EXTENSION}", directory / f"{stem}-{i}{ext}")
        for i in range(1, count + 1)
    ]


def parse_line_widths(text: str):
    """
    Parse "2" or "1, 2.5; 3" into a list of widths.
    Empty input -> None (keep line widths).
    """
    parts = [p for p in re.split(r"[;,\s]+", text.strip()) if p]
    if not parts:
        return None
    return [float(p) for p in parts]


def sanitize_filename(title: str, ext: str = ".tikz") -> str:
    """
    Create a safe filename from a plot title.
    - Lowercase
    - Spaces -> underscores
    - Remove non-alphanumeric/underscore/dash
    - Limit length to avoid filesystem issues
    """
    safe = title.lower().strip()
    safe = safe.replace(" ", "_")
    safe = re.sub(r"[^a-z0-9_\-]+", "", safe)
    if not safe:
        safe = "figure"
    return safe[:80] + ext  # cap length, always end with ext
