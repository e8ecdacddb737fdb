# export_utils.py
import io
import logging
import zipfile
from pathlib import Path

from matplotlib.backend_bases import FigureCanvasBase
from matplotlib.transforms import Bbox

from config import DPI
from errors import UnsupportedOutputError

logger = logging.getLogger(__name__)


def graphics_extensions() -> set:
    """File extensions matplotlib can save to, e.g. {".pdf", ".png", ".svg"}."""
    return {f".{fmt}" for fmt in FigureCanvasBase.get_supported_filetypes()}


def save_figure(fig, path, dpi: int = DPI, transparent: bool = False) -> Path:
    """
    Save a Matplotlib figure to path, format taken from the extension.

    The saved page is exactly the figure size: no tight cropping, no padding.

    Args:
        fig: Matplotlib figure object.
        path: Destination file.
        dpi: Resolution for raster formats.
        transparent: Drop figure and axes backgrounds.

    Returns:
        The written path.
    """
    path = Path(path)
    ext = path.suffix.lower()
    if ext not in graphics_extensions():
        raise UnsupportedOutputError(f"Unsupported graphics format {ext or '(none)'!r} for {path}")

    page = Bbox.from_bounds(0, 0, *fig.get_size_inches())
    fig.savefig(path, format=ext.lstrip("."), dpi=dpi, transparent=transparent, bbox_inches=page)
    logger.info("Saved figure: %s", path)
    return path


def bundle_zip(paths) -> io.BytesIO:
    """
    Bundle exported files into an in-memory ZIP archive.

    Args:
        paths: files to include, stored under their file name.

    Returns:
        BytesIO object with the ZIP.
    """
    zip_buf = io.BytesIO()
    with zipfile.ZipFile(zip_buf, "w", zipfile.ZIP_DEFLATED) as zipf:
        for path in paths:
            path = Path(path)
            zipf.write(path, arcname=path.name)

    zip_buf.seek(0)
    return zip_buf
