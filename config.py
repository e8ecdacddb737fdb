# config.py

# =========================
# Units & layout
# =========================
CM_PER_INCH = 2.54

# Added to the tight inset so text descenders are not clipped
INSET_PAD = 0.01

# =========================
# Output formats
# =========================
MARKUP_EXTENSIONS = (".tikz", ".tex")  # extensions that trigger split export
GRAPHICS_EXTENSION = ".pdf"            # split export always renders PDF

DPI = 300  # raster exports (png, jpg, ...)

# =========================
# Style defaults
# =========================
DEFAULT_FONT_SIZE = 0  # 0 = keep the figure's font sizes

# =========================
# Front end
# =========================
PREVIEW_DPI = 120
DEFAULT_PAPER_SIZE_CM = (10.0, 8.0)
PLOT_STYLE = {
    "linewidth": 1.5,
    "marker": None,
}
