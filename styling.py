# styling.py
import numbers

from matplotlib.text import Text

ELEMENTWISE = "elementwise"
BROADCAST = "broadcast"


def apply_font_size(fig, size) -> None:
    """
    Set one font size on tick labels and every text in the figure.
    size <= 0 (or None) keeps the figure's own sizes.
    """
    if not size or size <= 0:
        return
    for ax in fig.axes:
        ax.tick_params(labelsize=size)
    for text in fig.findobj(Text):
        text.set_fontsize(size)


def collect_lines(fig):
    """Plotted lines in discovery order: axes order, then plotting order."""
    return [line for ax in fig.axes for line in ax.get_lines()]


def _as_widths(widths):
    if widths is None:
        return []
    if isinstance(widths, numbers.Real):
        return [float(widths)]
    return [float(w) for w in widths]


def line_width_policy(n_widths: int, n_lines: int) -> str:
    """One width per line -> ELEMENTWISE, any other count -> BROADCAST."""
    return ELEMENTWISE if n_widths == n_lines else BROADCAST


def line_width_plan(widths, n_lines: int):
    """
    Width for each of n_lines lines.

    Examples:
        line_width_plan(2, 3)          -> [2.0, 2.0, 2.0]
        line_width_plan([1, 2, 3], 3)  -> [1.0, 2.0, 3.0]
        line_width_plan([1, 2], 3)     -> [1.0, 1.0, 1.0]
    """
    values = _as_widths(widths)
    if not values:
        return []
    if line_width_policy(len(values), n_lines) == ELEMENTWISE:
        return values
    return [values[0]] * n_lines


def apply_line_width(lines, widths) -> None:
    """Apply line_width_plan() to lines; no-op when widths is None or empty."""
    for line, width in zip(lines, line_width_plan(widths, len(lines))):
        line.set_linewidth(width)
