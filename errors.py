# errors.py


class FigExportError(Exception):
    """Base class for figure export failures."""


class InvalidTargetError(FigExportError, TypeError):
    """Raised when the export target is neither a figure nor an axes."""


class UnsupportedOutputError(FigExportError, ValueError):
    """Raised when the output extension is not a known graphics or markup format."""


class MultiAxisAdvisory(UserWarning):
    """Split export of a figure with several axes; each axis gets its own file pair."""
