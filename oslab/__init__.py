"""Classic operating-system algorithms: CPU scheduling, the banker's safety check, page replacement, memory placement and threading demos."""

__version__ = "0.1.0"
__all__ = ["__version__"]