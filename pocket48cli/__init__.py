"""List Pocket48 live streams and recorded broadcasts from the command line."""

__version__ = "2.0.0"
__all__ = ["__version__"]