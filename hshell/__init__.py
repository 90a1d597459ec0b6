"""A minimal command-line shell that runs programs found on PATH."""

__version__ = "0.1.0"
__all__ = ["__version__"]