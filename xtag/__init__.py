"""Tag files and directories through extended attributes, then scan, format and query them."""

__version__ = "0.1.1"
__all__ = ["__version__"]