"""IPP assembler: inline fragment files into a single source file."""

from .version import __version__

__all__ = ["__version__"]
