"""Top-level package for kvconfig.

This package reads flat `key = value` configuration files and returns the
accepted entries, the rejected lines, and line statistics as plain data. The
main entry point is `ConfigLoader`.
"""

from .config import LoaderSettings
from .loader import ConfigLoader, parse_file
from .models.datatypes import ParseResult, ParseStatus

__all__ = [
    "ConfigLoader",
    "LoaderSettings",
    "ParseResult",
    "ParseStatus",
    "__version__",
    "parse_file",
]

__version__ = "0.1.0"
