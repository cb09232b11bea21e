"""Utility functions for SuffixPy."""

from suffixpy.utils.constants import Constants
from suffixpy.utils.helpers import expand_file_path, format_time
from suffixpy.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "format_time",
    "setup_logger",
]
