"""SuffixPy - suffix array construction and queries.

Sort every suffix of a text once, then answer rank, longest-common-prefix and
selection queries against the sorted order.
"""

from suffixpy.core import (
    Config,
    IndexOutOfRangeError,
    InvalidInputError,
    SuffixArray,
    SuffixIndexError,
    load_config,
)
from suffixpy.processing import run_tool
from suffixpy.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "IndexOutOfRangeError",
    "InvalidInputError",
    "SuffixArray",
    "SuffixIndexError",
    "load_config",
    "run_tool",
    "setup_logger",
]
