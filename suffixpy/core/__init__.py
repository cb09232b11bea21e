"""Core suffix index for SuffixPy."""

from .builder import sort_suffixes
from .comparators import END_OF_SUFFIX, common_prefix_length, compare, is_less_than
from .config import Config, load_config
from .errors import IndexOutOfRangeError, InvalidInputError, SuffixIndexError
from .suffix_array import SuffixArray

__all__ = [
    "END_OF_SUFFIX",
    "Config",
    "IndexOutOfRangeError",
    "InvalidInputError",
    "SuffixArray",
    "SuffixIndexError",
    "common_prefix_length",
    "compare",
    "is_less_than",
    "load_config",
    "sort_suffixes",
]
