"""Text tools built on the suffix array."""

from suffixpy.tools.common import longest_common_substring
from suffixpy.tools.kwic import keyword_in_context
from suffixpy.tools.repeated import longest_repeated_substring
from suffixpy.tools.spelling import SpellChecker, tokenize

__all__ = [
    "SpellChecker",
    "keyword_in_context",
    "longest_common_substring",
    "longest_repeated_substring",
    "tokenize",
]
