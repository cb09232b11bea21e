"""Data loading for SuffixPy."""

from suffixpy.data.dictionary import load_dictionary, load_word_list, read_text

__all__ = [
    "load_dictionary",
    "load_word_list",
    "read_text",
]
