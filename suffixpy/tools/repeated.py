"""Longest repeated substring."""

from loguru import logger

from suffixpy.core import SuffixArray
from suffixpy.tools.progress import adjacent_ranks


def longest_repeated_substring(sa: SuffixArray, verbose: bool = False) -> str:
    """Find the longest substring that occurs at least twice in the indexed text.

    Any repeated substring is a common prefix of two suffixes, and the longest
    one is shared by a pair of suffixes adjacent in sorted order.

    Args:
        sa: Suffix array of the text
        verbose: Whether to show progress

    Returns:
        The longest repeated substring ("" if nothing repeats). Ties go to the
        lexicographically smallest candidate.
    """
    best_length = 0
    best_rank = 0

    for i in adjacent_ranks(sa.length(), "  Scanning adjacent suffixes", verbose):
        length = sa.longest_common_prefix(i)
        if length > best_length:
            best_length = length
            best_rank = i

    if best_length == 0:
        if verbose:
            logger.info("  No repeated substring found")
        return ""

    offset = sa.index_of(best_rank)
    if verbose:
        logger.info(f"  Longest repeat: {best_length} characters at offset {offset}")
    return sa.text[offset : offset + best_length]
