"""Longest common substring of two documents."""

from loguru import logger

from suffixpy.core import SuffixArray
from suffixpy.tools.progress import adjacent_ranks
from suffixpy.utils import Constants


def longest_common_substring(
    first: str,
    second: str,
    separator: str = Constants.DOCUMENT_SEPARATOR,
    verbose: bool = False,
    cutoff: int = Constants.INSERTION_SORT_CUTOFF,
) -> str:
    """Find the longest substring that appears in both documents.

    Both documents are indexed together as first + separator + second. A
    common substring is a common prefix of two adjacent suffixes that start
    on opposite sides of the separator. The separator occurs nowhere else,
    so no such prefix can run across it.

    Args:
        first: First document
        second: Second document
        separator: Character joining the two documents
        verbose: Whether to show progress
        cutoff: Insertion-sort threshold for the combined index

    Returns:
        The longest common substring ("" if the documents share no character)

    Raises:
        ValueError: If separator is not a single character or either document
            contains it
    """
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    if separator in first or separator in second:
        raise ValueError(f"documents must not contain the separator {separator!r}")

    boundary = len(first)
    sa = SuffixArray(first + separator + second, cutoff=cutoff)
    if verbose:
        logger.info(f"  Indexed {sa.length():,} characters from both documents")

    best_length = 0
    best_offset = 0

    for i in adjacent_ranks(sa.length(), "  Scanning document boundary", verbose):
        a = sa.index_of(i)
        b = sa.index_of(i - 1)
        # Only pairs with one suffix in each document count
        if (a < boundary) == (b < boundary):
            continue
        length = sa.longest_common_prefix(i)
        if length > best_length:
            best_length = length
            best_offset = a

    return sa.text[best_offset : best_offset + best_length]
