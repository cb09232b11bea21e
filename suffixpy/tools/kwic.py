"""Keyword-in-context search."""

from suffixpy.core import SuffixArray
from suffixpy.utils import Constants


def keyword_in_context(
    sa: SuffixArray, query: str, context: int = Constants.DEFAULT_CONTEXT
) -> list[str]:
    """List every occurrence of query with surrounding text.

    Occurrences are visited in suffix order: starting at rank(query), ranks
    are walked forward while their suffix still begins with query.

    Args:
        sa: Suffix array of the text
        query: Keyword to look up
        context: Characters of text to include on each side of a match

    Returns:
        One text slice per occurrence, clipped to the bounds of the text

    Raises:
        ValueError: If query is empty or context is negative
    """
    if not query:
        raise ValueError("query must not be empty")
    if context < 0:
        raise ValueError(f"context must be >= 0, got {context}")

    text = sa.text
    n = sa.length()
    results = []

    for i in range(sa.rank(query), n):
        offset = sa.index_of(i)
        if not text.startswith(query, offset):
            break
        start = max(0, offset - context)
        end = min(n, offset + len(query) + context)
        results.append(text[start:end])

    return results
