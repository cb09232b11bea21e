"""Suffix sorting by three-way radix quicksort.

The permutation of suffix offsets is ordered one character position at a
time. Each range is partitioned into suffixes whose character at depth k is
less than, equal to or greater than a pivot character. The outer zones keep
the same depth; the middle zone shares one more confirmed character and moves
on to depth k + 1. Small ranges fall back to insertion sort.

Pending ranges live on an explicit stack, so a text made of one repeated
character costs quadratic time but never exhausts the interpreter's
recursion limit.
"""

from suffixpy.core.comparators import END_OF_SUFFIX, char_at, is_less_than
from suffixpy.utils.constants import Constants


def insertion_sort(text: str, index: list[int], lo: int, hi: int, k: int) -> None:
    """Sort index[lo..hi] in place, comparing suffixes from depth k onward."""
    for i in range(lo + 1, hi + 1):
        j = i
        while j > lo and is_less_than(text, index[j], index[j - 1], k):
            index[j], index[j - 1] = index[j - 1], index[j]
            j -= 1


def partition(text: str, index: list[int], lo: int, hi: int, k: int) -> tuple[int, int, int]:
    """Dutch-national-flag partition of index[lo..hi] on the character at depth k.

    The pivot is the depth-k character of the suffix at index[lo]. Afterwards
    index[lo..lt-1] < pivot, index[lt..gt] == pivot and index[gt+1..hi] > pivot.

    Returns:
        Tuple of (lt, gt, pivot)
    """
    v = char_at(text, index[lo] + k)
    lt = lo
    gt = hi
    i = lo + 1

    while i <= gt:
        t = char_at(text, index[i] + k)
        if t < v:
            index[lt], index[i] = index[i], index[lt]
            lt += 1
            i += 1
        elif t > v:
            index[i], index[gt] = index[gt], index[i]
            gt -= 1
        else:
            i += 1

    return lt, gt, v


def sort_suffixes(text: str, cutoff: int = Constants.INSERTION_SORT_CUTOFF) -> list[int]:
    """Build the suffix array of text.

    Args:
        text: Text whose suffixes are sorted
        cutoff: Ranges of at most this many entries (hi - lo < cutoff) are
            insertion-sorted instead of partitioned

    Returns:
        List of suffix start offsets in lexicographic order of their suffixes

    Raises:
        ValueError: If cutoff is less than 1
    """
    if cutoff < 1:
        raise ValueError(f"cutoff must be >= 1, got {cutoff}")

    index = list(range(len(text)))
    stack: list[tuple[int, int, int]] = [(0, len(text) - 1, 0)]

    while stack:
        lo, hi, k = stack.pop()
        if hi <= lo:
            continue

        if hi - lo < cutoff:
            insertion_sort(text, index, lo, hi, k)
            continue

        lt, gt, v = partition(text, index, lo, hi, k)

        stack.append((lo, lt - 1, k))
        stack.append((gt + 1, hi, k))
        # An exhausted suffix has nothing left to compare
        if v != END_OF_SUFFIX:
            stack.append((lt, gt, k + 1))

    return index
