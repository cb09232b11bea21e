"""Read-only suffix array over an immutable text."""

import time

from loguru import logger

from suffixpy.core.builder import sort_suffixes
from suffixpy.core.comparators import common_prefix_length, compare
from suffixpy.core.errors import IndexOutOfRangeError, require_text
from suffixpy.utils.constants import Constants


class SuffixArray:
    """Sorted suffixes of a text, kept as offsets into the text.

    index[i] is the start offset of the i-th smallest suffix. Suffixes are
    compared character by character in place, so the only string ever built
    from the text is the one returned by select_as_string().

    length() and index_of() take constant time. longest_common_prefix() takes
    time proportional to the prefix it measures, select_as_string() time
    proportional to the suffix it returns, and rank() a binary search of
    string comparisons.

    Construction sorts with three-way radix quicksort: about 2N ln N character
    comparisons for a random text, degrading toward quadratic on texts built
    from a single repeated character.
    """

    def __init__(self, text: str, cutoff: int = Constants.INSERTION_SORT_CUTOFF) -> None:
        """Build and sort the suffix array.

        Args:
            text: The text to index (any str, including "")
            cutoff: Ranges of at most this many suffixes are insertion-sorted
                instead of partitioned; must be at least 1

        Raises:
            InvalidInputError: If text is None or not a str
            ValueError: If cutoff is less than 1
        """
        self._text = require_text(text, "text")
        self._length = len(self._text)

        start_time = time.time()
        self._index: tuple[int, ...] = tuple(sort_suffixes(self._text, cutoff))
        logger.debug(
            f"Sorted {self._length:,} suffixes in {time.time() - start_time:.3f}s "
            f"(cutoff={cutoff})"
        )

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self._length})"

    @property
    def text(self) -> str:
        """The indexed text."""
        return self._text

    def length(self) -> int:
        """Return the number of characters (and suffixes) in the text."""
        return self._length

    def _check_rank(self, i: int, lower: int) -> None:
        if i < lower or i >= self._length:
            raise IndexOutOfRangeError(i, lower, self._length)

    def index_of(self, i: int) -> int:
        """Return the offset into the text of the i-th smallest suffix.

        Raises:
            IndexOutOfRangeError: Unless 0 <= i < length()
        """
        self._check_rank(i, 0)
        return self._index[i]

    def select_as_string(self, i: int) -> str:
        """Return the i-th smallest suffix as a string.

        Raises:
            IndexOutOfRangeError: Unless 0 <= i < length()
        """
        self._check_rank(i, 0)
        return self._text[self._index[i] :]

    def longest_common_prefix(self, i: int) -> int:
        """Return the length of the prefix shared by the i-th and (i-1)-th smallest suffixes.

        Raises:
            IndexOutOfRangeError: Unless 1 <= i < length()
        """
        self._check_rank(i, 1)
        return common_prefix_length(self._text, self._index[i], self._index[i - 1])

    def rank(self, key: str) -> int:
        """Return the number of suffixes strictly less than key.

        The binary search keeps moving left past exact matches, so the result
        is the leftmost insertion point even when key occurs in the text.

        Raises:
            InvalidInputError: If key is None or not a str
        """
        key = require_text(key, "key")
        lo = 0
        hi = self._length

        # Invariant: suffixes at ranks < lo are < key, ranks >= hi are >= key
        while lo < hi:
            mid = lo + (hi - lo) // 2
            if compare(self._text, key, self._index[mid]) > 0:
                lo = mid + 1
            else:
                hi = mid

        return lo

    def prefix_range(self, prefix: str) -> range:
        """Return the ranks whose suffixes start with prefix.

        Every suffix beginning with prefix is >= prefix and sorts together, so
        the matches form one contiguous run starting at rank(prefix).
        """
        first = self.rank(prefix)
        last = first
        while last < self._length and self._text.startswith(prefix, self._index[last]):
            last += 1
        return range(first, last)
