"""Dictionary lookups backed by a suffix array."""

import re
from collections.abc import Iterable

from loguru import logger

from suffixpy.core import SuffixArray
from suffixpy.utils import Constants

_WORD_PATTERN = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")


def tokenize(text: str) -> list[str]:
    """Split a document into lowercase words."""
    return _WORD_PATTERN.findall(text.lower())


class SpellChecker:
    """Word list indexed as one delimited text.

    The words are stored as "\\nword1\\nword2\\n...\\n". A word is known when
    "\\nword\\n" occurs in that text, which is checked with a single rank()
    lookup. Suggestions come from the run of suffixes starting with
    "\\nprefix".
    """

    def __init__(self, words: Iterable[str], cutoff: int = Constants.INSERTION_SORT_CUTOFF):
        delimiter = Constants.WORD_DELIMITER
        vocabulary = sorted({w.lower() for w in words if w and delimiter not in w})
        text = delimiter + delimiter.join(vocabulary) + delimiter if vocabulary else ""
        self.word_count = len(vocabulary)
        self.index = SuffixArray(text, cutoff=cutoff)
        logger.debug(f"Indexed {self.word_count} dictionary words")

    def is_known(self, word: str) -> bool:
        """Check whether word is in the dictionary (case-insensitive)."""
        delimiter = Constants.WORD_DELIMITER
        if delimiter in word:
            return False
        key = f"{delimiter}{word.lower()}{delimiter}"
        r = self.index.rank(key)
        if r >= self.index.length():
            return False
        return self.index.text.startswith(key, self.index.index_of(r))

    def misspelled(self, words: Iterable[str]) -> list[str]:
        """Return the unknown words, de-duplicated, in first-seen order."""
        seen = set()
        unknown = []
        for word in words:
            if word in seen:
                continue
            seen.add(word)
            if not self.is_known(word):
                unknown.append(word)
        return unknown

    def suggestions(self, prefix: str, limit: int = Constants.DEFAULT_SUGGESTION_LIMIT) -> list[str]:
        """Return up to limit dictionary words starting with prefix, alphabetically."""
        delimiter = Constants.WORD_DELIMITER
        text = self.index.text
        found = []
        for r in self.index.prefix_range(delimiter + prefix.lower()):
            start = self.index.index_of(r) + 1
            end = text.find(delimiter, start)
            # The trailing delimiter suffix matches an empty prefix but holds no word
            if end > start:
                found.append(text[start:end])
        return sorted(found)[:limit]
