"""Shared constants for SuffixPy."""


class Constants:
    """Project-wide constant values."""

    # Ranges of this size or smaller are insertion-sorted during construction
    INSERTION_SORT_CUTOFF = 8

    # Joins the two documents of a longest-common-substring query
    DOCUMENT_SEPARATOR = "\x01"

    # Delimits dictionary words inside the spell checker's indexed text
    WORD_DELIMITER = "\n"

    # Characters shown on each side of a keyword-in-context match
    DEFAULT_CONTEXT = 15

    DEFAULT_SUGGESTION_LIMIT = 10

    # Above this many LCP comparisons a progress bar is shown in verbose mode
    PROGRESS_BAR_THRESHOLD = 10_000
