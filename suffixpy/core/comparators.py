"""Character-wise suffix comparison primitives.

Every function here works on offsets into one shared text. Suffixes are never
sliced out; characters are read one at a time and compared by code point.
"""

# Stands for "no character left" once a suffix is exhausted. Lower than any code point.
END_OF_SUFFIX = -1


def char_at(text: str, pos: int) -> int:
    """Return the code point at pos, or END_OF_SUFFIX past the end of text."""
    if pos < len(text):
        return ord(text[pos])
    return END_OF_SUFFIX


def is_less_than(text: str, i: int, j: int, k: int) -> bool:
    """Check whether text[i:] sorts strictly before text[j:].

    The first k characters of both suffixes are known to be equal, so the
    comparison starts at i + k and j + k. A suffix that runs out of
    characters first is the smaller one.

    Args:
        text: The indexed text
        i: Start offset of the first suffix
        j: Start offset of the second suffix
        k: Depth already known to be equal

    Returns:
        True if suffix i is less than suffix j, False otherwise (including i == j)
    """
    if i == j:
        return False

    n = len(text)
    i += k
    j += k

    while i < n and j < n:
        a = text[i]
        b = text[j]
        if a != b:
            return a < b
        i += 1
        j += 1

    # The suffix that started later runs out first
    return i > j


def compare(text: str, key: str, i: int) -> int:
    """Three-way comparison of key against text[i:].

    Returns:
        Negative if key sorts before the suffix, zero if equal, positive if after.
        On a mismatch the value is the difference of the two code points.
    """
    n = len(text)
    key_length = len(key)
    j = 0

    while i < n and j < key_length:
        if key[j] != text[i]:
            return ord(key[j]) - ord(text[i])
        i += 1
        j += 1

    if i < n:
        return -1
    if j < key_length:
        return 1
    return 0


def common_prefix_length(text: str, i: int, j: int) -> int:
    """Count the leading characters shared by text[i:] and text[j:]."""
    n = len(text)
    size = 0

    while i < n and j < n and text[i] == text[j]:
        i += 1
        j += 1
        size += 1

    return size
