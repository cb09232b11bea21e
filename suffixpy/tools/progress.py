"""Progress reporting for scans over adjacent suffixes."""

from collections.abc import Iterable

from tqdm import tqdm

from suffixpy.utils import Constants


def adjacent_ranks(n: int, desc: str, verbose: bool) -> Iterable[int]:
    """Return ranks 1..n-1, wrapped in a progress bar for large verbose scans.

    Args:
        n: Number of suffixes in the index
        desc: Progress bar description
        verbose: Whether progress may be shown

    Returns:
        Iterable over every rank that has a predecessor
    """
    ranks = range(1, n)
    if verbose and n > Constants.PROGRESS_BAR_THRESHOLD:
        return tqdm(ranks, desc=desc, unit="suffix", leave=False)
    return ranks
