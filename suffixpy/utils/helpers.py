"""Shared utility functions for SuffixPy."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand ~ in a file path; None and empty paths become None."""
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    remaining = seconds % 60
    return f"{minutes}m {remaining:.1f}s"
