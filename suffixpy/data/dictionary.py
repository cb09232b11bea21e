"""Text and word list loading."""

import re

from loguru import logger
from wordfreq import top_n_list

from suffixpy.utils import expand_file_path

_WHITESPACE_RUN = re.compile(r"\s+")


def read_text(filepath: str, collapse_whitespace: bool = False) -> str:
    """Read a UTF-8 text file.

    Args:
        filepath: Path of the file to read (may contain ~)
        collapse_whitespace: Replace each run of whitespace with a single space

    Returns:
        File contents
    """
    filepath = expand_file_path(filepath) or filepath

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        logger.error(f"✗ Input file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if collapse_whitespace:
        text = _WHITESPACE_RUN.sub(" ", text).strip()
    return text


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load custom word list from file."""
    if not filepath:
        return []

    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    words = []
    invalid_count = 0

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip().lower()
                if line and not line.startswith("#"):
                    if any(c.isspace() or c == "\\" for c in line):
                        invalid_count += 1
                        continue
                    words.append(line)
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if verbose and invalid_count > 0:
        logger.info(f"  Skipped {invalid_count} words with invalid characters")

    return words


def load_dictionary(
    top_n: int | None,
    include_filepath: str | None,
    verbose: bool = False,
) -> set[str]:
    """Load the spell checker's word list.

    Combines the top_n most common English words from wordfreq with the words
    of the include file.
    """
    words: set[str] = set()

    if top_n:
        if verbose:
            logger.info(f"  Loading top {top_n} English words...")
        words.update(w for w in top_n_list("en", top_n) if w and not any(c.isspace() for c in w))

    custom_words = load_word_list(include_filepath, verbose)
    added_count = len(set(custom_words) - words)
    words.update(custom_words)

    if verbose:
        logger.info(f"  Loaded {len(words)} dictionary words")
        if added_count > 0:
            logger.info(f"  Added {added_count} custom words from include file")

    return words
