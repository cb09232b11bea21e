"""Tool orchestration: load inputs, build the index, run a tool, write results."""

from pathlib import Path
import sys
import time

from loguru import logger

from suffixpy.core import Config, SuffixArray
from suffixpy.data import load_dictionary, read_text
from suffixpy.tools import (
    SpellChecker,
    keyword_in_context,
    longest_common_substring,
    longest_repeated_substring,
    tokenize,
)
from suffixpy.utils import format_time


def _load_inputs(config: Config) -> list[str]:
    """Read every input file named in the configuration."""
    texts = []
    for path in config.inputs:
        text = read_text(path, collapse_whitespace=config.collapse_whitespace)
        if config.verbose:
            logger.info(f"  Read {len(text):,} characters from {path}")
        texts.append(text)
    return texts


def _build_index(text: str, config: Config) -> SuffixArray:
    start_time = time.time()
    sa = SuffixArray(text, cutoff=config.cutoff)
    if config.verbose:
        logger.info(
            f"  Built suffix array of {sa.length():,} suffixes "
            f"in {format_time(time.time() - start_time)}"
        )
    return sa


def _run_lrs(texts: list[str], config: Config) -> list[str]:
    results = []
    for text in texts:
        sa = _build_index(text, config)
        results.append(longest_repeated_substring(sa, verbose=config.verbose))
    return results


def _run_lcs(texts: list[str], config: Config) -> list[str]:
    first, second = texts
    return [
        longest_common_substring(first, second, verbose=config.verbose, cutoff=config.cutoff)
    ]


def _run_kwic(texts: list[str], config: Config) -> list[str]:
    results = []
    for text in texts:
        sa = _build_index(text, config)
        for query in config.queries:
            matches = keyword_in_context(sa, query, config.context)
            if config.verbose:
                logger.info(f"  {query!r}: {len(matches)} occurrence(s)")
            results.extend(matches)
            results.append("")
    return results


def _run_spell(texts: list[str], config: Config) -> list[str]:
    words = load_dictionary(config.top_n, config.include, verbose=config.verbose)
    checker = SpellChecker(words, cutoff=config.cutoff)
    results = []
    for text in texts:
        unknown = checker.misspelled(tokenize(text))
        if config.verbose:
            logger.info(f"  {len(unknown)} unknown word(s)")
        results.extend(unknown)
    return results


_TOOLS = {
    "lrs": _run_lrs,
    "lcs": _run_lcs,
    "kwic": _run_kwic,
    "spell": _run_spell,
}


def write_results(lines: list[str], output_path: str | None) -> None:
    """Write result lines to output_path, or to stdout when it is None.

    Missing parent directories of output_path are created.
    """
    if output_path is None:
        sys.stdout.writelines(f"{line}\n" for line in lines)
        return

    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.writelines(f"{line}\n" for line in lines)
    except OSError as e:
        logger.error(f"✗ Could not write results to {path}: {e}")
        logger.error("  Please check the output path and its permissions")
        raise


def run_tool(config: Config) -> list[str]:
    """Run the configured tool and write its results.

    Args:
        config: Configuration object containing all settings

    Returns:
        Result lines, as written to the output
    """
    start_time = time.time()

    if config.verbose:
        logger.info(f"Running {config.tool} on {len(config.inputs)} input(s)")

    texts = _load_inputs(config)
    results = _TOOLS[config.tool](texts, config)
    write_results(results, config.output)

    if config.verbose:
        logger.info(f"Total processing time: {format_time(time.time() - start_time)}")

    return results
