"""Command-line interface for the SuffixPy project."""

import argparse

from suffixpy.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Text queries over a suffix array",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Longest repeated substring of a text
  %(prog)s --tool lrs tale.txt -v

  # Longest common substring of two texts
  %(prog)s --tool lcs first.txt second.txt

  # Every occurrence of "best" and "worst" with 20 characters of context
  %(prog)s --tool kwic tale.txt -q best,worst --context 20

  # Words of a document missing from the 5000 most common English words
  %(prog)s --tool spell essay.txt --top-n 5000 --include settings/words.txt

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "tool": "kwic",
  "inputs": ["tale.txt"],
  "queries": ["best", "worst"],
  "context": 15,
  "output": "results/kwic.txt",
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        default=[],
        help="Input text files (exactly two for lcs)",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    parser.add_argument(
        "-t",
        "--tool",
        type=str,
        choices=["lrs", "lcs", "kwic", "spell"],
        default="lrs",
        help="lrs: longest repeated substring, lcs: longest common substring, "
        "kwic: keyword in context, spell: unknown words",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Tool parameters
    parser.add_argument(
        "-q", "--queries", type=str, help="Comma-separated keywords to look up (kwic only)"
    )
    parser.add_argument(
        "--context",
        type=int,
        help="Characters of context around each match (kwic only)",
        default=Constants.DEFAULT_CONTEXT,
    )
    parser.add_argument("--top-n", type=int, help="Use the top N most common English words (spell)")
    parser.add_argument("--include", type=str, help="File with additional dictionary words (spell)")
    parser.add_argument(
        "--cutoff",
        type=int,
        help="Range size at which suffix sorting switches to insertion sort",
        default=Constants.INSERTION_SORT_CUTOFF,
    )
    parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Do not collapse runs of whitespace in input texts",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
