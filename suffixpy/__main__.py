"""Main entry point for suffixpy package."""

from loguru import logger

from suffixpy.cli import create_parser
from suffixpy.core import load_config
from suffixpy.processing import run_tool
from suffixpy.utils.logging import setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug, log_file=config.log_file)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("SuffixPy - Suffix Array Text Tools")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        logger.info(f"  Tool: {config.tool}")
        logger.info(f"  Inputs: {', '.join(config.inputs)}")
        if config.queries:
            logger.info(f"  Queries: {', '.join(config.queries)}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        if config.include:
            logger.info(f"  Include file: {config.include}")
        logger.info(f"  Insertion sort cutoff: {config.cutoff}")
        logger.info("")

    try:
        run_tool(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
