"""Main entry point for the stack iterators demo."""

import logging
import sys
import time

from .config import get_demo_config
from .data_generator import ElementGenerator
from .display import print_pairs, print_stack
from .models import DemoSummary

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(summary: DemoSummary):
    """Print summary statistics.

    Args:
        summary: Statistics from the demo run
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    print(f"\n  Element kind: {summary.element_kind}")
    print(f"  Elements pushed: {summary.pushed:,}")
    print(f"  Elements traversed: {summary.traversed:,}")
    print(f"  Pairs produced: {summary.pairs:,}")
    print(f"  Time taken: {summary.elapsed_time:.4f} seconds")

    print("\n" + "=" * 80)


def main():
    """Main execution function."""
    logger.info("Starting stack iterators demo")
    logger.info("=" * 80)

    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.info(f"Stack size: {config.stack_size:,}")
        logger.info(f"Element kind: {config.element_kind}")

        start_time = time.time()
        generator = ElementGenerator(config.element_kind, seed=config.seed)
        stack = generator.build_stack(config.stack_size)

        logger.info("-" * 80)
        logger.info("STEP 1: Traversing the stack bottom to top")
        logger.info("-" * 80)
        traversed = print_stack(stack)

        logger.info("-" * 80)
        logger.info("STEP 2: Traversing adjacent pairs")
        logger.info("-" * 80)
        pairs = print_pairs(stack)

        summary = DemoSummary(
            element_kind=config.element_kind,
            pushed=config.stack_size,
            traversed=traversed,
            pairs=pairs,
            elapsed_time=time.time() - start_time,
        )
        print_summary(summary)

        logger.info("Execution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
