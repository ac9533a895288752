"""Walkthrough of generators and the iterator protocol."""

import logging
import os
import sys
from typing import Iterator, List

from .config import SequenceConfig, get_export_config, get_sequence_config
from .generators import forever, take, two_step
from .models import Sequence
from .pipeline import SequenceExportPipeline
from .utils import MemoryProfiler, format_bytes

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


def step_through(gen: Iterator[int]) -> List[int]:
    """Call next() by hand until the generator is exhausted.

    Returns:
        Every value produced, in order
    """
    values = []
    while True:
        try:
            value = next(gen)
        except StopIteration:
            logger.info("next(gen) -> StopIteration, generator is exhausted")
            return values
        logger.info(f"next(gen) -> {value}")
        values.append(value)


def demo_generators(take_count: int) -> None:
    """Show lazy execution, manual stepping and an infinite generator."""
    logger.info("-" * 60)
    logger.info("Creating a generator runs none of its body:")
    gen = two_step()
    logger.info(f"  {gen!r}")

    logger.info("Stepping it by hand:")
    step_through(gen)

    logger.info("A for loop calls next() until StopIteration:")
    for value in two_step():
        logger.info(f"  {value}")

    logger.info(f"First {take_count} values of an infinite generator:")
    counter = forever()
    for _ in range(take_count):
        logger.info(f"  next(counter) -> {next(counter)}")


def demo_sequence(config: SequenceConfig) -> Sequence:
    """Iterate a configured Sequence twice to show it restarts."""
    sequence = Sequence(config.start, config.end, config.interval)
    logger.info("-" * 60)
    logger.info(f"Iterating {sequence}:")

    if sequence.is_bounded:
        first_pass = list(sequence)
        second_pass = list(sequence)
        logger.info(f"  values: {first_pass}")
        logger.info(f"  second pass identical: {first_pass == second_pass}")
    else:
        logger.info(f"  first {config.take_count}: {take(sequence, config.take_count)}")
        logger.info(f"  again: {take(sequence, config.take_count)}")

    return sequence


def compare_memory(size: int) -> None:
    """Sum ``size`` values lazily and from a materialized list."""
    sequence = Sequence(0, size - 1)
    profiler = MemoryProfiler()

    logger.info("-" * 60)
    logger.info(f"Summing {size:,} values lazily and eagerly:")
    lazy = profiler.profile("lazy", lambda: sum(sequence))
    eager = profiler.profile("eager", lambda: sum(list(sequence)))

    saved = eager["peak_memory"] - lazy["peak_memory"]
    logger.info(f"  Lazy iteration saved {format_bytes(saved)} of peak memory")


def main():
    """Main execution function."""
    setup_logging(os.getenv("VERBOSE", "false").lower() == "true")
    logger.info("Starting sequence generators walkthrough")

    try:
        sequence_config = get_sequence_config()
        export_config = get_export_config()

        demo_generators(sequence_config.take_count)
        sequence = demo_sequence(sequence_config)

        if sequence_config.profile_size:
            compare_memory(sequence_config.profile_size)

        if export_config.enabled:
            logger.info("-" * 60)
            stats = SequenceExportPipeline(export_config).export(sequence)
            logger.info(
                f"Exported {stats.total_rows:,} values in {stats.total_batches} batches "
                f"({format_bytes(stats.file_size_bytes)})"
            )

        logger.info("Walkthrough completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
