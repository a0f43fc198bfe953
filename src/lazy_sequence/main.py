"""Main entry point: sum the running sums of 1..n through a lazy sequence."""

import logging
import sys

from .config import DemoConfig, get_demo_config
from .consumers import SumConsumer, drive
from .producers import running_sums
from .sinks import ParquetSequenceWriter, to_dataframes

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging.

    Args:
        verbose: Enable verbose logging
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def run(config: DemoConfig) -> int:
    """Drive the running-sums sequence and return the total of its values.

    Args:
        config: Driver configuration

    Returns:
        Sum of every value the sequence produced
    """
    with running_sums(config.sequence_limit) as numbers:
        total = drive(numbers, SumConsumer())

    if config.output_file is not None:
        with running_sums(config.sequence_limit) as numbers, ParquetSequenceWriter(
            config.output_file, config.compression
        ) as writer:
            stats = writer.write(to_dataframes(numbers, config.batch_size, column="running_sum"))
        logger.info(
            f"Wrote {stats.total_rows} rows in {stats.total_batches} blocks "
            f"({stats.file_size_bytes} bytes) to {config.output_file}"
        )

    return total


def main():
    """Main execution function."""
    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.info(f"Running sums of 1..{config.sequence_limit}")
        total = run(config)
        print(total)
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
