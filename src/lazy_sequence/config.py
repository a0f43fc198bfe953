"""Configuration management for the demo driver."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class DemoConfig:
    """Driver configuration parameters."""

    sequence_limit: int = 7
    batch_size: int = 1000
    output_file: Optional[Path] = None
    compression: str = "snappy"
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.sequence_limit < 0:
            raise ValueError("sequence_limit must not be negative")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load driver configuration from environment variables.

        An empty or missing OUTPUT_FILE disables Parquet output.
        """
        output_file = os.getenv("OUTPUT_FILE") or None
        return cls(
            sequence_limit=int(os.getenv("SEQUENCE_LIMIT", "7")),
            batch_size=int(os.getenv("BATCH_SIZE", "1000")),
            output_file=Path(output_file) if output_file else None,
            compression=os.getenv("COMPRESSION", "snappy"),
            verbose=os.getenv("VERBOSE", "false").lower() == "true",
        )


def get_demo_config() -> DemoConfig:
    """Get driver configuration."""
    return DemoConfig.from_env()
