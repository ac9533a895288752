"""Configuration management for the application."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_UNBOUNDED_VALUES = ("", "inf", "infinity", "unbounded", "none")


def _parse_end(raw: Optional[str]) -> Optional[int]:
    """Parse SEQUENCE_END, where blank or ``inf`` means unbounded."""
    if raw is None or raw.strip().lower() in _UNBOUNDED_VALUES:
        return None
    return int(raw)


@dataclass
class SequenceConfig:
    """Parameters of the sequence walked by the demo."""

    start: int = 1
    end: Optional[int] = 10
    interval: int = 2
    take_count: int = 3
    profile_size: int = 100_000

    @classmethod
    def from_env(cls) -> "SequenceConfig":
        """Load sequence configuration from environment variables.

        SEQUENCE_END accepts an integer, or one of blank/inf/unbounded for
        a sequence without an upper limit.
        """
        return cls(
            start=int(os.getenv("SEQUENCE_START", "1")),
            end=_parse_end(os.getenv("SEQUENCE_END", "10")),
            interval=int(os.getenv("SEQUENCE_INTERVAL", "2")),
            take_count=int(os.getenv("TAKE_COUNT", "3")),
            profile_size=int(os.getenv("PROFILE_SIZE", "100000")),
        )

    def __post_init__(self):
        if self.interval == 0:
            raise ValueError("interval must be nonzero")
        if self.take_count < 0:
            raise ValueError("take_count must be non-negative")
        if self.profile_size < 0:
            raise ValueError("profile_size must be non-negative")


@dataclass
class ExportConfig:
    """Parquet export parameters."""

    enabled: bool = False
    batch_size: int = 1000
    compression: str = "snappy"
    output_dir: Path = field(default_factory=lambda: Path("./output"))
    limit: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """Load export configuration from environment variables."""
        limit = os.getenv("EXPORT_LIMIT") or None
        return cls(
            enabled=os.getenv("EXPORT_ENABLED", "false").lower() == "true",
            batch_size=int(os.getenv("BATCH_SIZE", "1000")),
            compression=os.getenv("COMPRESSION", "snappy"),
            output_dir=Path(os.getenv("OUTPUT_DIR", "./output")),
            limit=int(limit) if limit is not None else None,
        )

    @property
    def output_file(self) -> Path:
        return self.output_dir / "sequence.parquet"

    def __post_init__(self):
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must be non-negative")


def get_sequence_config() -> SequenceConfig:
    """Get sequence configuration."""
    return SequenceConfig.from_env()


def get_export_config() -> ExportConfig:
    """Get export configuration."""
    return ExportConfig.from_env()
