"""Structural types shared by the export components."""

from typing import Iterator, Protocol

import pandas as pd

from .models import ExportStatistics


class SequenceWriter(Protocol):
    """Anything that can persist a stream of sequence DataFrames."""

    def write(self, dataframes: Iterator[pd.DataFrame]) -> ExportStatistics:
        """Consume the frames and report what was written."""
        ...


class LoggerProtocol(Protocol):
    """Subset of ``logging.Logger`` the components rely on."""

    def info(self, message: str) -> None:
        ...

    def debug(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...
