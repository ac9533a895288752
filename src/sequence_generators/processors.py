"""Processing steps that turn a sequence into DataFrame batches."""

import logging
from itertools import islice
from typing import Iterable, Iterator, List

import pandas as pd


class SequenceBatcher:
    """Groups sequence values into fixed-size batches."""

    def __init__(self, batch_size: int = 1000):
        """
        Initialize batcher.

        Args:
            batch_size: Number of values per batch
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size

    def batch(self, values: Iterable[int]) -> Iterator[List[int]]:
        """
        Cut values into consecutive chunks.

        Each chunk is an ``islice`` of the shared iterator, so the source is
        never read further ahead than the current chunk.

        Args:
            values: Iterable of sequence values

        Yields:
            Lists of at most ``batch_size`` values; only the last may be short
        """
        iterator = iter(values)
        while True:
            chunk = list(islice(iterator, self.batch_size))
            if not chunk:
                return
            yield chunk


class DataFrameTransformer:
    """Converts value batches into typed DataFrames."""

    def transform(self, batches: Iterable[List[int]]) -> Iterator[pd.DataFrame]:
        """
        Transform batches to DataFrames.

        Args:
            batches: Iterable of value batches

        Yields:
            DataFrames with ``value``, ``position`` and ``batch_number`` columns
        """
        logger = logging.getLogger(__name__)
        position = 0
        for batch_num, batch in enumerate(batches, 1):
            df = pd.DataFrame(
                {
                    "value": pd.Series(batch, dtype="int64"),
                    "position": pd.Series(
                        range(position, position + len(batch)), dtype="int64"
                    ),
                }
            )
            df["batch_number"] = batch_num
            position += len(batch)

            logger.debug(f"Created DataFrame batch {batch_num} with {len(df)} values")
            yield df
