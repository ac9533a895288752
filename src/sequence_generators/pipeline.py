"""Pipeline that exports a sequence to Parquet."""

import logging
from itertools import islice
from typing import Optional

from .config import ExportConfig
from .models import ExportStatistics, Sequence
from .processors import DataFrameTransformer, SequenceBatcher
from .protocols import LoggerProtocol, SequenceWriter
from .writers import ParquetWriter


class SequenceExportPipeline:
    """
    Streams a Sequence into a Parquet file.

    Values flow through chained generators (sequence -> batches -> frames ->
    writer), so memory stays at one batch regardless of sequence length.
    """

    def __init__(
        self,
        config: ExportConfig,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize pipeline.

        Args:
            config: Export configuration
            logger: Logger instance
        """
        self.config = config
        self._logger = logger or logging.getLogger(__name__)

        self.batcher = SequenceBatcher(config.batch_size)
        self.transformer = DataFrameTransformer()

    def export(
        self,
        sequence: Sequence,
        limit: Optional[int] = None,
        writer: Optional[SequenceWriter] = None,
    ) -> ExportStatistics:
        """
        Export the sequence, truncated to ``limit`` values when given.

        Args:
            sequence: Sequence to export
            limit: Maximum number of values; overrides ``config.limit``
            writer: Destination for the frames; defaults to a ParquetWriter
                on ``config.output_file``

        Returns:
            ExportStatistics reported by the writer

        Raises:
            ValueError: If the sequence is unbounded and no limit is set
        """
        if limit is None:
            limit = self.config.limit
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")
        if not sequence.is_bounded and limit is None:
            raise ValueError("Cannot export an unbounded sequence without a limit")

        self._logger.info(
            f"Exporting {sequence} "
            f"(batch size: {self.config.batch_size}, limit: {limit})"
        )

        values = iter(sequence) if limit is None else islice(sequence, limit)
        batches = self.batcher.batch(values)
        dataframes = self.transformer.transform(batches)

        if writer is not None:
            stats = writer.write(dataframes)
        else:
            with ParquetWriter(
                self.config.output_file, self.config.compression, self._logger
            ) as parquet_writer:
                stats = parquet_writer.write(dataframes)

        self._logger.info(f"Export completed in {stats.elapsed_time:.2f} seconds")
        return stats
