"""Parquet output for sequence DataFrames."""

import logging
import time
from pathlib import Path
from typing import Iterator, List, Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .models import ExportStatistics
from .protocols import LoggerProtocol


class ParquetWriter:
    """
    Streams DataFrames into a single Parquet file, one row group each.

    The underlying pyarrow writer is opened lazily with the schema of the
    first frame and closed once the frames run out. Each instance writes
    exactly one file.
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "snappy",
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize Parquet writer.

        Args:
            output_path: Path to output Parquet file
            compression: Compression codec
            logger: Logger instance
        """
        self.output_path = Path(output_path)
        self.compression = compression
        self._logger = logger or logging.getLogger(__name__)
        self._writer: Optional[pq.ParquetWriter] = None
        self._schema: Optional[pa.Schema] = None
        self._used = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def write(self, dataframes: Iterator[pd.DataFrame]) -> ExportStatistics:
        """
        Write dataframes to the Parquet file.

        Args:
            dataframes: Iterator of DataFrames to write

        Returns:
            ExportStatistics with operation details

        Raises:
            RuntimeError: If the iterator produced no frames, or this writer
                already wrote its file
            ValueError: If a frame's schema differs from the first one
        """
        if self._used:
            raise RuntimeError(
                f"Writer for {self.output_path} already used. Create a new ParquetWriter."
            )
        self._used = True

        start_time = time.time()
        batch_count = 0
        total_rows = 0

        for df in dataframes:
            table = pa.Table.from_pandas(df, preserve_index=False)

            if self._writer is None:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
                self._schema = table.schema
                self._writer = pq.ParquetWriter(
                    str(self.output_path),
                    self._schema,
                    compression=self.compression,
                )
                self._logger.debug(f"Opened {self.output_path} with schema: {self._schema}")

            if not table.schema.equals(self._schema):
                raise ValueError(
                    f"DataFrame schema mismatch. Expected {self._schema}, got {table.schema}"
                )

            self._writer.write_table(table)
            total_rows += len(df)
            batch_count += 1
            self._logger.debug(f"Written {len(df)} rows (total: {total_rows})")

        if self._writer is None:
            raise RuntimeError("No batches written. The sequence produced no values.")

        # Flush the footer so the file size below is final
        self.close()

        elapsed_time = time.time() - start_time
        file_size = self.output_path.stat().st_size

        self._logger.info(
            f"Successfully wrote {total_rows:,} rows in {batch_count} "
            f"row groups to {self.output_path}"
        )

        return ExportStatistics(
            total_rows=total_rows,
            total_batches=batch_count,
            file_size_bytes=file_size,
            elapsed_time=elapsed_time,
        )

    def close(self):
        """Close the Parquet writer."""
        if self._writer is not None:
            self._writer.close()
            self._writer = None


class ParquetReader:
    """Reads exported sequences back from Parquet."""

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)

    def read_values(self, parquet_path: Path) -> List[int]:
        """
        Read the ``value`` column in row order.

        Args:
            parquet_path: Path to Parquet file

        Returns:
            Sequence values as plain integers
        """
        table = pq.read_table(parquet_path, columns=["value"])
        values = table.column("value").to_pylist()
        self._logger.info(f"Read {len(values):,} values from {parquet_path}")
        return values

    def read_metadata(self, parquet_path: Path) -> dict:
        """Row and row-group counts of a Parquet file."""
        metadata = pq.ParquetFile(parquet_path).metadata
        return {
            "num_rows": metadata.num_rows,
            "num_row_groups": metadata.num_row_groups,
            "num_columns": metadata.num_columns,
        }
