"""Sequence Generators - lazy, restartable integer sequences and generator demos."""

__version__ = "0.1.0"

from .generators import forever, take, two_step
from .models import UNBOUNDED, ExportStatistics, Sequence, SequenceIterator
from .pipeline import SequenceExportPipeline
from .processors import DataFrameTransformer, SequenceBatcher
from .writers import ParquetReader, ParquetWriter

__all__ = [
    # Models
    "Sequence",
    "SequenceIterator",
    "ExportStatistics",
    "UNBOUNDED",
    # Generators
    "two_step",
    "forever",
    "take",
    # Export
    "SequenceBatcher",
    "DataFrameTransformer",
    "ParquetWriter",
    "ParquetReader",
    "SequenceExportPipeline",
]
