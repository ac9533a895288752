"""Data models for sequences and export results."""

import math
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, Optional, Union

# Sentinel for a sequence without an upper limit
UNBOUNDED = None


@dataclass(frozen=True)
class Sequence:
    """
    Immutable description of an integer range.

    Values run from ``start`` in steps of ``interval`` while they stay
    ``<= end``. Iterating a Sequence always starts fresh from ``start``, so
    the same object can be consumed any number of times, even concurrently.
    """

    start: int = 0
    end: Optional[Union[int, float]] = UNBOUNDED
    interval: int = 1

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.end == math.inf:
            object.__setattr__(self, "end", UNBOUNDED)

        for name in ("start", "end", "interval"):
            value = getattr(self, name)
            # -inf is an end nothing can reach
            if name == "end" and (value is UNBOUNDED or value == -math.inf):
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {value!r}")

        if self.interval == 0:
            raise ValueError("interval must be nonzero")
        if self.interval < 0 and self.is_bounded and self.start <= self.end:
            raise ValueError(
                f"negative interval never passes end={self.end} from start={self.start}"
            )

    @property
    def is_bounded(self) -> bool:
        """Whether the sequence has an end at all."""
        return self.end is not UNBOUNDED

    def __iter__(self) -> "SequenceIterator":
        return SequenceIterator(self)

    def __len__(self) -> int:
        if not self.is_bounded:
            raise TypeError("unbounded sequence has no length")
        if self.end < self.start:
            return 0
        # Construction guarantees a positive interval here
        return (self.end - self.start) // self.interval + 1

    def __bool__(self) -> bool:
        return not self.is_bounded or len(self) > 0

    def take(self, n: int) -> List[int]:
        """
        Return the first ``n`` values.

        Safe on unbounded sequences since only ``n`` values are pulled.
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        return list(islice(self, n))


class SequenceIterator(Iterator[int]):
    """
    Cursor over a single pass of a Sequence.

    Holds the only mutable state of an iteration: the next value to emit.
    """

    def __init__(self, sequence: Sequence):
        self._sequence = sequence
        self._current = sequence.start

    def has_next(self) -> bool:
        """Check whether another value is available without consuming it."""
        end = self._sequence.end
        return end is UNBOUNDED or self._current <= end

    def __iter__(self) -> "SequenceIterator":
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        value = self._current
        self._current += self._sequence.interval
        return value


@dataclass
class ExportStatistics:
    """Statistics for export operations."""

    total_rows: int = 0
    total_batches: int = 0
    file_size_bytes: int = 0
    elapsed_time: float = 0.0
