"""Tests for models module."""

import math

import pytest

from sequence_generators.models import UNBOUNDED, Sequence, SequenceIterator


def test_odd_numbers():
    """Test the classic 1..10 step 2 sequence."""
    assert list(Sequence(1, 10, 2)) == [1, 3, 5, 7, 9]


def test_defaults_are_unbounded():
    """Test that Sequence() counts from 0 by 1 forever."""
    sequence = Sequence()
    assert sequence.start == 0
    assert sequence.end is UNBOUNDED
    assert sequence.interval == 1
    assert not sequence.is_bounded
    assert sequence.take(3) == [0, 1, 2]


def test_unbounded_first_n_values():
    """Test pulling a prefix from an unbounded sequence."""
    assert Sequence(0).take(100) == list(range(100))


def test_infinity_is_normalized():
    """Test that math.inf is accepted as the unbounded end."""
    sequence = Sequence(5, math.inf)
    assert sequence.end is UNBOUNDED
    assert sequence.take(2) == [5, 6]


@pytest.mark.parametrize(
    "start,end,interval",
    [(0, 0, 1), (0, 9, 3), (0, 10, 3), (-5, 5, 1), (3, 100, 7), (2, 3, 5)],
)
def test_bounded_length_and_steps(start, end, interval):
    """Test length formula, endpoints and spacing of bounded sequences."""
    values = list(Sequence(start, end, interval))

    assert len(values) == (end - start) // interval + 1
    assert len(Sequence(start, end, interval)) == len(values)
    assert values[0] == start
    assert values[-1] <= end
    assert all(b - a == interval for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("interval", [1, 2, -1, -3])
@pytest.mark.parametrize("start,end", [(10, 1), (0, -1), (5, -math.inf)])
def test_end_before_start_is_empty_for_any_interval(start, end, interval):
    """Test that nothing is produced once end lies below start."""
    sequence = Sequence(start, end, interval)
    assert list(sequence) == []
    assert len(sequence) == 0
    assert not sequence


def test_negative_interval_toward_reachable_end_rejected():
    """Test that a descending step with end at or above start raises."""
    with pytest.raises(ValueError, match="never passes end"):
        Sequence(1, 10, -1)
    with pytest.raises(ValueError, match="never passes end"):
        Sequence(3, 3, -2)


def test_negative_interval_unbounded_counts_down():
    """Test that an unbounded descending sequence is driven by the consumer."""
    assert Sequence(0, interval=-2).take(4) == [0, -2, -4, -6]


def test_negative_infinity_end_is_bounded():
    """Test that -inf is kept as an end no value can reach."""
    sequence = Sequence(0, -math.inf)
    assert sequence.is_bounded
    assert sequence.take(3) == []


def test_zero_interval_rejected():
    """Test that a zero step raises instead of looping forever."""
    with pytest.raises(ValueError, match="nonzero"):
        Sequence(0, 10, 0)


@pytest.mark.parametrize("kwargs", [{"start": 1.5}, {"end": "10"}, {"interval": True}])
def test_non_integer_rejected(kwargs):
    """Test that non-integer parameters raise TypeError."""
    with pytest.raises(TypeError):
        Sequence(**kwargs)


def test_unbounded_has_no_length():
    """Test that len() of an unbounded sequence raises TypeError."""
    sequence = Sequence()
    with pytest.raises(TypeError, match="unbounded"):
        len(sequence)
    assert sequence


def test_restartable():
    """Test that iterating twice yields the same values."""
    sequence = Sequence(1, 10, 2)
    assert list(sequence) == list(sequence)


def test_interleaved_iterators_are_independent():
    """Test that two passes over one sequence do not share state."""
    sequence = Sequence(0, 5)
    first = iter(sequence)
    second = iter(sequence)

    assert next(first) == 0
    assert next(first) == 1
    assert next(second) == 0
    assert list(first) == [2, 3, 4, 5]
    assert list(second) == [1, 2, 3, 4, 5]


def test_immutable():
    """Test that a sequence cannot be modified after construction."""
    sequence = Sequence(1, 10, 2)
    with pytest.raises(AttributeError):
        sequence.start = 5


def test_iterator_has_next():
    """Test the explicit has_next/next cursor."""
    iterator = iter(Sequence(1, 3))
    assert isinstance(iterator, SequenceIterator)
    assert iter(iterator) is iterator

    seen = []
    while iterator.has_next():
        seen.append(next(iterator))

    assert seen == [1, 2, 3]
    assert not iterator.has_next()
    with pytest.raises(StopIteration):
        next(iterator)


def test_take_validates_count():
    """Test that take() rejects negative counts."""
    assert Sequence(1, 10).take(0) == []
    with pytest.raises(ValueError):
        Sequence().take(-1)
