"""Tests for pairwise module."""

import pytest

from stack_iterators.models import PairwiseState
from stack_iterators.pairwise import PairwiseIterator, pairwise
from stack_iterators.stack import Stack, StackMutatedError


class TrackedSource:
    """Re-iterable source that records how many of its iterators were released."""

    def __init__(self, values):
        self.values = list(values)
        self.opened = 0
        self.released = 0

    def __iter__(self):
        self.opened += 1
        try:
            for value in self.values:
                yield value
        finally:
            self.released += 1


def test_pairs_of_five_elements():
    """Test that 5 elements give 4 adjacent pairs."""
    stack = Stack(range(5))

    assert list(pairwise(stack)) == [(0, 1), (1, 2), (2, 3), (3, 4)]


def test_pairs_from_factory():
    """Test pairing over stack.all."""
    stack = Stack(range(5))

    assert list(pairwise(stack.all)) == [(0, 1), (1, 2), (2, 3), (3, 4)]


@pytest.mark.parametrize("values", [[], [7]])
def test_short_input_yields_nothing(values):
    """Test that fewer than two elements produce no pairs."""
    pairs = pairwise(Stack(values))

    assert list(pairs) == []
    assert pairs.state is PairwiseState.EXHAUSTED


def test_pairs_after_pop():
    """Test the pop-then-pair scenario."""
    stack = Stack(range(5))
    stack.pop()

    assert list(pairwise(stack.all)) == [(0, 1), (1, 2), (2, 3)]


def test_state_transitions():
    """Test INIT -> ADVANCING -> EXHAUSTED."""
    pairs = pairwise([1, 2, 3])
    assert pairs.state is PairwiseState.INIT

    assert next(pairs) == (1, 2)
    assert pairs.state is PairwiseState.ADVANCING

    assert next(pairs) == (2, 3)
    with pytest.raises(StopIteration):
        next(pairs)
    assert pairs.state is PairwiseState.EXHAUSTED

    with pytest.raises(StopIteration):
        next(pairs)


def test_natural_exhaustion_releases_both_cursors():
    """Test that both cursors are released after the last pair."""
    source = TrackedSource([1, 2, 3])

    assert list(pairwise(source)) == [(1, 2), (2, 3)]
    assert source.opened == 2
    assert source.released == 2


def test_early_close_releases_both_cursors():
    """Test that close() after the first pair releases both cursors."""
    source = TrackedSource(range(10))
    pairs = pairwise(source)

    assert next(pairs) == (0, 1)
    pairs.close()

    assert source.released == 2
    assert pairs.state is PairwiseState.EXHAUSTED
    assert list(pairs) == []


def test_context_manager_releases_on_break():
    """Test that leaving a with block after break releases both cursors."""
    source = TrackedSource(range(10))

    seen = []
    with pairwise(source) as pairs:
        for pair in pairs:
            seen.append(pair)
            break

    assert seen == [(0, 1)]
    assert source.released == 2


def test_close_before_start():
    """Test closing an iterator that never produced a pair."""
    pairs = PairwiseIterator([1, 2, 3])
    pairs.close()
    pairs.close()

    assert pairs.state is PairwiseState.EXHAUSTED
    assert list(pairs) == []


def test_one_shot_iterator_source():
    """Test that a one-shot generator still yields correct pairs."""
    values = (x * x for x in range(4))

    assert list(pairwise(values)) == [(0, 1), (1, 4), (4, 9)]


def test_one_shot_iterator_is_closed_on_early_stop():
    """Test that an abandoned one-shot source is closed."""
    log = []

    def numbers():
        try:
            yield from range(100)
        finally:
            log.append("closed")

    with pairwise(numbers()) as pairs:
        assert next(pairs) == (0, 1)

    assert log == ["closed"]


def test_pairwise_does_not_mutate_stack():
    """Test that pairing leaves the stack and later traversals untouched."""
    stack = Stack(range(5))
    pairs = pairwise(stack.all)
    next(pairs)
    pairs.close()

    assert len(stack) == 5
    assert list(stack.all()) == [0, 1, 2, 3, 4]


class FailingSource(TrackedSource):
    """Tracked source whose iterators raise when they reach a marker value."""

    def __iter__(self):
        self.opened += 1
        try:
            for value in self.values:
                if value == "boom":
                    raise ValueError("bad element")
                yield value
        finally:
            self.released += 1


def test_source_error_releases_both_cursors():
    """Test that an error from the source exhausts the iterator and releases both cursors."""
    source = FailingSource([0, 1, 2, "boom", 4])
    pairs = pairwise(source)

    with pytest.raises(ValueError, match="bad element"):
        list(pairs)

    assert pairs.state is PairwiseState.EXHAUSTED
    assert source.released == 2
    assert list(pairs) == []


def test_error_during_lookahead_releases_both_cursors():
    """Test that an error on the very first draw still releases both cursors."""
    source = FailingSource(["boom"])
    pairs = pairwise(source)

    with pytest.raises(ValueError):
        next(pairs)

    assert pairs.state is PairwiseState.EXHAUSTED
    assert source.released == 1
    assert source.opened == 1


def test_stack_mutation_exhausts_pairwise():
    """Test that pushing onto the stack mid-iteration exhausts the adapter."""
    stack = Stack(range(5))
    pairs = pairwise(stack.all)
    assert next(pairs) == (0, 1)

    stack.push(9)

    with pytest.raises(StackMutatedError):
        next(pairs)
    assert pairs.state is PairwiseState.EXHAUSTED
    assert list(stack.all()) == [0, 1, 2, 3, 4, 9]


def test_break_without_close_keeps_cursors_open():
    """Test that a bare break leaves the iterator resumable until closed."""
    source = TrackedSource(range(5))
    pairs = pairwise(source)

    for pair in pairs:
        break

    assert pair == (0, 1)
    assert pairs.state is PairwiseState.ADVANCING
    assert source.released == 0
    assert next(pairs) == (1, 2)

    pairs.close()
    assert source.released == 2


def test_dropped_iterator_releases_cursors():
    """Test that releasing the last reference finalizes both cursors."""
    source = TrackedSource(range(5))
    pairs = pairwise(source)
    next(pairs)

    del pairs

    assert source.released == 2
