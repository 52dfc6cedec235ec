"""Pairwise adapter built from two offset cursors."""

import itertools
import logging
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, Tuple, TypeVar

from .cursor import Cursor, Source
from .models import PairwiseState
from .protocols import LoggerProtocol

V = TypeVar("V")


class PairwiseIterator(Generic[V]):
    """
    Yields adjacent pairs ``(v[i], v[i + 1])`` of a sequence.

    Two independent cursors walk the same source; the second one is advanced
    once before the first pair is drawn, so the pairs come out without
    buffering the input. Both cursors are stopped as soon as either runs dry,
    a cursor raises, or the consumer calls ``close()`` (or leaves a ``with``
    block).

    A bare ``break`` is not a stop signal: the iterator stays ``ADVANCING``
    and keeps both cursors open while it is still referenced, so it can be
    resumed. Use ``with pairwise(...)`` or ``close()`` to stop early; an
    iterator that is simply dropped releases its cursors when it is garbage
    collected.

    State machine::

        INIT --lookahead--> ADVANCING --either cursor empty / close()--> EXHAUSTED
    """

    def __init__(self, source: Source, logger: Optional[LoggerProtocol] = None):
        """
        Initialize pairwise iterator.

        Args:
            source: A re-iterable (stack, list, ...), a zero-argument factory
                such as ``stack.all``, or a one-shot iterator
            logger: Logger instance
        """
        self._logger = logger or logging.getLogger(__name__)
        self.state = PairwiseState.INIT
        self._origin = None

        if callable(source) and not isinstance(source, Iterable):
            first, second = source(), source()
        elif isinstance(source, Iterator):
            # A one-shot iterator cannot be opened twice; split it instead
            self._origin = source
            first, second = itertools.tee(source, 2)
        else:
            first, second = source, source
        self._first: Cursor[V] = Cursor(first, self._logger)
        self._second: Cursor[V] = Cursor(second, self._logger)

    def _set_state(self, state: PairwiseState) -> None:
        self._logger.debug(f"Pairwise {self.state.value} -> {state.value}")
        self.state = state

    def __iter__(self) -> "PairwiseIterator[V]":
        return self

    def __next__(self) -> Tuple[V, V]:
        if self.state is PairwiseState.EXHAUSTED:
            raise StopIteration

        try:
            if self.state is PairwiseState.INIT:
                self._second.next()
                self._set_state(PairwiseState.ADVANCING)

            left = self._first.next()
            right = self._second.next() if left else left
        except BaseException:
            self.close()
            raise

        if not right:
            self.close()
            raise StopIteration
        return left.value, right.value

    def close(self) -> None:
        """Stop producing pairs and release both cursors."""
        if self.state is PairwiseState.EXHAUSTED:
            return
        self._set_state(PairwiseState.EXHAUSTED)
        try:
            self._first.stop()
        finally:
            self._second.stop()
            close = getattr(self._origin, "close", None)
            if close is not None:
                close()

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and release both cursors."""
        self.close()


def pairwise(source: Source, logger: Optional[LoggerProtocol] = None) -> PairwiseIterator:
    """
    Pair each element of ``source`` with its successor.

    Args:
        source: Re-iterable, zero-argument iterator factory, or one-shot iterator
        logger: Logger instance

    Returns:
        Iterator of adjacent pairs; empty when the source has fewer than two values
    """
    return PairwiseIterator(source, logger)
