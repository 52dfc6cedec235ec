"""Pull-style cursors over any iterable."""

import logging
from collections.abc import Iterable
from typing import Callable, Generic, Iterator, Optional, TypeVar, Union

from .models import Lookup
from .protocols import LoggerProtocol

V = TypeVar("V")

Source = Union[Iterable, Callable[[], Iterable]]


class Cursor(Generic[V]):
    """
    Consumer-paced handle over an iterator.

    Single Responsibility: Step one iterator on demand and release it on stop.
    ``next()`` reports exhaustion through a not-found ``Lookup`` instead of
    raising ``StopIteration``.
    """

    def __init__(self, iterable: Iterable[V], logger: Optional[LoggerProtocol] = None):
        """
        Initialize cursor.

        Args:
            iterable: Values to step through; ``iter()`` is called once here
            logger: Logger instance
        """
        self._iterator: Iterator[V] = iter(iterable)
        self._logger = logger or logging.getLogger(__name__)
        self._exhausted = False
        self._stopped = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def stopped(self) -> bool:
        return self._stopped

    def next(self) -> Lookup[V]:
        """
        Fetch the next value.

        Returns:
            Lookup with the value, or a not-found Lookup once exhausted or stopped
        """
        if self._exhausted:
            return Lookup.missing()
        try:
            value = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return Lookup.missing()
        return Lookup.of(value)

    def stop(self) -> None:
        """Release the underlying iterator. Safe to call more than once."""
        if self._stopped:
            return
        self._stopped = True
        self._exhausted = True
        # Generators run their finally blocks on close()
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()
        self._logger.debug("Cursor stopped")

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and stop the cursor."""
        self.stop()

    def __iter__(self) -> "Cursor[V]":
        return self

    def __next__(self) -> V:
        result = self.next()
        if not result:
            raise StopIteration
        return result.value


def resolve(source: Source) -> Iterable:
    """Turn a zero-argument factory such as ``stack.all`` into its iterable."""
    if callable(source) and not isinstance(source, Iterable):
        return source()
    return source


def pull(source: Source, logger: Optional[LoggerProtocol] = None) -> Cursor:
    """
    Open a pull-style cursor.

    Args:
        source: An iterable, or a zero-argument callable returning one
        logger: Logger instance

    Returns:
        A fresh Cursor positioned before the first value
    """
    return Cursor(resolve(source), logger)
