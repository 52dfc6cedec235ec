"""Generic LIFO stack with lazy, non-destructive traversals."""

import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .models import EmptyStackError, Lookup
from .protocols import Visitor

T = TypeVar("T")

logger = logging.getLogger(__name__)


class StackMutatedError(RuntimeError):
    """Raised when a stack changes while one of its traversals is suspended."""


class Stack(Generic[T]):
    """
    Last-in-first-out container of homogeneous elements.

    Single Responsibility: Store elements and hand out traversals over them.
    Empty pop/peek is not an error: both return a ``Lookup`` whose ``found``
    flag is false.
    """

    def __init__(self, values: Optional[Iterable[T]] = None):
        """
        Initialize stack.

        Args:
            values: Optional initial elements, pushed in iteration order
        """
        self._data: List[T] = []
        # Bumped on every structural change; live traversals compare against it
        self._version = 0
        if values is not None:
            for value in values:
                self.push(value)

    def push(self, value: T) -> None:
        """Append ``value`` as the new top."""
        self._data.append(value)
        self._version += 1

    def pop(self) -> Lookup[T]:
        """
        Remove and return the top element.

        Returns:
            Lookup with the removed element, or a not-found Lookup if empty
        """
        if not self._data:
            return Lookup.missing()
        self._version += 1
        return Lookup.of(self._data.pop())

    def peek(self) -> Lookup[T]:
        """Return the top element without removing it."""
        if not self._data:
            return Lookup.missing()
        return Lookup.of(self._data[-1])

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def all(self) -> Iterator[T]:
        """
        Lazily traverse the stack from bottom to top.

        Each call returns a fresh, independent generator. The consumer may
        stop at any point; nothing past the last requested element is read.

        Yields:
            Elements in push order (oldest first)

        Raises:
            StackMutatedError: If the stack changes while the traversal is live
        """
        version = self._version
        for index in range(len(self._data)):
            if self._version != version:
                raise StackMutatedError("stack changed size during iteration")
            yield self._data[index]

    def __iter__(self) -> Iterator[T]:
        return self.all()

    def iter(self) -> "StackIterator[T]":
        """Return an explicit pull-style cursor positioned at the bottom."""
        return StackIterator(self)

    def each(self, visitor: Visitor[T]) -> bool:
        """
        Push-style traversal: call ``visitor`` once per element.

        Args:
            visitor: Called bottom to top; a falsy return value stops the walk

        Returns:
            True if every element was visited, False if the visitor stopped early
        """
        for value in self.all():
            if not visitor(value):
                return False
        return True

    def drain(self) -> Iterator[T]:
        """
        Consuming traversal from bottom to top.

        Yielded elements are removed from the stack. Stopping early leaves the
        elements that were not yet yielded in place.

        Yields:
            Elements in push order, each removed as it is produced
        """
        taken = 0
        try:
            while taken < len(self._data):
                value = self._data[taken]
                taken += 1
                yield value
        finally:
            if taken:
                del self._data[:taken]
                self._version += 1
                logger.debug(f"Drained {taken} element(s), {len(self._data)} left")


class StackIterator(Generic[T]):
    """
    Index cursor over a stack.

    Single Responsibility: Track one position in one stack. Independent
    instances over the same stack never affect each other.
    """

    def __init__(self, stack: Stack[T]):
        self._stack = stack
        self._version = stack._version
        self.index = 0
        self._closed = False

    def __iter__(self) -> "StackIterator[T]":
        return self

    def __next__(self) -> T:
        if self._closed:
            raise StopIteration
        if self._stack._version != self._version:
            raise StackMutatedError("stack changed size during iteration")
        if self.index >= len(self._stack._data):
            raise StopIteration
        value = self._stack._data[self.index]
        self.index += 1
        return value

    def next(self) -> Lookup[T]:
        """Return the next element, or a not-found Lookup once exhausted."""
        try:
            return Lookup.of(self.__next__())
        except StopIteration:
            return Lookup.missing()

    def has_next(self) -> bool:
        if self._closed:
            return False
        if self._stack._version != self._version:
            raise StackMutatedError("stack changed size during iteration")
        return self.index < len(self._stack._data)

    def close(self) -> None:
        """Stop the cursor; further steps report exhaustion."""
        self._closed = True
