"""Data models shared by the stack and its iterator adapters."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class EmptyStackError(LookupError):
    """Raised when a missing value is unwrapped."""


class PairwiseState(str, Enum):
    """Pairwise adapter state enumeration."""

    INIT = "init"
    ADVANCING = "advancing"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """
    Result of an operation that may find nothing.

    Carries an explicit ``found`` flag next to the value, so a stored ``None``
    (or ``0``, or ``""``) is never confused with an empty stack. Unpacks like
    a 2-tuple::

        value, found = stack.pop()
    """

    value: Optional[T] = None
    found: bool = False

    @classmethod
    def of(cls, value: T) -> "Lookup[T]":
        """Create a found result."""
        return cls(value, True)

    @classmethod
    def missing(cls) -> "Lookup[T]":
        """Create a not-found result."""
        return cls(None, False)

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.found

    def __bool__(self) -> bool:
        return self.found

    def __eq__(self, other: object) -> bool:
        # Compares equal to the (value, found) pair it unpacks to
        if isinstance(other, Lookup):
            return (self.value, self.found) == (other.value, other.found)
        if isinstance(other, tuple) and len(other) == 2:
            return (self.value, self.found) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.found))

    def unwrap(self) -> T:
        """
        Return the value, raising if nothing was found.

        Raises:
            EmptyStackError: If the lookup found nothing
        """
        if not self.found:
            raise EmptyStackError("lookup found no value")
        return self.value

    def value_or(self, default: T) -> T:
        """Return the value, or ``default`` if nothing was found."""
        return self.value if self.found else default


@dataclass
class DemoSummary:
    """Statistics collected by one demo run."""

    element_kind: str = "int"
    pushed: int = 0
    traversed: int = 0
    pairs: int = 0
    elapsed_time: float = 0.0
