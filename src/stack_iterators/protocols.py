"""Protocol definitions for dependency inversion."""

from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)


class Visitor(Protocol[T_contra]):
    """Protocol for push-style traversal callbacks."""

    def __call__(self, value: T_contra) -> object:
        """Handle one element; return a falsy value to stop."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
