"""Stack Iterators - Lazy, stoppable traversals over a generic stack."""

__version__ = "0.1.0"

from .cursor import Cursor, pull
from .models import Lookup, PairwiseState
from .pairwise import PairwiseIterator, pairwise
from .stack import EmptyStackError, Stack, StackIterator, StackMutatedError

__all__ = [
    # Models
    "Lookup",
    "PairwiseState",
    # Stack
    "Stack",
    "StackIterator",
    "EmptyStackError",
    "StackMutatedError",
    # Cursors
    "Cursor",
    "pull",
    # Pairwise
    "PairwiseIterator",
    "pairwise",
]
