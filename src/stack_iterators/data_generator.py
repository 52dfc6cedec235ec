"""Generate demo stack elements using the Faker library."""

import logging
from typing import Any, Callable, Dict, Generator

from faker import Faker

from .stack import Stack

logger = logging.getLogger(__name__)

ELEMENT_KINDS = ("int", "name", "word")


class ElementGenerator:
    """Generate elements of one kind for filling demo stacks."""

    def __init__(self, kind: str = "int", seed: int = 42):
        """Initialize the element generator.

        Args:
            kind: Element kind, one of ``int``, ``name`` or ``word``
            seed: Random seed for reproducibility
        """
        if kind not in ELEMENT_KINDS:
            raise ValueError(
                f"Unknown element kind: {kind}. Valid options: {', '.join(ELEMENT_KINDS)}"
            )
        self.kind = kind
        self.faker = Faker()
        self.faker.seed_instance(seed)

    def _factories(self) -> Dict[str, Callable[[int], Any]]:
        return {
            "int": lambda i: i,
            "name": lambda i: self.faker.name(),
            "word": lambda i: self.faker.word(),
        }

    def generate(self, count: int) -> Generator[Any, None, None]:
        """Lazily generate ``count`` elements.

        ``int`` elements are ``0..count-1`` so demo output is predictable.

        Args:
            count: Number of elements to generate

        Yields:
            One element at a time
        """
        if count < 0:
            raise ValueError("count must not be negative")
        factory = self._factories()[self.kind]
        for i in range(count):
            yield factory(i)

    def fill(self, stack: Stack, count: int) -> Stack:
        """Push ``count`` generated elements onto ``stack``.

        Args:
            stack: Stack to fill
            count: Number of elements to push

        Returns:
            The same stack, for chaining
        """
        for value in self.generate(count):
            stack.push(value)
        logger.info(f"Pushed {count:,} {self.kind} element(s), stack size is {len(stack):,}")
        return stack

    def build_stack(self, count: int) -> Stack:
        """Create a new stack holding ``count`` generated elements."""
        return self.fill(Stack(), count)
