"""Printing helpers for stacks and their pairs."""

from typing import Callable

from .pairwise import pairwise
from .stack import Stack


def print_stack(stack: Stack, out: Callable[[str], None] = print) -> int:
    """
    Print every element of ``stack`` on its own line, bottom to top.

    Args:
        stack: Stack to print
        out: Line sink

    Returns:
        Number of lines printed
    """
    count = 0
    for value in stack:
        out(f"{value}")
        count += 1
    return count


def print_pairs(stack: Stack, out: Callable[[str], None] = print) -> int:
    """
    Print every adjacent pair of ``stack`` as ``"<current> <next>"``.

    Args:
        stack: Stack to print
        out: Line sink

    Returns:
        Number of pairs printed
    """
    count = 0
    with pairwise(stack.all) as pairs:
        for current, following in pairs:
            out(f"{current} {following}")
            count += 1
    return count
