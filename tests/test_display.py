"""Tests for display module."""

from stack_iterators.display import print_pairs, print_stack
from stack_iterators.stack import Stack


def test_print_stack(capsys):
    """Test printing each element bottom to top."""
    count = print_stack(Stack(range(5)))

    assert count == 5
    assert capsys.readouterr().out.splitlines() == ["0", "1", "2", "3", "4"]


def test_print_pairs(capsys):
    """Test printing adjacent pairs."""
    count = print_pairs(Stack(range(5)))

    assert count == 4
    assert capsys.readouterr().out.splitlines() == ["0 1", "1 2", "2 3", "3 4"]


def test_print_to_custom_sink():
    """Test sending output to a custom line sink."""
    lines = []

    print_stack(Stack(["a"]), out=lines.append)
    print_pairs(Stack(["a"]), out=lines.append)

    assert lines == ["a"]
