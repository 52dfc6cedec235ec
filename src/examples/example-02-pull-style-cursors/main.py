"""
Example 02: Pull-style Cursors

A cursor hands control to the consumer: you ask for the next value when
you want it. This is the shape of Rust's Iterator::next() returning
Option<T>; here next() returns a Lookup with a found flag.
"""

from stack_iterators import Stack, pull


if __name__ == "__main__":
    stack = Stack(["a", "b", "c"])

    print("Explicit index cursor (stack.iter()):")
    cursor = stack.iter()
    while True:
        value, found = cursor.next()
        if not found:
            break
        print(f"  index {cursor.index - 1}: {value}")

    print("\nTwo independent cursors over the same stack:")
    first = pull(stack)
    second = pull(stack)
    second.next()
    print(f"  first.next()  = {first.next()}")
    print(f"  second.next() = {second.next()}")

    print("\n✅ Each cursor keeps its own position!")
