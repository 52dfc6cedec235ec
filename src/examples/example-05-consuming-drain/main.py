"""
Example 05: Borrowing vs Consuming

all() only looks at the stack, like iterating over &stack in Rust.
drain() takes the elements out as it goes, like iterating a Stack by value.
"""

from stack_iterators import Stack


if __name__ == "__main__":
    stack = Stack(range(5))

    print(f"Borrowing traversal: {list(stack.all())}")
    print(f"Stack still holds {len(stack)} elements")

    print("\nDraining until we reach 2:")
    for value in stack.drain():
        print(f"  took {value}")
        if value == 2:
            break

    print(f"\nLeft on the stack: {list(stack.all())}")
    print("\n✅ drain() removes only what it yielded!")
