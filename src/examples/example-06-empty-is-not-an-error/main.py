"""
Example 06: Empty is not an Error

pop() and peek() never raise on an empty stack. They return a Lookup
with a found flag, so a stored None is never confused with 'nothing'.
"""

from stack_iterators import EmptyStackError, Stack


if __name__ == "__main__":
    stack = Stack()
    stack.push(None)

    value, found = stack.pop()
    print(f"pop() -> value={value!r}, found={found}")

    value, found = stack.pop()
    print(f"pop() -> value={value!r}, found={found}")

    print(f"\nvalue_or(-1) on empty: {stack.peek().value_or(-1)}")

    try:
        stack.peek().unwrap()
    except EmptyStackError as e:
        print(f"unwrap() on empty raised: {e}")

    print("\n✅ Check the flag, not the value!")
