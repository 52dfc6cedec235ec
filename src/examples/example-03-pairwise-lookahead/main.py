"""
Example 03: Pairwise with a Lookahead Cursor

Open two cursors over the same stack, advance the second one once,
then draw from both in lockstep. Nothing is buffered.
"""

from stack_iterators import Stack, pairwise


if __name__ == "__main__":
    stack = Stack(range(5))

    print("Adjacent pairs:")
    for current, following in pairwise(stack.all):
        print(f"  {current} {following}")

    stack.pop()
    print("\nAfter pop():")
    print(f"  {list(pairwise(stack))}")

    print("\nShort stacks give no pairs:")
    print(f"  {list(pairwise(Stack([1])))}")

    print("\n✅ Output: (0,1) (1,2) (2,3) (3,4), then (0,1) (1,2) (2,3)")
