"""
Example 08: Collecting Traversals

Traversals are lazy, but sometimes you want the whole thing at once.
The collect helpers turn a stack or its pairs into pandas and pyarrow objects.
"""

from stack_iterators import Stack
from stack_iterators.collect import pairs_to_dict, pairs_to_frame, pairs_to_table, to_series
from stack_iterators.pairwise import pairwise


if __name__ == "__main__":
    stack = Stack(["red", "green", "blue", "black"])

    print("As a pandas Series:")
    print(to_series(stack, name="colors"))

    print("\nPairs as a DataFrame:")
    print(pairs_to_frame(stack))

    print("\nPairs as a pyarrow Table:")
    print(pairs_to_table(stack.all))

    print("\nSuccessor map:")
    print(pairs_to_dict(pairwise(stack)))

    print("\n✅ Materialize only when you need to!")
