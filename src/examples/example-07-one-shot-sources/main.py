"""
Example 07: Pairing a One-shot Generator

A generator can only be walked once, so two cursors cannot be opened on
it. pairwise() detects that and splits it with itertools.tee instead.
"""

from stack_iterators import pairwise


if __name__ == "__main__":
    squares = (x**2 for x in range(5))

    print("Pairs of a generator expression:")
    for pair in pairwise(squares):
        print(f"  {pair}")

    print("\n✅ tee() gives the lookahead cursor its own view of the values!")
