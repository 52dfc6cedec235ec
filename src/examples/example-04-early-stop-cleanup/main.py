"""
Example 04: Early Stop and Cleanup

Stopping a pairwise iteration releases both underlying cursors,
whichever one you looked at last. The finally blocks below prove it.
"""

from stack_iterators import pairwise


class NoisySource:
    """Re-iterable that announces when each iterator is released."""

    def __init__(self, values):
        self.values = values

    def __iter__(self):
        print("  Opening cursor")
        try:
            yield from self.values
        finally:
            print("  Releasing cursor")


if __name__ == "__main__":
    print("Taking only the first pair:")
    with pairwise(NoisySource(range(10))) as pairs:
        for pair in pairs:
            print(f"  got {pair}")
            break

    print(f"\nState after the with block: {pairs.state.value}")
    print("\n✅ Both cursors released on early stop!")
