"""
Example 01: Push-style Iteration

A for loop over the stack is driven by the stack's own generator.
Stack.each() shows the callback form: the producer calls you, and you
return False to stop.
"""

from stack_iterators import Stack


if __name__ == "__main__":
    stack = Stack()
    for i in range(5):
        stack.push(i)

    print("for loop (bottom to top):")
    for value in stack:
        print(f"  {value}")

    print("\neach() with a visitor that stops after 2:")

    def visit(value):
        print(f"  visited {value}")
        return value < 2

    finished = stack.each(visit)
    print(f"  finished = {finished}")

    print("\n✅ The producer drives the loop; the consumer only says 'stop'!")
