# examples/chain_order_demo.py
"""
Example: Matrix Chain Order

Shows how the grouping of a matrix chain changes the flop count, first by
evaluating both groupings of A * B * C by hand, then by asking the optimizer.
"""

import flopchain as fc

def matrix_chain_order_demo():
    """Compare hand-picked groupings against the optimizer."""
    A = fc.ShapeCost(2, 5)
    B = fc.ShapeCost(5, 3)
    C = fc.ShapeCost(3, 10)

    print(f"(A * B) * C: {(A * B) * C}")
    print(f"A * (B * C): {A * (B * C)}")

    print()
    fc.print_chain_report([A.shape, B.shape, C.shape], ["A", "B", "C"])

    print()
    fc.print_chain_report([(40, 20), (20, 30), (30, 10), (10, 30)], ["A", "B", "C", "D"])

if __name__ == "__main__":
    matrix_chain_order_demo()
