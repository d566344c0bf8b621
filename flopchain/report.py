# flopchain/report.py
"""
Printed comparison of optimal and left-to-right evaluation for a chain.
"""

from typing import Optional, Sequence

from .chain import ChainPlan, evaluate_order, plan_chain
from .config import ChainConfig


def format_chain(plan: ChainPlan, shapes: Sequence[Sequence[int]]) -> str:
    """One line per matrix, e.g. ``A: 40 x 20``."""
    return "\n".join(f"   {name}: {rows} x {cols}"
                     for name, (rows, cols) in zip(plan.names, shapes))


def print_chain_report(shapes: Sequence[Sequence[int]],
                       names: Optional[Sequence[str]] = None,
                       config: Optional[ChainConfig] = None) -> ChainPlan:
    """Print the optimal order for a chain next to the naive order."""
    plan = plan_chain(shapes, names, config)

    print("⛓️  Matrix Chain Order")
    print("=" * 55)
    if plan.tree is None:
        print("   (empty chain)")
        return plan

    print(format_chain(plan, shapes))

    result = evaluate_order(plan.tree, shapes)
    print(f"\n🧮 Flop counts:")
    print(f"   Optimal {plan.expression}: {plan.cost:,}")
    print(f"   Left-to-right: {plan.naive_cost:,}")
    if plan.cost > 0:
        print(f"   Theoretical speedup: {plan.naive_cost / plan.cost:.2f}x")
    print(f"   Result: {result}")

    return plan
