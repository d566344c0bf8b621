# flopchain/__init__.py
"""
flopchain

Flop accounting for matrix expressions and optimal matrix chain ordering.
"""

from .errors import FlopChainError, DimensionMismatch, InvalidArgument, NoInput
from .config import ChainConfig, DEFAULT_CONFIG
from .cost import ShapeCost, construct, add, multiply, sum_all, product_all
from .chain import (
    ChainPlan,
    chain_tables,
    evaluate_order,
    naive_cost,
    optimal_order,
    order_tree,
    plan_chain,
    render_order,
    shapes_from_dims,
    validate_chain,
)
from .report import print_chain_report

# Version information
__version__ = "1.0.0"

# Public API
__all__ = [
    "FlopChainError",
    "DimensionMismatch",
    "InvalidArgument",
    "NoInput",
    "ChainConfig",
    "DEFAULT_CONFIG",
    "ShapeCost",
    "construct",
    "add",
    "multiply",
    "sum_all",
    "product_all",
    "ChainPlan",
    "chain_tables",
    "evaluate_order",
    "naive_cost",
    "optimal_order",
    "order_tree",
    "plan_chain",
    "render_order",
    "shapes_from_dims",
    "validate_chain",
    "print_chain_report",
    "__version__",
]

def version():
    """Return version string."""
    return __version__
