# flopchain/chain.py
"""
Matrix chain order optimization.

Given an ordered chain of matrix shapes, find the parenthesization that
minimizes the total flop count under the ShapeCost cost model and render it
as a fully parenthesized expression such as ``((A * (B * C)) * D)``.

The search is the classic interval dynamic program: ``O(n^3)`` time and two
``n x n`` tables, built fresh for each call.
"""

import warnings
from collections import Counter
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import ChainConfig, DEFAULT_CONFIG
from .cost import ShapeCost, multiply_flops, product_all
from .errors import InvalidArgument, NoInput

Shape = Tuple[int, int]
# A leaf is a chain index, an inner node is a (left, right) pair
OrderTree = Union[int, Tuple["OrderTree", "OrderTree"]]

# =============================================================================
# Input validation
# =============================================================================

def validate_chain(shapes: Sequence[Sequence[int]]) -> List[Shape]:
    """
    Normalize a chain to a list of ``(rows, cols)`` tuples.

    Raises:
        InvalidArgument: If an entry is not a pair or adjacent shapes do not
            line up (``cols[i] != rows[i + 1]``)
    """
    chain = []
    for index, shape in enumerate(shapes):
        try:
            rows, cols = shape
            dims = (int(rows), int(cols))
        except (TypeError, ValueError):
            raise InvalidArgument(f"Shape {index} must be a (rows, cols) pair, got {shape!r}")
        if dims != (rows, cols):
            raise InvalidArgument(f"Shape {index} must have integer dimensions, got {shape!r}")
        chain.append(dims)

    for index, (left, right) in enumerate(zip(chain, chain[1:])):
        if left[1] != right[0]:
            raise InvalidArgument(
                f"Chain is broken between matrix {index} and {index + 1}: "
                f"{left[0]} x {left[1]} cannot be multiplied by {right[0]} x {right[1]}"
            )

    return chain


def shapes_from_dims(dims: Sequence[int]) -> List[Shape]:
    """Expand a dimension vector ``p`` into shapes ``(p[i], p[i + 1])``."""
    dims = [int(d) for d in dims]
    return list(zip(dims, dims[1:]))


def _labels(n: int, names: Optional[Sequence[str]], config: ChainConfig) -> List[str]:
    if names is None or len(names) == 0:
        return [config.label(i) for i in range(n)]

    if len(names) != n:
        raise InvalidArgument(f"Got {len(names)} names for {n} matrices")

    labels = [str(name) for name in names]
    if config.warn_duplicate_names:
        repeated = sorted(name for name, count in Counter(labels).items() if count > 1)
        if repeated:
            warnings.warn(
                f"Duplicate matrix names {repeated}; the rendered order will be ambiguous",
                RuntimeWarning,
                stacklevel=3,
            )
    return labels

# =============================================================================
# Dynamic program
# =============================================================================

def chain_tables(chain: Sequence[Shape]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Fill the cost and split tables for a validated chain.

    Returns:
        Tuple of (min_cost, split) where ``min_cost[i, j]`` is the cheapest way
        to multiply matrices ``i..j`` and ``split[i, j]`` is the ``k`` of the
        best grouping ``(i..k) * (k+1..j)``. Only ``i <= j`` is populated.
    """
    n = len(chain)
    # object dtype keeps Python ints, so costs never wrap or overflow
    min_cost = np.zeros((n, n), dtype=object)
    split = np.zeros((n, n), dtype=np.int64)

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best_cost = None
            best_k = i
            for k in range(i, j):
                q = (min_cost[i, k] + min_cost[k + 1, j]
                     + multiply_flops(chain[i][0], chain[k][1], chain[j][1]))
                # strict comparison keeps the smallest k on ties
                if best_cost is None or q < best_cost:
                    best_cost = q
                    best_k = k
            min_cost[i, j] = best_cost
            split[i, j] = best_k

    return min_cost, split


def render_order(split: np.ndarray, i: int, j: int,
                 label: Callable[[int], str], operator: str = "*") -> str:
    """Render the optimal grouping of matrices ``i..j`` from the split table."""
    if i == j:
        return label(i)
    k = int(split[i, j])
    left = render_order(split, i, k, label, operator)
    right = render_order(split, k + 1, j, label, operator)
    return f"({left} {operator} {right})"


def order_tree(split: np.ndarray, i: int, j: int) -> OrderTree:
    """Nested-tuple form of the optimal grouping of matrices ``i..j``."""
    if i == j:
        return i
    k = int(split[i, j])
    return (order_tree(split, i, k), order_tree(split, k + 1, j))

# =============================================================================
# Verification helpers
# =============================================================================

def evaluate_order(tree: OrderTree, shapes: Sequence[Sequence[int]]) -> ShapeCost:
    """Multiply the chain in the grouping given by ``tree`` and return the result."""
    matrices = [ShapeCost(rows, cols) for rows, cols in validate_chain(shapes)]

    def evaluate(node):
        if isinstance(node, tuple):
            left, right = node
            return evaluate(left) * evaluate(right)
        return matrices[node]

    return evaluate(tree)


def naive_cost(shapes: Sequence[Sequence[int]]) -> int:
    """Cost of multiplying the chain strictly left to right."""
    chain = validate_chain(shapes)
    if not chain:
        return 0
    return product_all(ShapeCost(rows, cols) for rows, cols in chain).cost

# =============================================================================
# Public API
# =============================================================================

@dataclass(frozen=True)
class ChainPlan:
    """Result of optimizing one chain"""
    expression: str
    cost: int
    tree: Optional[OrderTree]
    naive_cost: int
    names: Tuple[str, ...]

    @property
    def savings(self) -> int:
        """Flops saved relative to left-to-right evaluation."""
        return self.naive_cost - self.cost

    def as_tuple(self) -> Tuple[str, int]:
        return (self.expression, self.cost)


def plan_chain(shapes: Sequence[Sequence[int]],
               names: Optional[Sequence[str]] = None,
               config: Optional[ChainConfig] = None) -> ChainPlan:
    """
    Find the cheapest parenthesization of a matrix chain.

    Args:
        shapes: Ordered ``(rows, cols)`` pairs; adjacent inner dimensions must match
        names: Optional labels, one per matrix. Empty or None means ``M1``, ``M2``, ...
        config: Optimizer options, defaults to :data:`DEFAULT_CONFIG`

    Returns:
        ChainPlan with the rendered expression, its cost and the naive cost

    Raises:
        InvalidArgument: On malformed shapes, broken adjacency or a names/shapes
            length mismatch
        NoInput: On an empty chain when ``config.allow_empty`` is False
    """
    config = config or DEFAULT_CONFIG
    chain = validate_chain(shapes)
    n = len(chain)
    labels = _labels(n, names, config)

    if n == 0:
        if not config.allow_empty:
            raise NoInput()
        return ChainPlan("", 0, None, 0, ())

    min_cost, split = chain_tables(chain)
    return ChainPlan(
        expression=render_order(split, 0, n - 1, labels.__getitem__, config.operator),
        cost=int(min_cost[0, n - 1]),
        tree=order_tree(split, 0, n - 1),
        naive_cost=naive_cost(chain),
        names=tuple(labels),
    )


def optimal_order(shapes: Sequence[Sequence[int]],
                  names: Optional[Sequence[str]] = None,
                  config: Optional[ChainConfig] = None) -> Tuple[str, int]:
    """Return ``(expression, min_cost)`` for the cheapest parenthesization."""
    return plan_chain(shapes, names, config).as_tuple()
