# flopchain/cost.py
"""
Flop cost model for matrix expressions.

A ShapeCost carries only the shape of a matrix and the number of scalar
operations spent producing it. Combining two values with ``+`` or ``*``
checks the dimensions and returns a new value whose cost is the sum of both
operands' costs plus the cost of the operation itself. No matrix data is
ever stored or computed.
"""

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Tuple, Union

from .errors import DimensionMismatch, InvalidArgument

# =============================================================================
# Flop formulas
# =============================================================================

def add_flops(rows: int, cols: int) -> int:
    """Elementwise addition: one operation per cell."""
    return rows * cols


def multiply_flops(rows: int, inner: int, cols: int) -> int:
    """
    Cost of multiplying a ``rows x inner`` matrix by an ``inner x cols`` matrix.

    Charged as ``rows * inner * (2 * cols - 1)``: ``rows * inner * cols``
    multiplications plus ``rows * inner * (cols - 1)`` additions. A zero-width
    result (``cols == 0``) needs no additions and costs 0 rather than going
    negative.
    """
    return rows * inner * cols + multiply_adds(rows, inner, cols)


def multiply_adds(rows: int, inner: int, cols: int) -> int:
    """Addition share of :func:`multiply_flops`."""
    return rows * inner * max(cols - 1, 0)

# =============================================================================
# ShapeCost
# =============================================================================

@dataclass(frozen=True, repr=False)
class ShapeCost:
    """
    Immutable matrix shape plus the cumulative flops spent producing it.

    Equality compares rows, cols and cost. ``add_ops`` records how much of
    ``cost`` came from additions and does not take part in equality.
    """
    rows: int
    cols: int
    cost: int = 0
    add_ops: int = field(default=0, compare=False)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def flops(self) -> int:
        return self.cost

    @property
    def mult_ops(self) -> int:
        return self.cost - self.add_ops

    def add(self, other: "ShapeCost") -> "ShapeCost":
        """Elementwise sum; raises DimensionMismatch unless shapes are equal."""
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionMismatch("add", self.shape, other.shape)

        own = add_flops(self.rows, self.cols)
        return ShapeCost(
            self.rows,
            self.cols,
            self.cost + other.cost + own,
            self.add_ops + other.add_ops + own,
        )

    def multiply(self, other: "ShapeCost") -> "ShapeCost":
        """Matrix product; raises DimensionMismatch unless inner dimensions agree."""
        if self.cols != other.rows:
            raise DimensionMismatch("multiply", self.shape, other.shape)

        return ShapeCost(
            self.rows,
            other.cols,
            self.cost + other.cost + multiply_flops(self.rows, self.cols, other.cols),
            self.add_ops + other.add_ops + multiply_adds(self.rows, self.cols, other.cols),
        )

    def __add__(self, other):
        if not isinstance(other, ShapeCost):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if not isinstance(other, ShapeCost):
            return NotImplemented
        return self.multiply(other)

    __matmul__ = __mul__

    def __str__(self) -> str:
        return f"<dims: {self.rows} x {self.cols}, flops: {self.cost}>"

    def __repr__(self) -> str:
        return f"ShapeCost(rows={self.rows}, cols={self.cols}, cost={self.cost})"

    def describe(self) -> str:
        """Verbose form with the addition and multiplication counts split out."""
        return (f"<{self.rows} x {self.cols}, adds: {self.add_ops}, "
                f"mults: {self.mult_ops}, flops: {self.cost}>")

# =============================================================================
# Functional API
# =============================================================================

def construct(rows: int, cols: int) -> ShapeCost:
    """A fresh matrix of the given shape with zero cost."""
    return ShapeCost(rows, cols)


def add(a: ShapeCost, b: ShapeCost) -> Union[ShapeCost, DimensionMismatch]:
    """Like ``a + b`` but returns the DimensionMismatch instead of raising it."""
    try:
        return a.add(b)
    except DimensionMismatch as e:
        return e


def multiply(a: ShapeCost, b: ShapeCost) -> Union[ShapeCost, DimensionMismatch]:
    """Like ``a * b`` but returns the DimensionMismatch instead of raising it."""
    try:
        return a.multiply(b)
    except DimensionMismatch as e:
        return e


def _fold(op, values: Iterable[ShapeCost], name: str) -> ShapeCost:
    values = list(values)
    if not values:
        raise InvalidArgument(f"{name} needs at least one operand")
    return reduce(op, values)


def sum_all(values: Iterable[ShapeCost]) -> ShapeCost:
    """``values[0] + values[1] + ...`` evaluated left to right."""
    return _fold(ShapeCost.add, values, "sum_all")


def product_all(values: Iterable[ShapeCost]) -> ShapeCost:
    """``values[0] * values[1] * ...`` evaluated left to right."""
    return _fold(ShapeCost.multiply, values, "product_all")
