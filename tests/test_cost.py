"""
Tests for the ShapeCost flop model
"""

import pytest

import flopchain as fc
from flopchain import ShapeCost


def test_construct():
    """A new matrix has zero cost"""
    A = fc.construct(2, 10)

    assert A.rows == 2
    assert A.cols == 10
    assert A.cost == 0
    assert A.flops == 0
    assert A.add_ops == 0
    assert A.mult_ops == 0
    assert A == ShapeCost(2, 10)


def test_add():
    """Elementwise add costs one flop per cell"""
    C = ShapeCost(2, 10) + ShapeCost(2, 10)

    assert C.shape == (2, 10)
    assert C.cost == 20
    assert C.add_ops == 20
    assert C.mult_ops == 0


def test_multiply():
    """rows1 * cols1 * (2 * cols2 - 1) flops per product"""
    C = ShapeCost(2, 5) * ShapeCost(5, 10)

    assert C.shape == (2, 10)
    assert C.cost == 190
    assert C.add_ops == 90
    assert C.mult_ops == 100


def test_matmul_operator_matches_multiply():
    A = ShapeCost(2, 5)
    B = ShapeCost(5, 10)
    assert A @ B == A * B == A.multiply(B)


def test_add_dimension_mismatch():
    A = ShapeCost(2, 10)
    B = ShapeCost(10, 2)

    with pytest.raises(fc.DimensionMismatch) as info:
        A + B

    assert info.value.operation == "add"
    assert info.value.left == (2, 10)
    assert info.value.right == (10, 2)
    assert "2 x 10 vs 10 x 2" in str(info.value)
    assert A == ShapeCost(2, 10)
    assert B == ShapeCost(10, 2)


def test_multiply_dimension_mismatch():
    with pytest.raises(fc.DimensionMismatch) as info:
        ShapeCost(2, 5) * ShapeCost(4, 10)

    assert info.value.operation == "multiply"
    assert info.value.left == (2, 5)
    assert info.value.right == (4, 10)


def test_dimension_mismatch_is_value_error():
    with pytest.raises(ValueError):
        ShapeCost(2, 5) * ShapeCost(4, 10)


@pytest.mark.parametrize("left,right,ok", [
    ((2, 3), (2, 3), True),
    ((2, 3), (3, 2), False),
    ((2, 3), (2, 4), False),
    ((1, 3), (2, 3), False),
])
def test_add_fails_iff_shapes_differ(left, right, ok):
    result = fc.add(ShapeCost(*left), ShapeCost(*right))
    assert isinstance(result, ShapeCost) == ok
    assert isinstance(result, fc.DimensionMismatch) != ok


@pytest.mark.parametrize("left,right,ok", [
    ((2, 3), (3, 7), True),
    ((2, 3), (2, 3), False),
    ((4, 4), (4, 4), True),
    ((2, 3), (4, 3), False),
])
def test_multiply_fails_iff_inner_dims_differ(left, right, ok):
    result = fc.multiply(ShapeCost(*left), ShapeCost(*right))
    assert isinstance(result, ShapeCost) == ok
    assert isinstance(result, fc.DimensionMismatch) != ok


def test_equality_includes_cost():
    """Same shape with different cost is not equal"""
    summed = ShapeCost(2, 10) + ShapeCost(2, 10)

    assert summed != ShapeCost(2, 10)
    assert summed == ShapeCost(2, 10, 20)
    # add_ops does not take part in equality
    assert ShapeCost(2, 10, 20) == summed
    assert len({summed, ShapeCost(2, 10, 20)}) == 1


def test_equality_is_transitive():
    a = ShapeCost(3, 3) * ShapeCost(3, 3)
    b = ShapeCost(3, 3, 45)
    c = ShapeCost(3, 3, 45, add_ops=18)
    assert a == b and b == c and a == c


def test_non_shapecost_operand():
    with pytest.raises(TypeError):
        ShapeCost(2, 2) + 1
    with pytest.raises(TypeError):
        ShapeCost(2, 2) * "x"


def test_display():
    C = ShapeCost(2, 5) * ShapeCost(5, 10)

    assert str(C) == "<dims: 2 x 10, flops: 190>"
    assert C.describe() == "<2 x 10, adds: 90, mults: 100, flops: 190>"
    assert repr(C) == "ShapeCost(rows=2, cols=10, cost=190)"


def test_accumulator_matches_fold():
    """Rebinding an accumulator equals a left-to-right fold"""
    operands = [ShapeCost(2, 5), ShapeCost(5, 10), ShapeCost(10, 3), ShapeCost(3, 8)]

    acc = operands[0]
    for operand in operands[1:]:
        acc = acc * operand

    assert acc == fc.product_all(operands)
    assert acc == ((operands[0] * operands[1]) * operands[2]) * operands[3]

    terms = [ShapeCost(4, 4)] * 3
    total = terms[0]
    for term in terms[1:]:
        total += term
    assert total == fc.sum_all(terms)
    assert total.cost == 32


def test_fold_needs_operands():
    with pytest.raises(fc.InvalidArgument):
        fc.sum_all([])
    with pytest.raises(fc.InvalidArgument):
        fc.product_all([])


def test_single_operand_fold():
    assert fc.product_all([ShapeCost(3, 4)]) == ShapeCost(3, 4)


def test_mixed_expression():
    """Grouping changes cost, not shape"""
    A = ShapeCost(2, 5)
    B = ShapeCost(5, 10)
    C = ShapeCost(10, 3)
    D = ShapeCost(3, 8)
    E = ShapeCost(2, 7)
    F = ShapeCost(7, 8)

    G = A * B * C * D + E * F
    G2 = (A * (B * C)) * D + E * F

    assert G.shape == (2, 8)
    assert G2.shape == (2, 8)
    assert G.cost == 606
    assert G2.cost == 616


def test_zero_width_product():
    """An empty result costs nothing and never goes negative"""
    C = ShapeCost(2, 5) * ShapeCost(5, 0)

    assert C.shape == (2, 0)
    assert C.cost == 0
    assert C.add_ops == 0
    assert fc.optimal_order([(2, 5), (5, 0)]) == ("(M1 * M2)", 0)


def test_cost_never_decreases():
    A = ShapeCost(3, 3, 7)
    B = ShapeCost(3, 3, 11)
    assert (A + B).cost >= A.cost + B.cost
    assert (A * B).cost >= A.cost + B.cost


def test_immutable():
    A = ShapeCost(2, 2)
    with pytest.raises(AttributeError):
        A.cost = 5
