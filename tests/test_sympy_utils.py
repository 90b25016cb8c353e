import pytest
import sympy as sp

from standard_form.algebra.expression import Expression
from standard_form.algebra.monomial import ONE
from standard_form.errors import InvalidExpression
from standard_form.io.parser import parse
from standard_form.io.sympy_utils import from_sympy, symbols, to_sympy
from standard_form.standardizer import Standardizer

X, Y, Z = symbols()


def test_symbols_are_non_commutative():
	assert not X.is_commutative
	assert X * Y != Y * X


def test_to_sympy_preserves_generator_order():
	assert to_sympy(parse("-XY+Z")) == -X * Y + Z
	assert to_sympy(parse("YX")) == Y * X
	assert to_sympy(parse("X^2Y-3Z")) == X**2 * Y - 3 * Z


def test_to_sympy_skips_zero_terms():
	assert to_sympy(parse("XY-XY")) == 0


def test_from_sympy_expands_products():
	assert from_sympy(2 * X * Y - Y * X) == parse("2XY-YX")
	assert from_sympy((X + Y) ** 2) == parse("X^2+XY+YX+Y^2")


def test_from_sympy_constant_term():
	e = from_sympy(X + 3)
	assert e.coefficient_of(ONE) == 3


def test_round_trip_on_standard_expression():
	e = Standardizer().standardize_expression("ZYX+YZX")
	assert from_sympy(to_sympy(e)) == e.pruned()


@pytest.mark.parametrize("bad", [
	sp.Symbol("a") * X,
	X / 2,
	X ** -1,
	sp.Symbol("W", commutative=False) * X,
	sp.sin(X),
])
def test_from_sympy_rejects_outside_the_algebra(bad):
	with pytest.raises(InvalidExpression):
		from_sympy(bad)


def test_standardize_sympy():
	std = Standardizer()
	assert std.standardize_sympy((X + Y) ** 2) == X**2 + Y**2 + Z
	assert std.standardize_sympy(Y * Z * X) == X * Y * Z + Y**2 - Z**2
