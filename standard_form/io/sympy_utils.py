"""SymPy bridge: Expression <-> SymPy expressions over non-commutative X, Y, Z.

Provides:
  • SympyUtils.symbols(): the three non-commutative generator symbols.
  • SympyUtils.to_sympy(expression): sum of coefficient * ordered generator powers.
  • SympyUtils.from_sympy(expr): expand and read back a polynomial in X, Y, Z with integer coefficients.

Module-level functions proxy to SympyUtils methods for compatibility.
"""

from __future__ import annotations
from typing import Dict, List, Tuple
import sympy as sp

from standard_form.algebra.expression import Expression
from standard_form.algebra.generators import GENERATORS
from standard_form.algebra.monomial import compact
from standard_form.errors import InvalidExpression

_SYMBOLS: Dict[str, sp.Symbol] = {g: sp.Symbol(g, commutative=False) for g in GENERATORS}


class SympyUtils:
	"""Utility namespace for SymPy conversion."""

	@staticmethod
	def symbols() -> Tuple[sp.Symbol, ...]:
		"""Return the generator symbols (X, Y, Z), all non-commutative."""
		return tuple(_SYMBOLS[g] for g in GENERATORS)

	@staticmethod
	def to_sympy(expression: Expression) -> sp.Expr:
		"""Return the SymPy sum of the non-zero terms, generator order preserved."""
		total = sp.Integer(0)
		for m, c in expression.sorted_items():
			if c == 0:
				continue
			prod = sp.Integer(1)
			for g, e in m:
				prod = prod * _SYMBOLS[g] ** e
			total = total + sp.Integer(c) * prod
		return total

	@staticmethod
	def _read_factor(f: sp.Expr) -> Tuple[str, int]:
		"""Return (generator, exponent) for a generator symbol or a positive integer power of one."""
		if isinstance(f, sp.Symbol):
			base, exp = f, sp.Integer(1)
		elif isinstance(f, sp.Pow):
			base, exp = f.base, f.exp
		else:
			raise InvalidExpression(f"unsupported factor {f}")
		if not isinstance(base, sp.Symbol) or base.name not in _SYMBOLS:
			raise InvalidExpression(f"unknown generator {base}")
		if base.is_commutative:
			raise InvalidExpression(f"generator {base} must be non-commutative")
		if not (exp.is_Integer and exp > 0):
			raise InvalidExpression(f"exponent of {base} must be a positive integer, got {exp}")
		return base.name, int(exp)

	@staticmethod
	def from_sympy(expr: sp.Expr) -> Expression:
		"""
		Expand `expr` and return it as an Expression. Coefficients must be
		integers and the only symbols the non-commutative X, Y, Z; anything
		else raises InvalidExpression.
		"""
		e = sp.expand(sp.sympify(expr))
		out = Expression()
		for term in sp.Add.make_args(e):
			if term == 0:
				continue
			c_part, nc_part = term.args_cnc()
			coeff = sp.Mul(*c_part)
			if not coeff.is_Integer:
				raise InvalidExpression(f"coefficient {coeff} of {term} is not an integer")
			pairs: List[Tuple[str, int]] = []
			for f in nc_part:
				pairs.append(SympyUtils._read_factor(f))
			out.add_term(compact(pairs), int(coeff))
		return out


def symbols() -> Tuple[sp.Symbol, ...]:
	"""Proxy to SympyUtils.symbols."""
	return SympyUtils.symbols()

def to_sympy(expression: Expression) -> sp.Expr:
	"""Proxy to SympyUtils.to_sympy."""
	return SympyUtils.to_sympy(expression)

def from_sympy(expr: sp.Expr) -> Expression:
	"""Proxy to SympyUtils.from_sympy."""
	return SympyUtils.from_sympy(expr)
