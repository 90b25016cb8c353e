"""
parse -> standardize -> render, plus the SymPy round trip.
"""

from __future__ import annotations
from typing import Optional, Union
import sympy as sp

from standard_form.algebra.expression import Expression
from standard_form.io.parser import ExpressionParser
from standard_form.io.sympy_utils import SympyUtils
from standard_form.rewrite.config import RewriteConfig
from standard_form.rewrite.engine import RewriteEngine
from standard_form.rewrite.relations import RelationTable

ExprLike = Union[Expression, str]


class Standardizer:
	"""Public facade for standard-form reduction."""

	def __init__(self, config: Optional[RewriteConfig] = None, relations: Optional[RelationTable] = None) -> None:
		"""Initialize the parser and the rewrite engine."""
		self.parser = ExpressionParser()
		self.engine = RewriteEngine(relations=relations, config=config)

	def parse(self, s: str) -> Expression:
		"""Parse text into a raw (not yet standard) Expression."""
		return self.parser.parse(s)

	def standardize_expression(self, e: ExprLike) -> Expression:
		"""Return the standard Expression equal to `e` (text is parsed first)."""
		if isinstance(e, str):
			e = self.parse(e)
		return self.engine.standardize(e)

	def standardize(self, s: str) -> str:
		"""Return the canonical text of the standard form of `s`."""
		return self.standardize_expression(s).render()

	def standardize_sympy(self, e: sp.Expr) -> sp.Expr:
		"""Standardize a SymPy expression over the non-commutative X, Y, Z."""
		return SympyUtils.to_sympy(self.engine.standardize(SympyUtils.from_sympy(e)))

	@property
	def state(self):
		"""RewriteState of the most recent standardization."""
		return self.engine.state


def standardize(s: str) -> str:
	"""Proxy to Standardizer().standardize."""
	return Standardizer().standardize(s)
