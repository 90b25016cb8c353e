"""
Top-level re-exports for the standard-form package.

Expressions over the non-commuting generators X, Y, Z with
XY + YX = Z, YZ + ZY = X, XZ + ZX = Y are reduced to sums of standard
monomials X^i Y^j Z^k.
"""

from .errors import InvalidExpression, RelationTableError, RewriteLimitExceeded
from .algebra import Expression, Monomial, compact, decode
from .io.parser import ExpressionParser, ParseResult, parse, preprocess, split
from .io.renderer import render
from .rewrite import RewriteConfig, RewriteEngine, RelationTable, DEFAULT_RELATIONS, first_violation
from .standardizer import Standardizer, standardize

__all__ = [
	"InvalidExpression", "RelationTableError", "RewriteLimitExceeded",
	"Expression", "Monomial", "compact", "decode",
	"ExpressionParser", "ParseResult", "parse", "preprocess", "split",
	"render",
	"RewriteConfig", "RewriteEngine", "RelationTable", "DEFAULT_RELATIONS", "first_violation",
	"Standardizer", "standardize",
]
