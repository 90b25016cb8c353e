"""
Lenient text parser for sums of generator monomials.

Pipeline:
  • preprocess(raw): upper-case, drop everything but letters, digits, '+', '-';
	prepend '+' when the text does not start with a sign
  • split(normalized): cut into signed-monomial tokens at every '+'/'-' after position 0
  • parse(raw): read each token's signed coefficient, compact the rest into a
	Monomial, and accumulate into an Expression

Out-of-grammar input (nothing left after filtering, a token without any
generator factor, an unknown letter) raises InvalidExpression. The
ExpressionParser.try_parse gate reports the same failures as a ParseResult.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from standard_form.algebra.expression import Expression
from standard_form.algebra.monomial import Monomial, compact, decode
from standard_form.errors import InvalidExpression


@dataclass(frozen=True)
class ParseResult:
	ok: bool
	expression: Optional[Expression]
	message: str


def preprocess(raw: str) -> str:
	"""Case-fold and filter `raw`; the result always starts with a sign when non-empty."""
	kept = []
	for ch in raw:
		if (ch.isascii() and ch.isalnum()) or ch == "+" or ch == "-":
			kept.append(ch.upper())
	term = "".join(kept)
	if term and term[0].isalnum():
		term = "+" + term
	return term


def split(normalized: str) -> List[str]:
	"""Slice into maximal runs each beginning with its sign character."""
	result: List[str] = []
	i_current = 0
	for i in range(1, len(normalized)):
		if normalized[i] == "+" or normalized[i] == "-":
			result.append(normalized[i_current:i])
			i_current = i
	result.append(normalized[i_current:])
	return result


def parse_token(token: str) -> Tuple[Monomial, int]:
	"""
	Return (monomial, signed coefficient) for one signed token such as "-3X2Y".

	The sign and the digits right after it go through decode(), so a missing
	or literal-zero coefficient reads as magnitude 1.
	"""
	sign = 1 if token[0] == "+" else -1
	_, occ, next_index = decode(token, 0)
	rest = token[next_index:]
	if rest == "":
		raise InvalidExpression(f"term {token!r} has no generator factor")
	return compact(rest), sign * occ


def parse(raw: str) -> Expression:
	"""Parse raw text into an Expression; raises InvalidExpression on out-of-grammar input."""
	if not isinstance(raw, str):
		raise InvalidExpression(f"expected a string, got {type(raw).__name__}")
	normalized = preprocess(raw)
	if normalized == "":
		raise InvalidExpression("empty expression")
	exp = Expression()
	for token in split(normalized):
		m, occ = parse_token(token)
		exp.add_term(m, occ)
	return exp


class ExpressionParser:
	"""Grammar gate returning ParseResult instead of raising."""

	def parse(self, text: str) -> Expression:
		return parse(text)

	def try_parse(self, text: str) -> ParseResult:
		"""Parse `text`; failures come back as ok=False with a parse_error:* code."""
		if not isinstance(text, str):
			print(f"try_parse: input is not a string (type={type(text).__name__})")
			return ParseResult(False, None, "parse_error:input_not_str")
		normalized = preprocess(text)
		if normalized == "":
			print("try_parse: input is empty after filtering")
			return ParseResult(False, None, "parse_error:empty")
		for ch in normalized:
			if ch.isalpha() and ch not in "XYZ":
				print(f"try_parse: unknown generator {ch!r}")
				return ParseResult(False, None, f"parse_error:unknown_generator:{ch}")
		try:
			exp = parse(text)
		except InvalidExpression as e:
			print(f"try_parse: {e}")
			return ParseResult(False, None, "parse_error:no_factor")
		return ParseResult(True, exp, "ok")
