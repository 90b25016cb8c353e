"""
Monomial codec: raw generator/exponent text <-> Monomial keys.

A Monomial is an immutable ordered tuple of (generator, exponent) pairs. The
only way to build one is compact(), which merges adjacent equal generators,
so every key that reaches an Expression is already in merged form.

Provides:
  • decode(text, start)  -> (generator, exponent, next_index)
  • compact(source)      -> Monomial from raw text or a sequence of pairs
  • Monomial.is_standard(), .degree, .letters(), .text()
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from standard_form.algebra.generators import is_generator, rank
from standard_form.errors import InvalidExpression

Factor = Tuple[str, int]


def decode(text: str, start: int) -> Tuple[str, int, int]:
	"""
	Read one letter at `start` and the decimal digits after it as its exponent.

	No digits gives exponent 1. A digit run that evaluates to 0 also gives 1:
	"X0" reads the same as "X".
	"""
	ch = text[start]
	occ = 0
	i = start + 1
	while i < len(text) and "0" <= text[i] <= "9":
		occ = occ * 10 + int(text[i])
		i += 1
	if occ == 0:
		occ = 1
	return ch, occ, i


@dataclass(frozen=True)
class Monomial:
	"""Ordered product of generator powers; hashable structural key."""

	factors: Tuple[Factor, ...] = ()

	def __iter__(self) -> Iterator[Factor]:
		return iter(self.factors)

	def __len__(self) -> int:
		return len(self.factors)

	def __getitem__(self, i):
		return self.factors[i]

	def __str__(self) -> str:
		return self.text()

	def __repr__(self) -> str:
		return f"Monomial({self.text()!r})"

	@property
	def degree(self) -> int:
		"""Total generator count (sum of exponents)."""
		return sum(e for _, e in self.factors)

	def letters(self) -> Tuple[str, ...]:
		"""Generator letters left to right, one per factor, ignoring exponents."""
		return tuple(g for g, _ in self.factors)

	def word(self) -> Tuple[int, ...]:
		"""Expanded letter ranks, e.g. X2Y -> (0, 0, 1)."""
		out = []
		for g, e in self.factors:
			out.extend([rank(g)] * e)
		return tuple(out)

	def is_standard(self) -> bool:
		"""Return True iff the letters are strictly increasing (X^i Y^j Z^k)."""
		prev = -1
		for g, _ in self.factors:
			r = rank(g)
			if r <= prev:
				return False
			prev = r
		return True

	def exponent_vector(self) -> Tuple[int, ...]:
		"""(i, j, k) for X^i Y^j Z^k; only meaningful for standard monomials."""
		vec = [0, 0, 0]
		for g, e in self.factors:
			vec[rank(g)] += e
		return tuple(vec)

	def text(self) -> str:
		"""Raw text form without carets: exponent 1 omitted, e.g. X2YZ3."""
		parts = []
		for g, e in self.factors:
			if e == 1:
				parts.append(g)
			else:
				parts.append(f"{g}{e}")
		return "".join(parts)


def _pairs_from_text(text: str) -> Iterator[Factor]:
	i = 0
	n = len(text)
	while i < n:
		ch = text[i]
		if "0" <= ch <= "9":
			raise InvalidExpression(f"exponent without a generator in {text!r}")
		if not is_generator(ch):
			raise InvalidExpression(f"unknown generator {ch!r}")
		g, e, i = decode(text, i)
		yield g, e


def compact(source: Union[str, Iterable[Factor]]) -> Monomial:
	"""
	Merge consecutive equal generators by summing exponents, keeping encounter order.

	`source` is either raw text ("XX2Y" -> X3Y) or a sequence of (generator,
	exponent) pairs. Pairs with a non-positive exponent are omitted.
	"""
	if isinstance(source, str):
		pairs: Iterable[Factor] = _pairs_from_text(source)
	else:
		pairs = source
	merged: list[list] = []
	for g, e in pairs:
		if e <= 0:
			continue
		if not is_generator(g):
			raise InvalidExpression(f"unknown generator {g!r}")
		if merged and merged[-1][0] == g:
			merged[-1][1] += e
		else:
			merged.append([g, e])
	return Monomial(tuple((g, int(e)) for g, e in merged))


ONE = Monomial(())


def graded_key(m: Monomial) -> Tuple[int, Tuple[int, ...]]:
	"""
	Sort key for graded lexicographic descending order: higher degree first,
	then the expanded word ascending (for standard monomials this is deg-lex
	with X > Y > Z, so X2Y2 < XYZ < X2 < Y2 < Z2 in sort order).
	"""
	return (-m.degree, m.word())
