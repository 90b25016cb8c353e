"""
Elementary relation table: descending generator pair -> standard replacement.

	YX = -XY + Z
	ZY = -YZ + X
	ZX = -XZ + Y

Every right-hand side is a sum of standard monomials of degree <= 2, and each
rewrite either swaps the pair or drops one generator. That is what makes the
rewrite loop terminate; RelationTable re-checks it on construction so an
edited table cannot silently break the loop.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from standard_form.algebra.expression import Expression
from standard_form.algebra.generators import GENERATORS, descending, is_generator
from standard_form.errors import RelationTableError

Pair = Tuple[str, str]


class RelationTable:
	"""Read-only mapping (G1, G2) -> Expression for every descending adjacent pair."""

	def __init__(self, entries: Mapping[Pair, Expression]) -> None:
		table: Dict[Pair, Expression] = {}
		for pair, rhs in entries.items():
			self._check_entry(pair, rhs)
			table[pair] = rhs.copy()
		for g1 in GENERATORS:
			for g2 in GENERATORS:
				if g1 != g2 and descending(g1, g2) and (g1, g2) not in table:
					raise RelationTableError(f"missing relation for {g1}{g2}")
		self._table = MappingProxyType(table)

	@staticmethod
	def _check_entry(pair: Pair, rhs: Expression) -> None:
		"""Reject keys that are not descending pairs and right-hand sides that could grow."""
		if len(pair) != 2 or not is_generator(pair[0]) or not is_generator(pair[1]):
			raise RelationTableError(f"relation key must be a generator pair, got {pair!r}")
		g1, g2 = pair
		if g1 == g2 or not descending(g1, g2):
			raise RelationTableError(f"relation key {g1}{g2} is not a descending pair")
		for m in rhs.terms():
			if not m.is_standard():
				raise RelationTableError(f"relation {g1}{g2}: term {m.text()} is not standard")
			if m.degree > 2:
				raise RelationTableError(f"relation {g1}{g2}: term {m.text()} has degree {m.degree} > 2")
			if m.degree == 2 and m.letters() != (g2, g1):
				raise RelationTableError(f"relation {g1}{g2}: degree-2 term {m.text()} must be {g2}{g1}")

	def lookup(self, g1: str, g2: str) -> Expression:
		"""Return a fresh copy of the replacement for the product g1·g2."""
		return self._table[(g1, g2)].copy()

	def pairs(self) -> Tuple[Pair, ...]:
		return tuple(self._table)

	def __contains__(self, pair: object) -> bool:
		return pair in self._table

	def __iter__(self) -> Iterator[Pair]:
		return iter(self._table)

	def __len__(self) -> int:
		return len(self._table)


def _default_relations() -> RelationTable:
	return RelationTable({
		("Y", "X"): Expression.from_terms([("XY", -1), ("Z", 1)]),
		("Z", "Y"): Expression.from_terms([("YZ", -1), ("X", 1)]),
		("Z", "X"): Expression.from_terms([("XZ", -1), ("Y", 1)]),
	})


DEFAULT_RELATIONS = _default_relations()
