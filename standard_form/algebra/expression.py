"""
Sparse non-commutative polynomial: Monomial -> integer coefficient.

Zero coefficients are kept: an entry with coefficient 0 is present and
distinct from an absent one. Use pruned() where value equality is meant.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, Optional, Tuple

from standard_form.algebra.monomial import Monomial, compact, graded_key
from standard_form.io.renderer import render


class Expression:
	"""Mutable sum of signed monomials owned by the computation holding it."""

	def __init__(self, terms: Optional[Iterable[Tuple[Monomial, int]]] = None) -> None:
		self._occ: Dict[Monomial, int] = {}
		if terms is not None:
			for m, c in terms:
				self.add_term(m, c)

	@classmethod
	def from_terms(cls, pairs: Iterable[Tuple[str, int]]) -> "Expression":
		"""Build from (raw monomial text, coefficient) pairs, e.g. [("XY", -1), ("Z", 1)]."""
		exp = cls()
		for text, c in pairs:
			exp.add_term(compact(text), c)
		return exp

	def add_term(self, monomial: Monomial, amount: int = 1) -> "Expression":
		"""Accumulate `amount` into the coefficient of `monomial`, creating the entry if absent."""
		self._occ[monomial] = self._occ.get(monomial, 0) + int(amount)
		return self

	def add_expression(self, other: "Expression", multiplier: int = 1) -> "Expression":
		"""Accumulate coefficient * multiplier for every entry of `other`."""
		for m, c in other.items():
			self.add_term(m, c * multiplier)
		return self

	def remove_term(self, monomial: Monomial) -> None:
		self._occ.pop(monomial, None)

	def pop_term(self, monomial: Monomial) -> int:
		"""Remove `monomial` and return its coefficient (KeyError if absent)."""
		return self._occ.pop(monomial)

	def terms(self) -> Tuple[Monomial, ...]:
		"""Snapshot of the current keys; safe to iterate while mutating self."""
		return tuple(self._occ)

	def coefficient_of(self, monomial: Monomial) -> Optional[int]:
		"""Coefficient of `monomial`, or None when it has no entry."""
		return self._occ.get(monomial)

	def items(self) -> Tuple[Tuple[Monomial, int], ...]:
		return tuple(self._occ.items())

	def sorted_items(self) -> Tuple[Tuple[Monomial, int], ...]:
		"""Entries in graded lexicographic descending order."""
		return tuple(sorted(self._occ.items(), key=lambda kv: graded_key(kv[0])))

	def copy(self) -> "Expression":
		return Expression(self.items())

	def pruned(self) -> "Expression":
		"""Copy without zero-coefficient entries."""
		return Expression((m, c) for m, c in self._occ.items() if c != 0)

	def is_standard(self) -> bool:
		"""Return True iff every monomial is standard."""
		for m in self._occ:
			if not m.is_standard():
				return False
		return True

	def degree(self) -> int:
		"""Largest monomial degree among non-zero entries (0 when there are none)."""
		best = 0
		for m, c in self._occ.items():
			if c != 0 and m.degree > best:
				best = m.degree
		return best

	def render(self) -> str:
		"""Canonical text form (see standard_form.io.renderer)."""
		return render(self)

	def __iter__(self) -> Iterator[Monomial]:
		return iter(self.terms())

	def __len__(self) -> int:
		return len(self._occ)

	def __contains__(self, monomial: object) -> bool:
		return monomial in self._occ

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Expression):
			return NotImplemented
		return self._occ == other._occ

	def __repr__(self) -> str:
		body = ", ".join(f"{m.text() or '1'}: {c}" for m, c in self.sorted_items())
		return f"Expression({{{body}}})"
