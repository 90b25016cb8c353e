"""
Rewrite engine: elementary relations applied to a finite, terminating fixpoint.

For a monomial, the leftmost adjacent descending pair G1^e1 G2^e2 is replaced
by front · G1^(e1-1) · rhs · G2^(e2-1) · end for every term of the pair's
relation, one pair swap per step. Each step either reduces the number of
inversions at the same degree or lowers the degree, so the loop ends.

standardize() runs an explicit worklist: pending monomials sit in a FIFO
queue, their coefficients in a working Expression, so terms produced along
different rewrite paths merge (and may cancel) before they are rewritten.
The final coefficients do not depend on the worklist order.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Optional, Tuple

from standard_form.algebra.expression import Expression
from standard_form.algebra.generators import descending
from standard_form.algebra.monomial import Monomial, compact, graded_key
from standard_form.errors import RewriteLimitExceeded
from standard_form.rewrite.config import ORDERS, LogEvent, RewriteConfig, RewriteState
from standard_form.rewrite.relations import DEFAULT_RELATIONS, RelationTable


def first_violation(monomial: Monomial) -> Optional[int]:
	"""
	Return the factor index of the left element of the leftmost descending
	adjacent pair, or None when the monomial is already standard.
	"""
	letters = monomial.letters()
	i_current = 0
	for i in range(1, len(letters)):
		if descending(letters[i_current], letters[i]):
			return i_current
		i_current = i
	return None


class RewriteEngine:
	"""Standardizes Expressions against an injected RelationTable."""

	def __init__(self, relations: Optional[RelationTable] = None, config: Optional[RewriteConfig] = None) -> None:
		"""
		Bind the relation table (DEFAULT_RELATIONS when omitted) and the loop configuration.
		"""
		if relations is None:
			relations = DEFAULT_RELATIONS
		self.relations = relations
		self.cfg = config if config is not None else RewriteConfig()
		if self.cfg.order not in ORDERS:
			raise ValueError(f"unknown worklist order {self.cfg.order!r}; expected one of {ORDERS}")
		if self.cfg.max_steps < 0:
			raise ValueError("max_steps must be non-negative")
		self.state = RewriteState()

	first_violation = staticmethod(first_violation)

	def reduce_one_step(self, monomial: Monomial, index: int) -> Expression:
		"""
		Rewrite the descending pair at factor `index` once and return the resulting sum.
		"""
		if index < 0 or index + 1 >= len(monomial):
			raise ValueError(f"no adjacent pair at index {index} in {monomial.text()}")
		g1, e1 = monomial[index]
		g2, e2 = monomial[index + 1]
		if not descending(g1, g2):
			raise ValueError(f"{g1}{g2} at index {index} in {monomial.text()} is already ordered")

		front = monomial.factors[:index]
		end = monomial.factors[index + 2:]
		result = Expression()
		for sub, c in self.relations.lookup(g1, g2).items():
			pairs = list(front)
			pairs.append((g1, e1 - 1))
			pairs.extend(sub.factors)
			pairs.append((g2, e2 - 1))
			pairs.extend(end)
			result.add_term(compact(pairs), c)
		return result

	def _initial_order(self, expression: Expression) -> Tuple[Monomial, ...]:
		if self.cfg.order == "graded":
			return tuple(sorted(expression.terms(), key=graded_key))
		if self.cfg.order == "reverse":
			return tuple(sorted(expression.terms(), key=graded_key, reverse=True))
		return expression.terms()

	@staticmethod
	def _record(state: RewriteState, kind: str, payload: dict) -> None:
		state.log.append(LogEvent(kind=kind, payload=payload))

	@staticmethod
	def _push(queue: Deque[Monomial], working: Expression, m: Monomial, amount: int) -> None:
		if m not in working:
			queue.append(m)
		working.add_term(m, amount)

	def standardize(self, expression: Expression) -> Expression:
		"""
		Return the standard form of `expression`; the call's RewriteState is
		published as self.state once the call ends.
		"""
		result, _ = self.standardize_with_state(expression)
		return result

	def standardize_with_state(self, expression: Expression) -> Tuple[Expression, RewriteState]:
		"""
		Return a new Expression equal to `expression` with every monomial standard.

		The input is not modified. Non-standard monomials whose pending
		coefficient has cancelled to zero are dropped without rewriting;
		standard monomials keep their (possibly zero) coefficient.
		Step count and trace live in a RewriteState local to this call.
		"""
		state = RewriteState()
		working = Expression()
		queue: Deque[Monomial] = deque()
		result = Expression()

		seed = self._initial_order(expression)
		for m in seed:
			self._push(queue, working, m, expression.coefficient_of(m))
		if self.cfg.trace:
			self._record(state, "seed", {"terms": [[m.text(), expression.coefficient_of(m)] for m in seed]})

		try:
			self._drain(queue, working, result, state)
		finally:
			self.state = state
		return result, state

	def _drain(self, queue: Deque[Monomial], working: Expression, result: Expression, state: RewriteState) -> None:
		while queue:
			m = queue.popleft()
			occ = working.pop_term(m)
			idx = first_violation(m)
			if idx is None:
				result.add_term(m, occ)
				if self.cfg.trace:
					self._record(state, "emit", {"monomial": m.text(), "coefficient": occ})
				continue
			if occ == 0:
				if self.cfg.trace:
					self._record(state, "drop", {"monomial": m.text()})
				continue
			if state.steps >= self.cfg.max_steps:
				raise RewriteLimitExceeded(state.steps, self.cfg.max_steps)
			state.steps += 1
			produced = self.reduce_one_step(m, idx)
			if self.cfg.trace:
				self._record(state, "rewrite", {
					"monomial": m.text(),
					"index": idx,
					"coefficient": occ,
					"produced": [[s.text(), c] for s, c in produced.sorted_items()],
				})
			for sub, c in produced.items():
				self._push(queue, working, sub, c * occ)

		if self.cfg.trace:
			self._record(state, "done", {"steps": state.steps, "terms": len(result)})


def standardize(expression: Expression, relations: Optional[RelationTable] = None) -> Expression:
	"""Proxy to RewriteEngine(relations).standardize(expression)."""
	return RewriteEngine(relations).standardize(expression)
