"""
Renderer: standard Expression -> canonical text.

Terms are emitted in graded lexicographic descending order, coefficient 1 is
omitted, -1 becomes a bare '-', zero entries are skipped, and a final text
pass turns every generator letter directly followed by a digit into
letter^digit (X2 -> X^2).
"""

from __future__ import annotations
import re
from typing import TYPE_CHECKING

from standard_form.algebra.monomial import graded_key

if TYPE_CHECKING:
	from standard_form.algebra.expression import Expression

_EXPONENT_RE = re.compile(r"([XYZ])(\d)")


def caret_exponents(text: str) -> str:
	"""Insert '^' between a generator letter and a following digit."""
	return _EXPONENT_RE.sub(r"\1^\2", text)


def render(expression: "Expression") -> str:
	"""Return the canonical text form; an expression with no non-zero term renders as '0'."""
	result = ""
	first = True
	for m, occ in sorted(expression.items(), key=lambda kv: graded_key(kv[0])):
		if occ == 0:
			continue
		body = m.text()
		if occ > 0 and not first:
			result += "+"
		if body == "":
			result += str(occ)
		elif occ == 1:
			pass
		elif occ == -1:
			result += "-"
		else:
			result += str(occ)
		result += body
		first = False
	if first:
		return "0"
	return caret_exponents(result)
