"""
Error kinds raised by the standard-form package.

  • InvalidExpression     — input text (or SymPy input) outside the accepted grammar
  • RelationTableError    — an elementary relation table that would break termination
  • RewriteLimitExceeded  — the rewrite loop ran past its configured step budget
"""

from __future__ import annotations


class InvalidExpression(ValueError):
	"""Raised when an input cannot be read as a sum of generator monomials."""


class RelationTableError(ValueError):
	"""Raised when an elementary relation table fails validation."""


class RewriteLimitExceeded(RuntimeError):
	"""Raised when standardization exceeds RewriteConfig.max_steps."""

	def __init__(self, steps: int, max_steps: int) -> None:
		super().__init__(f"rewrite budget exhausted after {steps} steps (max_steps={max_steps})")
		self.steps = steps
		self.max_steps = max_steps
