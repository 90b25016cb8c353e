"""
Rewrite configuration and typed containers for the standardization loop.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List

ORDERS = ("graded", "reverse", "insertion")


@dataclass
class RewriteConfig:
	"""
	Worklist order and step budget.

	order      : initial worklist order — "graded" (render order), "reverse", or "insertion"
	max_steps  : rewrite steps allowed before RewriteLimitExceeded
	trace      : record LogEvents into RewriteState.log
	"""
	order: str = "graded"
	max_steps: int = 1_000_000
	trace: bool = False


@dataclass
class LogEvent:
	"""
	Structured event for rewrite tracing.
	"""
	kind: str
	payload: Dict[str, object]


@dataclass
class RewriteState:
	"""
	Mutable state of one standardize() call.
	"""
	steps: int = 0
	log: List[LogEvent] = field(default_factory=list)
