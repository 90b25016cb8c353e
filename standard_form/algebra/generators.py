"""
Generator alphabet of the algebra: X < Y < Z (total, fixed order).
"""

from __future__ import annotations
from typing import Tuple

GENERATORS: Tuple[str, ...] = ("X", "Y", "Z")

_RANK = {g: i for i, g in enumerate(GENERATORS)}


def is_generator(ch: str) -> bool:
	"""Return True iff ch is one of the generator letters."""
	return ch in _RANK


def rank(g: str) -> int:
	"""Return the position of g in the generator order (X=0, Y=1, Z=2)."""
	return _RANK[g]


def descending(g1: str, g2: str) -> bool:
	"""Return True iff the adjacent product g1·g2 is out of order (g2 not strictly greater)."""
	return _RANK[g2] <= _RANK[g1]
