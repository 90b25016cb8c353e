"""Equality checks for standardized expressions (class-based).

Two expressions that are equal in the algebra must take the same value in
every representation of it. The relations XY + YX = Z, YZ + ZY = X,
XZ + ZX = Y are satisfied by

  • the scalar points (x, y, z) with |x| = |y| = |z| = 1/2 and z = 2xy
  • a real 2x2 representation built from sx = [[0,1],[1,0]], sz = [[1,0],[0,-1]]:
		X = -I/2 + sx
		Y = -I/2 - sx/2 + (sqrt(3)/2) sz
		Z = -I/2 - sx/2 - (sqrt(3)/2) sz
	(three unit vectors at 120 degrees in the sx/sz plane)

Provides:
  • EqualityChecks.structural_equal(a, b)
  • EqualityChecks.evaluate_exact(expression, point) -> sympy Matrix
  • EqualityChecks.numeric_fingerprint(expression) -> hex digest
  • EqualityChecks.representation_counterexample(a, b) -> dict | None
"""

from __future__ import annotations
from typing import Dict, List
import hashlib
import numpy as np
import sympy as sp

from standard_form.algebra.expression import Expression

Point = Dict[str, sp.Matrix]


def _scalar_point(x: sp.Expr, y: sp.Expr, z: sp.Expr) -> Point:
	return {"X": sp.Matrix([[x]]), "Y": sp.Matrix([[y]]), "Z": sp.Matrix([[z]])}


def _matrix_point() -> Point:
	h = sp.Rational(1, 2)
	r = sp.sqrt(3) / 2
	eye = sp.eye(2)
	sx = sp.Matrix([[0, 1], [1, 0]])
	sz = sp.Matrix([[1, 0], [0, -1]])
	return {
		"X": -h * eye + sx,
		"Y": -h * eye - h * sx + r * sz,
		"Z": -h * eye - h * sx - r * sz,
	}


def _build_representations() -> Dict[str, Point]:
	h = sp.Rational(1, 2)
	return {
		"scalar_ppp": _scalar_point(h, h, h),
		"scalar_pmm": _scalar_point(h, -h, -h),
		"scalar_mpm": _scalar_point(-h, h, -h),
		"scalar_mmp": _scalar_point(-h, -h, h),
		"matrix_2x2": _matrix_point(),
	}


REPRESENTATIONS: Dict[str, Point] = _build_representations()


class EqualityChecks:
	"""Encapsulates structural and representation-based equality checks."""

	def __init__(self) -> None:
		"""Initialize stateless checker (hook for future options)."""

	def structural_equal(self, a: Expression, b: Expression) -> bool:
		"""Return True iff a and b have the same non-zero terms."""
		return a.pruned() == b.pruned()

	@staticmethod
	def evaluate_exact(expression: Expression, point: Point) -> sp.Matrix:
		"""
		Return the exact value of `expression` with each generator replaced by
		the matrix in `point`; the empty monomial maps to the identity.
		"""
		n = point["X"].shape[0]
		total = sp.zeros(n, n)
		for m, c in expression.items():
			if c == 0:
				continue
			prod = sp.eye(n)
			for g, e in m:
				prod = prod * point[g] ** e
			total = total + c * prod
		return total.applyfunc(sp.expand)

	@staticmethod
	def _evaluate_float(expression: Expression, point: Point) -> np.ndarray:
		n = point["X"].shape[0]
		mats = {}
		for g, v in point.items():
			mats[g] = np.array(v.evalf().tolist(), dtype=np.float64)
		total = np.zeros((n, n), dtype=np.float64)
		for m, c in expression.items():
			if c == 0:
				continue
			prod = np.eye(n, dtype=np.float64)
			for g, e in m:
				prod = prod @ np.linalg.matrix_power(mats[g], e)
			total = total + float(c) * prod
		return total

	def numeric_fingerprint(self, expression: Expression) -> str:
		"""
		Deterministic float64 fingerprint over every representation, as a BLAKE2b digest.
		"""
		out_codes: List[str] = []
		for name in sorted(REPRESENTATIONS):
			val = self._evaluate_float(expression, REPRESENTATIONS[name])
			if not np.all(np.isfinite(val)):
				out_codes.append("nan")
				continue
			for v in val.reshape(-1):
				x = round(float(v), 6)
				if x == 0.0:
					x = 0.0
				out_codes.append(f"{x:.6f}")
		blob = "|".join(out_codes).encode("utf-8")
		h = hashlib.blake2b(blob, digest_size=8)
		return h.hexdigest()

	def representation_counterexample(self, a: Expression, b: Expression) -> Dict[str, object] | None:
		"""
		Evaluate a and b exactly in every representation and return a
		structured witness for the first one where they differ, or None.
		"""
		for name in sorted(REPRESENTATIONS):
			point = REPRESENTATIONS[name]
			va = self.evaluate_exact(a, point)
			vb = self.evaluate_exact(b, point)
			diff = (va - vb).applyfunc(sp.simplify)
			if any(x != 0 for x in diff):
				return {"point": name, "a_val": str(va.tolist()), "b_val": str(vb.tolist()), "diff": str(diff.tolist())}
		return None
