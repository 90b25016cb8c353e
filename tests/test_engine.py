import pytest

from standard_form.algebra.expression import Expression
from standard_form.algebra.monomial import compact
from standard_form.errors import RewriteLimitExceeded
from standard_form.io.parser import parse
from standard_form.rewrite.config import RewriteConfig
from standard_form.rewrite.engine import RewriteEngine, first_violation
from standard_form.rewrite.relations import RelationTable
from standard_form.standardizer import Standardizer, standardize

SAMPLES = [
	"YX", "ZY", "ZX", "XY-YX", "YZX", "XYXY", "ZYX", "YX^2", "Y^2X",
	"ZZYYXX", "3ZXY-2YXZ+XZY", "Z^2Y^2X^2", "XYZYX", "ZYXZYX", "XY+YX-Z",
]


@pytest.mark.parametrize("raw,expected", [
	("YX", "-XY+Z"),
	("ZY", "-YZ+X"),
	("ZX", "-XZ+Y"),
])
def test_elementary_relations(raw, expected):
	assert standardize(raw) == expected


@pytest.mark.parametrize("raw", ["XY", "X^2Y^3Z", "XYZ", "Z", "X^10Z^3"])
def test_standard_input_is_unchanged(raw):
	assert standardize(raw) == raw


@pytest.mark.parametrize("raw,expected", [
	("XY-YX", "2XY-Z"),
	("YZX", "XYZ+Y^2-Z^2"),
	("XYXY", "-X^2Y^2-XYZ+X^2"),
])
def test_worked_examples(raw, expected):
	assert standardize(raw) == expected


@pytest.mark.parametrize("raw,expected", [
	("ZYX", "-XYZ+X^2-Y^2+Z^2"),
	("YX^2", "X^2Y-2XZ+Y"),
	("Y^2X", "XY^2+2YZ-X"),
	("3YX", "-3XY+3Z"),
	("-2ZY", "2YZ-2X"),
	("x * y - (y x)", "2XY-Z"),
	("XY-XY", "0"),
	("YX+XY-Z", "0"),
])
def test_standardize_more(raw, expected):
	assert standardize(raw) == expected


@pytest.mark.parametrize("raw,index", [
	("XYZ", None),
	("Z", None),
	("", None),
	("YX", 0),
	("XZY", 1),
	("XYX", 1),
	("X2Y3X", 1),
	("ZYX", 0),
])
def test_first_violation(raw, index):
	assert first_violation(compact(raw)) == index


def test_reduce_one_step_distributes_surrounding_powers():
	eng = RewriteEngine()
	assert eng.reduce_one_step(compact("Y2X"), 0) == Expression.from_terms([("YXY", -1), ("YZ", 1)])
	assert eng.reduce_one_step(compact("XY3X2Z"), 1) == Expression.from_terms([("XY2XYXZ", -1), ("XY2ZXZ", 1)])


def test_reduce_one_step_rejects_ordered_pair_and_bad_index():
	eng = RewriteEngine()
	with pytest.raises(ValueError):
		eng.reduce_one_step(compact("XYX"), 0)
	with pytest.raises(ValueError):
		eng.reduce_one_step(compact("YX"), 1)


def test_standardize_does_not_modify_input():
	e = parse("ZYX+YX")
	RewriteEngine().standardize(e)
	assert e == parse("ZYX+YX")


@pytest.mark.parametrize("raw", SAMPLES)
def test_output_is_standard(raw):
	assert Standardizer().standardize_expression(raw).is_standard()


@pytest.mark.parametrize("raw", SAMPLES)
def test_idempotent_structurally(raw):
	std = Standardizer()
	once = std.standardize_expression(raw)
	assert std.standardize_expression(once) == once


@pytest.mark.parametrize("raw", [s for s in SAMPLES if standardize(s) != "0"])
def test_idempotent_textually(raw):
	once = standardize(raw)
	assert standardize(once) == once


@pytest.mark.parametrize("raw", SAMPLES)
def test_degree_does_not_increase(raw):
	std = Standardizer()
	assert std.standardize_expression(raw).degree() <= parse(raw).degree()


@pytest.mark.parametrize("a,b", [
	("YZX", "XYXY"),
	("ZYX", "XYZ"),
	("YX", "-YX"),
	("3ZY-X", "Y^2X+ZX"),
])
def test_additivity(a, b):
	std = Standardizer()
	merged = std.standardize_expression(a).add_expression(std.standardize_expression(b))
	joined = a + (b if b.startswith("-") else "+" + b)
	assert std.standardize_expression(joined).pruned() == merged.pruned()


@pytest.mark.parametrize("raw", SAMPLES)
def test_final_coefficients_do_not_depend_on_worklist_order(raw):
	results = []
	for order in ("graded", "reverse", "insertion"):
		std = Standardizer(config=RewriteConfig(order=order))
		results.append(std.standardize_expression(raw).pruned())
	assert results[0] == results[1] == results[2]


def test_unknown_order_is_rejected():
	with pytest.raises(ValueError):
		RewriteEngine(config=RewriteConfig(order="random"))


@pytest.mark.parametrize("raw,steps", [
	("XY", 0),
	("YX", 1),
	("YZX", 2),
	("XYXY", 2),
	("ZYX", 3),
])
def test_step_counts(raw, steps):
	std = Standardizer()
	std.standardize(raw)
	assert std.state.steps == steps


def test_step_budget_is_enforced():
	with pytest.raises(RewriteLimitExceeded) as info:
		Standardizer(config=RewriteConfig(max_steps=2)).standardize("ZYX")
	assert info.value.max_steps == 2
	assert Standardizer(config=RewriteConfig(max_steps=3)).standardize("ZYX") == "-XYZ+X^2-Y^2+Z^2"


def test_high_powers_terminate_within_a_loose_bound():
	std = Standardizer()
	out = std.standardize_expression("Z^2Y^2X^2")
	assert out.is_standard()
	assert 0 < std.state.steps < 100_000


def test_injected_relation_table():
	commuting = RelationTable({
		("Y", "X"): Expression.from_terms([("XY", 1)]),
		("Z", "Y"): Expression.from_terms([("YZ", 1)]),
		("Z", "X"): Expression.from_terms([("XZ", 1)]),
	})
	std = Standardizer(relations=commuting)
	assert std.standardize("ZYX") == "XYZ"
	assert std.standardize("YX-XY") == "0"
	assert std.standardize("Z^2XY^3X") == "X^2Y^3Z^2"


def test_trace_events():
	std = Standardizer(config=RewriteConfig(trace=True))
	std.standardize("YX")
	kinds = [ev.kind for ev in std.state.log]
	assert kinds == ["seed", "rewrite", "emit", "emit", "done"]
	assert std.state.log[0].payload == {"terms": [["YX", 1]]}
	assert std.state.log[1].payload == {
		"monomial": "YX",
		"index": 0,
		"coefficient": 1,
		"produced": [["XY", -1], ["Z", 1]],
	}
	assert std.state.log[-1].payload == {"steps": 1, "terms": 2}


def test_trace_off_records_nothing():
	std = Standardizer()
	std.standardize("ZYX")
	assert std.state.log == []


def test_calls_on_one_engine_keep_separate_state():
	eng = RewriteEngine(config=RewriteConfig(trace=True))
	_, first = eng.standardize_with_state(parse("ZYX"))
	_, second = eng.standardize_with_state(parse("YX"))
	assert first.steps == 3
	assert second.steps == 1
	assert first is not second
	assert [ev.kind for ev in second.log] == ["seed", "rewrite", "emit", "emit", "done"]
	assert eng.state is second


class _NestingEngine(RewriteEngine):
	"""Runs a second standardization from inside the first one's rewrite loop."""

	def __init__(self, config):
		super().__init__(config=config)
		self.inner = None
		self._nesting = False

	def reduce_one_step(self, monomial, index):
		if self.inner is None and not self._nesting:
			self._nesting = True
			self.inner = self.standardize_with_state(parse("YX"))
		return super().reduce_one_step(monomial, index)


def test_nested_call_does_not_disturb_outer_budget_or_trace():
	eng = _NestingEngine(RewriteConfig(trace=True, max_steps=3))
	result, outer = eng.standardize_with_state(parse("ZYX"))
	inner_result, inner = eng.inner
	assert result.pruned() == Standardizer().standardize_expression("ZYX").pruned()
	assert inner_result.pruned() == Standardizer().standardize_expression("YX").pruned()
	assert outer.steps == 3
	assert inner.steps == 1
	assert [ev.kind for ev in outer.log].count("rewrite") == 3
	assert [ev.kind for ev in inner.log].count("rewrite") == 1
	assert outer.log[0].payload == {"terms": [["ZYX", 1]]}
	assert inner.log[0].payload == {"terms": [["YX", 1]]}
	assert eng.state is outer
