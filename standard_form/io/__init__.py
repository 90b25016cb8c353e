"""
Text and SymPy input/output for standard-form expressions.

Submodules:
	parser       — preprocess / split / parse raw text into an Expression
	renderer     — canonical text rendering
	sympy_utils  — conversion to and from non-commutative SymPy expressions
"""
