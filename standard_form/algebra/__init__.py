from .generators import GENERATORS
from .monomial import Monomial, ONE, compact, decode, graded_key
from .expression import Expression

__all__ = ["GENERATORS", "Monomial", "ONE", "compact", "decode", "graded_key", "Expression"]
