from .config import RewriteConfig, LogEvent, RewriteState, ORDERS
from .relations import RelationTable, DEFAULT_RELATIONS
from .engine import RewriteEngine, first_violation, standardize

__all__ = [
	"RewriteConfig", "LogEvent", "RewriteState", "ORDERS",
	"RelationTable", "DEFAULT_RELATIONS",
	"RewriteEngine", "first_violation", "standardize",
]
