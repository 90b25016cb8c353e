from .equality import EqualityChecks, REPRESENTATIONS

__all__ = ["EqualityChecks", "REPRESENTATIONS"]
