from .trace import RunLog

__all__ = ["RunLog"]
