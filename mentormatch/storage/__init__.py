"""In-memory storage for uploaded records."""

from .memory import MemStorage, RecordCollection

__all__ = ["MemStorage", "RecordCollection"]
