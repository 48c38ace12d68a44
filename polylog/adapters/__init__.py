"""Sink implementations for polylog."""

from .memory_sink import MemorySink
from .file_sink import FileSink

__all__ = [
    'MemorySink',
    'FileSink',
]
