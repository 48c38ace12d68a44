"""Polymorphic log sinks with a consistency harness."""

from .adapters import FileSink, MemorySink
from .errors import (
    PolylogError,
    SinkClosedError,
    SinkOpenError,
    VerificationError,
)
from .harness import Harness, Mismatch, format_messages
from .interfaces import ILogSink

__version__ = "0.1.0"

__all__ = [
    'ILogSink',
    'MemorySink',
    'FileSink',
    'Harness',
    'Mismatch',
    'format_messages',
    'PolylogError',
    'SinkOpenError',
    'SinkClosedError',
    'VerificationError',
]
