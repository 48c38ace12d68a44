"""Interface definitions for polylog sinks."""

from .i_log_sink import ILogSink

__all__ = [
    'ILogSink',
]
