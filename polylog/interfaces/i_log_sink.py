"""Log sink interface (adapter pattern)."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ILogSink(Protocol):
    """Interface for an ordered message log."""

    def append(self, message: str) -> None:
        """Record one message."""
        ...

    def read_all(self) -> list[str]:
        """Return every recorded message, in append order."""
        ...
