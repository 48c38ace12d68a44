"""In-memory log sink adapter."""


class MemorySink:
    """Adapter that keeps log messages in a process-local list."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def append(self, message: str) -> None:
        """Add message to the end of the log."""
        self._messages.append(message)

    def read_all(self) -> list[str]:
        """Return a copy of the stored messages."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        # An empty sink is still a usable sink
        return True
