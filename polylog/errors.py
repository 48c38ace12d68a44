"""Exceptions raised by polylog."""


class PolylogError(Exception):
    """Base exception for polylog."""


class SinkOpenError(PolylogError):
    """Backing storage for a sink could not be opened for writing."""

    def __init__(self, path):
        super().__init__(f"Failed to open file: {path}")
        self.path = path


class SinkClosedError(PolylogError):
    """Write attempted on a sink that was already closed."""


class VerificationError(PolylogError):
    """One or more sinks did not reproduce the expected messages."""

    def __init__(self, mismatches):
        super().__init__(
            f"{len(mismatches)} sink(s) failed verification"
        )
        self.mismatches = mismatches
