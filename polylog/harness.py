"""Harness that drives identical input through every sink and checks it."""

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Iterable, Sequence

from .errors import VerificationError
from .interfaces import ILogSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mismatch:
    """A sink whose read-back differs from the expected messages."""
    index: int
    sink: ILogSink
    expected: list[str]
    observed: list[str]

    @property
    def sink_name(self) -> str:
        return type(self.sink).__name__


def format_messages(messages: Iterable[str]) -> str:
    """Render messages one per line."""
    return "".join(f"{m}\n" for m in messages)


class Harness:
    """Owns a set of sinks and verifies they all record the same log.

    Sinks exposing close() are released when the harness closes, in
    reverse registration order, whatever way the run ends.
    """

    def __init__(self):
        self._sinks: list[ILogSink] = []
        self._stack = ExitStack()

    @property
    def sinks(self) -> tuple[ILogSink, ...]:
        return tuple(self._sinks)

    def add(self, sink: ILogSink) -> ILogSink:
        """Take ownership of sink."""
        self._sinks.append(sink)
        if callable(getattr(sink, "close", None)):
            self._stack.callback(sink.close)
        logger.debug("Registered sink #%d: %s", len(self._sinks) - 1,
                     type(sink).__name__)
        return sink

    def broadcast(self, messages: Iterable[str]) -> None:
        """Append each message to every sink, messages outer."""
        count = 0
        for message in messages:
            for sink in self._sinks:
                sink.append(message)
            count += 1
        logger.debug("Broadcast %d message(s) to %d sink(s)",
                     count, len(self._sinks))

    def verify(self, expected: Sequence[str]) -> list[Mismatch]:
        """Compare every sink's read-back against expected."""
        expected = list(expected)
        mismatches = []
        for idx, sink in enumerate(self._sinks):
            observed = sink.read_all()
            if observed != expected:
                mismatch = Mismatch(idx, sink, expected, observed)
                logger.warning("Sink #%d (%s) mismatch: %r != %r",
                               idx, mismatch.sink_name, observed, expected)
                mismatches.append(mismatch)
        if not mismatches:
            logger.debug("All %d sink(s) verified", len(self._sinks))
        return mismatches

    def check(self, expected: Sequence[str]) -> None:
        """Like verify(), but raise VerificationError on any mismatch."""
        mismatches = self.verify(expected)
        if mismatches:
            raise VerificationError(mismatches)

    def run(self, messages: Iterable[str]) -> list[Mismatch]:
        """Broadcast messages, then verify every sink against them."""
        messages = list(messages)
        self.broadcast(messages)
        return self.verify(messages)

    def close(self) -> None:
        self._stack.close()

    def __enter__(self) -> "Harness":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
