"""File-backed log sink adapter."""

import logging
import os
from pathlib import Path
from typing import Union

from ..config import ENCODING, LINE_TERMINATOR
from ..errors import SinkClosedError, SinkOpenError

logger = logging.getLogger(__name__)


class FileSink:
    """Adapter that writes one message per line to a backing file.

    The write handle is opened (and the file truncated) on construction
    and stays open until close(). read_all() uses its own read handle on
    every call, so it never disturbs pending writes.
    """

    def __init__(self, path: Union[str, os.PathLike]):
        self._path = Path(path)
        try:
            # newline=LINE_TERMINATOR disables newline translation
            self._file = open(
                self._path, "w",
                encoding=ENCODING,
                newline=LINE_TERMINATOR
            )
        except OSError as e:
            raise SinkOpenError(str(path)) from e

        logger.debug("Opened %s for writing", self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def append(self, message: str) -> None:
        """Write message as a line and flush it to disk."""
        if self._file.closed:
            raise SinkClosedError(f"append to closed sink: {self._path}")

        self._file.write(message + LINE_TERMINATOR)
        self._file.flush()
        os.fsync(self._file.fileno())

    def read_all(self) -> list[str]:
        """Re-read the backing file, one message per line."""
        messages = []
        with open(
            self._path, "r",
            encoding=ENCODING,
            newline=LINE_TERMINATOR
        ) as infile:
            for line in infile:
                if line.endswith(LINE_TERMINATOR):
                    line = line[:-len(LINE_TERMINATOR)]
                messages.append(line)
        return messages

    def close(self) -> None:
        """Release the write handle (idempotent)."""
        if self._file.closed:
            return
        self._file.close()
        logger.debug("Closed %s", self._path)

    def __enter__(self) -> "FileSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
