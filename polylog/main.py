"""polylog - Main Entry Point."""

import sys
from typing import Optional

from .adapters import FileSink, MemorySink
from .config import DEFAULT_LOG_FILE, LOG_LEVEL, TEST_MESSAGES
from .errors import SinkOpenError
from .harness import Harness, format_messages
from .logging_setup import configure_logging


def main(argv: Optional[list[str]] = None) -> None:
    """Run every sink over the test messages; exit 1 on any failure."""
    if argv is None:
        argv = sys.argv[1:]
    filename = argv[0] if argv else DEFAULT_LOG_FILE

    configure_logging(LOG_LEVEL)

    with Harness() as harness:
        # Mount sinks
        harness.add(MemorySink())
        try:
            harness.add(FileSink(filename))
        except SinkOpenError as e:
            print(f"ERROR: Failed to open file: {e.path}", file=sys.stderr)
            sys.exit(1)

        mismatches = harness.run(TEST_MESSAGES)

        # Report the first failing sink only
        if mismatches:
            first = mismatches[0]
            print(
                f"ERROR: {first.sink_name} "
                f"expected: {first.expected}; "
                f"but observed: {first.observed}\n"
                f"--- expected ---\n{format_messages(first.expected)}"
                f"--- observed ---\n{format_messages(first.observed)}",
                end="",
                file=sys.stderr
            )
            sys.exit(1)


if __name__ == "__main__":
    main()
