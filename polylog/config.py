"""Configuration defaults."""

import logging
import os
import tempfile


# Backing file
DEFAULT_LOG_FILE = os.path.join(tempfile.gettempdir(), "outfile_python.txt")
ENCODING = "utf-8"
LINE_TERMINATOR = "\n"

# Harness input
TEST_MESSAGES = (
    "Hello, World!",
    "abracadabra",
    "Sayonara!",
)

# Diagnostics (stderr)
LOG_LEVEL = logging.WARNING
