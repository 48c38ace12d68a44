"""Allow ``python -m polylog``."""

from .main import main

main()
