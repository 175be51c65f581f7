"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

# stdout carries the report, so a successful run must stay silent on stderr
LEVEL = logging.WARNING

def setup_logging(level: int = LEVEL) -> None:
    """Configure standard Python logging.

    Call **exactly once** at startup; later calls are no-ops.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    # Configure stderr handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    setup_logging._configured = True  # type: ignore[attr-defined]
