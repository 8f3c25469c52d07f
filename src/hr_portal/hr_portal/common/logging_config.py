from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Attach one stdout handler to the package logger.

    Safe to call more than once (e.g. one app per test).
    """
    global _configured

    pkg_logger = logging.getLogger(__name__.rsplit(".", 2)[0])
    pkg_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    _configured = True
