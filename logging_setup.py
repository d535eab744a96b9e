"""Logging for the ``finance`` modules.

Entrypoints (server, dashboard, seed script) call ``configure_logging`` once;
everything else only asks ``get_logger`` for a ``finance.<module>`` logger.
"""

import logging
import os

_ROOT = "finance"


def configure_logging() -> None:
    root = logging.getLogger(_ROOT)
    if any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root.handlers = [handler]
    root.setLevel(os.getenv("FINANCE_LOG_LEVEL", "INFO").upper())
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        # silent until an entrypoint configures output
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
