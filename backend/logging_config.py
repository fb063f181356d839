"""Logging configuration for the Capture Records API.

Installs a single formatted console handler on the root logger. Module
loggers are created with ``logging.getLogger(__name__)`` and propagate
to it.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "capture-records-api"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Set up root logging.

    Safe to call more than once: the handler is replaced, not duplicated.

    Args:
        level: Logging level name or number (default: INFO)

    Returns:
        The root logger
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove our previous handler to avoid duplicates
    for handler in root.handlers[:]:
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    return root
