"""
Logging setup for the renderer process.

mdBook shows a backend's stderr to the user and treats stdout as
unused, so all diagnostics go to stderr through the logging module.
"""

import logging
import os
import sys

LOG_ENV_VAR = "MDBOOK_DOCX_LOG"
LOG_FORMAT = "%(asctime)s [%(levelname)s] (%(name)s): %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "mdbook-docx"


def resolve_level(verbose=False, environ=None):
    """
    Pick the log level: MDBOOK_DOCX_LOG wins, then --verbose, then INFO.

    Unknown level names in the environment fall back to INFO.
    """
    environ = os.environ if environ is None else environ
    name = environ.get(LOG_ENV_VAR, "").strip().upper()
    if name:
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO
    return logging.DEBUG if verbose else logging.INFO


def init_logger(verbose=False, stream=None):
    """Configure the root logger; calling it again replaces its own handler."""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(resolve_level(verbose))
    return root
