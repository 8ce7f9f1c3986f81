"""
Logging setup for the Scratchnet library.

Every module gets its own named logger from `setup_logging`. All of them write
every message to one shared in-memory debug log, and write "INFO" and above to
the screen. A training run clears the debug log when it starts, so after
`Network.train` returns, `get_debug_log()` holds the per-iteration record of that run.
"""
__author__ = 'shoover'

import logging
import io
import sys


debug_logging = io.StringIO()  # Global bucket for debug statements.
DEBUG_FORMAT = "%(asctime)s %(levelname)8s [%(module)12s.%(funcName)-20s:%(lineno)4d] %(message)s"
SCREEN_FORMAT = "%(asctime)s | %(message)s"

_screen_handlers = {}  # Logger name -> handler which prints to the screen


def _screen_formatter(level):
    return logging.Formatter(DEBUG_FORMAT if level == "DEBUG" else SCREEN_FORMAT, datefmt="%H:%M:%S")


def setup_logging(name="scratchnet", level="INFO", stream=None):
    """Create (or re-create) the logger `name`.

    **Optional Parameters**

    * `level` <string|"INFO">
        Messages at this level and above are printed to the screen.
    * `stream` <file-like|None>
        Print to this stream instead of `sys.stdout`.
    """
    log = logging.getLogger(name=name)
    log.handlers = []

    handler_debug = logging.StreamHandler(debug_logging)
    handler_debug.setFormatter(logging.Formatter(DEBUG_FORMAT))
    handler_debug.setLevel("DEBUG")
    log.addHandler(handler_debug)

    handler_screen = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler_screen.setFormatter(_screen_formatter(level))
    handler_screen.setLevel(level)
    log.addHandler(handler_screen)
    _screen_handlers[name] = handler_screen

    log.setLevel("DEBUG")  # The handlers have their own levels.

    return log


def set_screen_level(level):
    """Change how much every Scratchnet logger prints. "DEBUG" prints every
    training iteration; "WARNING" silences progress reports."""
    for handler in _screen_handlers.values():
        handler.setLevel(level)
        handler.setFormatter(_screen_formatter(level))


def get_debug_log():
    """Everything logged at any level since the debug log was last cleared."""
    return debug_logging.getvalue()


def clear_debug_log():
    debug_logging.seek(0)
    debug_logging.truncate()
