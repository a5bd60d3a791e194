"""Log handler setup for docpatterns diagnostics.

Demo output is plain text written to stdout with `print`; log records
only carry debugging information on internal steps, and go to stderr
by default.
"""
import io
import logging
import sys
from enum import IntEnum
from typing import Optional

from docpatterns.utils.helpers import check_arg


root_logger = logging.getLogger()
logger = logging.getLogger(__name__)


DEFAULT_STREAM = object()


class LogLevel(IntEnum):
    """docpatterns log level.

    DEBUG : Debug log
    INFO : Information log
    WARNING : Warning log
    ERROR : Error log
    CRITICAL : Critical log
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class StreamLogHandler(logging.StreamHandler):
    """StreamHandler installed by `set_log`.

    Having a dedicated type lets `set_log` replace its own handlers
    without touching those installed by other libraries.
    """

    def __init__(self, stream: io.TextIOBase = DEFAULT_STREAM) -> None:
        if stream is DEFAULT_STREAM:
            stream = sys.stderr
        super().__init__(stream=stream)


def set_log(
    stream: Optional[io.TextIOBase] = DEFAULT_STREAM,
    level: int = LogLevel.WARNING,
    format: str = "%(message)s",
) -> None:
    """Set the docpatterns log behavior.

    Previously installed `StreamLogHandler` objects are removed from
    the root logger before the new one is added.

    Parameters
    ----------
    stream : io.TextIOBase or None, optional
        Log stream; default ``sys.stderr``.
        If None, no handler is installed.
    level : int or LogLevel, optional
        Log level; default LogLevel.WARNING
    format : str, optional
        Log record format; default "%(message)s" - for the available attributes (see https://docs.python.org/3/library/logging.html#logrecord-attributes)
    """
    nonetype = type(None)
    if stream is not DEFAULT_STREAM:
        check_arg(stream, "stream", (io.TextIOBase, nonetype))
    check_arg(level, "level", (int, LogLevel))
    check_arg(format, "format", str)

    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        if isinstance(handler, StreamLogHandler):
            root_logger.removeHandler(handler)
            handler.close()

    if stream is None:
        logger.warning("No docpatterns log handler added.")
        return

    handler = StreamLogHandler(stream)
    handler.setFormatter(logging.Formatter(format))
    handler.setLevel(level)
    root_logger.addHandler(handler)
