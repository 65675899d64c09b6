"""Logging for the graphpoet command."""

import logging
import sys
from logging import LogRecord, StreamHandler
from typing import NoReturn, TextIO

PROG = "graphpoet"

# ANSI color codes for level names.
COLORS = {
    logging.FATAL: 31,  # red
    logging.ERROR: 31,  # red
    logging.WARNING: 33,  # yellow
    logging.INFO: 32,  # green
    logging.DEBUG: 35,  # magenta
}


class CommandHandler(StreamHandler):

    """Writes records as "graphpoet: level: message", exiting on severe ones.

    The level is bold and colorized when the stream is a TTY. After emitting a
    record at or above exit_level, exits with status 1.
    """

    def __init__(self, stream: TextIO, exit_level: int):
        super().__init__(stream)
        self.exit_level = exit_level
        self.use_color = stream.isatty()

    def format(self, record: LogRecord) -> str:
        level = record.levelname.lower()
        if self.use_color and record.levelno in COLORS:
            level = f"\x1b[{COLORS[record.levelno]};1m{level}\x1b[0m"
        return f"{PROG}: {level}: {record.getMessage()}"

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def setup_logging(stream: TextIO, verbose: int = 0, keep_going: bool = False):
    """Set up the root logger for a command.

    Warnings and worse are shown by default; each verbose step adds a level
    (info, then debug). Errors exit the program unless keep_going is set, in
    which case only fatal logs do.
    """
    log_level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    exit_level = logging.FATAL if keep_going else logging.ERROR
    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.addHandler(CommandHandler(stream, exit_level))
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log msg at the FATAL level and exit with status 1.

    The handler from setup_logging exits on its own. Raising SystemExit here
    covers callers that never set up logging, and lets tools know that code
    after a fatal log is unreachable.
    """
    logging.fatal(msg, *args, **kwargs)
    raise SystemExit(1)
