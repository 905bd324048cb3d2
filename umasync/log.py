"""Leveled, colored console output.

Adds a VERBOSE level between DEBUG and INFO and mirrors the console colors
the bot has always used: debug dim, info blue, warnings yellow, errors red and
critical messages inverted.
"""

import difflib
import logging
import sys

VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

logger = logging.getLogger("umasync")

RESET = "\033[0m"
COLORS = {
    logging.DEBUG: "\033[2m",
    VERBOSE: "",
    logging.INFO: "\033[34m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;7;31m",
}
DIFF_COLORS = {"+": "\033[32m", "-": "\033[31m", "@": "\033[36m"}


class ColorFormatter(logging.Formatter):
    def __init__(self, color=True):
        super().__init__("%(message)s")
        self.color = color

    def format(self, record):
        message = super().format(record)
        if record.levelno >= logging.CRITICAL:
            message = f" {message} "
        code = COLORS.get(record.levelno, "")
        if not self.color or not code:
            return message
        return f"{code}{message}{RESET}"


def level_from_flags(quiet=False, verbose=False, debug=False):
    """Pick a log level from the CLI flags; later flags win."""
    level = logging.INFO
    if quiet:
        level = logging.ERROR
    if verbose:
        level = VERBOSE
    if debug:
        level = logging.DEBUG
    return level


def setup(level=logging.INFO, stream=None):
    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(color=_isatty(stream)))
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def diff(before, after, stream=None):
    """Print a line diff of ``before`` -> ``after`` to stderr.

    Returns True when the texts differ. An empty diff is only mentioned at
    verbose level.
    """
    if before == after:
        logger.log(VERBOSE, "===> No changes")
        return False

    stream = stream or sys.stderr
    color = _isatty(stream)
    lines = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile="current",
        tofile="updated",
    )
    for line in lines:
        if not line.endswith("\n"):
            line += "\n"
        code = DIFF_COLORS.get(line[:1], "") if color else ""
        if code and not line.startswith(("+++", "---")):
            text = line.rstrip("\n")
            stream.write(f"{code}{text}{RESET}\n")
        else:
            stream.write(line)
    stream.write("\n")
    return True


def _isatty(stream):
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
