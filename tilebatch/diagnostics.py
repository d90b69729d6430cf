"""Prefixed diagnostic messages and a checked-condition helper."""

from __future__ import annotations

import inspect
import os
import sys


class GameError(RuntimeError):
    """Raised when a required condition does not hold."""


_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


def _is_this_module(filename: str) -> bool:
    return os.path.normcase(os.path.abspath(filename)) == _THIS_FILE


def _caller_location() -> tuple[str, int, str]:
    frame = inspect.currentframe()
    try:
        while frame is not None and _is_this_module(frame.f_code.co_filename):
            frame = frame.f_back
        if frame is None:
            return "?", 0, "?"
        code = frame.f_code
        return os.path.basename(code.co_filename), frame.f_lineno, code.co_name
    finally:
        del frame


def emit(prefix: str, message: str) -> None:
    """Write ``message`` tagged with ``prefix`` and the caller's location.

    ``LOG`` messages go to standard output, everything else to standard error.
    A trailing newline is added unless the message already ends with one.
    """
    stream = sys.stdout if prefix == "LOG" else sys.stderr
    filename, line, function = _caller_location()
    ending = "" if message.endswith("\n") else "\n"
    stream.write(f"[{prefix}][{filename}:{line}][{function}] {message}{ending}")


def log(message: str) -> None:
    """Informational message on standard output."""
    emit("LOG", message)


def warn(message: str) -> None:
    """Warning on standard error."""
    emit("WRN", message)


def error(message: str) -> None:
    """Error message on standard error."""
    emit("ERR", message)


def ensure(condition: object, message: str = "assertion failed") -> None:
    """Report and raise GameError if ``condition`` is false."""
    if not condition:
        error("(assertion failed)")
        error(message)
        raise GameError(message)