"""Error taxonomy for Polaris.

Every failure the runtime can detect is a PolarisError. Errors are raised
where they are detected and travel up to the Feeder that submitted the
statement; the Feeder hands them to the error-reporting callback and then
decides whether the session continues.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable


class ErrorLevel(enum.Enum):
    FATAL = "fatal"
    FAILURE = "failure"


ErrorCallback = Callable[[ErrorLevel, str], None]

logger = logging.getLogger("polaris")


class PolarisError(Exception):
    """ Base class for all Polaris errors"""

    level: ErrorLevel = ErrorLevel.FATAL


class UnboundSymbol(PolarisError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""


class NotCallable(PolarisError):
    """ Raised when applying a value that is neither a lambda nor a procedure"""


class NumericConversion(PolarisError):
    """ Raised when an arithmetic or comparison operand is not a number"""


class NumericRange(PolarisError):
    """ Raised when a numeric operation over/underflows or divides by zero"""


class ImportNotFound(PolarisError):
    """ Raised when no include directory nor literal path resolves a module"""


class MalformedForm(PolarisError):
    """ Raised when a form or builtin call is missing required parts"""


class RecursionDepthExceeded(PolarisError):
    """ Raised when a form nests deeper than the host stack allows"""


def log_error(level: ErrorLevel, message: str) -> None:
    """Default error reporter: route the message through the polaris logger."""
    if level is ErrorLevel.FATAL:
        logger.critical(message)
    else:
        logger.error(message)
