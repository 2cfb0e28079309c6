"""
Validation rules shared by the builder and the tool wrappers.

Every rule takes a value and a human-readable label, returns None when the value is
acceptable and raises a fault otherwise. Rules never accumulate: the first violation
aborts the whole build.

Rules
- non_empty_string, not_flag                      → InvalidArgumentError
- number, number_min, number_non_negative        → InvalidArgumentError
- integer, integer_min, integer_non_negative     → InvalidArgumentError
- bin                                            → BinaryNotFoundError / BinaryNotExecutableError /
                                                   BinaryNotInPathError

not_flag is the argument-injection guard: tools are invoked without a shell, so
quoting cannot help; a positional value shaped like a flag must be rejected outright.
"""
import logging
import math

from . import environ
from .faults import *

logger = logging.getLogger(__name__)


def _is_number(object):
    if isinstance(object, bool):
        return False
    if isinstance(object, float):
        return math.isfinite(object)
    return isinstance(object, int)


def non_empty_string(object, label, /):
    if not isinstance(object, str) or not object:
        raise InvalidArgumentError(f"{label} must be a non-empty string", label=label, value=object)


def not_flag(object, label, /):
    non_empty_string(object, label)
    if object.startswith("-"):
        raise InvalidArgumentError(f"{label} must not start with '-': {object}", label=label, value=object)


def number(object, label, /):
    if not _is_number(object):
        raise InvalidArgumentError(f"{label} must be a number", label=label, value=object)


def number_min(object, label, min=0, /):
    number(object, label)
    if min is not None and object < min:
        raise InvalidArgumentError(f"{label} must be >= {min}", label=label, value=object)


def number_non_negative(object, label, /):
    if not _is_number(object) or object < 0:
        raise InvalidArgumentError(f"{label} must be a non-negative number", label=label, value=object)


def integer(object, label, /):
    if isinstance(object, float) and math.isfinite(object) and object.is_integer():
        return
    if isinstance(object, bool) or not isinstance(object, int):
        raise InvalidArgumentError(f"{label} must be an integer", label=label, value=object)


def integer_min(object, label, min=None, /):
    integer(object, label)
    if min is not None and object < min:
        raise InvalidArgumentError(f"{label} must be >= {min}", label=label, value=object)


def integer_non_negative(object, label, /):
    integer_min(object, label, 0)


def bin(reference, label="binary", /):
    """
    check that an executable reference can be launched.

    resolution
    - path-like (contains '/' or '\\'): must exist, then must be executable.
    - bare name: must resolve through PATH.

    the probes live in argwright.environ and are looked up at call time.
    """
    if not isinstance(reference, str) or not reference:
        raise InvalidArgumentError(f"{label} is not set", label=label, value=reference)

    if "/" in reference or "\\" in reference:
        if not environ.exists(reference):
            raise BinaryNotFoundError(f"{label} does not exist: {reference}", label=label, value=reference)
        if not environ.is_executable(reference):
            raise BinaryNotExecutableError(f"{label} is not executable: {reference}", label=label, value=reference)
        logger.debug("%s resolved by path: %s", label, reference)
        return

    if not environ.is_in_path(reference):
        raise BinaryNotInPathError(f"{label} is not in PATH: {reference}", label=label, value=reference)
    logger.debug("%s resolved through PATH: %s", label, reference)


__all__ = (
    "non_empty_string",
    "not_flag",
    "number",
    "number_min",
    "number_non_negative",
    "integer",
    "integer_min",
    "integer_non_negative",
    "bin",
)
