"""
Fail-fast contract checks for the environment a command will run in.

- bin(reference): the executable can be launched; returns its resolved path.
- bins(references): bin() for several executables; returns {reference: path}.
- env(keys): required environment variables are set; returns their values.

Each helper accepts an optional hint that replaces the default remediation hint of
the raised fault.
"""
import logging

from . import environ
from . import validate
from .faults import *
from .utils import *

logger = logging.getLogger(__name__)


def bin(reference, /, label="binary", hint=Unset):
    """
    ensure an executable exists (explicit path or bare name on PATH).

    returns
    - the reference itself for path-like references,
    - the PATH-resolved location for bare names (falling back to the name).
    """
    try:
        validate.bin(reference, label)
    except CommandException as fault:
        if hint is Unset:
            raise
        raise fault.__replace__(hint=hint) from None

    if "/" in reference or "\\" in reference:
        resolved = reference
    else:
        resolved = environ.which(reference) or reference
    logger.debug("ensured %s: %s", label, resolved)
    return resolved


def bins(references, /, label="binary", hint=Unset):
    """
    ensure a set of executables; returns a mapping of reference to resolved path.
    """
    return {reference: bin(reference, label=label, hint=hint) for reference in listify(references, "bins")}


def env(keys, /, allow_empty=False, hint=Unset):
    """
    ensure environment variables are set.

    returns the value for a single key (str), or a mapping for a list of keys.
    empty values count as missing unless allow_empty is True.
    """
    def require(key):
        validate.non_empty_string(key, "env key")
        value = environ.getenv(key)
        if value is None or (not allow_empty and value == ""):
            options = {"label": key, "value": value}
            if hint is not Unset:
                options["hint"] = hint
            raise MissingEnvironmentError(f"required environment variable is not set: {key}", **options)
        return value

    if isinstance(keys, str):
        return require(keys)
    return {key: require(key) for key in listify(keys, "env keys")}


__all__ = (
    "bin",
    "bins",
    "env",
)
