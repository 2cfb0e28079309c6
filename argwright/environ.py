"""
Environment and filesystem probes consumed by the validators.

These are the only places where the library looks outside the process: PATH lookup,
file existence, the executable bit, and environment variables. Callers (and tests)
replace them by patching the module attributes; the validators always look them up
at call time.
"""
import os
import shutil


def is_in_path(name, /):
    """
    true when a bare executable name resolves through PATH.
    """
    return shutil.which(name) is not None


def which(name, /):
    """
    full path of a bare executable name, or None when it is not on PATH.
    """
    return shutil.which(name)


def exists(path, /):
    return os.path.exists(path)


def is_executable(path, /):
    return os.path.isfile(path) and os.access(path, os.X_OK)


def getenv(key, /):
    return os.environ.get(key)


__all__ = (
    "is_in_path",
    "which",
    "exists",
    "is_executable",
    "getenv",
)
