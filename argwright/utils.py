"""
Argwright utilities (internal helpers, carefully exposed)

Scope
- Small, pure building blocks shared by the builder and the tool wrappers.
- Public-but-internal leaning: stable enough for consumers, designed primarily
  to support the builder layer.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/[].

- is_scalar(value) / is_sequence(value)
  • Shape predicates for option values: scalars are str/int/float (never bool),
    sequences are lists and tuples (never strings).

- stringify(value, label)
  • Render a scalar option value as an argv token.

- listify(value, label)
  • Normalize “a string or a list of strings” into a fresh list, rejecting empty lists.

- sorted_keys(mapping)
  • Deterministic key order for map-valued options (sorted by str(key)).

- join_csv(value, label)
  • Collapse “a string or a list of strings” into one comma-separated token.

- clone_options(options, *fields)
  • Copy an options mapping before deriving defaults into it, so caller input is never mutated.

Stability and contract
- These utilities are part of the package’s supported surface and are re-exported via __all__.
- Names not in __all__ are internal and may change without notice.

Quick examples
    >>> listify("a", "src")
    ['a']
    >>> sorted_keys({"z": "1", "a": "2"})
    ['a', 'z']
    >>> join_csv(["name", "size"], "output")
    'name,size'
"""
import functools
import math
from collections.abc import Mapping
from typing import final

from .faults import InvalidArgumentError, TypeMismatchError
from .validate import non_empty_string


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    This is used when None is a legitimate user value, but the API needs a way
    to distinguish “not provided” from “provided as None”. A single instance,
    Unset, is exposed for use as the default in internal parameters.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when UnsetType appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        """
        Ensure a single instance for this sentinel type.
        """
        return super().__new__(cls)

    def __bool__(self):
        """
        Falsey sentinel: allows simple truthiness checks without equating Unset to None.
        """
        return False

    def __repr__(self):
        """
        Human-friendly representation used in logs and errors.
        """
        return "Unset"

    def __init_subclass__(cls, **options):
        """
        Disallow subclassing to preserve sentinel semantics.
        """
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve an internal Unset sentinel to a concrete default.

    This returns the given object unless it is the Unset sentinel, in which case
    the provided default is returned. Importantly, falsey values like None, 0, "",
    or [] are preserved as-is: they are not treated as “unset”.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None   # None is preserved, not replaced
    """
    return object if object is not Unset else default


def is_scalar(object, /):
    """
    True for option values that render as a single argv token.

    Booleans are excluded on purpose: bool is an int subclass in Python, and a
    stray True must never be rendered as "True" or "1".
    """
    if isinstance(object, bool):
        return False
    if isinstance(object, float):
        return math.isfinite(object)
    return isinstance(object, str | int)


def is_sequence(object, /):
    """
    True for ordered collections accepted as list-valued options (list/tuple).
    """
    return isinstance(object, list | tuple)


def stringify(object, label="value", /):
    """
    Render a scalar as an argv token.

    Raises
    - TypeMismatchError: when the value is not a scalar (see is_scalar).
    """
    if not is_scalar(object):
        raise TypeMismatchError(
            f"{label} must be a string or a number, got {type(object).__name__}",
            label=label,
            value=object,
        )
    return object if isinstance(object, str) else str(object)


def listify(object, label, /):
    """
    Normalize a “string or list of strings” value into a fresh list.

    Behavior
    - str: validated as non-empty, returned as a one-element list.
    - list/tuple: must be non-empty; every element validated as a non-empty string.
    - anything else: TypeMismatchError.

    The caller's list is never returned as-is, so later appends cannot leak back.
    """
    if isinstance(object, str):
        non_empty_string(object, label)
        return [object]
    if not is_sequence(object):
        raise TypeMismatchError(
            f"{label} must be a string or a list of strings, got {type(object).__name__}",
            label=label,
            value=object,
        )
    if not object:
        raise InvalidArgumentError(f"{label} must be non-empty", label=label, value=object)
    for element in object:
        non_empty_string(element, label)
    return list(object)


def sorted_keys(mapping, /):
    """
    Keys of a mapping in deterministic order: sorted by their string form.

    Map-valued options must yield byte-identical argv across runs, so the native
    mapping order is never used.
    """
    if not isinstance(mapping, Mapping):
        raise TypeError("sorted_keys() argument must be a mapping")
    return sorted(mapping, key=str)


def join_csv(object, label, /):
    """
    Collapse a “string or list of strings” value into one comma-separated token.
    """
    return ",".join(listify(object, label))


def clone_options(options, /, *fields):
    """
    Shallow-copy an options mapping, copying the named list-valued fields too.

    Wrappers that derive a default into the options (e.g., “into” forcing a target
    directory) work on this copy; the caller's mapping and lists stay untouched.
    """
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise TypeMismatchError(
            f"options must be a mapping, got {type(options).__name__}",
            label="options",
            value=options,
        )
    clone = dict(options)
    for field in fields:
        if is_sequence(value := clone.get(field)):
            clone[field] = list(value)
    return clone


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a valid, user-meaningful value but you still
need to distinguish “no input” from “explicitly passed None”.
"""


__all__ = (
    # Functions
    "coalesce",
    "is_scalar",
    "is_sequence",
    "stringify",
    "listify",
    "sorted_keys",
    "join_csv",
    "clone_options",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
