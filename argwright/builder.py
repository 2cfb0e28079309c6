r"""
Argwright argument builder.

Overview
- ArgumentBuilder binds one target argv (a list, usually pre-seeded with the program)
  and one read-only options mapping, and exposes chainable operations that turn
  options into ordered argv tokens.
- builder(argv, options): factory, the usual entry point.

Operations (each returns the builder; each is a no-op when the option is absent or None)
- flag(key, literal)                 bool        → literal
- value(key, literal, ...)           scalar      → literal value   | literal=value
- value_string / value_token         scalar      → value(...) validated by non_empty_string / not_flag
- value_number(key, literal, ...)    number      → value(...) validated by number/integer rules
- repeatable(key, literal, ...)      str | list  → literal v1 literal v2 ...
- repeatable_map(key, literal, ...)  mapping     → literal k1 v1 literal k2 v2 ... (keys sorted)
- bool_or_value / bool_or_equals     True|scalar → literal | literal value | literal=value
- count(key, literal, ...)           True|int    → literal repeated
- mutually_exclusive(keys, label)    fails when more than one key is set
- extra(key="extra")                 list        → tokens verbatim (caller-controlled escape hatch)
- terminator()                       → "--"
- literal(*tokens)                   → wrapper-chosen tokens (subcommand words, forced flags)
- option(literal, value, label)      → literal value   | literal=value, for method arguments
- operand(value, label) / operands(values, label)  → positional arguments

Commit discipline
- Operations stage their tokens; the bound argv is only extended by commit().
- Used as a context manager, the builder commits on a clean exit and discards the
  staged tokens when the block raises, so a failed build never leaves a partial argv.

Quick example:
    >>> argv = ["cp"]
    >>> with builder(argv, {"recursive": True, "verbose": True}) as b:
    ...     b.flag("recursive", "-r").flag("verbose", "-v").terminator().operands(["a", "b"], "src")
    ...
    >>> argv
    ['cp', '-r', '-v', '--', 'a', 'b']
"""
import logging
from collections.abc import Mapping
from types import MappingProxyType

from . import validate as _validate
from .faults import *
from .utils import *

logger = logging.getLogger(__name__)

MODES = frozenset({"pair", "equals"})


def _check_mode(mode):
    if mode not in MODES:
        raise ValueError(f"mode must be one of {sorted(MODES)!r}, got {mode!r}")


def _check_validator(validator, name="validate"):
    if validator is not None and not callable(validator):
        raise TypeError(f"{name!r} must be callable")


class ArgumentBuilder:
    """
    Stateful helper that accumulates argv tokens from an options mapping.

    State
    - target argv (bound, extended only on commit),
    - options (read-only view, never mutated),
    - staged tokens (discarded on failure).

    A builder is made for a single command and is not reused across commands.
    """
    __slots__ = ("_argv", "_options", "_staged")

    def __init__(self, argv, options=None, /):
        if not isinstance(argv, list):
            raise TypeError("builder() argv must be a list")
        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            raise TypeMismatchError(
                f"options must be a mapping, got {type(options).__name__}",
                label="options",
                value=options,
            )
        self._argv = argv
        self._options = MappingProxyType(options)
        self._staged = []

    @property
    def options(self):
        return self._options

    @property
    def tokens(self):
        """
        Tokens staged so far (not yet committed to the bound argv).
        """
        return tuple(self._staged)

    def _isset(self, key):
        value = self._options.get(key)
        return value is not None and value is not False

    def _emit(self, literal, token, mode):
        if mode == "equals":
            self._staged.append(f"{literal}={token}")
        else:
            self._staged.extend((literal, token))

    def flag(self, key, literal, /):
        """
        Append `literal` when options[key] is True.
        """
        if (value := self._options.get(key)) is None:
            return self
        if not isinstance(value, bool):
            raise TypeMismatchError(
                f"{key} must be a boolean, got {type(value).__name__}",
                label=key,
                value=value,
            )
        if value:
            self._staged.append(literal)
        return self

    def value(self, key, literal, /, *, label=Unset, validate=None, mode="pair"):
        """
        Append `literal value` (mode="pair") or `literal=value` (mode="equals").

        The optional validator runs as validate(value, label) before anything is staged.
        """
        _check_mode(mode)
        _check_validator(validate)
        if (value := self._options.get(key)) is None:
            return self
        label = coalesce(label, key)
        token = stringify(value, label)
        if validate is not None:
            validate(value, label)
        self._emit(literal, token, mode)
        return self

    def value_string(self, key, literal, /, *, label=Unset, mode="pair"):
        return self.value(key, literal, label=label, validate=_validate.non_empty_string, mode=mode)

    def value_token(self, key, literal, /, *, label=Unset, mode="pair"):
        return self.value(key, literal, label=label, validate=_validate.not_flag, mode=mode)

    def value_number(self, key, literal, /, *, label=Unset, min=Unset, integer=False, non_negative=False, mode="pair"):
        """
        Append a validated number.

        Sub-options
        - min: lower bound (inclusive).
        - integer: require a whole number; it is emitted without a fractional part.
        - non_negative: lower bound of 0 (combined with min, the stricter wins).
        """
        _check_mode(mode)
        if (value := self._options.get(key)) is None:
            return self
        label = coalesce(label, key)

        bound = min
        if non_negative:
            bound = 0 if bound is Unset else max(bound, 0)

        if integer:
            _validate.integer_min(value, label, coalesce(bound))
            token = str(int(value))
        else:
            if bound is Unset:
                _validate.number(value, label)
            else:
                _validate.number_min(value, label, bound)
            token = stringify(value, label)

        self._emit(literal, token, mode)
        return self

    def repeatable(self, key, literal, /, *, label=Unset, validate=None, mode="pair"):
        """
        Append one `literal value` pair per element, in the caller's order.

        A single string is accepted as a one-element list; an empty list is rejected.
        """
        _check_mode(mode)
        _check_validator(validate)
        if (value := self._options.get(key)) is None:
            return self
        label = coalesce(label, key)
        values = listify(value, label)
        if validate is not None:
            for element in values:
                validate(element, label)
        for element in values:
            self._emit(literal, element, mode)
        return self

    def repeatable_map(self, key, literal, /, *, label=Unset, key_validate=None, value_validate=None):
        """
        Append `literal name value` triples for a string-keyed mapping.

        Keys are iterated in sorted order, never in the mapping's native order, so the
        produced argv is byte-identical across runs and platforms.
        """
        _check_validator(key_validate, "key_validate")
        _check_validator(value_validate, "value_validate")
        if (value := self._options.get(key)) is None:
            return self
        label = coalesce(label, key)
        if not isinstance(value, Mapping):
            raise TypeMismatchError(
                f"{label} must be a mapping, got {type(value).__name__}",
                label=label,
                value=value,
            )

        triples = []
        for name in sorted_keys(value):
            if not isinstance(name, str):
                raise TypeMismatchError(
                    f"{label} keys must be strings, got {type(name).__name__}",
                    label=label,
                    value=name,
                )
            if key_validate is None:
                _validate.non_empty_string(name, label + " name")
            else:
                key_validate(name, label)
            token = stringify(item := value[name], f"{label} {name}")
            if value_validate is not None:
                value_validate(item, label)
            triples.extend((literal, name, token))

        self._staged.extend(triples)
        return self

    def bool_or_value(self, key, literal, /, *, label=Unset, validate=None, mode="pair"):
        """
        True → bare literal; scalar → literal with the validated value; False is rejected.
        """
        _check_mode(mode)
        _check_validator(validate)
        if (value := self._options.get(key)) is None:
            return self
        label = coalesce(label, key)
        if value is True:
            self._staged.append(literal)
            return self
        if value is False:
            raise InvalidArgumentError(
                f"{label} must be true or a value, false is ambiguous",
                label=label,
                value=value,
            )
        token = stringify(value, label)
        if validate is not None:
            validate(value, label)
        self._emit(literal, token, mode)
        return self

    def bool_or_equals(self, key, literal, /, *, label=Unset, validate=None):
        return self.bool_or_value(key, literal, label=label, validate=validate, mode="equals")

    def count(self, key, literal, /, *, label=Unset, true_count=1, min=1):
        """
        Repeat `literal`: true_count times for True, n times for an integer n >= min.
        """
        if (value := self._options.get(key)) is None or value is False:
            return self
        label = coalesce(label, key)
        if value is True:
            self._staged.extend([literal] * true_count)
            return self
        _validate.integer_min(value, label, min)
        self._staged.extend([literal] * int(value))
        return self

    def mutually_exclusive(self, keys, /, label=Unset):
        """
        Fail with ConflictingOptionsError when more than one of `keys` is set.

        An option counts as set when it is neither absent, None nor False.
        """
        if isinstance(keys, str) or not is_sequence(keys) or len(keys) < 2:
            raise TypeError("mutually_exclusive() keys must be a list of at least two option names")
        conflicting = [key for key in keys if self._isset(key)]
        if len(conflicting) > 1:
            label = coalesce(label, " and ".join(keys) if len(keys) == 2 else "/".join(keys))
            raise ConflictingOptionsError(
                f"{label} are mutually exclusive",
                label=label,
                value=tuple(conflicting),
            )
        return self

    def extra(self, key="extra", /):
        """
        Append caller-supplied tokens verbatim.

        This is the explicit escape hatch for anything not modeled; entries are raw,
        trusted tokens by contract, so only their shape is checked.
        """
        if (value := self._options.get(key)) is None:
            return self
        if not is_sequence(value):
            raise TypeMismatchError(
                f"{key} must be a list, got {type(value).__name__}",
                label=key,
                value=value,
            )
        self._staged.extend(stringify(token, key) for token in value)
        return self

    def terminator(self):
        """
        Append the explicit end-of-options marker.
        """
        self._staged.append("--")
        return self

    def literal(self, *tokens):
        """
        Append tokens chosen by the wrapper itself: subcommand words, forced flags.

        They carry no caller data, so no flag guard applies.
        """
        for token in tokens:
            _validate.non_empty_string(token, "literal")
        self._staged.extend(tokens)
        return self

    def option(self, literal, value, label, /, *, mode="pair"):
        """
        Append `literal value` for a value handed to the method rather than read from options.
        """
        _check_mode(mode)
        _validate.non_empty_string(value, label)
        self._emit(literal, value, mode)
        return self

    def operand(self, value, label, /, *, guard=False):
        """
        Append one positional argument; guard=True rejects flag-shaped values.
        """
        if guard:
            _validate.not_flag(value, label)
        else:
            _validate.non_empty_string(value, label)
        self._staged.append(value)
        return self

    def operands(self, values, label, /, *, guard=False):
        """
        Append positional arguments from a string or a non-empty list of strings.
        """
        values = listify(values, label)
        if guard:
            for value in values:
                _validate.not_flag(value, label)
        self._staged.extend(values)
        return self

    def commit(self):
        """
        Move the staged tokens into the bound argv and return it.
        """
        self._argv.extend(self._staged)
        logger.debug("committed %d token(s) to argv", len(self._staged))
        self._staged.clear()
        return self._argv

    def discard(self):
        self._staged.clear()
        return self

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback, /):
        if type is None:
            self.commit()
        else:
            self.discard()
        return False

    def __repr__(self):
        return f"argument-builder(argv={self._argv!r}, staged={self._staged!r})"


def builder(argv, options=None, /):
    """
    Bind a target argv and an options mapping for a single build.

    Parameters
    - argv: list that receives the tokens on commit (pre-seed it with the program).
    - options: mapping of option values, or None.
    """
    return ArgumentBuilder(argv, options)


__all__ = (
    "ArgumentBuilder",
    "builder",
)
