"""
Argwright faults (build errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every way a build can fail.
  Codes are grouped by domain to keep copy consistent and make logs/searches predictable.
- CommandException: base type that carries message + options and knows how to render
  itself in a friendly, lowercased, and actionable way.
- Concrete faults: one class per failure kind (invalid argument, type mismatch,
  conflicting options, unresolvable binary, missing environment).
- trigger(): central entry point to surface a fault (respecting shell/deferred/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Propagation
- Faults are raised synchronously at the point of detection; the first one wins.
- Every concrete fault also inherits the closest builtin (ValueError, TypeError,
  LookupError) so generic handlers keep working.

Integration
- Library code raises faults directly. Host applications that want a rendered report
  instead of a traceback call trigger(fault, shell=True, **style).
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the library (stable identifiers).

    grouping (by high-level domain)
    - arguments (1110x)
      • INVALID_ARGUMENT, TYPE_MISMATCH, UNKNOWN_OPTION
    - options (1111x)
      • CONFLICTING_OPTIONS
    - binaries (1112x)
      • BINARY_NOT_FOUND, BINARY_NOT_EXECUTABLE, BINARY_NOT_IN_PATH
    - environment (1113x)
      • MISSING_ENVIRONMENT

    rationale
    - codes are discoverable (searchable in logs and docs) and normalized to a string
      via normalize() so hosts can remap them if desired (e.g., to shorter labels).
    """
    # --- argument errors (1110x) ---
    INVALID_ARGUMENT            = 11101
    TYPE_MISMATCH               = 11102
    UNKNOWN_OPTION              = 11103

    # --- option set errors (1111x) ---
    CONFLICTING_OPTIONS         = 11111

    # --- binary resolution errors (1112x) ---
    BINARY_NOT_FOUND            = 11121
    BINARY_NOT_EXECUTABLE       = 11122
    BINARY_NOT_IN_PATH          = 11123

    # --- environment errors (1113x) ---
    MISSING_ENVIRONMENT         = 11131

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class CommandException(Exception):
    """
    base class of every fault raised while building a command.

    attributes
    - message: one-sentence description, already carrying the offending label.
    - options: read-only mapping of context (label, value, hint, tool, and any
      rendering option merged by trigger()).
    - code/title: class-level identity used by the renderer.
    """
    code = None
    title = "command fault"
    hint = "check the options passed to the builder"

    def __init__(self, message, /, **options):
        if not isinstance(message, str):
            raise TypeError(f"{type(self).__name__}() message must be a string")
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def label(self):
        return self.options.get("label")

    @property
    def value(self):
        return self.options.get("value")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("tool", "argwright")), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.code.normalize() if self.code is not None else "-", styler("code")),
            " | ",
            text(self.options.get("title", self.title).title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        hint = Text.assemble(
            text(" → ", styler("hint-arrow")),
            text(self.options.get("hint", self.hint), styler("hint"))
        )

        if fancy:
            try:
                width = int((console.width - 4) * self.options["ratio"])
            except KeyError:
                width = None
            return Panel(Group(message, hint), title=header, title_align="left", width=width)

        return Group(header, message, hint)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        if self.options.get("deferred", False):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        fault = type(self)(self.message, **{**self.options, **overrides})
        fault.__traceback__ = self.__traceback__
        return fault


class InvalidArgumentError(CommandException, ValueError):
    code = FaultCode.INVALID_ARGUMENT
    title = "invalid argument"
    hint = "fix the value and build again"


class TypeMismatchError(CommandException, TypeError):
    code = FaultCode.TYPE_MISMATCH
    title = "type mismatch"
    hint = "pass a boolean, a scalar, a list or a mapping as the option expects"


class UnknownOptionError(CommandException, TypeError):
    code = FaultCode.UNKNOWN_OPTION
    title = "unknown option"
    hint = "check the option name against the tool's documented options"


class ConflictingOptionsError(CommandException, ValueError):
    code = FaultCode.CONFLICTING_OPTIONS
    title = "conflicting options"
    hint = "set at most one of the mutually exclusive options"


class BinaryNotFoundError(CommandException, LookupError):
    code = FaultCode.BINARY_NOT_FOUND
    title = "binary not found"
    hint = "install the tool or point the wrapper at an existing path"


class BinaryNotExecutableError(CommandException, LookupError):
    code = FaultCode.BINARY_NOT_EXECUTABLE
    title = "binary not executable"
    hint = "mark the file executable (chmod +x) or use another path"


class BinaryNotInPathError(CommandException, LookupError):
    code = FaultCode.BINARY_NOT_IN_PATH
    title = "binary not in path"
    hint = "install the tool or extend PATH so it can be resolved"


class MissingEnvironmentError(CommandException, LookupError):
    code = FaultCode.MISSING_ENVIRONMENT
    title = "missing environment"
    hint = "export the variable before building the command"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see CommandException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console; otherwise, the fault is raised.

    typical options
    - shell, fancy, colorful, deferred, tool, title, hint, and any other context the
      reporter may want to show (e.g., label/value).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    lookup
    - the host application may expose a __docs__ mapping in __main__ where keys
      are FaultCode instances and values are short documentation strings.
    - when not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "CommandException",
    "InvalidArgumentError",
    "TypeMismatchError",
    "UnknownOptionError",
    "ConflictingOptionsError",
    "BinaryNotFoundError",
    "BinaryNotExecutableError",
    "BinaryNotInPathError",
    "MissingEnvironmentError",
    "FaultCode",
    "trigger",
    "getdoc",
)
