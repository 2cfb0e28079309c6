"""
Shared plumbing of the tool wrappers.

Every wrapper is a Tool subclass declaring
- bin: the default executable (overridable per instance: Cp("/opt/bin/cp")),
- __options__: the option names its methods accept as keyword arguments,
- _apply(builder): how the modeled options become argv tokens, in the tool's order.

Every public method follows the same four steps: reject unknown options, ensure the
binary, build argv through one ArgumentBuilder, return a Command.
"""
import logging
import re

from .. import ensure
from ..builder import builder
from ..command import Command
from ..faults import *
from ..utils import *

logger = logging.getLogger(__name__)


class ToolType(type):
    """
    Metaclass for wrappers.

    Responsibilities
    - derive __typename__ from the class name (camel-case split with hyphens),
      used in labels and messages.
    - freeze __options__ into a frozenset, merging the options declared by bases.
    - reject malformed declarations at class creation time.
    """

    def __new__(cls, name, bases, namespace, **options):
        declared = namespace.get("__options__", ())
        if isinstance(declared, str) or not all(isinstance(option, str) for option in declared):
            raise TypeError(f"{name} '__options__' must be an iterable of strings")

        inherited = frozenset().union(*(getattr(base, "__options__", ()) for base in bases))

        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
                "__options__": inherited | frozenset(declared),
            },
            **options,
        )

        if not isinstance(self.bin, str | UnsetType) or self.bin == "":
            raise TypeError(f"{name} 'bin' must be a non-empty string")

        return self


class Tool(metaclass=ToolType):
    """
    Base class of the wrappers.

    Options are passed as keyword arguments, so each call works on its own fresh
    mapping; wrappers that derive defaults copy it first (clone_options).
    """
    bin = Unset
    __options__ = ("extra",)

    def __init__(self, bin=Unset, /):
        bin = coalesce(bin, type(self).bin)
        if not isinstance(bin, str) or not bin:
            raise TypeError(f"{type(self).__typename__} 'bin' must be a non-empty string")
        self.bin = bin

    @property
    def label(self):
        return f"{type(self).__typename__} binary"

    def _check(self, options, /, *accepted):
        """
        Reject option names the called method does not know about.
        """
        unknown = sorted(set(options) - type(self).__options__ - frozenset(accepted))
        if unknown:
            raise UnknownOptionError(
                f"{type(self).__typename__} does not accept option(s): {', '.join(unknown)}",
                label=unknown[0],
                value=tuple(unknown),
                tool=type(self).__typename__,
            )
        return options

    def _start(self):
        ensure.bin(self.bin, label=self.label)
        return [self.bin]

    def _finish(self, argv, /):
        command = Command.from_argv(argv)
        logger.debug("built %s command: %r", type(self).__typename__, command)
        return command

    def _apply(self, builder, /):
        raise NotImplementedError(f"{type(self).__typename__} does not model any option")

    def raw(self, argv, /, **options):
        """
        Low-level escape hatch.

        Builds: `<bin> <modeled options...> <argv...>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.operands(argv, "argv")
        return self._finish(args)

    def __repr__(self):
        return f"{type(self).__typename__}(bin={self.bin!r})"


__all__ = (
    "ToolType",
    "Tool",
)
