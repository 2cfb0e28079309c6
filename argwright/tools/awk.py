"""
awk wrapper (POSIX awk, with the common gawk long options).

Options (in emission order)
- extra                       list         emitted first, verbatim
- posix, traditional, lint, interval, bignum, sandbox, csv, optimize,
  ignore_case, characters_as_bytes, use_lc_numeric
                              bool         --posix --traditional ...
- debug, profile, pretty_print, dump_variables
                              True | str   --debug | --debug=<file> ...
- field_sep                   str          -F <sep>
- includes                    str | list   -i <lib> ...
- vars                        mapping | list of "k=v"   -v k=v ... (mapping keys sorted)

Method-only option
- assigns                     mapping | list of "k=v"   emitted after the program(s)
"""
from collections.abc import Mapping

from .. import validate
from ..builder import builder
from ..utils import listify, sorted_keys, stringify
from .base import Tool

LONG_FLAGS = (
    "posix",
    "traditional",
    "lint",
    "interval",
    "bignum",
    "sandbox",
    "csv",
    "optimize",
    "ignore_case",
    "characters_as_bytes",
    "use_lc_numeric",
)

OPTIONAL_VALUE_FLAGS = (
    "debug",
    "profile",
    "pretty_print",
    "dump_variables",
)


def _assignments(object, label, /):
    """
    `k=v` tokens from a mapping (sorted by key) or a list of preformatted strings.

    The presence of '=' in preformatted strings is left to the caller.
    """
    if not isinstance(object, Mapping):
        return listify(object, label)
    tokens = []
    for name in sorted_keys(object):
        validate.non_empty_string(name, f"{label} name")
        tokens.append(f"{name}={stringify(object[name], f'{label} {name}')}")
    return tokens


class Awk(Tool):
    bin = "awk"
    __options__ = LONG_FLAGS + OPTIONAL_VALUE_FLAGS + ("field_sep", "includes", "vars")

    def _apply(self, b, /):
        b.extra()
        for key in LONG_FLAGS:
            b.flag(key, "--" + key.replace("_", "-"))
        for key in OPTIONAL_VALUE_FLAGS:
            b.bool_or_equals(key, "--" + key.replace("_", "-"), validate=validate.non_empty_string)
        b.value_string("field_sep", "-F") \
            .repeatable("includes", "-i", label="include")
        if (vars := b.options.get("vars")) is not None:
            for token in _assignments(vars, "var"):
                b.option("-v", token, "var")

    def _program(self, head, inputs, options, /):
        self._check(options, "assigns")
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            head(b)
            if (assigns := options.get("assigns")) is not None:
                b.operands(_assignments(assigns, "assign"), "assign", guard=True)
            if inputs is not None:
                b.operands(inputs, "input", guard=True)
        return self._finish(args)

    def eval(self, program, inputs=None, /, **options):
        """
        Inline program mode.

        Builds: `awk <opts...> <program> [assigns...] [inputs...]`
        """
        return self._program(lambda b: b.operand(program, "program", guard=True), inputs, options)

    def source(self, programs, inputs=None, /, **options):
        """
        Multiple programs mode (gawk).

        Builds: `awk <opts...> -e <p1> -e <p2> ... [assigns...] [inputs...]`
        """
        def head(b):
            for program in listify(programs, "programs"):
                b.option("-e", program, "program")
        return self._program(head, inputs, options)

    def file(self, scripts, inputs=None, /, **options):
        """
        Script file mode.

        Builds: `awk <opts...> -f <s1> -f <s2> ... [assigns...] [inputs...]`
        """
        def head(b):
            for script in listify(scripts, "scripts"):
                b.option("-f", script, "script")
        return self._program(head, inputs, options)


__all__ = ("Awk",)
