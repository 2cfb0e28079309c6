"""
jq wrapper.

Builds `jq` invocations; never runs them.

Options (in emission order)
- null_input, raw_input, slurp                     -n -R -s
- compact_output, raw_output, join_output          -c -r -j
- sort_keys, monochrome_output, color_output       -S -M -C   (monochrome/color exclusive)
- exit_status, ascii_output                        -e -a
- tab                                              --tab
- indent            int >= 0                       --indent <n>
- arg, argjson, slurpfile, rawfile   {name: value} --arg <name> <value> ... (names sorted)
- extra             list                           appended verbatim after the modeled options

Variable names must be valid jq identifiers: ^[A-Za-z_][A-Za-z0-9_]*$
"""
import re

from .. import validate
from ..builder import builder
from ..faults import InvalidArgumentError
from ..utils import clone_options
from .base import Tool

IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _variable(name, label, /):
    label = f"{label} name"
    validate.non_empty_string(name, label)
    if not IDENTIFIER.fullmatch(name):
        raise InvalidArgumentError(
            f"{label} must match ^[A-Za-z_][A-Za-z0-9_]*$: {name}",
            label=label,
            value=name,
        )


class Jq(Tool):
    bin = "jq"
    __options__ = (
        "null_input",
        "raw_input",
        "slurp",
        "compact_output",
        "raw_output",
        "join_output",
        "sort_keys",
        "monochrome_output",
        "color_output",
        "exit_status",
        "ascii_output",
        "tab",
        "indent",
        "arg",
        "argjson",
        "slurpfile",
        "rawfile",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["color_output", "monochrome_output"])
        b.flag("null_input", "-n") \
            .flag("raw_input", "-R") \
            .flag("slurp", "-s") \
            .flag("compact_output", "-c") \
            .flag("raw_output", "-r") \
            .flag("join_output", "-j") \
            .flag("sort_keys", "-S") \
            .flag("monochrome_output", "-M") \
            .flag("color_output", "-C") \
            .flag("exit_status", "-e") \
            .flag("ascii_output", "-a") \
            .flag("tab", "--tab") \
            .value_number("indent", "--indent", integer=True, min=0)
        for key in ("arg", "argjson", "slurpfile", "rawfile"):
            b.repeatable_map(key, f"--{key}", key_validate=_variable)
        b.extra()

    def eval(self, filter=".", inputs=None, /, **options):
        """
        Evaluate a jq filter; jq reads stdin when inputs is None.

        Builds: `jq <opts...> -- <filter> [inputs...]`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operand("." if filter is None else filter, "filter")
            if inputs is not None:
                b.operands(inputs, "input", guard=True)
        return self._finish(args)

    def eval_file(self, file, inputs=None, /, **options):
        """
        Evaluate a jq program stored in a file.

        Builds: `jq <opts...> -f <file> [inputs...]`
        """
        self._check(options)
        options = clone_options(options, "extra")
        options["from_file"] = file
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.value_string("from_file", "-f", label="file")
            if inputs is not None:
                b.operands(inputs, "input", guard=True)
        return self._finish(args)


__all__ = ("Jq",)
