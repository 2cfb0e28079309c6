"""
grep wrapper.

Builds `grep` invocations; never runs them.

Options (in emission order)
- extended / fixed / perl                    -E | -F | -P        (mutually exclusive)
- ignore_case, word, line, invert            -i -w -x -v
- count, quiet, line_number                  -c -q -n
- files_with_matches, files_without_matches  -l -L
- with_filename / no_filename                -H | -h             (mutually exclusive)
- recursive / recursive_follow               -r | -R             (mutually exclusive)
- max_count          number >= 1             -m <n>
- after_context      number >= 0             -A <n>
- before_context     number >= 0             -B <n>
- context            number >= 0             -C <n>              (exclusive with -A/-B)
- null, null_data, text, binary_without_match  -Z -z -a -I
- color              True | str              --color=auto | --color=<when>
- include, exclude, exclude_dir  str | list  --include=<glob> ... (GNU)
- extra              list                    appended verbatim after the modeled options

Patterns are always emitted as `-e <pattern>` so a pattern starting with '-' is
never read as an option.
"""
from ..builder import builder
from ..utils import clone_options
from .base import Tool


class Grep(Tool):
    bin = "grep"
    __options__ = (
        "extended",
        "fixed",
        "perl",
        "ignore_case",
        "word",
        "line",
        "invert",
        "count",
        "quiet",
        "line_number",
        "files_with_matches",
        "files_without_matches",
        "with_filename",
        "no_filename",
        "recursive",
        "recursive_follow",
        "max_count",
        "after_context",
        "before_context",
        "context",
        "null",
        "null_data",
        "text",
        "binary_without_match",
        "color",
        "include",
        "exclude",
        "exclude_dir",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["extended", "fixed", "perl"]) \
            .mutually_exclusive(["with_filename", "no_filename"]) \
            .mutually_exclusive(["recursive", "recursive_follow"]) \
            .mutually_exclusive(["context", "after_context"], label="context and after_context/before_context") \
            .mutually_exclusive(["context", "before_context"], label="context and after_context/before_context")

        b.flag("extended", "-E") \
            .flag("fixed", "-F") \
            .flag("perl", "-P") \
            .flag("ignore_case", "-i") \
            .flag("word", "-w") \
            .flag("line", "-x") \
            .flag("invert", "-v") \
            .flag("count", "-c") \
            .flag("quiet", "-q") \
            .flag("line_number", "-n") \
            .flag("files_with_matches", "-l") \
            .flag("files_without_matches", "-L") \
            .flag("with_filename", "-H") \
            .flag("no_filename", "-h") \
            .flag("recursive", "-r") \
            .flag("recursive_follow", "-R") \
            .value_number("max_count", "-m", min=1) \
            .value_number("after_context", "-A", min=0) \
            .value_number("before_context", "-B", min=0) \
            .value_number("context", "-C", min=0) \
            .flag("null", "-Z") \
            .flag("null_data", "-z") \
            .flag("text", "-a") \
            .flag("binary_without_match", "-I")

        # True renders as the explicit --color=auto
        if b.options.get("color") is True:
            b.literal("--color=auto")
        else:
            b.value_token("color", "--color", mode="equals")

        b.repeatable("include", "--include", mode="equals") \
            .repeatable("exclude", "--exclude", mode="equals") \
            .repeatable("exclude_dir", "--exclude-dir", mode="equals") \
            .extra()

    def search(self, pattern, inputs=None, /, **options):
        """
        Search for one or more patterns; grep reads stdin when inputs is None.

        Builds: `grep <opts...> -e <pattern>... [inputs...]`
        """
        self._check(options)
        options = clone_options(options, "extra", "include", "exclude", "exclude_dir")
        options["regexp"] = pattern
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.repeatable("regexp", "-e", label="pattern")
            if inputs is not None:
                b.operands(inputs, "input", guard=True)
        return self._finish(args)

    def count_matches(self, pattern, inputs=None, /, **options):
        """
        search() with count forced on (-c).
        """
        return self.search(pattern, inputs, **(options | {"count": True}))

    def list_files(self, pattern, inputs=None, /, **options):
        """
        search() with files_with_matches forced on (-l).
        """
        return self.search(pattern, inputs, **(options | {"files_with_matches": True}))


__all__ = ("Grep",)
