"""
find wrapper.

Builds `find` invocations; never runs them. GNU, BSD and BusyBox variants differ,
so anything not modeled goes through `expr` / `extra_expr`.

Start options (before the starting points)
- follow_mode   "P" | "L" | "H"   -P | -L | -H
- extra         list              appended verbatim after follow_mode

Expression options (after the starting points, in emission order)
- maxdepth, mindepth            int >= 0   -maxdepth <n> -mindepth <n>
- xdev, depth                   bool       -xdev -depth
- type, name, iname, path, ipath, regex, iregex
                                str        -type <t> -name <glob> ...
- size, user, group, perm       str        -size <s> -user <u> ...
- mtime, atime, ctime           int        -mtime <n> ...
- newer                         str        -newer <file>
- empty, readable, writable, executable, print0
                                bool       -empty -readable ...
- extra_expr                    list       appended verbatim after the modeled tests
"""
from ..builder import builder
from ..faults import InvalidArgumentError
from .base import Tool

FOLLOW_MODES = ("P", "L", "H")


def _follow_mode(object, label, /):
    if object not in FOLLOW_MODES:
        raise InvalidArgumentError(
            f"{label} must be one of: {', '.join(map(repr, FOLLOW_MODES))}",
            label=label,
            value=object,
        )


class Find(Tool):
    bin = "find"
    __options__ = (
        "follow_mode",
        "maxdepth",
        "mindepth",
        "xdev",
        "depth",
        "type",
        "name",
        "iname",
        "path",
        "ipath",
        "regex",
        "iregex",
        "size",
        "user",
        "group",
        "perm",
        "mtime",
        "atime",
        "ctime",
        "newer",
        "empty",
        "readable",
        "writable",
        "executable",
        "print0",
        "extra_expr",
    )

    def _apply(self, b, /):
        if (mode := b.options.get("follow_mode")) is not None:
            _follow_mode(mode, "follow_mode")
            b.literal(f"-{mode}")
        b.extra()

    def _expression(self, b, /):
        b.value_number("maxdepth", "-maxdepth", integer=True, min=0) \
            .value_number("mindepth", "-mindepth", integer=True, min=0) \
            .flag("xdev", "-xdev") \
            .flag("depth", "-depth")
        for key in ("type", "name", "iname", "path", "ipath", "regex", "iregex", "size", "user", "group", "perm"):
            b.value_string(key, f"-{key}")
        for key in ("mtime", "atime", "ctime"):
            b.value_number(key, f"-{key}", integer=True)
        b.value_string("newer", "-newer")
        for key in ("empty", "readable", "writable", "executable", "print0"):
            b.flag(key, f"-{key}")
        b.extra("extra_expr")

    def run(self, paths=None, expr=None, /, **options):
        """
        Builds: `find [-P|-L|-H] <extra...> -- <paths...> <modeled expression...> <expr...>`

        paths defaults to ".".
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands("." if paths is None else paths, "paths")
            self._expression(b)
            if expr is not None:
                b.operands(expr, "expr")
        return self._finish(args)

    def search(self, paths=None, /, **options):
        """
        run() without a caller expression.
        """
        return self.run(paths, None, **options)


__all__ = ("Find",)
