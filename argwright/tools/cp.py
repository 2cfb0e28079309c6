"""
cp wrapper.

Builds `cp` invocations; never runs them.

Options (in emission order)
- archive              bool   -a
- recursive            bool   -r
- force                bool   -f   (exclusive with interactive)
- interactive          bool   -i
- update               bool   -u
- verbose              bool   -v
- preserve             bool   -p
- parents              bool   --parents          (GNU)
- no_target_directory  bool   -T                 (GNU)
- target_directory     str    -t <dir>           (GNU)
- extra                list   appended verbatim after the modeled options
"""
from ..builder import builder
from ..utils import clone_options
from .base import Tool


class Cp(Tool):
    bin = "cp"
    __options__ = (
        "archive",
        "recursive",
        "force",
        "interactive",
        "update",
        "verbose",
        "preserve",
        "parents",
        "no_target_directory",
        "target_directory",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["force", "interactive"])
        b.flag("archive", "-a") \
            .flag("recursive", "-r") \
            .flag("force", "-f") \
            .flag("interactive", "-i") \
            .flag("update", "-u") \
            .flag("verbose", "-v") \
            .flag("preserve", "-p") \
            .flag("parents", "--parents") \
            .flag("no_target_directory", "-T") \
            .value_string("target_directory", "-t") \
            .extra()

    def copy(self, src, dest, /, **options):
        """
        Copy file(s) / dir(s).

        Builds: `cp <opts...> -- <src...> <dest>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands(src, "src").operand(dest, "dest")
        return self._finish(args)

    def into(self, src, dir, /, **options):
        """
        Copy into a directory with GNU-style `-t`.

        Builds: `cp <opts...> -t <dir> -- <src...>`
        """
        self._check(options)
        options = clone_options(options, "extra")
        options["target_directory"] = dir
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands(src, "src")
        return self._finish(args)


__all__ = ("Cp",)
