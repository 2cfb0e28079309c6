"""
mv wrapper.

Builds `mv` invocations; never runs them.

Options (in emission order)
- force                bool   -f                 (exclusive with interactive and no_clobber)
- interactive          bool   -i                 (exclusive with no_clobber)
- update               bool   -u
- verbose              bool   -v
- no_clobber           bool   -n
- backup               bool   --backup           (GNU)
- suffix               str    --suffix=<s>       (GNU)
- no_target_directory  bool   -T                 (GNU)
- target_directory     str    -t <dir>           (GNU)
- extra                list   appended verbatim after the modeled options
"""
from ..builder import builder
from ..utils import clone_options
from .base import Tool


class Mv(Tool):
    bin = "mv"
    __options__ = (
        "force",
        "interactive",
        "update",
        "verbose",
        "no_clobber",
        "backup",
        "suffix",
        "no_target_directory",
        "target_directory",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["force", "interactive"]) \
            .mutually_exclusive(["no_clobber", "force"]) \
            .mutually_exclusive(["no_clobber", "interactive"])
        b.flag("force", "-f") \
            .flag("interactive", "-i") \
            .flag("update", "-u") \
            .flag("verbose", "-v") \
            .flag("no_clobber", "-n") \
            .flag("backup", "--backup") \
            .value_string("suffix", "--suffix", mode="equals") \
            .flag("no_target_directory", "-T") \
            .value_string("target_directory", "-t") \
            .extra()

    def move(self, src, dest, /, **options):
        """
        Move/rename file(s).

        Builds: `mv <opts...> -- <src...> <dest>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands(src, "src").operand(dest, "dest")
        return self._finish(args)

    def into(self, src, dir, /, **options):
        """
        Move into a directory with GNU-style `-t`.

        Builds: `mv <opts...> -t <dir> -- <src...>`
        """
        self._check(options)
        options = clone_options(options, "extra")
        options["target_directory"] = dir
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands(src, "src")
        return self._finish(args)


__all__ = ("Mv",)
