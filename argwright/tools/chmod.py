"""
chmod wrapper.

Builds `chmod` invocations; never runs them.

Options (in emission order)
- recursive         bool   -R
- verbose           bool   -v
- changes           bool   -c
- silent            bool   -f
- preserve_root     bool   --preserve-root      (exclusive with no_preserve_root)
- no_preserve_root  bool   --no-preserve-root
- reference         str    --reference=<file>
- extra             list   appended verbatim after the modeled options
"""
from ..builder import builder
from ..utils import clone_options
from .base import Tool


class Chmod(Tool):
    bin = "chmod"
    __options__ = (
        "recursive",
        "verbose",
        "changes",
        "silent",
        "preserve_root",
        "no_preserve_root",
        "reference",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["preserve_root", "no_preserve_root"])
        b.flag("recursive", "-R") \
            .flag("verbose", "-v") \
            .flag("changes", "-c") \
            .flag("silent", "-f") \
            .flag("preserve_root", "--preserve-root") \
            .flag("no_preserve_root", "--no-preserve-root") \
            .value_string("reference", "--reference", mode="equals") \
            .extra()

    def set(self, paths, mode, /, **options):
        """
        Set a mode (octal or symbolic) on paths.

        Builds: `chmod <opts...> -- <mode> <paths...>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operand(mode, "mode").operands(paths, "paths")
        return self._finish(args)

    def reference(self, paths, reference, /, **options):
        """
        Copy the mode of a reference file onto paths.

        Builds: `chmod <opts...> --reference=<file> -- <paths...>`
        """
        self._check(options)
        options = clone_options(options, "extra")
        options["reference"] = reference
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands(paths, "paths")
        return self._finish(args)


__all__ = ("Chmod",)
