"""
rm wrapper.

Options: force (-f), interactive (-i), recursive (-r), dir (-d), verbose (-v), extra.
force and interactive are mutually exclusive.
"""
from ..builder import builder
from .base import Tool


class Rm(Tool):
    bin = "rm"
    __options__ = (
        "force",
        "interactive",
        "recursive",
        "dir",
        "verbose",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["force", "interactive"])
        b.flag("force", "-f") \
            .flag("interactive", "-i") \
            .flag("recursive", "-r") \
            .flag("dir", "-d") \
            .flag("verbose", "-v") \
            .extra()

    def remove(self, paths, /, **options):
        """
        Builds: `rm <opts...> -- <paths...>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands(paths, "paths")
        return self._finish(args)


__all__ = ("Rm",)
