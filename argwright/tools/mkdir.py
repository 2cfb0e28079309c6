"""
mkdir wrapper.

Options: parents (-p), verbose (-v), mode (-m <mode>), dry_run (--dry-run), extra.
"""
from ..builder import builder
from .base import Tool


class Mkdir(Tool):
    bin = "mkdir"
    __options__ = (
        "parents",
        "verbose",
        "mode",
        "dry_run",
    )

    def _apply(self, b, /):
        b.flag("parents", "-p") \
            .flag("verbose", "-v") \
            .value_string("mode", "-m") \
            .flag("dry_run", "--dry-run") \
            .extra()

    def make(self, paths, /, **options):
        """
        Builds: `mkdir <opts...> -- <paths...>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.terminator().operands(paths, "paths")
        return self._finish(args)


__all__ = ("Mkdir",)
