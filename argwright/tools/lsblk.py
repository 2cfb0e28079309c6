"""
lsblk wrapper.

Options (in emission order)
- json, bytes, paths, fs, all, nodeps, list, raw, noheadings   -J -b -p -f -a -d -l -r -n
- tree                                                         --tree
- sort     str        --sort <column>
- output   str|list   -o <col,col,...>
- extra    list       appended verbatim after the modeled options
"""
from ..builder import builder
from ..utils import join_csv
from .base import Tool


class Lsblk(Tool):
    bin = "lsblk"
    __options__ = (
        "json",
        "bytes",
        "paths",
        "fs",
        "all",
        "nodeps",
        "list",
        "raw",
        "noheadings",
        "tree",
        "sort",
        "output",
    )

    def _apply(self, b, /):
        b.flag("json", "-J") \
            .flag("bytes", "-b") \
            .flag("paths", "-p") \
            .flag("fs", "-f") \
            .flag("all", "-a") \
            .flag("nodeps", "-d") \
            .flag("list", "-l") \
            .flag("raw", "-r") \
            .flag("noheadings", "-n") \
            .flag("tree", "--tree") \
            .value_token("sort", "--sort")
        if (output := b.options.get("output")) is not None:
            b.option("-o", join_csv(output, "output"), "output")
        b.extra()

    def list(self, devices=None, /, **options):
        """
        Builds: `lsblk <opts...> [devices...]`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            if devices is not None:
                b.operands(devices, "device", guard=True)
        return self._finish(args)


__all__ = ("Lsblk",)
