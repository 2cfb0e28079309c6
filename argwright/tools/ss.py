"""
ss wrapper (iproute2).

Options (in emission order)
- inet4 / inet6        bool   -4 | -6        (mutually exclusive)
- family               str    -f <family>
- tcp, udp, raw, unix                -t -u -w -x
- all, listening, numeric, resolve           -a -l -n -r
- no_header, extended, info, memory, timers  -H -e -i -m -o
- summary              bool   -s
- process / packet     bool   -p             (mutually exclusive, same flag)
- context              str    -Z <ctx>       (takes precedence over show_context)
- show_context         bool   -Z
- extra                list   appended verbatim after the modeled options

Filters are passed through as tokens: show(["state", "listening", "dport", "=", ":ssh"]).
"""
from ..builder import builder
from .base import Tool


class Ss(Tool):
    bin = "ss"
    __options__ = (
        "inet4",
        "inet6",
        "family",
        "tcp",
        "udp",
        "raw",
        "unix",
        "all",
        "listening",
        "numeric",
        "resolve",
        "no_header",
        "extended",
        "info",
        "memory",
        "timers",
        "summary",
        "process",
        "packet",
        "context",
        "show_context",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["inet4", "inet6"]) \
            .mutually_exclusive(["process", "packet"])
        b.flag("inet4", "-4") \
            .flag("inet6", "-6") \
            .value_token("family", "-f") \
            .flag("tcp", "-t") \
            .flag("udp", "-u") \
            .flag("raw", "-w") \
            .flag("unix", "-x") \
            .flag("all", "-a") \
            .flag("listening", "-l") \
            .flag("numeric", "-n") \
            .flag("resolve", "-r") \
            .flag("no_header", "-H") \
            .flag("extended", "-e") \
            .flag("info", "-i") \
            .flag("memory", "-m") \
            .flag("timers", "-o") \
            .flag("summary", "-s") \
            .flag("process", "-p") \
            .flag("packet", "-p")
        if b.options.get("context") is not None:
            b.value_string("context", "-Z")
        else:
            b.flag("show_context", "-Z")
        b.extra()

    def show(self, filter=None, /, **options):
        """
        Builds: `ss <opts...> [filter...]`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            if filter is not None:
                b.operands(filter, "filter", guard=True)
        return self._finish(args)

    def summary(self, /, **options):
        return self.show(None, **(options | {"summary": True}))

    def listen(self, filter=None, /, **options):
        return self.show(filter, **(options | {"listening": True}))

    def all_sockets(self, filter=None, /, **options):
        return self.show(filter, **(options | {"all": True}))


__all__ = ("Ss",)
