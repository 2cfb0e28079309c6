"""
ping wrapper (iputils).

Options (in emission order)
- inet4 / inet6                 bool      -4 | -6            (mutually exclusive)
- count                         n >= 1    -c <n>
- interval, timeout, deadline   n >= 0    -i <s> -W <s> -w <s>
- size                          n >= 0    -s <bytes>
- ttl, tos, mark                n >= 0    -t <n> -Q <n> -m <n>
- interface (alias: source)     str       -I <iface|addr>
- preload                       n >= 1    -l <n>
- flood, adaptive, quiet, verbose, audible, numeric, timestamp, record_route
                                bool      -f -A -q -v -a -n -D -R
- pmtudisc                      str       -M <do|want|dont|probe>
- pattern                       str       -p <hex>
- extra                         list      appended verbatim after the modeled options
"""
from ..builder import builder
from .base import Tool


class Ping(Tool):
    bin = "ping"
    __options__ = (
        "inet4",
        "inet6",
        "count",
        "interval",
        "timeout",
        "deadline",
        "size",
        "ttl",
        "tos",
        "mark",
        "interface",
        "source",
        "preload",
        "flood",
        "adaptive",
        "quiet",
        "verbose",
        "audible",
        "numeric",
        "timestamp",
        "record_route",
        "pmtudisc",
        "pattern",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["inet4", "inet6"])
        b.flag("inet4", "-4") \
            .flag("inet6", "-6") \
            .value_number("count", "-c", min=1) \
            .value_number("interval", "-i", non_negative=True) \
            .value_number("timeout", "-W", non_negative=True) \
            .value_number("deadline", "-w", non_negative=True) \
            .value_number("size", "-s", non_negative=True) \
            .value_number("ttl", "-t", min=0) \
            .value_number("tos", "-Q", min=0) \
            .value_number("mark", "-m", min=0)

        if b.options.get("interface") is None:
            b.value_string("source", "-I", label="interface")
        else:
            b.value_string("interface", "-I")

        b.value_number("preload", "-l", min=1) \
            .flag("flood", "-f") \
            .flag("adaptive", "-A") \
            .flag("quiet", "-q") \
            .flag("verbose", "-v") \
            .flag("audible", "-a") \
            .flag("numeric", "-n") \
            .flag("timestamp", "-D") \
            .flag("record_route", "-R") \
            .value_token("pmtudisc", "-M") \
            .value_string("pattern", "-p") \
            .extra()

    def ping(self, dest, /, **options):
        """
        Builds: `ping <opts...> <dest>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.operand(dest, "dest", guard=True)
        return self._finish(args)

    def once(self, dest, /, **options):
        return self.ping(dest, **(options | {"count": 1}))

    def flood(self, dest, /, **options):
        return self.ping(dest, **(options | {"flood": True}))


__all__ = ("Ping",)
