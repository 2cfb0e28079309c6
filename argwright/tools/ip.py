"""
ip wrapper (iproute2), covering the read-side subcommands.

Global options (before the object, in emission order)
- inet4 / inet6       bool         -4 | -6        (mutually exclusive)
- family              str          -f <family>
- netns               str          -n <name>
- batch               str          -b <file>
- json, pretty, oneline, brief, details, human, resolve, timestamp, timestamp_short
                      bool         -j -p -o -br -d -h -r -t -ts
- stats               True | int   -s (repeated n times)
- color               True | str   -c | -c <when>
- extra               list         appended verbatim after the global options

Subcommands
- link_show(dev)       selectors: up, master, vrf, type, group
- addr_show(dev)       selectors: up, scope, label, to
- netns_exec(name, argv)
- monitor(objects)
- raw(argv)
"""
from .. import validate
from ..builder import builder
from .base import Tool


class Ip(Tool):
    bin = "ip"
    __options__ = (
        "inet4",
        "inet6",
        "family",
        "netns",
        "batch",
        "json",
        "pretty",
        "oneline",
        "brief",
        "details",
        "human",
        "resolve",
        "timestamp",
        "timestamp_short",
        "stats",
        "color",
    )

    def _apply(self, b, /):
        b.mutually_exclusive(["inet4", "inet6"])
        b.flag("inet4", "-4") \
            .flag("inet6", "-6") \
            .value_token("family", "-f") \
            .value_string("netns", "-n") \
            .value_string("batch", "-b") \
            .flag("json", "-j") \
            .flag("pretty", "-p") \
            .flag("oneline", "-o") \
            .flag("brief", "-br") \
            .flag("details", "-d") \
            .flag("human", "-h") \
            .flag("resolve", "-r") \
            .flag("timestamp", "-t") \
            .flag("timestamp_short", "-ts") \
            .count("stats", "-s", true_count=1, min=1) \
            .bool_or_value("color", "-c", validate=validate.not_flag) \
            .extra()

    def _build(self, object, command, dev, options, selectors, /):
        self._check(options, *selectors)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.literal(object, command)
            if dev is not None:
                b.literal("dev").operand(dev, "dev", guard=True)
            for key in selectors:
                if key == "up":
                    b.flag(key, key)
                elif key == "group":
                    b.value(key, key)
                else:
                    b.value_string(key, key)
        return self._finish(args)

    def link_show(self, dev=None, /, **options):
        """
        Builds: `ip <global opts...> link show [dev <dev>] [up] [master <m>] [vrf <v>] [type <t>] [group <g>]`
        """
        return self._build("link", "show", dev, options, ("up", "master", "vrf", "type", "group"))

    def addr_show(self, dev=None, /, **options):
        """
        Builds: `ip <global opts...> addr show [dev <dev>] [up] [scope <s>] [label <l>] [to <prefix>]`
        """
        return self._build("addr", "show", dev, options, ("up", "scope", "label", "to"))

    def netns_exec(self, name, argv, /, **options):
        """
        Builds: `ip <global opts...> netns exec <name> <argv...>`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.literal("netns", "exec") \
                .operand(name, "name", guard=True) \
                .operands(argv, "argv")
        return self._finish(args)

    def monitor(self, objects=None, /, **options):
        """
        Builds: `ip <global opts...> monitor [objects...]`
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            b.literal("monitor")
            if objects is not None:
                b.operands(objects, "objects", guard=True)
        return self._finish(args)


__all__ = ("Ip",)
