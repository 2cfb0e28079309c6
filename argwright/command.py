"""
Command descriptor: the sole product of a build.

A Command is a program reference plus an ordered tuple of arguments. It has no
behavior beyond value semantics and representation; whoever knows how to spawn a
process from (program, args), without shell interpretation, can execute it.

    >>> command = Command("cp", ["-r", "--", "a", "dst"])
    >>> command.argv
    ('cp', '-r', '--', 'a', 'dst')
"""
from collections.abc import Iterable


class Command:
    """
    immutable (program, args) pair produced by the tool wrappers.

    equality and hashing are by value, iteration yields the full argv, and the
    rich repr shows program and args separately.
    """
    __slots__ = ("_program", "_args")

    def __init__(self, program, args=(), /):
        if not isinstance(program, str) or not program:
            raise TypeError("Command() program must be a non-empty string")
        if isinstance(args, str) or not isinstance(args, Iterable):
            raise TypeError("Command() args must be an iterable of strings")
        args = tuple(args)
        if not all(isinstance(arg, str) for arg in args):
            raise TypeError("Command() args must be an iterable of strings")
        object.__setattr__(self, "_program", program)
        object.__setattr__(self, "_args", args)

    @classmethod
    def from_argv(cls, argv, /):
        """
        split a built argv (program first) into a Command.
        """
        if isinstance(argv, str) or not isinstance(argv, Iterable):
            raise TypeError("from_argv() argument must be an iterable of strings")
        if not (argv := list(argv)):
            raise ValueError("from_argv() argument cannot be empty")
        program, *args = argv
        return cls(program, args)

    @property
    def program(self):
        return self._program

    @property
    def args(self):
        return self._args

    @property
    def argv(self):
        return (self._program, *self._args)

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __iter__(self):
        return iter(self.argv)

    def __len__(self):
        return 1 + len(self._args)

    def __eq__(self, other, /):
        if not isinstance(other, Command):
            return NotImplemented
        return self.argv == other.argv

    def __hash__(self):
        return hash(self.argv)

    def __repr__(self):
        return f"command(program={self._program!r}, args={list(self._args)!r})"

    def __rich_repr__(self):
        yield "program", self._program
        yield "args", list(self._args)


__all__ = ("Command",)
