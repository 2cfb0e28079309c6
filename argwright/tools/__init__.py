"""
Tool wrappers.

One class per external program; each method validates its keyword options and
returns a Command, never running anything.

    >>> from argwright.tools import Cp
    >>> Cp().copy(["a", "b"], "dst", recursive=True).argv
    ('cp', '-r', '--', 'a', 'b', 'dst')

Override the executable per instance: Cp("/usr/local/bin/gcp").
"""
from .awk import *
from .base import *
from .chmod import *
from .cp import *
from .find import *
from .grep import *
from .ip import *
from .jq import *
from .lsblk import *
from .mkdir import *
from .mv import *
from .ping import *
from .rm import *
from .ss import *
from .wget import *

__all__ = (
    "ToolType",
    "Tool",
    "Awk",
    "Chmod",
    "Cp",
    "Find",
    "Grep",
    "Ip",
    "Jq",
    "Lsblk",
    "Mkdir",
    "Mv",
    "Ping",
    "Rm",
    "Ss",
    "Wget",
)
