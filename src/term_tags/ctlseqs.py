"""
..
   Control Sequences

   Only the Select Graphic Rendition (SGR) subset emitted by this package is defined.

   See https://invisible-island.net/xterm/ctlseqs/ctlseqs.html
"""

from __future__ import annotations

__all__ = []  # Updated later on

import re

# Parameters
Ps = "%d"
Pm = lambda n: ";".join((Ps,) * n)  # noqa: E731

_START = None  # Marks the beginning control sequence definitions

# C0
ESC = "\x1b"

# C1
CSI = f"{ESC}["

# Select Graphic Rendition
SGR = f"{CSI}{Ps}m"
SGR_NORMAL = SGR % 0
SGR_FG_RGB = f"{CSI}38;2;{Pm(3)}m"
SGR_BG_RGB = f"{CSI}48;2;{Pm(3)}m"
SGR_FG_INDEXED = f"{CSI}38;5;{Ps}m"
SGR_BG_INDEXED = f"{CSI}48;5;{Ps}m"


module_items = tuple(globals().items())
for name, value in module_items[module_items.index(("_START", None)) + 1 :]:
    globals()[f"{name}_b"] = value.encode()
    __all__.extend((name, f"{name}_b"))


# Patterns for sequences within text
class Pattern:
    CSI_escaped = re.escape(CSI)

    # Only what this package emits; not the general CSI grammar
    SGR_re = rf"{CSI_escaped}[\d;]*m"

    for name, regex in tuple(locals().items()):
        if name.endswith("_re"):
            globals()[name] = re.compile(regex, re.ASCII)
            globals()[f"{name}_b"] = re.compile(regex.encode(), re.ASCII)
            __all__.extend((name, f"{name}_b"))


del _START, module_items, Pattern
