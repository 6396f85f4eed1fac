"""
.. The color registry

Named colors, attributes and directives recognized within tags.
"""

from __future__ import annotations

__all__ = ("ColorDefinition", "iter_colors", "lookup")

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

from .modes import Depth, Direction
from .utils import BytesLike, arg_type_error


@dataclass(frozen=True)
class ColorDefinition:
    """A registry entry.

    Any representation may be ``None`` (undefined), in which case a representation
    for a lower color depth is used in its place.
    """

    name: str
    """Canonical (lowercase) name"""

    sgr_fg: Optional[int] = None
    """SGR code used in the foreground direction, or for both directions if
    :py:attr:`sgr_bg` is undefined (as for attributes)"""

    sgr_bg: Optional[int] = None
    """SGR code used in the background direction"""

    palette_index: Optional[int] = None
    """Entry of the 256-color palette"""

    rgb: Optional[int] = None
    """Packed 24-bit RGB value i.e ``0xRRGGBB``"""

    forces_depth: Optional[Depth] = None
    """The color depth switched to by the tag, if it's a mode-change tag"""

    forces_direction: Optional[Direction] = None
    """The direction switched to by the tag, if it's a mode-change tag"""

    literal_replacement: Optional[str] = None
    """A fixed string the tag expands to"""

    is_displayable: bool = True
    """``False`` for entries that are not colors or visible attributes"""

    aliases: Tuple[str, ...] = ()
    """Alternative names"""

    def __post_init__(self):
        if all(
            x is None
            for x in (
                self.sgr_fg,
                self.palette_index,
                self.rgb,
                self.forces_depth,
                self.forces_direction,
                self.literal_replacement,
            )
        ):
            raise ValueError(f"Color definition {self.name!r} defines nothing")

    @property
    def is_mode_change(self) -> bool:
        return self.forces_depth is not None or self.forces_direction is not None


def _color(name, fg, bg, pal, rgb, *aliases):
    return ColorDefinition(
        name, sgr_fg=fg, sgr_bg=bg, palette_index=pal, rgb=rgb, aliases=aliases
    )


def _attr(name, sgr, *aliases, display=True):
    return ColorDefinition(name, sgr_fg=sgr, is_displayable=display, aliases=aliases)


def _extended(name, pal, rgb):
    return ColorDefinition(name, palette_index=pal, rgb=rgb)


# See:
#   https://en.wikipedia.org/wiki/ANSI_escape_code
#   https://en.wikipedia.org/wiki/List_of_software_palettes
#   https://en.wikipedia.org/wiki/X11_color_names
_COLORS = (
    # name, fg, bg, palette, rgb, *aliases
    _color("black", 30, 40, 0, 0x000000),
    _color("red", 31, 41, 1, 0xBB0000),
    _color("green", 32, 42, 2, 0x00BB00),
    _color("yellow", 33, 43, 3, 0xBBBB00),
    _color("blue", 34, 44, 4, 0x0000BB),
    _color("magenta", 35, 45, 5, 0xBB00BB, "purple"),
    _color("cyan", 36, 46, 6, 0x00BBBB),
    _color("white", 37, 47, 7, 0xBBBBBB),
    _color("bblack", 90, 100, 8, 0x7F7F7F, "gray", "grey"),
    _color("bred", 91, 101, 9, 0xFF0000),
    _color("bgreen", 92, 102, 10, 0x00FF00),
    _color("byellow", 93, 103, 11, 0xFFFF00),
    _color("bblue", 94, 104, 12, 0x0000FF),
    _color("bmagenta", 95, 105, 13, 0xFF00FF, "bpurple"),
    _color("bcyan", 96, 106, 14, 0x00FFFF),
    _color("bwhite", 97, 107, 15, 0xFFFFFF),
    # Attributes
    _attr("normal", 0),
    _attr("bold", 1, "bright"),
    _attr("faint", 2),
    _attr("under", 4, "underline"),
    _attr("blink", 5),
    _attr("inverse", 7, "reverse"),
    _attr(
        "nobold",
        22,
        "nobright",
        "nofaint",
        "unbold",
        "unbright",
        "unfaint",
        display=False,
    ),
    _attr("nounder", 24, display=False),
    _attr("noblink", 25, "unblink", display=False),
    _attr("noinv", 27, display=False),
    # Mode changes
    ColorDefinition("4-bit", forces_depth=Depth.FOUR, is_displayable=False),
    ColorDefinition("8-bit", forces_depth=Depth.EIGHT, is_displayable=False),
    ColorDefinition("24-bit", forces_depth=Depth.TWENTY_FOUR, is_displayable=False),
    ColorDefinition(
        "fg",
        forces_direction=Direction.FOREGROUND,
        is_displayable=False,
        aliases=("nobg",),
    ),
    ColorDefinition("bg", forces_direction=Direction.BACKGROUND, is_displayable=False),
    # Palette-only colors
    _extended("azure", 25, 0x0066BB),
    _extended("jade", 35, 0x00BB66),
    _extended("violet", 55, 0x6600BB),
    _extended("lime", 70, 0x66BB00),
    _extended("tan", 94, 0x886600),
    _extended("silver", 102, 0x888888),
    _extended("pink", 125, 0xBB0066),
    _extended("orange", 130, 0xBB6600),
    _extended("bazure", 33, 0x0088FF),
    _extended("bjade", 48, 0x00FF88),
    _extended("bviolet", 93, 0x8800FF),
    _extended("blime", 118, 0x88FF00),
    _extended("btan", 178, 0xDDBB00),
    _extended("bsilver", 188, 0xDDDDDD),
    _extended("bpink", 198, 0xFF0088),
    _extended("borange", 208, 0xFF8800),
    # Literals
    ColorDefinition("esc", literal_replacement="\x1b", is_displayable=False),
)

_NAMES: Dict[bytes, ColorDefinition] = {
    name.encode(): definition
    for definition in _COLORS
    for name in (definition.name, *definition.aliases)
}

# No name or alias is longer
MAX_NAME_LENGTH = max(map(len, _NAMES))


def iter_colors(displayable_only: bool = True) -> Iterator[ColorDefinition]:
    """Iterates over the registry entries, in a fixed order.

    Args:
        displayable_only: If ``True``, entries that are not colors or visible
          attributes (negations, mode changes and literals) are excluded.
    """
    for definition in _COLORS:
        if definition.is_displayable or not displayable_only:
            yield definition


def lookup(name: Union[str, BytesLike]) -> Optional[ColorDefinition]:
    """Looks up a color by name.

    Args:
        name: A color/attribute name or alias. Matching is exact but
          case-insensitive (ASCII only).

    Returns:
        The registry entry or ``None`` if there is no such name.

    Raises:
        TypeError: *name* is neither a string nor a bytes-like object.
    """
    if isinstance(name, str):
        if not name.isascii():
            return None
        name = name.encode()
    elif isinstance(name, (bytes, bytearray, memoryview)):
        name = bytes(name)
    else:
        raise arg_type_error("name", name)

    if len(name) > MAX_NAME_LENGTH:
        return None

    return _NAMES.get(name.lower())
