"""
.. The Color API

Colors and their reduction to lower color depths.
"""

from __future__ import annotations

__all__ = ("Color", "rgb_to_indexed", "rgb_to_sgr", "shade_to_levels")

from typing import Tuple

from typing_extensions import NamedTuple, Self

from .utils import arg_value_error_range

# Palette layout of 256-color terminals
CUBE_START = 16
GRAYSCALE_START = 232

# 3-level RGB to SGR color code, indexed by ``9 * r + 3 * g + b``
_LEVELS_TO_SGR = (
    30,  # 0.0.0 -> Black
    34,  # 0.0.1 -> Blue
    94,  # 0.0.2 -> Bright Blue
    32,  # 0.1.0 -> Green
    36,  # 0.1.1 -> Cyan
    96,  # 0.1.2 -> Bright Cyan
    92,  # 0.2.0 -> Bright Green
    96,  # 0.2.1 -> Bright Cyan
    96,  # 0.2.2 -> Bright Cyan
    31,  # 1.0.0 -> Red
    35,  # 1.0.1 -> Magenta
    95,  # 1.0.2 -> Bright Magenta
    33,  # 1.1.0 -> Yellow
    90,  # 1.1.1 -> Bright Black
    90,  # 1.1.2 -> Bright Black
    93,  # 1.2.0 -> Bright Yellow
    90,  # 1.2.1 -> Bright Black
    97,  # 1.2.2 -> Bright White
    91,  # 2.0.0 -> Bright Red
    95,  # 2.0.1 -> Bright Magenta
    95,  # 2.0.2 -> Bright Magenta
    93,  # 2.1.0 -> Bright Yellow
    90,  # 2.1.1 -> Bright Black
    97,  # 2.1.2 -> Bright White
    93,  # 2.2.0 -> Bright Yellow
    97,  # 2.2.1 -> Bright White
    97,  # 2.2.2 -> Bright White
)

# Midtone grays no 3-level combination lands on; rendered as plain white
_WHITE_RANGE = range(0xAA, 0xD3 + 1)
_SGR_WHITE = 37


def shade_to_levels(shade: int, n: int) -> int:
    """Scales a channel value from the range [0, 255] to the range [0, *n*].

    Rounds half up.
    """
    return (shade * n + 128) // 255


def rgb_to_indexed(r: int, g: int, b: int) -> int:
    """Converts an RGB color to the nearest entry of the 256-color palette.

    Returns:
        A palette index within the 24-step grayscale ramp if all channels are equal,
        otherwise within the 6x6x6 color cube.
    """
    if r == g == b:
        return GRAYSCALE_START + shade_to_levels(r, 23)

    return (
        CUBE_START
        + 36 * shade_to_levels(r, 5)
        + 6 * shade_to_levels(g, 5)
        + shade_to_levels(b, 5)
    )


def rgb_to_sgr(r: int, g: int, b: int) -> int:
    """Converts an RGB color to the nearest of the 16 SGR color codes.

    Returns:
        A foreground SGR color code i.e within ``30..37`` or ``90..97``.
    """
    if r in _WHITE_RANGE and g in _WHITE_RANGE and b in _WHITE_RANGE:
        return _SGR_WHITE

    return _LEVELS_TO_SGR[
        9 * shade_to_levels(r, 2) + 3 * shade_to_levels(g, 2) + shade_to_levels(b, 2)
    ]


# To bypass `NamedTuple`'s `__new__()` override limitation
class _DummyColor(NamedTuple):
    r: int
    g: int
    b: int


class Color(_DummyColor):
    """A 24-bit RGB color.

    Args:
        r: The red channel.
        g: The green channel.
        b: The blue channel.

    Raises:
        ValueError: The value of a channel is not within the valid range.

    NOTE:
        The valid value range for all channels is 0 to 255, both inclusive.

    TIP:
        This class is a :py:class:`~typing.NamedTuple` of three fields.
    """

    __slots__ = ()

    r: int = _DummyColor.r
    r.__doc__ = """The red channel"""

    g: int = _DummyColor.g
    g.__doc__ = """The green channel"""

    b: int = _DummyColor.b
    b.__doc__ = """The blue channel"""

    def __new__(cls, r: int, g: int, b: int) -> Self:
        # `x & ~255` unsets the 8 LSb. Hence, if the result is non-zero (i.e any
        # of the bits above the lowest 8 is set), it implies `x` is out of range.
        if (r | g | b) & ~255:  # First test to see if *any* is out of range
            if r & ~255:
                raise arg_value_error_range("r", r)
            if g & ~255:
                raise arg_value_error_range("g", g)
            if b & ~255:
                raise arg_value_error_range("b", b)

        # Using `tuple` directly instead of `super()` for performance
        return tuple.__new__(cls, (r, g, b))

    @property
    def indexed(self) -> int:
        """The nearest entry of the 256-color palette.

        See :py:func:`rgb_to_indexed`.
        """
        return rgb_to_indexed(*self)

    @property
    def packed(self) -> int:
        """The color as a single integer i.e ``0xRRGGBB``."""
        return self.r << 16 | self.g << 8 | self.b

    @property
    def sgr(self) -> int:
        """The nearest of the 16 SGR color codes (foreground).

        See :py:func:`rgb_to_sgr`.
        """
        return rgb_to_sgr(*self)

    @classmethod
    def from_packed(cls, value: int) -> Self:
        """Creates a new instance from a packed ``0xRRGGBB`` integer.

        Raises:
            ValueError: *value* is not within the range ``0`` to ``0xFFFFFF``.
        """
        if value & ~0xFFFFFF:
            raise arg_value_error_range("value", value)

        return tuple.__new__(cls, unpack(value))

    @classmethod
    def _new(cls, r: int, g: int, b: int) -> Self:
        """Alternate constructor for internal use only."""
        return tuple.__new__(cls, (r, g, b))


def unpack(value: int) -> Tuple[int, int, int]:
    """Splits a packed ``0xRRGGBB`` integer into its channels, without validation."""
    return value >> 16 & 255, value >> 8 & 255, value & 255


_Color = Color._new
