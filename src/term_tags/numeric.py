"""
.. Numeric tags

Parses tag bodies such as ``196``, ``0xc4`` or ``255.128.0``.
"""

from __future__ import annotations

__all__ = ("NumericColor", "parse_numeric")

import re
from typing import Optional, Union

from typing_extensions import NamedTuple

from .color import Color, _Color
from .utils import BytesLike, arg_type_error

# C integer literal: hexadecimal, octal or decimal, in that order of precedence
_INT = rb"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
_SEP = rb"[.,;:]"
_NUMERIC_RE = re.compile(rb"%s(?:%s%s%s%s)?" % (_INT, _SEP, _INT, _SEP, _INT))
del _INT, _SEP


class NumericColor(NamedTuple):
    """A numerically specified color.

    For a single value, the components are ``None``. Such a value is ambiguous; it
    may be an SGR code or a palette index, depending on the color depth it's
    interpreted under.

    For a triple, *value* is the packed ``0xRRGGBB`` form of the components.
    """

    value: int
    red: Optional[int] = None
    green: Optional[int] = None
    blue: Optional[int] = None

    @property
    def is_triple(self) -> bool:
        return self.red is not None

    @property
    def color(self) -> Optional[Color]:
        """The components as a :py:class:`~term_tags.color.Color`, if a triple."""
        return _Color(self.red, self.green, self.blue) if self.is_triple else None


def _to_int(sign: bytes, digits: bytes) -> int:
    if digits[:2] in {b"0x", b"0X"}:
        value = int(digits[2:], 16)
    elif digits[:1] == b"0":
        value = int(digits, 8)
    else:
        value = int(digits)

    return -value if sign == b"-" else value


def parse_numeric(text: Union[str, BytesLike]) -> Optional[NumericColor]:
    """Parses a numeric tag body.

    Args:
        text: Either a single integer or three integers separated by any of ``.``,
          ``,``, ``;`` or ``:``. Integers follow C literal syntax i.e a ``0x``
          prefix denotes hexadecimal and a leading ``0``, octal.

    Returns:
        The parsed color or ``None`` if *text* is not valid or any value is out of
        the range ``0..255``.

    Raises:
        TypeError: *text* is neither a string nor a bytes-like object.
    """
    if isinstance(text, str):
        if not text.isascii():
            return None
        text = text.encode()
    elif isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text)
    else:
        raise arg_type_error("text", text)

    if not (match := _NUMERIC_RE.fullmatch(text)):
        return None

    groups = match.groups()
    values = [
        _to_int(sign, digits)
        for sign, digits in zip(groups[::2], groups[1::2])
        if digits is not None
    ]
    if any(value & ~255 for value in values):
        return None

    if len(values) == 1:
        return NumericColor(values[0])

    color = _Color(*values)
    return NumericColor(color.packed, *color)
