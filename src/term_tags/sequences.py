"""
.. Escape sequences

Building color/attribute escape sequences and stripping them from text.
"""

from __future__ import annotations

__all__ = (
    "build_escape",
    "build_escape_4bit",
    "build_escape_8bit",
    "build_escape_24bit",
    "build_escape_for_name",
    "resolve",
    "strip_sequences",
)

from typing import Optional, Union

from . import ctlseqs
from .color import Color, unpack
from .modes import Depth, Direction, ModeState, _coerce, _mode_state
from .numeric import NumericColor, parse_numeric
from .registry import ColorDefinition, lookup
from .utils import (
    BytesLike,
    OutputBuffer,
    arg_type_error,
    arg_value_error,
    arg_value_error_range,
    to_bytes,
)

Resolved = Union[ColorDefinition, NumericColor]

# Representations tried for a registry entry, starting at each depth
_FALLBACK = {
    Depth.TWENTY_FOUR: (Depth.TWENTY_FOUR, Depth.EIGHT, Depth.FOUR),
    Depth.EIGHT: (Depth.EIGHT, Depth.FOUR),
    Depth.FOUR: (Depth.FOUR,),
}

# Offset from a foreground SGR color code to its background counterpart
_SGR_BG_OFFSET = 10


def resolve(name: Union[str, BytesLike]) -> Optional[Resolved]:
    """Resolves a tag body by name, then as a number.

    Returns:
        The registry entry or numeric color, or ``None`` if *name* is neither.
    """
    if (definition := lookup(name)) is not None:
        return definition
    return parse_numeric(name)


def _build_definition(
    definition: ColorDefinition, depth: Depth, direction: Direction
) -> Optional[str]:
    foreground = direction is Direction.FOREGROUND
    for level in _FALLBACK[depth]:
        if level is Depth.TWENTY_FOUR:
            if definition.rgb is not None:
                return (ctlseqs.SGR_FG_RGB if foreground else ctlseqs.SGR_BG_RGB) % (
                    Color.from_packed(definition.rgb)
                )
        elif level is Depth.EIGHT:
            if definition.palette_index is not None:
                return (
                    ctlseqs.SGR_FG_INDEXED if foreground else ctlseqs.SGR_BG_INDEXED
                ) % definition.palette_index
        else:
            sgr = definition.sgr_fg
            if not foreground and definition.sgr_bg is not None:
                sgr = definition.sgr_bg
            if sgr is not None:
                return ctlseqs.SGR % sgr

    return definition.literal_replacement


def _build_numeric(
    numeric: NumericColor, depth: Depth, direction: Direction
) -> Optional[str]:
    foreground = direction is Direction.FOREGROUND
    color = numeric.color
    if depth is Depth.TWENTY_FOUR:
        if color is None:
            return None
        return (ctlseqs.SGR_FG_RGB if foreground else ctlseqs.SGR_BG_RGB) % color

    if depth is Depth.EIGHT:
        index = numeric.value if color is None else color.indexed
        return (
            ctlseqs.SGR_FG_INDEXED if foreground else ctlseqs.SGR_BG_INDEXED
        ) % index

    if color is None:
        return ctlseqs.SGR % numeric.value
    sgr = color.sgr
    return ctlseqs.SGR % (sgr if foreground else sgr + _SGR_BG_OFFSET)


def build_escape(
    resolved: Resolved, depth: Depth, direction: Direction
) -> Optional[str]:
    """Formats a resolved tag as an escape sequence.

    Args:
        resolved: A registry entry or numeric color.
        depth: The color depth to build for.
        direction: The color direction to build for.

    Returns:
        The escape sequence (or literal replacement), an empty string for a
        :term:`mode-change tag`, or ``None`` if *resolved* has no representation
        usable at *depth*.

    For a registry entry, the representation for *depth* is used if defined,
    otherwise that of the next lower depth, and so on, with the literal replacement
    as the last resort.

    A numeric triple is reduced to the nearest color available at *depth*. A single
    number is taken as an SGR code at 4-bit depth, a palette index at 8-bit depth and
    is invalid at 24-bit depth.

    NOTE:
        This doesn't apply mode changes. See :py:func:`render`.
    """
    if isinstance(resolved, ColorDefinition):
        if resolved.is_mode_change:
            return ""
        return _build_definition(resolved, depth, direction)

    return _build_numeric(resolved, depth, direction)


def render(
    resolved: Resolved,
    mode: ModeState,
    depth: Optional[Depth] = None,
    direction: Optional[Direction] = None,
) -> Optional[str]:
    """Applies a :term:`mode-change tag` to *mode* or builds the escape sequence for
    any other tag.

    *depth* and *direction* override those of *mode* when building.
    """
    if isinstance(resolved, ColorDefinition) and resolved.is_mode_change:
        if resolved.forces_depth is not None:
            mode.set_depth(resolved.forces_depth)
        if resolved.forces_direction is not None:
            mode.set_direction(resolved.forces_direction)
        return ""

    return build_escape(
        resolved,
        mode.get_depth() if depth is None else depth,
        mode.get_direction() if direction is None else direction,
    )


def _check_byte(arg: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise arg_type_error(arg, value)
    if value & ~255:
        raise arg_value_error_range(arg, value)


def _get_direction(
    direction: Union[Direction, str, None], mode: Optional[ModeState]
) -> Direction:
    if direction is None:
        return (_mode_state if mode is None else mode).get_direction()
    if (_direction := _coerce(Direction, direction)) is None:
        raise arg_value_error("direction", direction)
    return _direction


def build_escape_4bit(sgr_code: int) -> str:
    """Creates the escape sequence for an SGR code.

    Args:
        sgr_code: An SGR parameter, within the range ``0..255``.

    Raises:
        TypeError: *sgr_code* is not an integer.
        ValueError: *sgr_code* is out of range.
    """
    _check_byte("sgr_code", sgr_code)

    return ctlseqs.SGR % sgr_code


def build_escape_8bit(
    palette_index: int,
    direction: Union[Direction, str, None] = None,
    *,
    mode: Optional[ModeState] = None,
) -> str:
    """Creates the escape sequence for an entry of the 256-color palette.

    Args:
        palette_index: A palette index, within the range ``0..255``.
        direction: The color direction. Defaults to the current direction of *mode*.
        mode: The mode state to use. Defaults to the process-wide state.

    Raises:
        TypeError: *palette_index* is not an integer.
        ValueError: *palette_index* is out of range or *direction* is invalid.
    """
    _check_byte("palette_index", palette_index)
    direction = _get_direction(direction, mode)

    return (
        ctlseqs.SGR_FG_INDEXED
        if direction is Direction.FOREGROUND
        else ctlseqs.SGR_BG_INDEXED
    ) % palette_index


def build_escape_24bit(
    red: int,
    green: Optional[int] = None,
    blue: Optional[int] = None,
    direction: Union[Direction, str, None] = None,
    *,
    mode: Optional[ModeState] = None,
) -> str:
    """Creates the escape sequence for an RGB color.

    Args:
        red: The red channel or, if *green* and *blue* are omitted, a packed
          ``0xRRGGBB`` value.
        green: The green channel.
        blue: The blue channel.
        direction: The color direction. Defaults to the current direction of *mode*.
        mode: The mode state to use. Defaults to the process-wide state.

    Raises:
        TypeError: A channel is not an integer.
        ValueError: A channel is out of range or *direction* is invalid.
    """
    if green is None and blue is None:
        if not isinstance(red, int) or isinstance(red, bool):
            raise arg_type_error("red", red)
        if red & ~0xFFFFFF:
            raise arg_value_error_range("red", red, "packed RGB")
        red, green, blue = unpack(red)
    else:
        _check_byte("red", red)
        _check_byte("green", green)
        _check_byte("blue", blue)
    direction = _get_direction(direction, mode)

    return (
        ctlseqs.SGR_FG_RGB if direction is Direction.FOREGROUND else ctlseqs.SGR_BG_RGB
    ) % (red, green, blue)


def build_escape_for_name(
    name: Union[str, BytesLike],
    direction: Union[Direction, str, None] = None,
    depth: Union[Depth, int, None] = None,
    *,
    mode: Optional[ModeState] = None,
) -> Optional[str]:
    """Creates the escape sequence for a tag body.

    Args:
        name: A registry name or alias, or a numeric color (see
          :py:func:`~term_tags.numeric.parse_numeric`).
        direction: The color direction. Defaults to the current direction of *mode*.
        depth: The color depth. Defaults to the current depth of *mode*.
        mode: The mode state to use. Defaults to the process-wide state.

    Returns:
        The escape sequence, or ``None`` if *name* cannot be resolved at the
        effective depth.

    Raises:
        TypeError: *name* is neither a string nor a bytes-like object.
        ValueError: *direction* or *depth* is invalid.

    IMPORTANT:
        A :term:`mode-change tag` name changes *mode* and returns an empty string.
    """
    if direction is not None and (_direction := _coerce(Direction, direction)) is None:
        raise arg_value_error("direction", direction)
    if depth is not None and (_depth := _coerce(Depth, depth)) is None:
        raise arg_value_error("depth", depth)
    if (resolved := resolve(name)) is None:
        return None

    return render(
        resolved,
        _mode_state if mode is None else mode,
        None if depth is None else _depth,
        None if direction is None else _direction,
    )


def strip_sequences(
    text: Union[str, BytesLike], *, capacity: Optional[int] = None
) -> Union[str, bytes]:
    """Removes SGR escape sequences from text.

    Args:
        text: The text. If bytes-like, it ends at the first NUL byte, if any.
        capacity: If not ``None``, the size of the destination, including one byte
          for a terminator. Must exceed the length of the (encoded) text.

    Returns:
        The text without escape sequences; a string if *text* is a string,
        otherwise bytes.

    Raises:
        TypeError: *text* is neither a string nor a bytes-like object.
        UnicodeEncodeError: *text* contains a lone surrogate outside the range
          ``U+DC80..U+DCFF`` (those map back to the undecodable bytes they carry).
        term_tags.exceptions.BufferTooSmallError: The result doesn't fit within
          *capacity*.

    Only ``ESC [ <digits and semicolons> m`` is recognized. An ``ESC [`` not so
    terminated is kept.
    """
    result = _strip_sequences(to_bytes("text", text), capacity=capacity)
    return result.decode(errors="surrogateescape") if isinstance(text, str) else result


def _strip_sequences(src: bytes, *, capacity: Optional[int] = None) -> bytes:
    buffer = OutputBuffer(capacity)
    buffer.check_source(src)
    buffer.append(ctlseqs.SGR_re_b.sub(b"", src))

    return bytes(buffer)
