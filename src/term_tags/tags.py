"""
.. Color tags

Converting bracketed color tags within text (e.g ``[red]``, ``[255.128.0]``,
``[8-bit]``) into escape sequences, or removing them.
"""

from __future__ import annotations

__all__ = ("MAX_TAG_LENGTH", "replace_tags", "strip_tags")

import logging as _logging
from typing import Optional, Union

from .modes import ModeState, _mode_state
from .registry import ColorDefinition
from .sequences import render, resolve
from .utils import BytesLike, OutputBuffer, to_bytes

#: The length of the longest possible tag body
MAX_TAG_LENGTH = len("0xFF.0xFF.0xFF")


def replace_tags(
    text: Union[str, BytesLike],
    *,
    capacity: Optional[int] = None,
    mode: Optional[ModeState] = None,
) -> Union[str, bytes]:
    """Replaces color tags with escape sequences.

    Args:
        text: The text. If bytes-like, it ends at the first NUL byte, if any.
        capacity: If not ``None``, the size of the destination, including one byte
          for a terminator. Must exceed the length of the (encoded) text.
        mode: The mode state to resolve tags under. Defaults to the process-wide
          state.

    Returns:
        The converted text; a string if *text* is a string, otherwise bytes.

    Raises:
        TypeError: *text* is neither a string nor a bytes-like object.
        UnicodeEncodeError: *text* contains a lone surrogate outside the range
          ``U+DC80..U+DCFF`` (those map back to the undecodable bytes they carry).
        term_tags.exceptions.BufferTooSmallError: The result doesn't fit within
          *capacity*.

    Tags are resolved from left to right. A :term:`mode-change tag` produces no
    output but affects every tag after it (and *mode*, thereafter). Any bracketed
    text that is not a valid tag is left as-is.
    """
    result = _process_tags(to_bytes("text", text), capacity, mode, remove=False)
    return result.decode(errors="surrogateescape") if isinstance(text, str) else result


def strip_tags(
    text: Union[str, BytesLike],
    *,
    capacity: Optional[int] = None,
    mode: Optional[ModeState] = None,
) -> Union[str, bytes]:
    """Removes color tags.

    Same as :py:func:`replace_tags`, except that resolved tags are removed instead
    of replaced. Literal tags (e.g ``[esc]``) are still expanded and mode-change tags
    still take effect.
    """
    result = _process_tags(to_bytes("text", text), capacity, mode, remove=True)
    return result.decode(errors="surrogateescape") if isinstance(text, str) else result


def _process_tags(
    src: bytes, capacity: Optional[int], mode: Optional[ModeState], remove: bool
) -> bytes:
    if mode is None:
        mode = _mode_state

    buffer = OutputBuffer(capacity)
    buffer.check_source(src)

    start = 0
    while (
        (open_ := src.find(b"[", start)) != -1
        and (close := src.find(b"]", open_ + 1)) != -1
    ):
        # Of multiple opening brackets, the one nearest to the closing bracket opens
        # the tag
        open_ = src.rfind(b"[", open_, close)
        body = src[open_ + 1 : close]

        escape = None
        if len(body) <= MAX_TAG_LENGTH and (resolved := resolve(body)) is not None:
            escape = render(resolved, mode)

        if escape is None:
            _logger.debug(f"Unresolved tag {body!r} at {open_}")
            buffer.append(src[start : close + 1])
        else:
            buffer.append(src[start:open_])
            if escape and (not remove or _is_literal(resolved)):
                buffer.append(escape.encode())

        start = close + 1

    buffer.append(src[start:])

    return bytes(buffer)


def _is_literal(resolved) -> bool:
    return (
        isinstance(resolved, ColorDefinition)
        and resolved.literal_replacement is not None
    )


_logger = _logging.getLogger(__name__)
