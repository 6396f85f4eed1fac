"""
.. Fixed-capacity buffer operations

Each operation writes its result, NUL-terminated, into a caller-supplied writable
buffer (:py:class:`bytearray` or writable :py:class:`memoryview`) of a declared
capacity and returns ``True`` on success or ``False`` on failure, never raising for
a missing argument or insufficient capacity. The destination and source may be the
same buffer.

See :py:func:`term_tags.utils.buffer_operation`.
"""

from __future__ import annotations

__all__ = ("resolve_tags_to_escapes", "strip_escape_sequences", "strip_tags")

from typing import Optional

from .modes import ModeState
from .sequences import _strip_sequences
from .tags import _process_tags
from .utils import buffer_operation


@buffer_operation
def resolve_tags_to_escapes(
    src: bytes, *, capacity: int, mode: Optional[ModeState] = None
) -> bytes:
    """``resolve_tags_to_escapes(dst, cap, src, *, mode=None) -> bool``

    Buffer form of :py:func:`term_tags.tags.replace_tags`.
    """
    return _process_tags(src, capacity, mode, remove=False)


@buffer_operation
def strip_tags(src: bytes, *, capacity: int, mode: Optional[ModeState] = None) -> bytes:
    """``strip_tags(dst, cap, src, *, mode=None) -> bool``

    Buffer form of :py:func:`term_tags.tags.strip_tags`.
    """
    return _process_tags(src, capacity, mode, remove=True)


@buffer_operation
def strip_escape_sequences(src: bytes, *, capacity: int) -> bytes:
    """``strip_escape_sequences(dst, cap, src) -> bool``

    Buffer form of :py:func:`term_tags.sequences.strip_sequences`.
    """
    return _strip_sequences(src, capacity=capacity)
