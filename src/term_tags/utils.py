"""
.. Utilities
"""

from __future__ import annotations

__all__ = ("OutputBuffer", "buffer_operation", "to_bytes")

from functools import wraps
from types import FunctionType
from typing import Any, Optional, Union

from .exceptions import BufferTooSmallError, InvalidArgumentError, TermTagsError

BytesLike = Union[bytes, bytearray, memoryview]


class OutputBuffer:
    """An append-only byte buffer with an optional fixed capacity.

    Args:
        capacity: The total number of bytes available, **including** one byte
          reserved for a terminating NUL. If ``None``, the buffer is unbounded.

    Raises:
        InvalidArgumentError: *capacity* is not positive.

    An append succeeds only if the remaining capacity is **greater than** the length
    of the data, such that there is always room left for the terminator.
    """

    __slots__ = ("_data", "_remaining")

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 1:
            raise InvalidArgumentError(f"Capacity must be positive (got: {capacity})")

        self._data = bytearray()
        self._remaining = capacity

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> Optional[int]:
        """The unused capacity, including the byte reserved for the terminator, or
        ``None`` if unbounded."""
        return self._remaining

    def append(self, data: BytesLike) -> None:
        """Appends *data* to the buffer.

        Raises:
            BufferTooSmallError: *data* doesn't fit, leaving the buffer unchanged.
        """
        if self._remaining is not None:
            if self._remaining <= len(data):
                raise BufferTooSmallError(
                    f"Cannot append {len(data)} byte(s) with {self._remaining} byte(s) "
                    "of capacity remaining"
                )
            self._remaining -= len(data)

        self._data += data

    def check_source(self, source: BytesLike) -> None:
        """Ensures the capacity can hold at least *source* unchanged.

        Raises:
            BufferTooSmallError: The remaining capacity is not greater than the
              length of *source*.
        """
        if self._remaining is not None and self._remaining <= len(source):
            raise BufferTooSmallError(
                f"Capacity ({self._remaining}) must exceed the length of the source "
                f"({len(source)})"
            )


# Decorator Functions


def buffer_operation(func: FunctionType) -> FunctionType:
    """Adapts a text operation to the fixed-capacity buffer calling convention.

    Args:
        func: A function accepting a bytes source and a *capacity* keyword argument,
          returning bytes.

    The wrapper has the signature ``(dst, cap, src, **kwargs) -> bool``. On success,
    the result is written into *dst* followed by a NUL byte and ``True`` is returned.
    ``False`` is returned, leaving *dst* untouched, if:

    - *dst* or *src* is ``None``,
    - *dst* is not writable or is shorter than *cap* bytes,
    - *src* is a string that cannot be UTF-8 encoded,
    - *cap* is not greater than the length of *src*, or
    - the result (plus terminator) does not fit within *cap* bytes.

    *dst* and *src* may be the same buffer; the result is always rendered into
    scratch space before *dst* is written.
    """

    @wraps(func)
    def buffer_operation_wrapper(
        dst: Optional[Union[bytearray, memoryview]],
        cap: int,
        src: Optional[Union[str, BytesLike]],
        **kwargs,
    ) -> bool:
        if dst is None or src is None or not isinstance(cap, int):
            return False
        if not isinstance(dst, (bytearray, memoryview)) or len(dst) < cap:
            return False
        if isinstance(dst, memoryview) and dst.readonly:
            return False

        try:
            data = to_bytes("src", src)
        except (TypeError, UnicodeError):
            return False
        try:
            result = func(data, capacity=cap, **kwargs)
        except TermTagsError:
            return False

        end = len(result)
        dst[:end] = result
        dst[end] = 0

        return True

    return buffer_operation_wrapper


# Non-decorators


def arg_type_error(arg: str, value: Any) -> TypeError:
    return TypeError(f"Invalid type for {arg!r} (got: {type(value).__name__})")


def arg_value_error(arg: str, value: Any) -> ValueError:
    return ValueError(f"Invalid value for {arg!r} (got: {value!r})")


def arg_value_error_range(arg: str, value: Any, got_extra: str = "") -> ValueError:
    return ValueError(
        f"{arg!r} out of range (got: {value!r}, {got_extra})"
        if got_extra
        else f"{arg!r} out of range (got: {value!r})"
    )


def to_bytes(arg: str, value: Union[str, BytesLike]) -> bytes:
    """Converts *value* to bytes, C-string style.

    A string is UTF-8 encoded; lone surrogates carrying undecodable bytes (as from
    :py:func:`os.fsdecode`) are restored to those bytes. Bytes-like objects are read
    up to (but excluding) the first NUL byte, if any, so that a buffer previously
    written by this package can be passed straight back in.

    Raises:
        TypeError: *value* is neither a string nor a bytes-like object.
        UnicodeEncodeError: *value* contains a lone surrogate outside the range
          ``U+DC80..U+DCFF``.
    """
    if isinstance(value, str):
        return value.encode(errors="surrogateescape")
    if isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
        end = data.find(0)
        return data if end == -1 else data[:end]

    raise arg_type_error(arg, value)
