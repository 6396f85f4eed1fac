"""
.. Custom Exceptions
"""

from __future__ import annotations


class TermTagsWarning(Warning):
    """Package-specific warning base category."""


class TermTagsUserWarning(TermTagsWarning, UserWarning):
    """Package-specific user warning sub-category."""


class TermTagsError(Exception):
    """Exception baseclass. Raised for generic errors."""


class BufferTooSmallError(TermTagsError):
    """Raised when a destination buffer cannot hold the result of an operation.

    The capacity of a buffer must **exceed** the length of the data written into it,
    since room is always reserved for the terminating NUL byte.
    """


class InvalidArgumentError(TermTagsError, ValueError):
    """Raised for an unusable buffer capacity."""
