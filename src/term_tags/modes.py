"""
.. Output modes

The color depth and direction (foreground/background) that tags are resolved under.
"""

from __future__ import annotations

__all__ = ("Depth", "Direction", "ModeState")

import logging as _logging
from enum import Enum, IntEnum
from typing import Any, Optional, Union


class Depth(IntEnum):
    """Output color depth enumeration

    The value of each member is the number of bits per color.
    """

    FOUR = 4
    """16 colors, selected by SGR color codes"""

    EIGHT = 8
    """The 256-color palette"""

    TWENTY_FOUR = 24
    """Direct (truecolor) RGB"""


class Direction(Enum):
    """Color direction enumeration"""

    FOREGROUND = "fg"
    """Colors apply to the text"""

    BACKGROUND = "bg"
    """Colors apply to the cell background"""


def _coerce(enum: type, value: Any) -> Optional[Enum]:
    if isinstance(value, enum):
        return value
    # `bool` is an `int` but never a valid depth
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        try:
            return enum(value.lower() if isinstance(value, str) else value)
        except ValueError:
            pass

    return None


class ModeState:
    """The modes under which tags are resolved.

    Args:
        depth: The initial color depth.
        direction: The initial color direction.

    Raises:
        ValueError: An initial value is invalid.

    Setters never raise; an invalid request is ignored and the current value is
    retained.

    WARNING:
        Instances are not thread-safe. Resolving tags may change the modes (see
        :term:`mode-change tag`), hence a state shared across threads must be
        guarded externally.
    """

    __slots__ = ("_depth", "_direction")

    def __init__(
        self,
        depth: Union[Depth, int] = Depth.EIGHT,
        direction: Union[Direction, str] = Direction.FOREGROUND,
    ) -> None:
        if (_depth := _coerce(Depth, depth)) is None:
            raise ValueError(f"Invalid color depth (got: {depth!r})")
        if (_direction := _coerce(Direction, direction)) is None:
            raise ValueError(f"Invalid color direction (got: {direction!r})")

        self._depth = _depth
        self._direction = _direction

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(depth={self._depth.value}, "
            f"direction={self._direction.value!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModeState):
            return NotImplemented
        return (self._depth, self._direction) == (other._depth, other._direction)

    def copy(self) -> ModeState:
        """Returns an independent copy of the state."""
        return type(self)(self._depth, self._direction)

    def get_depth(self) -> Depth:
        return self._depth

    def get_direction(self) -> Direction:
        return self._direction

    def set_depth(self, depth: Union[Depth, int]) -> Depth:
        """Sets the color depth.

        Args:
            depth: ``4``, ``8`` or ``24`` (or the equivalent :py:class:`Depth`).

        Returns:
            The current depth, which is unchanged if *depth* is invalid.
        """
        if (_depth := _coerce(Depth, depth)) is None:
            _logger.debug(f"Rejected color depth {depth!r}; keeping {self._depth!r}")
        else:
            self._depth = _depth

        return self._depth

    def set_direction(self, direction: Union[Direction, str]) -> Direction:
        """Sets the color direction.

        Args:
            direction: ``"fg"`` or ``"bg"`` (case-insensitive), or the equivalent
              :py:class:`Direction`.

        Returns:
            The current direction, which is unchanged if *direction* is invalid.
        """
        if (_direction := _coerce(Direction, direction)) is None:
            _logger.debug(
                f"Rejected color direction {direction!r}; keeping {self._direction!r}"
            )
        else:
            self._direction = _direction

        return self._direction

    depth = property(get_depth, set_depth, doc="The color depth")
    direction = property(get_direction, set_direction, doc="The color direction")


_logger = _logging.getLogger(__name__)

# The process-wide state; see `term_tags.get_depth()` and co.
_mode_state = ModeState()
