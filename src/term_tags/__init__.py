"""
term-tags

Convert color tags in text to terminal escape sequences

Copyright (c) 2022, Toluwaleke Ogundipe <anonymoux47@gmail.com>
"""

from __future__ import annotations

__all__ = (
    "Depth",
    "Direction",
    "get_depth",
    "get_direction",
    "set_depth",
    "set_direction",
)
__author__ = "Toluwaleke Ogundipe"

from typing import Union

from .modes import Depth, Direction, _mode_state

version_info = (0, 1, 0)

# Follows https://semver.org/spec/v2.0.0.html
__version__ = ".".join(map(str, version_info[:3]))
if version_info[3:]:
    __version__ += "-" + ".".join(map(str, version_info[3:]))


def get_depth() -> Depth:
    """Returns the global color depth.

    See :py:func:`set_depth`.
    """
    return _mode_state.get_depth()


def get_direction() -> Direction:
    """Returns the global color direction.

    See :py:func:`set_direction`.
    """
    return _mode_state.get_direction()


def set_depth(depth: Union[Depth, int]) -> Depth:
    """Sets the global color depth.

    Args:
        depth: ``4``, ``8`` or ``24`` (or the equivalent :py:class:`Depth`).

    Returns:
        The global depth after the call. An invalid *depth* is ignored.

    The global depth is used by every operation not given an explicit mode state and
    is also changed by :term:`mode-change tags <mode-change tag>` resolved under it.

    WARNING:
        The global state is not thread-safe. See :py:class:`~term_tags.modes.ModeState`.
    """
    return _mode_state.set_depth(depth)


def set_direction(direction: Union[Direction, str]) -> Direction:
    """Sets the global color direction.

    Args:
        direction: ``"fg"`` or ``"bg"`` (or the equivalent :py:class:`Direction`).

    Returns:
        The global direction after the call. An invalid *direction* is ignored.

    See also: :py:func:`set_depth`.
    """
    return _mode_state.set_direction(direction)
