"""Term-Tags' Configuration"""

from __future__ import annotations

__all__ = (
    "ConfigOptions",
    "Option",
    "config_options",
    "init_config",
    "is_writable",
    "load_config",
    "load_xdg_config",
    "store_config",
)

import json
import logging as _logging
import os
import warnings
from dataclasses import dataclass, field
from os import path
from pathlib import Path
from typing import Any, Callable, Optional, Tuple, Union

from . import logging
from .exceptions import TermTagsUserWarning
from .modes import Depth, Direction, _mode_state


class ConfigOptions(dict):
    """Config options store

    * Subscription with an option name returns the corresponding :py:class:`Option`
      instance.
    * Attribute reference with a variable name ('s/ /_/g') returns the option's current
      value.
    * Attribute reference with a "private" name ('s/ /_/g' and preceded by '_') returns
      the option's default value.
    """

    def _attr_to_option(self, attr: str) -> Tuple[Option, str]:
        default = attr.startswith("_")
        name = attr.replace("_", " ")
        if default:
            name = name[1:]
        try:
            return self[name], "default" if default else "value"
        except KeyError:
            raise AttributeError(f"No such config option as {name!r}") from None

    def __getattr__(self, attr: str):
        return getattr(*self._attr_to_option(attr))

    def __setattr__(self, attr: str, value: Any):
        setattr(*self._attr_to_option(attr), value)

    def reset(self) -> None:
        """Restores every option to its default value."""
        for option in self.values():
            option.value = option.default


@dataclass
class Option:
    """A config option."""

    value: Any = field(init=False)
    default: Any
    is_valid: Callable[[Any], bool]
    error_msg: str

    def __post_init__(self):
        self.value = self.default


def is_writable(path: Union[str, os.PathLike, Path]) -> bool:
    """Checks if a file path is writable or creatable.

    Returns:
      - ``True``, if:
        - the file exists and is writable
        - the file doesn't exists but can be created
      - ``False``, if:
        - the path points to a directory
        - the file exists but is unwritable
        - the file doesn't exists and cannot be created
    """
    path = Path(path).expanduser()
    writable = False

    try:
        if path.exists():
            if path.is_file() and os.access(path, os.W_OK):
                writable = True
        else:
            for path in path.parents:
                if path.exists():
                    if path.is_dir() and os.access(path, os.W_OK):
                        writable = True
                    break
    except OSError:  # Fails to stat some directories
        pass

    return writable


def init_config(
    config_file: Optional[str] = None, *, init_logging: bool = False
) -> None:
    """Initializes user configuration.

    Args:
        config_file: A config file to load. If ``None``, the XDG config files are
          loaded, if any.
        init_logging: If ``True``, logging is initialized using the ``log file`` and
          ``log level`` options.

    The ``color depth`` and ``direction`` options are applied to the process-wide
    mode state.
    """
    if config_file:
        load_config(config_file)
    else:
        load_xdg_config()

    _mode_state.set_depth(config_options.color_depth)
    _mode_state.set_direction(config_options.direction)

    if init_logging:
        logging.init_log(
            path.expanduser(config_options.log_file),
            getattr(_logging, config_options.log_level),
        )


def load_config(config_file: str) -> bool:
    """Loads a user config file.

    Returns:
        ``True`` if the file was read, otherwise ``False``.

    Unknown options and options with invalid values are reported via
    :py:class:`~term_tags.exceptions.TermTagsUserWarning`; the latter retain their
    former values.
    """
    try:
        with open(config_file) as f:
            config = json.load(f)
    except Exception as e:
        _report(f"Failed to load {config_file!r} ({type(e).__name__}: {e}).")
        return False

    if not isinstance(config, dict):
        _report(f"Expected a JSON object at the top level of {config_file!r}.")
        return False

    for name, value in config.items():
        try:
            option = config_options[name]
        except KeyError:
            _report(f"Unknown option {name!r} (in {config_file!r}).")
        else:
            if option.is_valid(value):
                option.value = value
            else:
                value_repr = "null" if value is None else repr(value)
                value_type_name = "null" if value is None else type(value).__name__
                _report(
                    f"Invalid type/value for {name!r}; {option.error_msg} "
                    f"(got: {value_repr} of type {value_type_name!r})."
                )
                option_repr = "null" if option.value is None else repr(option.value)
                _logger.info(f"Using former value: {option_repr}.")

    return True


def load_xdg_config() -> None:
    """Loads user config files according to the XDG Base Directories spec."""
    for config_dir in reversed(os.environ.get("XDG_CONFIG_DIRS", "/etc").split(":")):
        config_file = path.join(config_dir, "term_tags", "config.json")
        if (
            # The XDG Base Dirs spec states that relative paths should be ignored
            path.abspath(config_dir) == config_dir
            and path.isfile(config_file)
        ):
            load_config(config_file)

    if path.isfile(xdg_config_file()):
        load_config(xdg_config_file())


def store_config(config_file: str) -> bool:
    """Writes current config to a file.

    Only options with non-default values are written.

    NOTE:
        This stores user configuration i.e the values of :py:data:`config_options`,
        not the runtime mode state. Depth and direction changes made via
        :py:func:`term_tags.set_depth` and co. or by mode-change tags are never
        written back.

    Returns:
        ``True`` if successful, otherwise ``False``.
    """
    config = {
        name: option.value
        for name, option in config_options.items()
        if option.value != option.default
    }

    err = None
    try:
        try:
            os.makedirs(path.dirname(config_file) or ".", exist_ok=True)
        except (FileExistsError, NotADirectoryError):
            err = "one of the parents is not a directory"
        else:
            with open(config_file, "w") as f:
                json.dump(config, f, indent=4)
    except Exception as e:
        err = f"{type(e).__name__}: {e}"
    if err:
        _report(f"Failed to write user config to {config_file!r} ({err}).")

    return not err


def xdg_config_file() -> str:
    """Returns the path of the user's XDG config file."""
    return path.join(
        os.environ.get("XDG_CONFIG_HOME", path.join(path.expanduser("~"), ".config")),
        "term_tags",
        "config.json",
    )


def _report(msg: str) -> None:
    _logger.warning(msg)
    warnings.warn(msg, TermTagsUserWarning, stacklevel=3)


_logger = _logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

config_options = {
    "color depth": Option(
        int(Depth.EIGHT),
        lambda x: (
            isinstance(x, int)
            and not isinstance(x, bool)
            and x in {depth.value for depth in Depth}
        ),
        "must be one of 4, 8, 24",
    ),
    "direction": Option(
        Direction.FOREGROUND.value,
        lambda x: isinstance(x, str) and x in {d.value for d in Direction},
        "must be one of 'fg', 'bg'",
    ),
    "log file": Option(
        path.join("~", ".term_tags", "term_tags.log"),
        lambda x: isinstance(x, str) and is_writable(x),
        "must be a string containing a writable/creatable file path",
    ),
    "log level": Option(
        "WARNING",
        lambda x: isinstance(x, str) and x in _LOG_LEVELS,
        f"must be one of {', '.join(map(repr, _LOG_LEVELS))}",
    ),
}
config_options = ConfigOptions(config_options)
