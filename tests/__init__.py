from contextlib import contextmanager

from term_tags.modes import _mode_state


@contextmanager
def reset_modes():
    depth, direction = _mode_state.get_depth(), _mode_state.get_direction()
    try:
        yield _mode_state
    finally:
        _mode_state.set_depth(depth)
        _mode_state.set_direction(direction)
