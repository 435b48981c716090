"""
Runtime configuration for KeyStride.

KeyStride has a single switch: *debug checks*. When enabled, objects created
afterwards validate their preconditions (rank agreement, cursor bounds) and
raise the errors from `keystride.domain._errors` on violation. When disabled
(the default), traversal runs without any runtime guards.

The initial value comes from the `KEYSTRIDE_DEBUG_CHECKS` environment
variable; it is opt-in and stays off for "0", "", and any spelling of
"false".

Notes
-----
Objects capture the flag at construction time. Toggling it does not change
the behavior of steppers, cursors or iterators that already exist, which
keeps the per-step hot path free of configuration lookups.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)

ENV_DEBUG_CHECKS = "KEYSTRIDE_DEBUG_CHECKS"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "0") not in (
        "0",
        "",
        "false",
        "False",
        "FALSE",
    )


_debug_checks: bool = _env_flag(ENV_DEBUG_CHECKS)


def debug_checks_enabled() -> bool:
    """
    Return whether newly created traversal objects validate preconditions.

    Returns
    -------
    bool
        Current value of the debug-check switch.
    """
    return _debug_checks


def set_debug_checks(enabled: bool) -> bool:
    """
    Enable or disable debug checks for objects created from now on.

    Parameters
    ----------
    enabled : bool
        New value of the switch.

    Returns
    -------
    bool
        The previous value, so callers can restore it.
    """
    global _debug_checks
    previous = _debug_checks
    _debug_checks = bool(enabled)
    if previous != _debug_checks:
        logger.debug("debug checks %s", "enabled" if _debug_checks else "disabled")
    return previous


@contextmanager
def debug_checks(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set the debug-check switch.

    Parameters
    ----------
    enabled : bool, optional
        Value to use inside the block. Defaults to True.

    Examples
    --------
    >>> with debug_checks():
    ...     it = array.xbegin((2, 3))
    """
    previous = set_debug_checks(enabled)
    try:
        yield
    finally:
        set_debug_checks(previous)
