#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Listener-count ceiling bookkeeping for event sources that enforce one.

Emitters in the Node.js tradition warn once the number of listeners for an
event passes a ceiling. An iterator adds a listener, so it raises the ceiling
by one while attached and lowers it again when it detaches. A ceiling of 0
means "unlimited" and is never touched.
"""

from __future__ import annotations

from typing import Any

from provide.foundation.logger import get_logger

log = get_logger(__name__)


def _has_ceiling(emitter: Any) -> bool:
    """Check for the SupportsMaxListeners methods, including dynamic attributes."""
    return all(callable(getattr(emitter, name, None)) for name in ("get_max_listeners", "set_max_listeners"))


class ListenerCeiling:
    """Raises an emitter's listener ceiling by one and restores it exactly once."""

    def __init__(self, emitter: Any, enabled: bool = True) -> None:
        self._emitter = emitter
        self._enabled = enabled and _has_ceiling(emitter)
        self._raised = False

    @property
    def enabled(self) -> bool:
        """Whether the emitter exposes a ceiling and tracking was requested."""
        return self._enabled

    @property
    def raised(self) -> bool:
        return self._raised

    def raise_(self) -> bool:
        """Increment the ceiling unless it is unlimited.

        Returns:
            True if the ceiling was changed
        """
        if not self._enabled or self._raised:
            return False

        current = self._emitter.get_max_listeners()
        if current == 0:
            return False

        self._emitter.set_max_listeners(current + 1)
        self._raised = True
        log.debug("Listener ceiling raised", previous=current, current=current + 1)
        return True

    def restore(self) -> bool:
        """Undo a previous raise_(); safe to call any number of times.

        Returns:
            True if the ceiling was changed
        """
        if not self._raised:
            return False

        self._raised = False
        current = self._emitter.get_max_listeners()
        if current == 0:
            return False

        self._emitter.set_max_listeners(current - 1)
        log.debug("Listener ceiling restored", previous=current, current=current - 1)
        return True


# 🔼⚙️🔚
