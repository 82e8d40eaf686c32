#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Protocols describing the event sources an iterator can observe."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Listener = Callable[..., Any]


@runtime_checkable
class EventSource(Protocol):
    """Anything that can register and remove listeners by event name.

    The same listener object passed to ``on`` must be accepted by ``off``
    for exact removal.
    """

    def on(self, event: str, listener: Listener) -> Any: ...

    def off(self, event: str, listener: Listener) -> Any: ...


@runtime_checkable
class SupportsMaxListeners(Protocol):
    """Event sources with a listener-count ceiling, where 0 means unlimited."""

    def get_max_listeners(self) -> int: ...

    def set_max_listeners(self, n: int) -> Any: ...


# 🔼⚙️🔚
