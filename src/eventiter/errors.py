#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Exceptions raised by event iterators."""

from __future__ import annotations


class EventIteratorError(Exception):
    """Base exception for event iterator errors."""

    def __init__(self, message: str, event: str):
        self.event = event
        super().__init__(message)


class ConcurrentNextError(EventIteratorError):
    """Raised when next() is awaited while another call is still suspended."""

    def __init__(self, event: str):
        message = (
            f"Event iterator for '{event}' already has a consumer waiting in next(). "
            f"Event iterators support a single consumer awaiting values sequentially."
        )
        super().__init__(message, event)


# 🔼⚙️🔚
