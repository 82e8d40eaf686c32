#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Async iteration over values pushed by event emitters."""

from provide.foundation.utils.versioning import get_version

from eventiter.errors import ConcurrentNextError, EventIteratorError
from eventiter.iterator import EventIterator, iterate
from eventiter.listeners import ListenerCeiling
from eventiter.options import EventIteratorFilter, EventIteratorOptions
from eventiter.protocol import EventSource, SupportsMaxListeners
from eventiter.types import EndReason, IteratorResult

__version__ = get_version("eventiter", caller_file=__file__)

__all__ = [
    "ConcurrentNextError",
    "EndReason",
    "EventIterator",
    "EventIteratorError",
    "EventIteratorFilter",
    "EventIteratorOptions",
    "EventSource",
    "IteratorResult",
    "ListenerCeiling",
    "SupportsMaxListeners",
    "__version__",
    "iterate",
]

# 🔼⚙️🔚
