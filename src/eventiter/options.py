#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Options model for event iterators."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from attrs import define, evolve, field, fields

EventIteratorFilter: TypeAlias = Callable[[Any, list[Any]], bool]


def accept_all(value: Any, collected: list[Any]) -> bool:
    """Default filter that accepts every value."""
    return True


def _filter_or_default(value: EventIteratorFilter | None) -> EventIteratorFilter:
    return accept_all if value is None else value


@define(frozen=True)
class EventIteratorOptions:
    """Settings controlling which values an iterator accepts and when it ends.

    Attributes:
        filter: Called with ``(value, pending_values)`` on every arrival; a falsy
            result drops the value without counting it.
        idle: Seconds without an accepted value before the iterator ends itself.
            None disables the idle timeout.
        limit: Number of accepted values after which the iterator ends.
            None means unbounded.
        track_max_listeners: Raise the emitter's listener ceiling while attached,
            if the emitter has one.
    """

    filter: EventIteratorFilter = field(default=None, converter=_filter_or_default)
    idle: float | None = field(default=None)
    limit: int | None = field(default=None)
    track_max_listeners: bool = field(default=True)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> EventIteratorOptions:
        """Build options from a plain mapping, ignoring unrecognized keys."""
        if not options:
            return cls()
        known = {a.name for a in fields(cls)}
        return cls(**{key: value for key, value in options.items() if key in known})

    @classmethod
    def coerce(cls, options: EventIteratorOptions | Mapping[str, Any] | None) -> EventIteratorOptions:
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options)

    def with_changes(self, **changes: Any) -> EventIteratorOptions:
        """Return a copy with the given fields replaced."""
        return evolve(self, **changes)


# 🔼⚙️🔚
