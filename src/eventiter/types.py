#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Result and lifecycle types shared by the event iterator modules."""

from __future__ import annotations

from enum import Enum, auto
from typing import Generic, TypeVar

from attrs import define, field

V = TypeVar("V")


class EndReason(Enum):
    """Why an event iterator stopped producing values."""

    EXPLICIT = auto()
    LIMIT = auto()
    IDLE = auto()
    CLOSED = auto()


@define(frozen=True)
class IteratorResult(Generic[V]):
    """A single step of an event iterator.

    ``done`` is True only for the terminal result, whose ``value`` is always None.
    """

    done: bool
    value: V | None = field(default=None)


DONE: IteratorResult = IteratorResult(done=True)

# 🔼⚙️🔚
