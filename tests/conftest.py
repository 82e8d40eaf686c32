#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for eventiter tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio

from tests.helpers.emitters import MockEmitter, PeopleEmitter, PlainEmitter


@pytest.fixture
def emitter() -> MockEmitter:
    """Emitter with a listener ceiling of 10."""
    return MockEmitter()


@pytest.fixture
def unlimited_emitter() -> MockEmitter:
    """Emitter whose listener ceiling is 0 (unlimited)."""
    return MockEmitter(max_listeners=0)


@pytest.fixture
def plain_emitter() -> PlainEmitter:
    """Emitter with no listener ceiling at all."""
    return PlainEmitter()


@pytest_asyncio.fixture
async def people_emitter_factory() -> AsyncGenerator[Callable[..., PeopleEmitter], None]:
    """Create PeopleEmitters whose emit tasks are cancelled on teardown."""
    created: list[PeopleEmitter] = []

    def factory(interval: float = 0.05) -> PeopleEmitter:
        people_emitter = PeopleEmitter(interval=interval)
        created.append(people_emitter)
        return people_emitter

    yield factory

    for people_emitter in created:
        await people_emitter.stop()


# 🔼⚙️🔚
