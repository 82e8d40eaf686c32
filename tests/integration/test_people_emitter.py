#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Integration tests driving EventIterator with an emitter that fires on a timer."""

from __future__ import annotations

import pytest

from eventiter import EndReason, EventIterator, EventIteratorOptions, IteratorResult
from tests.helpers.emitters import PEOPLE, PEOPLE_EVENT


class TestPeopleEmitter:
    """End-to-end iteration over a timed stream of people."""

    @pytest.mark.asyncio
    async def test_people_iterator_is_event_iterator(self, people_emitter_factory) -> None:
        """Test that the emitter's iterator is a configured EventIterator."""
        iterator = people_emitter_factory().create_people_iterator()

        assert isinstance(iterator, EventIterator)
        assert iterator.limit == len(PEOPLE)
        iterator.end()

    @pytest.mark.asyncio
    async def test_ended(self, people_emitter_factory) -> None:
        """Test the ended flag across repeated end() calls."""
        iterator = people_emitter_factory().create_people_iterator()

        assert iterator.ended is False
        iterator.end()
        assert iterator.ended is True
        iterator.end()
        assert iterator.ended is True

    @pytest.mark.asyncio
    async def test_next(self, people_emitter_factory) -> None:
        """Test pulling values one at a time, then ending."""
        iterator = people_emitter_factory().create_people_iterator()

        assert await iterator.next() == IteratorResult(done=False, value=PEOPLE[0])
        assert await iterator.next() == IteratorResult(done=False, value=PEOPLE[1])
        iterator.end()
        assert await iterator.next() == IteratorResult(done=True, value=None)

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_ends_at_limit(self, people_emitter_factory) -> None:
        """Test that a limit of 2 yields the first two people only."""
        people_emitter = people_emitter_factory()
        iterator = people_emitter.create_people_iterator(2)

        values = [person async for person in iterator]

        assert values == list(PEOPLE[:2])
        assert iterator.end_reason is EndReason.LIMIT
        assert people_emitter.listener_count(PEOPLE_EVENT) == 0

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_filters_values(self, people_emitter_factory) -> None:
        """Test that only people with three-letter names are yielded."""
        people_emitter = people_emitter_factory()
        iterator = people_emitter.create_people_iterator(
            options=EventIteratorOptions(filter=lambda person, collected: len(person.name) == 3),
        )

        values = [person.name async for person in iterator]

        assert values == ["Bob", "Joe"]
        assert iterator.end_reason is EndReason.EXPLICIT

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_idle_timeout(self, people_emitter_factory) -> None:
        """Test that a quiet emitter ends the loop without yielding."""
        people_emitter = people_emitter_factory(interval=0.3)
        iterator = people_emitter.create_people_iterator(options=EventIteratorOptions(idle=0.05))

        async for _person in iterator:
            pytest.fail("No person should be yielded before the idle timeout")

        assert iterator.ended is True
        assert iterator.end_reason is EndReason.IDLE
        assert people_emitter.listener_count(PEOPLE_EVENT) == 0

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_break_with_context_manager_restores_emitter(self, people_emitter_factory) -> None:
        """Test leaving the loop after the first person."""
        people_emitter = people_emitter_factory()
        ceiling = people_emitter.get_max_listeners()

        async with people_emitter.create_people_iterator() as iterator:
            async for person in iterator:
                assert person == PEOPLE[0]
                break

        assert people_emitter.listener_count(PEOPLE_EVENT) == 0
        assert people_emitter.get_max_listeners() == ceiling


# 🔼⚙️🔚
