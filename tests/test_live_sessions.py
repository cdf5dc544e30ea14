"""Tests for the per-user live session registry."""

import asyncio
import uuid

import pytest

from fittrack.core.enums import SessionState
from fittrack.core.errors import InvalidSessionTransition, LiveSessionConflict, LiveSessionNotFound
from fittrack.services.live_sessions import LiveSessionRegistry
from tests.test_session_runner import FakeSink, make_runner


class TestLiveSessionRegistry:
    def test_get_missing(self):
        with pytest.raises(LiveSessionNotFound):
            LiveSessionRegistry().get(uuid.uuid4())

    def test_open_and_get(self):
        registry = LiveSessionRegistry()
        user = uuid.uuid4()
        runner = make_runner()
        registry.open(user, runner)
        assert registry.get(user) is runner
        assert len(registry) == 1

    def test_unfinished_session_blocks_a_second(self):
        registry = LiveSessionRegistry()
        user = uuid.uuid4()
        registry.open(user, make_runner())
        with pytest.raises(LiveSessionConflict):
            registry.open(user, make_runner())

    @pytest.mark.asyncio
    async def test_completed_session_is_replaced(self):
        registry = LiveSessionRegistry()
        user = uuid.uuid4()
        done = make_runner()
        done.start()
        await done.finish()
        assert done.state is SessionState.COMPLETED
        registry.open(user, done)

        fresh = make_runner()
        registry.open(user, fresh)
        assert registry.get(user) is fresh

    def test_users_are_independent(self):
        registry = LiveSessionRegistry()
        registry.open(uuid.uuid4(), make_runner())
        registry.open(uuid.uuid4(), make_runner())
        assert len(registry) == 2

    def test_discard(self):
        registry = LiveSessionRegistry()
        user = uuid.uuid4()
        registry.open(user, make_runner())
        assert registry.discard(user) is True
        assert registry.discard(user) is False
        with pytest.raises(LiveSessionNotFound):
            registry.get(user)

    def test_close_all(self):
        registry = LiveSessionRegistry()
        registry.open(uuid.uuid4(), make_runner())
        registry.close_all()
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_cannot_discard_while_saving(self):
        """Abandoning during a save is refused, and the saved session is the only outcome."""
        registry = LiveSessionRegistry()
        user = uuid.uuid4()
        sink = FakeSink()
        sink.gate = asyncio.Event()
        runner = registry.open(user, make_runner(sink=sink))
        runner.start()

        finishing = asyncio.create_task(runner.finish())
        await asyncio.sleep(0)
        with pytest.raises(InvalidSessionTransition):
            registry.discard(user)
        assert registry.get(user) is runner
        assert sink.saved == []

        sink.gate.set()
        await finishing
        assert len(sink.saved) == 1
        assert registry.discard(user) is True

    @pytest.mark.asyncio
    async def test_release_drops_only_completed(self):
        registry = LiveSessionRegistry()
        user = uuid.uuid4()
        runner = registry.open(user, make_runner())
        runner.start()
        assert registry.release(user) is False
        assert registry.get(user) is runner

        await runner.finish()
        assert registry.release(user) is True
        assert len(registry) == 0
        assert registry.release(user) is False
