import asyncio
import uuid

import pytest

from models.session_models import Attachment
from services import memory
from services.chat_service import ChatService
from services.session_store import InMemorySessionStore
from utils.errors import PersistenceError


class SlowStore(InMemorySessionStore):
    """Yields between load and save so unsynchronized turns would interleave."""

    async def load(self, session_id):
        session = await super().load(session_id)
        await asyncio.sleep(0.01)
        return session


class BrokenStore(InMemorySessionStore):
    def __init__(self):
        super().__init__()
        self.saved = False

    async def load(self, session_id):
        raise PersistenceError("database unavailable", session_id)

    async def save(self, session):
        self.saved = True


@pytest.mark.asyncio
async def test_first_turn_creates_session_with_generated_id(memory_store, dispatcher):
    service = ChatService(memory_store, dispatcher)
    reply = await service.handle_turn("I want to build a birthday app")

    uuid.UUID(reply["sessionId"])
    assert reply["userGoals"] == ["build a birthday app"]
    assert reply["activeTopics"] == ["app"]

    stored = await memory_store.load(reply["sessionId"])
    assert [m.content for m in stored.messages] == ["I want to build a birthday app", reply["response"]]
    assert stored.context_summary == "Started with: I want to build a birthday app..."


@pytest.mark.asyncio
async def test_follow_up_turn_uses_stored_memory(memory_store, dispatcher):
    service = ChatService(memory_store, dispatcher)
    await service.handle_turn("let's make a video about the cast", session_id="s1")
    await service.handle_turn("it needs an intro and an outro for the crew", session_id="s1")

    reply = await service.handle_turn("yes", session_id="s1")
    assert reply["response"] == "Great! Let's continue with video. What's the next step?"

    stored = await memory_store.load("s1")
    assert len(stored.messages) == 6
    assert stored.context_summary == "Latest: yes..."


@pytest.mark.asyncio
async def test_attachments_are_recorded_on_the_user_message(memory_store, dispatcher):
    service = ChatService(memory_store, dispatcher)
    files = [Attachment("cut.mp4", "video/mp4")]
    reply = await service.handle_turn("take a look", session_id="s2", page_context="/studio", attachments=files)

    assert "Ready to work with these video files!" in reply["response"]
    stored = await memory_store.load("s2")
    assert stored.messages[0].files == (Attachment("cut.mp4", "video/mp4"),)


@pytest.mark.asyncio
async def test_history_cap_keeps_memory_from_dropped_turns(memory_store, dispatcher):
    service = ChatService(memory_store, dispatcher)
    await service.handle_turn("I want to build a birthday app", session_id="s3")
    for i in range(25):
        await service.handle_turn(f"message {i}", session_id="s3")

    stored = await memory_store.load("s3")
    assert len(stored.messages) == memory.MAX_HISTORY
    assert stored.messages[0].content == "message 0"
    assert stored.goals == ["build a birthday app"]
    assert stored.topics == ["app"]


@pytest.mark.asyncio
async def test_load_failure_is_not_treated_as_a_new_session(dispatcher):
    store = BrokenStore()
    service = ChatService(store, dispatcher)
    with pytest.raises(PersistenceError):
        await service.handle_turn("hey", session_id="s4")
    assert store.saved is False


@pytest.mark.asyncio
async def test_concurrent_turns_for_one_session_are_serialized(dispatcher):
    store = SlowStore()
    service = ChatService(store, dispatcher)
    await asyncio.gather(
        service.handle_turn("I want to write a blog post", session_id="same"),
        service.handle_turn("I need to plan the shoot", session_id="same"),
    )
    stored = await store.load("same")
    assert len(stored.messages) == 4
    assert sorted(stored.goals) == ["plan the shoot", "write a blog post"]


@pytest.mark.asyncio
async def test_different_sessions_are_independent(dispatcher):
    store = SlowStore()
    service = ChatService(store, dispatcher)
    await asyncio.gather(
        service.handle_turn("hey", session_id="a"),
        service.handle_turn("hello", session_id="b"),
    )
    assert len((await store.load("a")).messages) == 2
    assert len((await store.load("b")).messages) == 2
