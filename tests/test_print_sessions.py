import pytest

import print_sessions
from dal.conversation_dal import ConversationDAL
from models.session_models import ConversationSession, Message
from utils.database_init import AsyncDatabaseInitializer


def test_format_session_shows_memory_and_recent_messages():
    session = ConversationSession(
        session_id="s1",
        messages=[Message(role="user", content=f"line {i}\nmore") for i in range(6)],
        goals=["build a birthday app"],
        topics=["app", "video"],
        context_summary="Latest: line 5...",
    )
    text = print_sessions.format_session(session, last_messages=2)
    assert text.splitlines()[0] == "Session: s1"
    assert "  topics: app, video" in text
    assert "  goals: build a birthday app" in text
    assert "    USER: line 5 more" in text
    assert "line 3" not in text


def test_format_session_truncates_long_messages():
    session = ConversationSession(session_id="s2", messages=[Message(role="assistant", content="x" * 150)])
    text = print_sessions.format_session(session)
    assert "    ASSISTANT: " + "x" * 97 + "..." in text
    assert "  topics: -" in text


@pytest.mark.asyncio
async def test_main_prints_stored_sessions(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("DATABASE_DIR", str(tmp_path))
    await ConversationDAL(AsyncDatabaseInitializer()).save(ConversationSession(session_id="stored", topics=["bot"]))

    await print_sessions.main(limit=5, last_messages=1)
    out = capsys.readouterr().out
    assert "Session: stored" in out
    assert "topics: bot" in out
