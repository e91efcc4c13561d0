"""Async Data Access Layer for the orchestrator_conversations table.

Provides ConversationDAL, a SQLite-backed session store compatible with
`utils.database_init.AsyncDatabaseInitializer`.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional, Sequence

import aiosqlite

from models.session_models import ConversationSession, Message, utc_now_iso
from utils.database_init import AsyncDatabaseInitializer
from utils.errors import PersistenceError

LOGGER = logging.getLogger(__name__)


class ConversationDAL:
    """Data access layer for conversation sessions, one row per session id.

    The constructor accepts an `AsyncDatabaseInitializer` (or any object
    exposing an async `connection()` context manager that yields an
    `aiosqlite.Connection`). Database errors surface as PersistenceError.
    """

    _COLUMNS = (
        "session_id",
        "conversation_data",
        "user_goals",
        "active_topics",
        "context_summary",
        "created_at",
        "updated_at",
    )
    _COLUMN_LIST = ", ".join(_COLUMNS)

    def __init__(self, db_initializer: AsyncDatabaseInitializer) -> None:
        self._db = db_initializer

    async def load(self, session_id: str) -> Optional[ConversationSession]:
        """Return the session for `session_id`, or None if no row exists."""
        try:
            async with self._db.connection() as conn:
                cur = await conn.execute(
                    f"SELECT {self._COLUMN_LIST} FROM orchestrator_conversations WHERE session_id = ?",
                    (session_id,),
                )
                row = await cur.fetchone()
        except aiosqlite.Error as exc:
            LOGGER.error("Failed to load session %s: %s", session_id, exc)
            raise PersistenceError(f"Failed to load session {session_id}", session_id) from exc
        return self._row_to_session(row) if row else None

    async def save(self, session: ConversationSession) -> None:
        """Insert the session row or update it in place when it already exists."""
        created_at = session.created_at or utc_now_iso()
        updated_at = session.updated_at or created_at
        params = (
            session.session_id,
            json.dumps([m.to_dict() for m in session.messages]),
            json.dumps(list(session.goals)),
            json.dumps(list(session.topics)),
            session.context_summary,
            created_at,
            updated_at,
        )
        try:
            async with self._db.connection() as conn:
                await conn.execute(
                    f"""
                    INSERT INTO orchestrator_conversations ({self._COLUMN_LIST})
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(session_id) DO UPDATE SET
                        conversation_data = excluded.conversation_data,
                        user_goals = excluded.user_goals,
                        active_topics = excluded.active_topics,
                        context_summary = excluded.context_summary,
                        updated_at = excluded.updated_at
                    """,
                    params,
                )
                await conn.commit()
        except aiosqlite.Error as exc:
            LOGGER.error("Failed to save session %s: %s", session.session_id, exc)
            raise PersistenceError(f"Failed to save session {session.session_id}", session.session_id) from exc

    async def list_sessions(self, limit: int = 100) -> List[ConversationSession]:
        """List sessions, most recently updated first."""
        try:
            async with self._db.connection() as conn:
                cur = await conn.execute(
                    f"SELECT {self._COLUMN_LIST} FROM orchestrator_conversations ORDER BY updated_at DESC LIMIT ?",
                    (limit,),
                )
                rows = await cur.fetchall()
        except aiosqlite.Error as exc:
            raise PersistenceError("Failed to list sessions") from exc
        return [self._row_to_session(r) for r in rows]

    @staticmethod
    def _decode_list(raw: object, column: str, session_id: str, item_type: type) -> list:
        """Decode a JSON list column, rejecting values of any other shape."""
        try:
            value = json.loads(raw or "[]")
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"Stored session {session_id} has invalid JSON in {column}", session_id) from exc
        if not isinstance(value, list) or not all(isinstance(item, item_type) for item in value):
            raise PersistenceError(f"Stored session {session_id} has a malformed {column} column", session_id)
        return value

    @classmethod
    def _row_to_session(cls, row: Sequence[object]) -> ConversationSession:
        """Convert a DB row tuple into a ConversationSession."""
        session_id = str(row[0])
        raw_messages = cls._decode_list(row[1], "conversation_data", session_id, dict)
        try:
            messages = [Message.from_dict(m) for m in raw_messages]
        except (TypeError, AttributeError) as exc:
            raise PersistenceError(f"Stored session {session_id} has a malformed message", session_id) from exc
        return ConversationSession(
            session_id=session_id,
            messages=messages,
            goals=cls._decode_list(row[2], "user_goals", session_id, str),
            topics=cls._decode_list(row[3], "active_topics", session_id, str),
            context_summary=row[4] or "",
            created_at=row[5],
            updated_at=row[6],
        )
