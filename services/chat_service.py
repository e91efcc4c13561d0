"""One orchestrator chat turn: load memory, dispatch, update memory, persist."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Optional, Sequence

from models.session_models import Attachment, ConversationSession
from services import memory
from services.intent.dispatcher import IntentDispatcher
from services.session_store import SessionLocks, SessionStore

LOGGER = logging.getLogger(__name__)


class ChatService:
    """Run chat turns against a session store.

    Turns for the same session id are serialized with a per-session lock held
    from load to save, so two concurrent requests never drop each other's
    messages inside one process. Different sessions run in parallel.
    """

    def __init__(self, store: SessionStore, dispatcher: IntentDispatcher, locks: Optional[SessionLocks] = None) -> None:
        self.store = store
        self.dispatcher = dispatcher
        self.locks = locks or SessionLocks()

    async def handle_turn(
        self,
        message: str,
        session_id: Optional[str] = None,
        page_context: Optional[str] = None,
        attachments: Optional[Sequence[Attachment]] = None,
    ) -> Dict[str, Any]:
        """Process one user message and return the reply payload.

        Raises:
            PersistenceError: if the store fails to load or save the session.
        """
        actual_session_id = session_id or str(uuid.uuid4())
        async with self.locks.for_session(actual_session_id):
            # A store error propagates here; only a missing row starts a new session.
            session = await self.store.load(actual_session_id)
            is_new = session is None
            if session is None:
                session = ConversationSession(session_id=actual_session_id)

            result = self.dispatcher.dispatch(
                message,
                history=session.messages,
                goals=session.goals,
                topics=session.topics,
                page_context=page_context,
                attachments=attachments,
            )
            memory.apply_turn(
                session,
                message,
                result.reply,
                goals=result.goals,
                topics=result.topics,
                attachments=attachments,
                is_new=is_new,
            )
            await self.store.save(session)

        LOGGER.info(
            "Session %s turn handled: bucket=%s new=%s messages=%d",
            actual_session_id, result.intent.bucket, is_new, len(session.messages),
        )
        return {
            "response": result.reply,
            "sessionId": actual_session_id,
            "userGoals": list(session.goals),
            "activeTopics": list(session.topics),
        }

    async def get_session(self, session_id: str) -> Optional[ConversationSession]:
        return await self.store.load(session_id)
