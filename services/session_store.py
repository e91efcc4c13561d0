"""Session store interface and a simple in-memory implementation."""

from __future__ import annotations

import asyncio
import copy
import weakref
from typing import Dict, Optional, Protocol

from models.session_models import ConversationSession


class SessionStore(Protocol):
	"""Load and save conversation sessions by id."""

	async def load(self, session_id: str) -> Optional[ConversationSession]:
		"""Return the stored session, or None when no row exists for ``session_id``."""
		...

	async def save(self, session: ConversationSession) -> None:
		"""Insert or update ``session`` keyed by its session id."""
		...


class InMemorySessionStore:
	"""Keep sessions in a process-local dict; contents are lost on restart."""

	def __init__(self) -> None:
		self._sessions: Dict[str, ConversationSession] = {}

	async def load(self, session_id: str) -> Optional[ConversationSession]:
		state = self._sessions.get(session_id)
		return copy.deepcopy(state) if state is not None else None

	async def save(self, session: ConversationSession) -> None:
		self._sessions[session.session_id] = copy.deepcopy(session)


class SessionLocks:
	"""Hand out one asyncio.Lock per session id so turns for a session run one at a time."""

	def __init__(self) -> None:
		self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

	def for_session(self, session_id: str) -> asyncio.Lock:
		lock = self._locks.get(session_id)
		if lock is None:
			lock = asyncio.Lock()
			self._locks[session_id] = lock
		return lock
