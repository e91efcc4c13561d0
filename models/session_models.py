"""Conversation session domain models for the orchestrator chat."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def utc_now_iso() -> str:
	"""Return the current UTC time as an ISO-8601 string."""
	return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Attachment:
	"""Name and MIME type of a file the user attached to a message."""

	name: str
	type: str

	def to_dict(self) -> Dict[str, str]:
		return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class Message:
	"""A single chat turn; never modified once appended to a session.

	Rows written without a timestamp load with an empty one rather than the read time.
	"""

	role: str
	content: str
	timestamp: str = field(default_factory=utc_now_iso)
	files: Optional[tuple[Attachment, ...]] = None

	def to_dict(self) -> Dict[str, Any]:
		data: Dict[str, Any] = {"role": self.role, "content": self.content, "timestamp": self.timestamp}
		if self.files:
			data["files"] = [f.to_dict() for f in self.files]
		return data

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "Message":
		files = data.get("files") or None
		return cls(
			role=data.get("role", "user"),
			content=data.get("content", ""),
			timestamp=data.get("timestamp") or "",
			files=tuple(Attachment(name=f.get("name", ""), type=f.get("type", "")) for f in files) if files else None,
		)


@dataclass
class ConversationSession:
	"""Conversation memory for one session id."""

	session_id: str
	messages: List[Message] = field(default_factory=list)
	goals: List[str] = field(default_factory=list)
	topics: List[str] = field(default_factory=list)
	context_summary: str = ""
	created_at: Optional[str] = None
	updated_at: Optional[str] = None

	def to_record(self) -> Dict[str, Any]:
		"""Return the persisted row shape used by the API and the SQLite table."""
		return {
			"session_id": self.session_id,
			"conversation_data": [m.to_dict() for m in self.messages],
			"user_goals": list(self.goals),
			"active_topics": list(self.topics),
			"context_summary": self.context_summary,
			"created_at": self.created_at,
			"updated_at": self.updated_at,
		}
