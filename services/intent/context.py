"""Read-only summary of prior conversation used when rendering replies."""

from __future__ import annotations

import re
from typing import List, Sequence, Set

from models.session_models import Message

_QUESTION = re.compile(r"[^.!?]*\?")
_END_PUNCTUATION = re.compile(r"[.!?]")


class ConversationContext:
    """Topics and recently asked assistant questions for one session."""

    def __init__(self, history: Sequence[Message], topics: Sequence[str], recent: int = 10) -> None:
        self.message_count = len(history)
        self._history = list(history)
        self.topics: List[str] = list(topics)
        self.recent_messages: List[Message] = list(history[-recent:]) if recent else list(history)
        self.asked_questions: Set[str] = set()
        for msg in self.recent_messages:
            if msg.role != "assistant" or "?" not in msg.content:
                continue
            for question in _QUESTION.findall(msg.content):
                cleaned = question.strip().lower()
                if _END_PUNCTUATION.sub("", cleaned).strip():
                    self.asked_questions.add(cleaned)

    def has_discussed(self, topic: str) -> bool:
        needle = topic.lower()
        return any(needle in t.lower() for t in self.topics)

    def has_asked_question(self, question: str) -> bool:
        """Return True if a recent assistant question overlaps ``question``."""
        normalized = _END_PUNCTUATION.sub("", question.lower()).strip()
        for asked in self.asked_questions:
            bare = _END_PUNCTUATION.sub("", asked).strip()
            if normalized in asked or bare in normalized:
                return True
        return False

    def last_user_message(self) -> Message | None:
        for msg in reversed(self._history):
            if msg.role == "user":
                return msg
        return None
