"""Conversation memory updates applied after every orchestrator turn."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from models.session_models import Attachment, ConversationSession, Message, utc_now_iso
from services.intent.keywords import TOPIC_KEYWORDS

MAX_HISTORY = 50
MAX_GOALS = 10
MAX_TOPICS = 10
MIN_GOAL_LENGTH = 5
SUMMARY_CHARS = 200

GOAL_PATTERNS = (
    re.compile(r"(?:want to|need to|goal.*?is to|trying to|planning to|hoping to)\s+(.+?)(?:\.|,|$)", re.IGNORECASE),
    re.compile(r"(?:would like to|wish to|aim to|intend to)\s+(.+?)(?:\.|,|$)", re.IGNORECASE),
)
TOPIC_PATTERNS = tuple((kw, re.compile(rf"\b{kw}\b", re.IGNORECASE)) for kw in TOPIC_KEYWORDS)


def _cap(items: List[str], limit: int) -> List[str]:
    return items[-limit:] if limit else items


def extract_goals(message: str) -> List[str]:
    """Return goal phrases stated in ``message``, in pattern order, without duplicates."""
    found: List[str] = []
    for pattern in GOAL_PATTERNS:
        for match in pattern.finditer(message or ""):
            goal = match.group(1).strip()
            if len(goal) > MIN_GOAL_LENGTH and goal not in found:
                found.append(goal)
    return found


def extract_topics(message: str) -> List[str]:
    return [kw for kw, pattern in TOPIC_PATTERNS if pattern.search(message or "")]


def _merge(existing: Iterable[str], new_items: Iterable[str], limit: int) -> List[str]:
    merged = list(existing)
    for item in new_items:
        if item not in merged:
            merged.append(item)
    return _cap(merged, limit)


def merge_goals(goals: Sequence[str], message: str, limit: int = MAX_GOALS) -> List[str]:
    return _merge(goals, extract_goals(message), limit)


def merge_topics(topics: Sequence[str], message: str, limit: int = MAX_TOPICS) -> List[str]:
    return _merge(topics, extract_topics(message), limit)


def apply_turn(
    session: ConversationSession,
    message: str,
    reply: str,
    goals: Sequence[str],
    topics: Sequence[str],
    attachments: Optional[Sequence[Attachment]] = None,
    is_new: bool = False,
) -> ConversationSession:
    """Record one user/assistant exchange on ``session`` and return it.

    History is truncated to the most recent ``MAX_HISTORY`` entries. Goals and
    topics are replaced with the already-merged lists, so truncating history
    never retracts them.
    """
    now = utc_now_iso()
    files = tuple(attachments) if attachments else None
    session.messages = (
        list(session.messages)
        + [Message(role="user", content=message, timestamp=now, files=files), Message(role="assistant", content=reply, timestamp=now)]
    )[-MAX_HISTORY:]
    session.goals = _cap(list(goals), MAX_GOALS)
    session.topics = _cap(list(topics), MAX_TOPICS)
    prefix = "Started with" if is_new else "Latest"
    session.context_summary = f"{prefix}: {message[:SUMMARY_CHARS]}..."
    if session.created_at is None:
        session.created_at = now
    session.updated_at = now
    return session
