"""Ordered intent rules evaluated first-match-wins."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional, Sequence

from models import intent_result as buckets
from models.session_models import Attachment, Message
from services.intent import keywords
from services.intent.extractors import detect_action, has_any, tokenize


def _word_pattern(words: Sequence[str]) -> re.Pattern:
    alternatives = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b(?:{alternatives})\b")


_AFFIRMATION = _word_pattern(keywords.AFFIRMATIONS)
_NEGATION = _word_pattern(keywords.NEGATIONS)


@dataclass
class MessageView:
    """Normalized view of one incoming message and the memory it arrives with."""

    message: str
    history: Sequence[Message] = ()
    goals: Sequence[str] = ()
    topics: Sequence[str] = ()
    attachments: Sequence[Attachment] = ()
    page_context: Optional[str] = None
    lower: str = field(init=False)
    tokens: List[str] = field(init=False)
    token_set: FrozenSet[str] = field(init=False)

    def __post_init__(self) -> None:
        self.lower = self.message.lower()
        self.tokens = tokenize(self.message)
        self.token_set = frozenset(self.tokens)


@dataclass(frozen=True)
class IntentRule:
    bucket: str
    predicate: Callable[[MessageView], bool]


def is_greeting(view: MessageView) -> bool:
    return view.lower.strip().rstrip("!?.").strip() in keywords.GREETINGS


def keyword_rule(bucket: str, words: FrozenSet[str]) -> IntentRule:
    return IntentRule(bucket, lambda view: has_any(view.token_set, words))


def wants_bot(view: MessageView) -> bool:
    return has_any(view.token_set, keywords.BOT_KEYWORDS) and detect_action(view.tokens) == "create"


def asks_capabilities(view: MessageView) -> bool:
    return any(phrase in view.lower for phrase in keywords.CAPABILITY_PHRASES)


def has_attachments(view: MessageView) -> bool:
    return len(view.attachments) > 0


def _continuing(view: MessageView) -> bool:
    return len(view.history) > 2 and len(view.topics) > 0


def affirms_continuation(view: MessageView) -> bool:
    return _continuing(view) and _AFFIRMATION.search(view.lower) is not None


def declines_continuation(view: MessageView) -> bool:
    return _continuing(view) and _NEGATION.search(view.lower) is not None


# Order is significant: a message mentioning both "video" and "bot" is video_production.
DEFAULT_RULES = (
    IntentRule(buckets.GREETING, is_greeting),
    keyword_rule(buckets.VIDEO_PRODUCTION, keywords.VIDEO_KEYWORDS),
    IntentRule(buckets.BOT_CREATION, wants_bot),
    keyword_rule(buckets.DEVELOPMENT, keywords.DEVELOPMENT_KEYWORDS),
    keyword_rule(buckets.TASK_MANAGEMENT, keywords.TASK_KEYWORDS),
    keyword_rule(buckets.CONTENT_CREATION, keywords.CONTENT_KEYWORDS),
    keyword_rule(buckets.ACADEMIC, keywords.ACADEMIC_KEYWORDS),
    IntentRule(buckets.CAPABILITIES, asks_capabilities),
    IntentRule(buckets.FILE_HANDLING, has_attachments),
    IntentRule(buckets.CONTINUATION_YES, affirms_continuation),
    IntentRule(buckets.CONTINUATION_NO, declines_continuation),
)


def classify(view: MessageView, rules: Sequence[IntentRule] = DEFAULT_RULES) -> str:
    """Return the bucket of the first matching rule, or ``default``."""
    for rule in rules:
        if rule.predicate(view):
            return rule.bucket
    return buckets.DEFAULT
