"""Secondary attribute extraction for incoming chat messages.

Every detector takes the lowercase token list produced by :func:`tokenize`
and walks an ordered keyword table, returning the label of the first entry
whose words appear among the tokens.
"""

from __future__ import annotations

import re
import string
from typing import Iterable, List, Optional, Sequence, Tuple

from models.intent_result import IntentResult
from services.intent import keywords

_QUOTED = re.compile(r'"([^"]+)"')
_FILE_EXTENSION = re.compile(r"\.(pdf|doc|docx|txt|jpg|png|mp4|mp3)")
_POSITIVE = re.compile(r"great|awesome|perfect|excellent|love|good|nice|happy|excited")
_NEGATIVE = re.compile(r"bad|terrible|awful|hate|problem|issue|error|fail|stuck")


def tokenize(text: str) -> List[str]:
    """Lowercase ``text``, split on whitespace, and strip edge punctuation."""
    tokens = []
    for raw in text.lower().split():
        token = raw.strip(string.punctuation)
        if token:
            tokens.append(token)
    return tokens


def has_any(tokens: Iterable[str], words: Iterable[str]) -> bool:
    token_set = tokens if isinstance(tokens, (set, frozenset)) else set(tokens)
    return any(word in token_set for word in words)


def first_label(tokens: Sequence[str], table: Sequence[Tuple[str, Sequence[str]]]) -> Optional[str]:
    for label, words in table:
        if has_any(tokens, words):
            return label
    return None


def detect_action(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.ACTIONS)


def detect_production_stage(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.PRODUCTION_STAGES)


def detect_bot_purpose(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.BOT_PURPOSES)


def detect_development_stage(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.DEVELOPMENT_STAGES)


def detect_urgency(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.URGENCY_LEVELS)


def detect_timeframe(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.TIMEFRAMES)


def detect_content_format(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.CONTENT_FORMATS)


def detect_tone(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.TONES)


def detect_assignment_type(tokens: Sequence[str]) -> Optional[str]:
    return first_label(tokens, keywords.ASSIGNMENT_TYPES)


def detect_academic_subject(tokens: Sequence[str]) -> Optional[str]:
    token_set = set(tokens)
    for subject in keywords.ACADEMIC_SUBJECTS:
        if subject in token_set:
            return subject
    return None


def detect_technologies(tokens: Sequence[str]) -> List[str]:
    token_set = set(tokens)
    return [tech for tech in keywords.TECHNOLOGIES if tech in token_set]


def extract_entities(message: str) -> List[str]:
    """Return quoted substrings followed by file-extension mentions."""
    entities = _QUOTED.findall(message)
    entities.extend(m.group(0) for m in _FILE_EXTENSION.finditer(message.lower()))
    return entities


def analyze_sentiment(message_lower: str) -> str:
    if _POSITIVE.search(message_lower):
        return "positive"
    if _NEGATIVE.search(message_lower):
        return "negative"
    return "neutral"


def extract_attributes(bucket: str, message: str, tokens: Sequence[str]) -> IntentResult:
    """Build an :class:`IntentResult` carrying every secondary attribute."""
    return IntentResult(
        bucket=bucket,
        action=detect_action(tokens),
        urgency=detect_urgency(tokens),
        timeframe=detect_timeframe(tokens),
        content_format=detect_content_format(tokens),
        tone=detect_tone(tokens),
        subject=detect_academic_subject(tokens),
        assignment_type=detect_assignment_type(tokens),
        technologies=detect_technologies(tokens),
        entities=extract_entities(message),
        stage=detect_production_stage(tokens),
        bot_purpose=detect_bot_purpose(tokens),
        dev_stage=detect_development_stage(tokens),
        sentiment=analyze_sentiment(message.lower()),
    )
