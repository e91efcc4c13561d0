"""Rule-based intent dispatcher for the orchestrator chat."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from models.intent_result import IntentResult
from models.session_models import Attachment, Message
from services import memory
from services.intent import rules, templates
from services.intent.context import ConversationContext
from services.intent.extractors import extract_attributes

LOGGER = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Reply text plus the memory it implies for the next turn."""

    reply: str
    intent: IntentResult
    goals: List[str]
    topics: List[str]


class IntentDispatcher:
    """Classify a chat message and render a canned reply for its bucket.

    The dispatcher holds no session state. The only randomness (choosing a
    greeting phrasing) comes from ``rng``, which tests seed explicitly.
    """

    def __init__(self, rng: Optional[random.Random] = None, intent_rules: Sequence[rules.IntentRule] = rules.DEFAULT_RULES) -> None:
        self.rng = rng or random.Random()
        self.rules = tuple(intent_rules)

    def _view(
        self,
        message: str,
        history: Sequence[Message],
        goals: Sequence[str],
        topics: Sequence[str],
        page_context: Optional[str],
        attachments: Optional[Sequence[Attachment]],
    ) -> rules.MessageView:
        return rules.MessageView(
            message=message or "",
            history=history,
            goals=goals,
            topics=topics,
            attachments=attachments or (),
            page_context=page_context,
        )

    def classify(
        self,
        message: str,
        history: Sequence[Message] = (),
        goals: Sequence[str] = (),
        topics: Sequence[str] = (),
        page_context: Optional[str] = None,
        attachments: Optional[Sequence[Attachment]] = None,
    ) -> IntentResult:
        """Return the bucket and secondary attributes for ``message``."""
        view = self._view(message, history, goals, topics, page_context, attachments)
        bucket = rules.classify(view, self.rules)
        return extract_attributes(bucket, view.message, view.tokens)

    def dispatch(
        self,
        message: str,
        history: Sequence[Message] = (),
        goals: Sequence[str] = (),
        topics: Sequence[str] = (),
        page_context: Optional[str] = None,
        attachments: Optional[Sequence[Attachment]] = None,
        rng: Optional[random.Random] = None,
    ) -> DispatchResult:
        """Classify ``message``, render the reply, and compute updated goals/topics.

        Args:
            message: Raw user text.
            history: Prior messages of the session, oldest first.
            goals: Goals already stored for the session.
            topics: Topics already stored for the session.
            page_context: Page the user is on; carried for callers, unused by the rules.
            attachments: Name/MIME pairs of files sent with the message.
            rng: Overrides the dispatcher's random source for this call.

        Returns:
            A DispatchResult; ``goals`` and ``topics`` already include anything
            extracted from ``message`` and respect the retention caps.
        """
        intent = self.classify(message, history, goals, topics, page_context, attachments)
        view = self._view(message, history, goals, topics, page_context, attachments)
        context = ConversationContext(history, topics)
        reply = templates.render(intent, view, context, rng or self.rng)
        LOGGER.debug("Classified message as %s (action=%s)", intent.bucket, intent.action)
        return DispatchResult(
            reply=reply,
            intent=intent,
            goals=memory.merge_goals(goals, view.message),
            topics=memory.merge_topics(topics, view.message),
        )
