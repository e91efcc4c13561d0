from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

GREETING = "greeting"
VIDEO_PRODUCTION = "video_production"
BOT_CREATION = "bot_creation"
DEVELOPMENT = "development"
TASK_MANAGEMENT = "task_management"
CONTENT_CREATION = "content_creation"
ACADEMIC = "academic"
CAPABILITIES = "capabilities"
FILE_HANDLING = "file_handling"
CONTINUATION_YES = "continuation_yes"
CONTINUATION_NO = "continuation_no"
DEFAULT = "default"


@dataclass
class IntentResult:
    """Classification outcome for one incoming message.

    Attributes:
        bucket: Primary intent label (one of the module-level constants).
        action: Detected action verb family (create, edit, analyze, organize).
        urgency: ``urgent`` or ``high`` when urgency words are present.
        timeframe: today, tomorrow, this week or this month.
        content_format: Human-readable content format, e.g. ``a blog article``.
        tone: professional, casual, humorous or technical.
        subject: Academic subject name.
        assignment_type: essay, research paper, presentation or project.
        technologies: Framework / database names in table order.
        entities: Quoted substrings and file-extension mentions.
        stage: Video production stage.
        bot_purpose: Kind of bot requested.
        dev_stage: Software development stage.
        sentiment: positive, negative or neutral.
    """

    bucket: str
    action: Optional[str] = None
    urgency: Optional[str] = None
    timeframe: Optional[str] = None
    content_format: Optional[str] = None
    tone: Optional[str] = None
    subject: Optional[str] = None
    assignment_type: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    entities: List[str] = field(default_factory=list)
    stage: Optional[str] = None
    bot_purpose: Optional[str] = None
    dev_stage: Optional[str] = None
    sentiment: str = "neutral"
