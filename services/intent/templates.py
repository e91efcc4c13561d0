"""Reply templates for each intent bucket."""

from __future__ import annotations

import random
from typing import Callable, Dict

from models import intent_result as buckets
from models.intent_result import IntentResult
from services.intent.context import ConversationContext
from services.intent.extractors import has_any
from services.intent import keywords
from services.intent.rules import MessageView

GREETINGS = (
    "Hey! What can I help you with?",
    "Hi there! What do we need to work on?",
    "Hey, what's up? Ready to tackle something?",
    "Hi! What's on your list today?",
)

STAGE_GUIDANCE = {
    "script writing": "What's your story concept? I'll help you develop the narrative, dialogue, and structure.",
    "character design": "Tell me about your characters - their personalities, roles, and relationships. I'll help bring them to life.",
    "scene composition": "Describe your scenes. I'll help with camera angles, lighting, composition, and visual storytelling.",
    "audio production": "Let's work on the soundscape - dialogue, music, sound effects, and atmosphere.",
    "post-production": "Time to polish! I'll help with editing, color grading, effects, and final touches.",
}

VIDEO_CREATE = (
    "Got it! Let's create some video content. I can help you with:\n\n"
    "• Script writing and story development\n"
    "• Character design and animation\n"
    "• Scene composition and cinematography\n"
    "• Audio and soundtrack creation\n"
    "• Post-production and editing\n\n"
    "What aspect would you like to start with?"
)
VIDEO_SCRIPT_FOLLOWUP = (
    "I remember we were working on the script. Ready to move to the next stage "
    "like character design or scene composition?"
)
VIDEO_EDIT = (
    "I can help you edit video content! What needs adjustment?\n\n"
    "• Trim and cut scenes\n"
    "• Adjust timing and pacing\n"
    "• Color grading\n"
    "• Audio mixing\n"
    "• Add effects or transitions\n\n"
    "Tell me what you'd like to change."
)
VIDEO_GENERIC = (
    "I can help with video production! Tell me more about what you'd like to "
    "create - a full episode, a scene, or something else?"
)

BOT_WITH_PURPOSE = (
    "Perfect! I'll help you build a {purpose} bot. Let me know:\n\n"
    "• What specific tasks should it handle?\n"
    "• What triggers should activate it?\n"
    "• Where should it get data from?\n"
    "• What should it do with the results?\n\n"
    "The more details you provide, the better I can configure it!"
)
BOT_GENERIC = (
    "Perfect! I can help you create custom bots for automation. What kind of bot do you need?\n\n"
    "• Task automation bots\n"
    "• Content generation bots\n"
    "• Social media bots\n"
    "• Analytics and monitoring bots\n"
    "• Custom workflow bots\n\n"
    "Describe what you want it to do and I'll help you build it."
)

DEV_WITH_TECH = (
    "Great! I can help you build with {technologies}. What are you building?\n\n"
    "• Architecture planning\n"
    "• Implementation guidance\n"
    "• Best practices\n"
    "• Integration patterns\n"
    "• Testing strategies\n\n"
    "What's your first step?"
)
DEV_PLANNING = (
    "Let's plan your project! I can help with:\n\n"
    "• Requirements gathering\n"
    "• Architecture design\n"
    "• Technology stack selection\n"
    "• Timeline estimation\n"
    "• Breaking down tasks\n\n"
    "What's the project concept?"
)
DEV_GENERIC = (
    "I can help with development! What are you building?\n\n"
    "• Web applications\n"
    "• APIs and backend services\n"
    "• UI/UX design\n"
    "• Database architecture\n"
    "• Integration with external services\n\n"
    "Share your project idea and I'll assist."
)

TASK_URGENT = (
    "Got it - this sounds time-sensitive! Let me help you prioritize. "
    "What's the most critical thing that needs to happen today?"
)
TASK_TIMEFRAME = (
    "Planning for {timeframe}! I can help you:\n\n"
    "• Break down tasks\n"
    "• Set realistic deadlines\n"
    "• Create a timeline\n"
    "• Identify dependencies\n"
    "• Track progress\n\n"
    "What needs to be done?"
)
TASK_GENERIC = (
    "I can help organize your tasks and workflow! Would you like me to:\n\n"
    "• Create a task list\n"
    "• Set up a schedule\n"
    "• Plan a project timeline\n"
    "• Organize your priorities\n"
    "• Set up reminders\n\n"
    "What do you need help organizing?"
)

CONTENT_WITH_FORMAT_AND_TONE = (
    "Perfect! I'll help you write {content_format} with a {tone} tone. Tell me:\n\n"
    "• Who's your target audience?\n"
    "• What's the main message?\n"
    "• Any specific requirements?\n"
    "• Desired length?\n\n"
    "Let's create something great!"
)
CONTENT_GENERIC = (
    "I can help with content creation! What type of content do you need?\n\n"
    "• Marketing copy\n"
    "• Blog articles\n"
    "• Social media posts\n"
    "• Scripts and storytelling\n"
    "• Email campaigns\n\n"
    "Tell me about your project and target audience."
)

ACADEMIC_SPECIFIC = (
    "I can help with your {subject} {assignment_type}! Let's work on:\n\n"
    "• Research and sources\n"
    "• Outline and structure\n"
    "• Content development\n"
    "• Citations and formatting\n"
    "• Review and refinement\n\n"
    "What's your topic?"
)
ACADEMIC_GENERIC = (
    "I can help with your school work! What do you need assistance with?\n\n"
    "• Research and citations\n"
    "• Writing essays and papers\n"
    "• Project planning\n"
    "• Study organization\n"
    "• Note-taking strategies\n\n"
    "What subject or assignment are you working on?"
)

CAPABILITY_MENU = (
    "🎬 Video Production\n💻 Development\n🤖 Automation\n📝 Content\n"
    "📚 School/Work\n⚡ Task Management"
)
CAPABILITIES_INTRO = (
    "I'm Mayza - your singular AI assistant with everything built-in! I can help with:\n\n"
    "🎬 Video Production - scripts, characters, scenes, editing\n"
    "💻 Development - apps, code, APIs, design\n"
    "🤖 Automation - custom workflows and bots\n"
    "📝 Content - writing, marketing, social media\n"
    "📚 School/Work - research, planning, organization\n"
    "⚡ Task Management - planning, scheduling, organizing\n\n"
    "No routing, no departments - just me understanding your needs and getting "
    "things done. What can I help you with?"
)

FILE_HINTS = (
    ("images", "These look like images for your project!"),
    ("videos", "Ready to work with these video files!"),
    ("documents", "I can help you with these documents!"),
)
FILE_HANDLING = (
    "I see you've uploaded {count} file(s). {hint}\n\n"
    "I can help you:\n\n"
    "• Analyze and summarize content\n"
    "• Extract information\n"
    "• Transform or convert files\n"
    "• Organize and categorize\n"
    "• Use them in your project\n\n"
    "What would you like to do with these files?"
)

CONTINUE_YES = "Great! Let's continue with {topic}. What's the next step?"
CONTINUE_NO = "No problem! What would you like to work on instead?"

DEFAULT_PROCEED = (
    "Based on what you've shared about {topic}, I can start working on that. "
    "Should I proceed with implementation, or would you like to refine the approach first?"
)
DEFAULT_SUGGESTED = (
    'I understand you want help with: "{message}"\n\n'
    "This sounds like it might involve {suggestion}. Could you tell me more about:\n\n"
    "• Your end goal\n"
    "• Any specific requirements\n"
    "• Timeline or constraints\n\n"
    "I'm ready to help once I understand your needs better!"
)
DEFAULT_GENERIC = (
    'I understand you want help with: "{message}"\n\n'
    "I'm ready to assist! Could you provide a bit more context so I can help you "
    "effectively? For example:\n\n"
    "• What's the end goal?\n"
    "• What domain is this related to (work, school, creative project)?\n"
    "• Are there any specific requirements or constraints?\n\n"
    "The more details you share, the better I can help!"
)

Renderer = Callable[[IntentResult, MessageView, ConversationContext, random.Random], str]


def _last_topic(view: MessageView) -> str | None:
    return view.topics[-1] if view.topics else None


def render_greeting(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    topic = _last_topic(view)
    if context.message_count > 2 and topic:
        return f"Hey! Ready to continue with {topic}?"
    return rng.choice(GREETINGS)


def render_video(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    if intent.action == "create":
        if intent.stage:
            guidance = STAGE_GUIDANCE.get(intent.stage, "Let's work on this stage together!")
            return f"Got it! Let's focus on {intent.stage}. {guidance}"
        if context.has_discussed("script"):
            return VIDEO_SCRIPT_FOLLOWUP
        return VIDEO_CREATE
    if intent.action == "edit":
        return VIDEO_EDIT
    return VIDEO_GENERIC


def render_bot(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    if intent.bot_purpose:
        return BOT_WITH_PURPOSE.format(purpose=intent.bot_purpose)
    return BOT_GENERIC


def render_development(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    if intent.technologies:
        return DEV_WITH_TECH.format(technologies=", ".join(intent.technologies))
    if intent.dev_stage == "planning":
        return DEV_PLANNING
    return DEV_GENERIC


def render_task(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    if intent.urgency == "urgent" or intent.timeframe == "today":
        return TASK_URGENT
    if intent.timeframe:
        return TASK_TIMEFRAME.format(timeframe=intent.timeframe)
    return TASK_GENERIC


def render_content(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    if intent.content_format and intent.tone:
        return CONTENT_WITH_FORMAT_AND_TONE.format(content_format=intent.content_format, tone=intent.tone)
    return CONTENT_GENERIC


def render_academic(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    if intent.subject and intent.assignment_type:
        return ACADEMIC_SPECIFIC.format(subject=intent.subject, assignment_type=intent.assignment_type)
    return ACADEMIC_GENERIC


def render_capabilities(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    if context.message_count > 2:
        reply = "I'm Mayza - ONE AI handling everything we've discussed! I can help you continue with:\n\n"
        if view.topics:
            reply += "• " + "\n• ".join(view.topics) + "\n\n"
        return reply + "Or start something new:\n" + CAPABILITY_MENU + "\n\nWhat would you like to work on?"
    return CAPABILITIES_INTRO


def describe_file_types(view: MessageView) -> str:
    """Return the distinct coarse kinds of the attached files, comma separated."""
    kinds = []
    for attachment in view.attachments:
        mime = attachment.type or ""
        if mime.startswith("image/"):
            kind = "images"
        elif mime.startswith("video/"):
            kind = "videos"
        elif "pdf" in mime:
            kind = "PDFs"
        elif "document" in mime or "word" in mime:
            kind = "documents"
        else:
            kind = "files"
        if kind not in kinds:
            kinds.append(kind)
    return ", ".join(kinds)


def render_files(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    kinds = describe_file_types(view)
    hint = next((text for kind, text in FILE_HINTS if kind in kinds), "Got your files!")
    return FILE_HANDLING.format(count=len(view.attachments), hint=hint)


def render_continue_yes(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    return CONTINUE_YES.format(topic=_last_topic(view))


def render_continue_no(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    return CONTINUE_NO


def suggest_domain(intent: IntentResult, view: MessageView) -> str | None:
    if intent.entities:
        return "working with: " + ", ".join(intent.entities)
    domains = [label for label, words in keywords.DOMAIN_HINTS if has_any(view.token_set, words)]
    return " or ".join(domains) if domains else None


def render_default(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    recent_topics = list(view.topics[-3:])
    if context.message_count > 2 and recent_topics and not context.has_asked_question("what would you like to do"):
        last_user = context.last_user_message()
        if last_user is not None and len(last_user.content) > 20:
            return DEFAULT_PROCEED.format(topic=recent_topics[-1])
    suggestion = suggest_domain(intent, view)
    if suggestion:
        return DEFAULT_SUGGESTED.format(message=view.message, suggestion=suggestion)
    return DEFAULT_GENERIC.format(message=view.message)


RENDERERS: Dict[str, Renderer] = {
    buckets.GREETING: render_greeting,
    buckets.VIDEO_PRODUCTION: render_video,
    buckets.BOT_CREATION: render_bot,
    buckets.DEVELOPMENT: render_development,
    buckets.TASK_MANAGEMENT: render_task,
    buckets.CONTENT_CREATION: render_content,
    buckets.ACADEMIC: render_academic,
    buckets.CAPABILITIES: render_capabilities,
    buckets.FILE_HANDLING: render_files,
    buckets.CONTINUATION_YES: render_continue_yes,
    buckets.CONTINUATION_NO: render_continue_no,
    buckets.DEFAULT: render_default,
}


def render(intent: IntentResult, view: MessageView, context: ConversationContext, rng: random.Random) -> str:
    renderer = RENDERERS.get(intent.bucket, render_default)
    return renderer(intent, view, context, rng)
