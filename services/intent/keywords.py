"""Keyword tables used by intent classification and attribute extraction."""

GREETINGS = ("hi", "hey", "hello", "yo", "sup", "what's up", "whats up")

VIDEO_KEYWORDS = frozenset({
    "video", "episode", "scene", "script", "story", "character", "production",
    "film", "movie", "animate", "cinematic", "footage", "render",
})
BOT_KEYWORDS = frozenset({"bot", "automation", "automate", "workflow"})
DEVELOPMENT_KEYWORDS = frozenset({
    "app", "code", "develop", "program", "build", "website", "software", "api",
    "frontend", "backend", "database",
})
TASK_KEYWORDS = frozenset({"task", "todo", "plan", "organize", "schedule", "remind", "deadline", "priority"})
CONTENT_KEYWORDS = frozenset({"write", "content", "blog", "article", "post", "copy", "marketing", "email", "social"})
ACADEMIC_KEYWORDS = frozenset({
    "school", "study", "homework", "research", "paper", "essay", "assignment",
    "thesis", "dissertation",
})
CAPABILITY_PHRASES = ("what can you", "capabilities", "help with", "do for me", "able to")

AFFIRMATIONS = ("yes", "yeah", "sure", "ok", "okay", "continue", "proceed", "go ahead")
NEGATIONS = ("no", "not", "stop", "cancel", "different")

# Ordered (label, words); the first label whose words intersect the tokens wins.
ACTIONS = (
    ("create", ("create", "make", "generate", "build", "produce", "start", "new")),
    ("edit", ("edit", "modify", "change", "update", "revise", "adjust", "fix")),
    ("analyze", ("analyze", "review", "check", "examine", "evaluate")),
    ("organize", ("organize", "sort", "arrange", "structure", "plan")),
)
PRODUCTION_STAGES = (
    ("script writing", ("script", "writing", "story")),
    ("character design", ("character", "design", "personality")),
    ("scene composition", ("scene", "composition", "shot")),
    ("audio production", ("audio", "sound", "music", "soundtrack")),
    ("post-production", ("edit", "post", "effects")),
)
BOT_PURPOSES = (
    ("social media", ("social", "media", "post")),
    ("content generation", ("content", "generate", "write")),
    ("analytics", ("analytics", "track", "monitor")),
    ("task automation", ("task", "workflow", "process")),
)
DEVELOPMENT_STAGES = (
    ("planning", ("plan", "design", "architecture")),
    ("implementation", ("implement", "code", "build")),
    ("testing", ("test", "debug", "fix")),
    ("deployment", ("deploy", "launch", "release")),
)
URGENCY_LEVELS = (
    ("urgent", ("urgent", "asap", "emergency", "immediately", "critical", "now")),
    ("high", ("soon", "quickly", "fast")),
)
TIMEFRAMES = (
    ("today", ("today", "now")),
    ("tomorrow", ("tomorrow",)),
    ("this week", ("week", "weekly")),
    ("this month", ("month", "monthly")),
)
CONTENT_FORMATS = (
    ("a blog article", ("blog", "article")),
    ("an email", ("email", "newsletter")),
    ("social media content", ("social", "post", "tweet")),
    ("a video script", ("script", "video")),
    ("marketing copy", ("copy", "ad", "marketing")),
)
TONES = (
    ("professional", ("professional", "formal", "business")),
    ("casual", ("casual", "friendly", "conversational")),
    ("humorous", ("funny", "humorous", "entertaining")),
    ("technical", ("technical", "detailed")),
)
ASSIGNMENT_TYPES = (
    ("essay", ("essay", "paper")),
    ("research paper", ("research", "thesis")),
    ("presentation", ("presentation", "slides")),
    ("project", ("project",)),
)
ACADEMIC_SUBJECTS = (
    "math", "science", "history", "english", "literature", "biology", "chemistry",
    "physics", "computer", "programming", "psychology", "sociology", "economics",
    "philosophy",
)
TECHNOLOGIES = (
    "react", "vue", "angular", "node", "python", "typescript", "javascript", "sql",
    "mongodb", "postgres", "supabase", "firebase",
)

# Weak domain hints used by the default reply when nothing else matched.
DOMAIN_HINTS = (
    ("video production", ("video", "film", "scene")),
    ("development", ("code", "app", "software")),
    ("content creation", ("write", "content")),
)

# Whole-word keywords merged into a session's active topics.
TOPIC_KEYWORDS = (
    "video", "app", "audio", "design", "script", "episode", "project", "bot",
    "automation", "file", "task", "work", "school", "development", "writing",
    "content", "marketing", "production", "editing",
)
