from services.intent import extractors
from services.intent.extractors import extract_attributes, tokenize


def test_tokenize_lowercases_and_strips_edge_punctuation():
    assert tokenize('Edit the SCRIPT, then "render" it!') == ["edit", "the", "script", "then", "render", "it"]
    assert tokenize("what's up?") == ["what's", "up"]
    assert tokenize("   ") == []


def test_content_request_format_and_tone():
    message = "I need to write a blog post in a professional tone for busy founders"
    result = extract_attributes("content_creation", message, tokenize(message))
    assert result.content_format == "a blog article"
    assert result.tone == "professional"
    assert result.action is None


def test_action_uses_first_matching_family():
    assert extractors.detect_action(tokenize("fix and review the cut")) == "edit"
    assert extractors.detect_action(tokenize("review then plan")) == "analyze"
    assert extractors.detect_action(tokenize("start a new edit")) == "create"
    assert extractors.detect_action(tokenize("hello there")) is None


def test_urgency_and_timeframe():
    tokens = tokenize("I need this ASAP, due tomorrow")
    assert extractors.detect_urgency(tokens) == "urgent"
    assert extractors.detect_timeframe(tokens) == "tomorrow"
    assert extractors.detect_urgency(tokenize("can we move quickly")) == "high"
    assert extractors.detect_timeframe(tokenize("do it now")) == "today"
    assert extractors.detect_timeframe(tokenize("monthly report")) == "this month"


def test_academic_subject_and_assignment():
    tokens = tokenize("my physics research presentation")
    assert extractors.detect_academic_subject(tokens) == "physics"
    assert extractors.detect_assignment_type(tokens) == "research paper"


def test_technologies_follow_table_order():
    tokens = tokenize("Supabase backend with React and Python")
    assert extractors.detect_technologies(tokens) == ["react", "python", "supabase"]


def test_entities_are_quoted_text_then_file_extensions():
    message = 'Rename "Season Two" and attach the .PDF plus notes.txt'
    assert extractors.extract_entities(message) == ["Season Two", ".pdf", ".txt"]


def test_stage_purpose_and_dev_stage():
    assert extractors.detect_production_stage(tokenize("mix the soundtrack")) == "audio production"
    assert extractors.detect_bot_purpose(tokenize("a bot to monitor mentions")) == "analytics"
    assert extractors.detect_development_stage(tokenize("ready to deploy")) == "deployment"


def test_sentiment():
    assert extractors.analyze_sentiment("this is awesome") == "positive"
    assert extractors.analyze_sentiment("i am stuck on an error") == "negative"
    assert extractors.analyze_sentiment("send the file") == "neutral"
