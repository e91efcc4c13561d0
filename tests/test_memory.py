from models.session_models import Attachment, ConversationSession, Message
from services import memory


def test_goal_extraction_from_want_to():
    assert memory.extract_goals("I want to build a birthday app") == ["build a birthday app"]


def test_goal_extraction_stops_at_punctuation_and_skips_short_captures():
    assert memory.extract_goals("I need to ship it. Then more.") == ["ship it"]
    assert memory.extract_goals("I want to go.") == []


def test_goal_extraction_runs_both_pattern_groups():
    message = "I would like to redo the intro, and I want to add music"
    assert memory.extract_goals(message) == ["add music", "redo the intro"]


def test_goal_extraction_is_case_insensitive_and_keeps_original_text():
    assert memory.extract_goals("We are PLANNING TO Launch The Trailer") == ["Launch The Trailer"]


def test_goals_are_deduplicated_and_capped():
    existing = [f"goal number {i}" for i in range(10)]
    merged = memory.merge_goals(existing, "I want to finish the pilot")
    assert len(merged) == memory.MAX_GOALS
    assert merged[-1] == "finish the pilot"
    assert "goal number 0" not in merged
    assert memory.merge_goals(["finish the pilot"], "I want to finish the pilot") == ["finish the pilot"]


def test_topic_merge_keeps_existing_topics():
    merged = memory.merge_topics(["video"], "let's edit the script for episode 3")
    assert merged == ["video", "script", "episode"]


def test_topics_match_whole_words_case_insensitively():
    assert memory.extract_topics("VIDEO Apps and a Bot") == ["video", "bot"]
    assert memory.extract_topics("editing the production") == ["production", "editing"]


def test_topics_are_capped_to_most_recent():
    existing = ["video", "app", "audio", "design", "script", "episode", "project", "bot", "automation", "file"]
    merged = memory.merge_topics(existing, "school work")
    assert merged == existing[2:] + ["work", "school"]


def test_apply_turn_appends_both_messages_and_sets_summary():
    session = ConversationSession(session_id="s1")
    files = [Attachment("a.png", "image/png")]
    memory.apply_turn(session, "hello there", "Hi!", goals=[], topics=[], attachments=files, is_new=True)
    assert [m.role for m in session.messages] == ["user", "assistant"]
    assert session.messages[0].files == (Attachment("a.png", "image/png"),)
    assert session.messages[1].files is None
    assert session.context_summary == "Started with: hello there..."
    assert session.created_at is not None
    assert session.updated_at == session.created_at

    memory.apply_turn(session, "x" * 300, "ok", goals=[], topics=[])
    assert session.context_summary == "Latest: " + "x" * 200 + "..."


def test_history_truncation_never_retracts_goals_or_topics():
    session = ConversationSession(
        session_id="s1",
        messages=[Message(role="user" if i % 2 == 0 else "assistant", content=f"m{i}") for i in range(50)],
        goals=["build a birthday app"],
        topics=["app"],
    )
    memory.apply_turn(session, "next", "reply", goals=session.goals, topics=session.topics)
    assert len(session.messages) == memory.MAX_HISTORY
    assert session.messages[0].content == "m2"
    assert session.messages[-1].content == "reply"
    assert session.goals == ["build a birthday app"]
    assert session.topics == ["app"]
