"""Print the conversation sessions stored in the project's SQLite database.

For each session this prints the id, timestamps, active topics, goals and the
most recent messages. It reuses the same `DATABASE_DIR` behavior as the
application via `utils.database_init.AsyncDatabaseInitializer`.

Run: set the `DATABASE_DIR` environment variable and run
      `python print_sessions.py [--limit N] [--messages M]`.
"""
import argparse
import asyncio

from dotenv import load_dotenv

from dal.conversation_dal import ConversationDAL
from models.session_models import ConversationSession
from utils.database_init import AsyncDatabaseInitializer


def format_session(session: ConversationSession, last_messages: int = 4) -> str:
    """Return a readable multi-line summary of one session.

    Args:
        session: The session to describe.
        last_messages: How many of the newest messages to include.
    """
    lines = [
        f"Session: {session.session_id}",
        f"  created={session.created_at} updated={session.updated_at} messages={len(session.messages)}",
        f"  topics: {', '.join(session.topics) or '-'}",
        f"  goals: {'; '.join(session.goals) or '-'}",
    ]
    if session.context_summary:
        lines.append(f"  summary: {session.context_summary}")
    recent = session.messages[-last_messages:] if last_messages else []
    for msg in recent:
        text = msg.content.replace("\n", " ")
        if len(text) > 100:
            text = text[:97] + "..."
        lines.append(f"    {msg.role.upper()}: {text}")
    return "\n".join(lines)


async def main(limit: int, last_messages: int) -> None:
    """Ensure DB exists and print stored sessions, newest first."""
    dal = ConversationDAL(AsyncDatabaseInitializer(reset=False))
    for session in await dal.list_sessions(limit=limit):
        print(format_session(session, last_messages))
        print()


if __name__ == "__main__":
    load_dotenv()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--limit", type=int, default=20)
    parser.add_argument("--messages", type=int, default=4)
    args = parser.parse_args()
    asyncio.run(main(args.limit, args.messages))
