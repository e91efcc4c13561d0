import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

import aiosqlite

from utils.errors import ConfigurationError, PersistenceError


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


class AsyncDatabaseInitializer:
    """
    Manage an async SQLite database using the DATABASE_DIR environment variable.

    - The database file is located at: <DATABASE_DIR>/app.db
    - DATABASE_DIR is required unless `db_dir` is passed explicitly. A
      ConfigurationError is raised if it is missing or invalid (not a
      directory and cannot be created).
    - On the first call to `ensure_database()` for a given instance the
      orchestrator_conversations table is created. When `reset` is true
      (or RESET_DATABASE_ON_STARTUP is set) any existing file is deleted first.
    - Subsequent calls to `ensure_database()` on the same instance are no-ops,
      so it is safe for `connection()` to call it.
    """

    def __init__(self, db_dir: Optional[Path | str] = None, reset: Optional[bool] = None) -> None:
        env_dir = str(db_dir) if db_dir is not None else os.getenv("DATABASE_DIR")

        if env_dir is None or not env_dir.strip():
            raise ConfigurationError(
                "DATABASE_DIR environment variable must be set to a writable "
                "directory path where the SQLite database file will be stored."
            )

        path = Path(env_dir).expanduser()

        if path.exists() and not path.is_dir():
            raise ConfigurationError(
                f"DATABASE_DIR={env_dir!r} points to a file, not a directory "
                f"({path}). Please set DATABASE_DIR to a directory path."
            )

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(
                f"Failed to create or access database directory at {path}"
            ) from exc

        self.db_dir = path
        self.db_path = self.db_dir / "app.db"
        self.reset = _env_flag("RESET_DATABASE_ON_STARTUP") if reset is None else reset

        self._initialized = False

    async def ensure_database(self) -> None:
        """
        Ensure the SQLite database at `self.db_path` has the conversation table.

        Subsequent calls on the same instance are no-ops. Failing to remove the
        old file on reset or to create the table raises PersistenceError.
        """
        if self._initialized:
            return

        if self.reset and self.db_path.exists():
            try:
                self.db_path.unlink()
            except OSError as exc:
                raise PersistenceError(
                    f"Failed to delete existing database at {self.db_path}"
                ) from exc

        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute(
                    """
                    CREATE TABLE IF NOT EXISTS orchestrator_conversations (
                        session_id TEXT PRIMARY KEY,
                        conversation_data TEXT NOT NULL DEFAULT '[]',
                        user_goals TEXT NOT NULL DEFAULT '[]',
                        active_topics TEXT NOT NULL DEFAULT '[]',
                        context_summary TEXT,
                        created_at TEXT,
                        updated_at TEXT
                    )
                    """
                )
                await db.execute(
                    "CREATE INDEX IF NOT EXISTS idx_orchestrator_conversations_updated_at "
                    "ON orchestrator_conversations(updated_at)"
                )
                await db.commit()
        except aiosqlite.Error as exc:
            raise PersistenceError(f"Failed to create tables in {self.db_path}") from exc

        self._initialized = True

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Async context manager yielding an `aiosqlite.Connection`.

        The table is created on first use via `ensure_database()`.
        """
        await self.ensure_database()
        conn = await aiosqlite.connect(self.db_path)
        try:
            yield conn
        finally:
            await conn.close()
