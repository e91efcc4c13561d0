import logging
import os
import random
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from dal.conversation_dal import ConversationDAL
from routes.chat_route import router as chat_router
from services.chat_service import ChatService
from services.intent.dispatcher import IntentDispatcher
from services.session_store import InMemorySessionStore, SessionStore
from utils.database_init import AsyncDatabaseInitializer
from utils.errors import ConfigurationError

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file if present

LOGGER = logging.getLogger(__name__)


def configure_logging() -> None:
    level_name = (os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_rng() -> random.Random:
    """Return the greeting RNG, seeded from ORCHESTRATOR_RANDOM_SEED when set."""
    raw_seed = (os.getenv("ORCHESTRATOR_RANDOM_SEED") or "").strip()
    if not raw_seed:
        return random.Random()
    try:
        return random.Random(int(raw_seed))
    except ValueError as exc:
        raise ConfigurationError(f"ORCHESTRATOR_RANDOM_SEED must be an integer, got {raw_seed!r}") from exc


async def _build_store(app: FastAPI) -> SessionStore:
    """Create the session store selected by SESSION_STORE (sqlite or memory)."""
    backend = (os.getenv("SESSION_STORE") or "sqlite").strip().lower()
    if backend == "memory":
        return InMemorySessionStore()
    if backend != "sqlite":
        raise ConfigurationError(f"Unsupported SESSION_STORE {backend!r}; expected 'sqlite' or 'memory'")

    db_initializer = AsyncDatabaseInitializer()
    await db_initializer.ensure_database()
    app.state.db_initializer = db_initializer
    return ConversationDAL(db_initializer)


def create_app(session_store: Optional[SessionStore] = None, dispatcher: Optional[IntentDispatcher] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    `session_store` and `dispatcher` override the environment-driven defaults;
    tests use them to inject an in-memory store and a seeded dispatcher.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan manager to initialize:
          - the session store (SQLite at DATABASE_DIR/app.db, or in-memory)
          - the intent dispatcher and the chat service
        and attach them to `app.state`.
        """
        configure_logging()
        store = session_store or await _build_store(app)
        app.state.session_store = store
        app.state.chat_service = ChatService(store, dispatcher or IntentDispatcher(rng=_build_rng()))
        LOGGER.info("Orchestrator started with %s", type(store).__name__)
        yield

    app = FastAPI(lifespan=lifespan)

    @app.get("/health")
    async def health(request: Request):
        """
        Simple health check that reports which session store is active.
        """
        store = getattr(request.app.state, "session_store", None)
        return {
            "ok": True,
            "store": type(store).__name__ if store is not None else None,
            "db_initialized": hasattr(request.app.state, "db_initializer"),
        }

    app.include_router(chat_router)

    return app


app = create_app()
