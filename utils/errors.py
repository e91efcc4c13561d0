"""Exception types shared by the store, controllers and app startup."""

from __future__ import annotations

from typing import Optional


class OrchestratorError(Exception):
    """Base exception for orchestrator failures."""

    def __init__(self, message: str, session_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.session_id = session_id


class PersistenceError(OrchestratorError):
    """Raised when a conversation session cannot be loaded or saved."""


class ConfigurationError(OrchestratorError, RuntimeError):
    """Raised when required configuration is missing or invalid."""
