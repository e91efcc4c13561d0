"""Chat turn and session lookup controllers for the orchestrator."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, Request

from models.session_models import Attachment
from services.chat_service import ChatService
from utils.errors import PersistenceError


def _chat_service(request: Request) -> ChatService:
	service = getattr(request.app.state, "chat_service", None)
	if service is None:
		raise HTTPException(status_code=500, detail="Chat service not initialized.")
	return service


async def post_chat(
	request: Request,
	message: str,
	session_id: Optional[str],
	page_context: Optional[str],
	attachments: Optional[List[Attachment]],
) -> Dict[str, Any]:
	"""Run one orchestrator turn and return the reply with the session's memory."""
	service = _chat_service(request)
	try:
		return await service.handle_turn(message, session_id, page_context, attachments)
	except PersistenceError as exc:
		raise HTTPException(status_code=503, detail=exc.message) from exc


async def fetch_session(request: Request, session_id: str) -> Dict[str, Any]:
	"""Return the stored session record, or 404 if the session does not exist."""
	service = _chat_service(request)
	try:
		session = await service.get_session(session_id)
	except PersistenceError as exc:
		raise HTTPException(status_code=503, detail=exc.message) from exc
	if session is None:
		raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
	return session.to_record()
