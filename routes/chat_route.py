"""FastAPI routes for the orchestrator chat and its stored sessions."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from controllers.chat_controller import fetch_session, post_chat
from models.session_models import Attachment

router = APIRouter(prefix="/orchestrator", tags=["orchestrator"])


class AttachmentPayload(BaseModel):
	name: str
	type: str = ""


class ChatContext(BaseModel):
	"""Client page context as sent by the web front-end."""

	model_config = ConfigDict(populate_by_name=True)

	current_page: Optional[str] = Field(None, alias="currentPage")
	attached_files: Optional[List[AttachmentPayload]] = Field(None, alias="attachedFiles")


class ChatPayload(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	message: str = Field(..., min_length=1)
	session_id: Optional[str] = Field(None, alias="sessionId")
	page_context: Optional[str] = Field(None, alias="pageContext")
	attached_files: Optional[List[AttachmentPayload]] = Field(None, alias="attachedFiles")
	context: Optional[ChatContext] = None

	def resolved_page_context(self) -> Optional[str]:
		if self.page_context is not None:
			return self.page_context
		return self.context.current_page if self.context else None

	def resolved_attachments(self) -> Optional[List[Attachment]]:
		files = self.attached_files
		if files is None and self.context is not None:
			files = self.context.attached_files
		if not files:
			return None
		return [Attachment(name=f.name, type=f.type) for f in files]


@router.post("/chat")
async def chat_route(request: Request, payload: ChatPayload):
	"""Send a message to the orchestrator and receive its reply."""
	try:
		return await post_chat(
			request,
			payload.message,
			payload.session_id,
			payload.resolved_page_context(),
			payload.resolved_attachments(),
		)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))


@router.get("/sessions/{session_id}")
async def session_route(request: Request, session_id: str):
	"""Return the persisted record for a session."""
	try:
		return await fetch_session(request, session_id)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail=str(exc))
