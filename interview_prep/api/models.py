"""
FastAPI request and response models.

Every response uses the same envelope:
``{"status": "success"|"error", "message": ..., "data": ..., "error": ...}``.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Document, InterviewSession


class QueryRequest(BaseModel):
    """Request model for answering the current question."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "chatId": "5f0c2b7e9d7a4f4b8f6f2f1e0c9d8b7a",
                "message": "I have 5 years of experience building Python APIs..."
            }
        }
    )

    chat_id: Optional[str] = Field(None, alias="chatId", description="Interview session ID")
    message: Optional[str] = Field(None, description="Candidate's answer")


class DocumentSummary(BaseModel):
    id: str
    file_name: str = Field(..., serialization_alias="fileName")
    file_type: str = Field(..., serialization_alias="fileType")
    file_url: Optional[str] = Field(None, serialization_alias="fileUrl")
    uploaded_at: datetime = Field(..., serialization_alias="uploadedAt")

    @classmethod
    def from_document(cls, document: Document) -> "DocumentSummary":
        return cls(
            id=document.id,
            file_name=document.file_name,
            file_type=document.file_type,
            file_url=document.file_url,
            uploaded_at=document.uploaded_at
        )


class SessionSummary(BaseModel):
    id: str
    status: str
    average_score: float = Field(..., serialization_alias="averageScore")
    questions_count: int = Field(..., serialization_alias="questionsCount")
    started_at: datetime = Field(..., serialization_alias="startedAt")
    completed_at: Optional[datetime] = Field(None, serialization_alias="completedAt")

    @classmethod
    def from_session(cls, session: InterviewSession) -> "SessionSummary":
        return cls(
            id=session.id,
            status=session.status,
            average_score=session.average_score,
            questions_count=len(session.generated_questions),
            started_at=session.started_at,
            completed_at=session.completed_at
        )


class ChatHistory(BaseModel):
    id: str
    messages: List[Dict[str, Any]]
    questions: List[Dict[str, Any]]
    status: str
    average_score: float = Field(..., serialization_alias="averageScore")
    started_at: datetime = Field(..., serialization_alias="startedAt")
    completed_at: Optional[datetime] = Field(None, serialization_alias="completedAt")

    @classmethod
    def from_session(cls, session: InterviewSession) -> "ChatHistory":
        return cls(
            id=session.id,
            messages=[m.model_dump(mode="json") for m in session.messages],
            questions=[q.model_dump() for q in session.generated_questions],
            status=session.status,
            average_score=session.average_score,
            started_at=session.started_at,
            completed_at=session.completed_at
        )


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str = Field(..., description="Service status")
    llm_ready: bool = Field(..., description="Whether the completion service is ready")
    storage_dir: str = Field(..., description="Directory holding documents and sessions")
