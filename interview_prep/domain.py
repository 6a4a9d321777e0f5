"""
Domain records: documents with their chunks, interview sessions and messages.

Records are pydantic models so the JSON-file stores can dump and load them
directly.
"""
from datetime import datetime
from typing import List, Literal, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field

SourceTag = Literal["resume", "job_description"]
Role = Literal["system", "user", "assistant"]


def new_id() -> str:
    return uuid.uuid4().hex


class Chunk(BaseModel):
    """A sentence-aligned slice of a document's extracted text."""
    model_config = ConfigDict(frozen=True)

    text: str
    chunk_index: int = Field(..., ge=0)
    source_tag: SourceTag
    embedding: List[float] = Field(default_factory=list)


class ScoredChunk(BaseModel):
    """A chunk with its keyword score for one retrieval call. Never persisted."""
    chunk: Chunk
    score: int = Field(..., ge=0)
    document_id: str

    @property
    def source(self) -> str:
        return self.chunk.source_tag

    @property
    def text(self) -> str:
        return self.chunk.text


class Document(BaseModel):
    """An uploaded PDF (resume or job description) owned by one user."""
    id: str = Field(default_factory=new_id)
    user_id: str
    file_name: str
    file_type: SourceTag
    file_url: str
    storage_id: str
    extracted_text: str
    chunks: List[Chunk] = Field(default_factory=list)
    uploaded_at: datetime = Field(default_factory=datetime.now)


class Citation(BaseModel):
    source: str
    text: str


class ChatMessage(BaseModel):
    role: Role
    content: str
    score: Optional[int] = Field(None, ge=1, le=10)
    feedback: Optional[str] = None
    citations: List[Citation] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=datetime.now)


class GeneratedQuestion(BaseModel):
    question: str
    answered: bool = False


class InterviewSession(BaseModel):
    """
    One interview run.

    The current question is the first one not yet answered. The session is
    completed once every question is answered.
    """
    id: str = Field(default_factory=new_id)
    user_id: str
    resume_id: str
    job_description_id: str
    generated_questions: List[GeneratedQuestion] = Field(default_factory=list)
    messages: List[ChatMessage] = Field(default_factory=list)
    status: Literal["active", "completed"] = "active"
    average_score: float = 0.0
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    def current_question_index(self) -> Optional[int]:
        """Index of the first unanswered question, or None if all are answered."""
        for i, question in enumerate(self.generated_questions):
            if not question.answered:
                return i
        return None

    def calculate_average_score(self) -> float:
        """Mean of all scored messages, rounded to 2 decimals (0 if none)."""
        scores = [m.score for m in self.messages if m.score is not None]
        if not scores:
            return 0.0
        return round(sum(scores) / len(scores), 2)
