"""
FastAPI API modules.
"""
from .models import (
    QueryRequest,
    DocumentSummary,
    SessionSummary,
    ChatHistory,
    HealthResponse
)
from .service import DocumentService, InterviewPrepService, DOCUMENT_LABELS

__all__ = [
    'QueryRequest',
    'DocumentSummary',
    'SessionSummary',
    'ChatHistory',
    'HealthResponse',
    'DocumentService',
    'InterviewPrepService',
    'DOCUMENT_LABELS'
]
