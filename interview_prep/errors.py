"""
Exceptions raised by the interview and document services.

Each error carries the HTTP status the API answers with and a default
user-facing message.
"""
from typing import Optional


class InterviewPrepError(Exception):
    """Base class for all service errors."""

    status_code = 500
    message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class MissingDocumentsError(InterviewPrepError):
    status_code = 400
    message = "Please upload both resume and job description before starting an interview"


class SessionNotFoundError(InterviewPrepError):
    status_code = 404
    message = "Chat session not found"


class DocumentNotFoundError(InterviewPrepError):
    status_code = 404
    message = "Document not found"


class NoPendingQuestionError(InterviewPrepError):
    status_code = 400
    message = "All questions have been answered"


class SessionCompletedError(InterviewPrepError):
    status_code = 400
    message = "Interview session already completed"


class InvalidUploadError(InterviewPrepError):
    status_code = 400
    message = "Invalid upload"


class RetrievalError(InterviewPrepError):
    message = "Failed to find relevant chunks"


class UpstreamModelError(InterviewPrepError):
    """The completion call itself failed (network, auth, rate limit...)."""

    status_code = 502
    message = "Language model request failed"


class UpstreamParseError(InterviewPrepError):
    """
    Model output could not be parsed.

    Never surfaced to callers: it is carried inside a ParseFailure and
    answered with fallback content.
    """

    message = "Could not parse language model output"
