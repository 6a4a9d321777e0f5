"""
FastAPI application for the Interview Prep API.

Endpoints:
- POST /document/upload - Upload a resume or job description PDF
- GET /document/list - List uploaded documents
- DELETE /document/{id} - Delete a document
- POST /chat/start - Start an interview session
- POST /chat/query - Answer the current question
- GET /chat/sessions - List recent sessions
- GET /chat/{chatId} - Session history
- GET /health - Health check

Callers are identified by the X-User-Id header.
"""
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, File, Form, Header, HTTPException, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from interview_prep.api import (
    ChatHistory,
    DocumentSummary,
    HealthResponse,
    InterviewPrepService,
    QueryRequest,
    SessionSummary,
    DOCUMENT_LABELS
)
from interview_prep.errors import InterviewPrepError
from interview_prep.utils.config import MAX_UPLOAD_BYTES
from interview_prep.utils.logger import setup_logger

logger = setup_logger("fastapi_app")

UPLOAD_READ_CHUNK = 1024 * 1024

VALIDATION_MESSAGES = {"/chat/query": "Please provide chatId and message"}


def envelope(
    status_code: int,
    message: Optional[str] = None,
    data: Optional[dict] = None,
    error: Optional[str] = None
) -> JSONResponse:
    """Build the ``{status, message, data, error}`` JSON response."""
    body = {"status": "success" if status_code < 400 else "error"}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if error is not None:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=body)


def error_response(e: Exception, failure_message: str) -> JSONResponse:
    """
    Map an exception to an error envelope.

    Client errors answer with their own message. Server and upstream errors
    answer with ``failure_message`` and carry the underlying message.
    """
    if isinstance(e, InterviewPrepError) and e.status_code < 500:
        return envelope(e.status_code, message=e.message)

    logger.error(f"{failure_message}: {e}")
    status_code = e.status_code if isinstance(e, InterviewPrepError) else status.HTTP_500_INTERNAL_SERVER_ERROR
    return envelope(status_code, message=failure_message, error=str(e))


async def read_upload(file: UploadFile, limit: int) -> bytes:
    """
    Read an upload in bounded chunks, stopping one byte past ``limit``.

    An oversized file is never held in memory whole; the extra byte lets
    the size check reject it.
    """
    content = bytearray()
    while len(content) <= limit:
        chunk = await file.read(min(UPLOAD_READ_CHUNK, limit + 1 - len(content)))
        if not chunk:
            break
        content.extend(chunk)
    return bytes(content)


def get_service(request: Request) -> InterviewPrepService:
    service = request.app.state.service
    if not service.is_ready():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized. Please check /health endpoint."
        )
    return service


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized: missing X-User-Id header"
        )
    return x_user_id


chat_router = APIRouter(prefix="/chat", tags=["Chat"])
document_router = APIRouter(prefix="/document", tags=["Documents"])


@chat_router.post("/start")
async def start_chat(
    user_id: str = Depends(get_user_id),
    service: InterviewPrepService = Depends(get_service)
):
    """
    Start an interview session.

    Requires an uploaded resume and job description. Generates the questions
    and returns the first one.
    """
    try:
        session = await service.orchestrator.start_interview(user_id)
        questions = [q.question for q in session.generated_questions]
        return envelope(
            status.HTTP_201_CREATED,
            message="Interview session started",
            data={
                "chatId": session.id,
                "questions": questions,
                "firstQuestion": questions[0],
                "totalQuestions": len(questions)
            }
        )
    except Exception as e:
        return error_response(e, "Error starting interview session")


@chat_router.post("/query")
async def query_chat(
    body: QueryRequest,
    user_id: str = Depends(get_user_id),
    service: InterviewPrepService = Depends(get_service)
):
    """Submit an answer to the current question and get it scored."""
    if not body.chat_id or not body.message:
        return envelope(status.HTTP_400_BAD_REQUEST, message="Please provide chatId and message")

    try:
        outcome = await service.orchestrator.submit_answer(user_id, body.chat_id, body.message)
        return envelope(
            status.HTTP_200_OK,
            data={
                "score": outcome.score,
                "feedback": outcome.feedback,
                "citations": outcome.citations,
                "response": outcome.response,
                "hasMoreQuestions": outcome.has_more_questions,
                "currentQuestion": outcome.current_question,
                "totalQuestions": outcome.total_questions,
                "completed": outcome.completed,
                "averageScore": outcome.average_score
            }
        )
    except Exception as e:
        return error_response(e, "Error processing your answer")


@chat_router.get("/sessions")
async def get_chat_sessions(
    user_id: str = Depends(get_user_id),
    service: InterviewPrepService = Depends(get_service)
):
    """List the user's ten most recent sessions."""
    try:
        sessions = service.orchestrator.list_sessions(user_id)
        return envelope(
            status.HTTP_200_OK,
            data={"sessions": [
                SessionSummary.from_session(s).model_dump(mode="json", by_alias=True)
                for s in sessions
            ]}
        )
    except Exception as e:
        return error_response(e, "Error fetching chat sessions")


@chat_router.get("/{chat_id}")
async def get_chat_history(
    chat_id: str,
    user_id: str = Depends(get_user_id),
    service: InterviewPrepService = Depends(get_service)
):
    """Full message history and question list of a session."""
    try:
        session = service.orchestrator.get_history(user_id, chat_id)
        return envelope(
            status.HTTP_200_OK,
            data={"chat": ChatHistory.from_session(session).model_dump(mode="json", by_alias=True)}
        )
    except Exception as e:
        return error_response(e, "Error fetching chat history")


@document_router.post("/upload")
async def upload_document(
    file: Optional[UploadFile] = File(None),
    fileType: Optional[str] = Form(None),
    user_id: str = Depends(get_user_id),
    service: InterviewPrepService = Depends(get_service)
):
    """
    Upload a resume or job description PDF.

    A second upload of the same type replaces the previous document.
    """
    try:
        content = await read_upload(file, MAX_UPLOAD_BYTES) if file is not None else None
        document, created = service.documents.upload(
            user_id,
            file_name=file.filename if file is not None else None,
            content_type=file.content_type if file is not None else None,
            content=content,
            file_type=fileType
        )
        label = DOCUMENT_LABELS[document.file_type]
        return envelope(
            status.HTTP_201_CREATED if created else status.HTTP_200_OK,
            message=f"{label} {'uploaded' if created else 'updated'} successfully",
            data={"document": DocumentSummary.from_document(document).model_dump(
                mode="json", by_alias=True, exclude={"file_url"}
            )}
        )
    except Exception as e:
        return error_response(e, "Error uploading document")


@document_router.get("/list")
async def list_documents(
    user_id: str = Depends(get_user_id),
    service: InterviewPrepService = Depends(get_service)
):
    """List the user's documents, newest first."""
    try:
        documents = service.documents.list_documents(user_id)
        return envelope(
            status.HTTP_200_OK,
            data={"documents": [
                DocumentSummary.from_document(d).model_dump(mode="json", by_alias=True)
                for d in documents
            ]}
        )
    except Exception as e:
        return error_response(e, "Error fetching documents")


@document_router.delete("/{document_id}")
async def delete_document(
    document_id: str,
    user_id: str = Depends(get_user_id),
    service: InterviewPrepService = Depends(get_service)
):
    """Delete a document and its stored file."""
    try:
        service.documents.delete(user_id, document_id)
        return envelope(status.HTTP_200_OK, message="Document deleted successfully")
    except Exception as e:
        return error_response(e, "Error deleting document")


def create_app(service: Optional[InterviewPrepService] = None) -> FastAPI:
    """
    Create the FastAPI app.

    Args:
        service: Service to serve. If None, a default one is created and
                 initialized on startup.
    """
    app = FastAPI(
        title="Interview Prep API",
        description="AI mock interviews: question generation and answer scoring over your resume and job description",
        version="1.0.0"
    )
    app.state.service = service if service is not None else InterviewPrepService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, specify actual origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Initialize service on startup."""
        logger.info("🚀 Starting Interview Prep API...")
        if not app.state.service.is_ready():
            success = app.state.service.initialize()
            if not success:
                logger.error("⚠️ Service initialization failed - some endpoints may not work")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return envelope(exc.status_code, message=str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        return envelope(
            status.HTTP_400_BAD_REQUEST,
            message=VALIDATION_MESSAGES.get(request.url.path, "Invalid request")
        )

    @app.get("/", tags=["General"])
    async def root():
        """Root endpoint with API information."""
        return {
            "message": "Interview Prep API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    @app.get("/health", response_model=HealthResponse, tags=["General"])
    async def health_check():
        """Status of the service and its components."""
        service = app.state.service
        return HealthResponse(
            status="healthy" if service.is_ready() else "not ready",
            llm_ready=service.completion_service is not None,
            storage_dir=str(service.storage_dir)
        )

    app.include_router(chat_router)
    app.include_router(document_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
