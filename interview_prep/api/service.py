"""
Service layer for initializing and wiring the interview prep components.
"""
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Tuple
import time

from ..domain import Chunk, Document
from ..errors import DocumentNotFoundError, InvalidUploadError
from ..interview import InterviewOrchestrator
from ..interview.orchestrator import Completer
from ..llm import create_completion_service
from ..pdf import chunk_text, extract_text_from_pdf
from ..retrieval import generate_embedding
from ..storage import DocumentStore, LocalBlobStore, SessionStore
from ..utils.config import (
    CHUNK_WORD_COUNT,
    DOCUMENT_TYPES,
    MAX_UPLOAD_BYTES,
    MIN_EXTRACTED_TEXT_LENGTH,
    STORAGE_DIR
)
from ..utils.logger import setup_logger
from ..utils.text_utils import cleanup_file

logger = setup_logger("api_service")

DOCUMENT_LABELS = {"resume": "Resume", "job_description": "Job Description"}


class DocumentService:
    """
    Upload, list and delete a user's resume and job description.

    An upload is staged in a local file, parsed, stored as a blob and chunked.
    If any step fails the local file and the new blob are removed, so no
    partial document is left behind.
    """

    def __init__(
        self,
        document_store: DocumentStore,
        blob_store: LocalBlobStore,
        upload_dir: Path,
        text_extractor: Callable[[Path], str] = extract_text_from_pdf,
        chunk_word_count: int = CHUNK_WORD_COUNT
    ):
        self.document_store = document_store
        self.blob_store = blob_store
        self.upload_dir = Path(upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self.text_extractor = text_extractor
        self.chunk_word_count = chunk_word_count

    def _build_chunks(self, text: str, file_type: str) -> List[Chunk]:
        return [
            Chunk(
                text=chunk,
                chunk_index=i,
                source_tag=file_type,
                embedding=generate_embedding(chunk)
            )
            for i, chunk in enumerate(chunk_text(text, self.chunk_word_count))
        ]

    def upload(
        self,
        user_id: str,
        file_name: Optional[str],
        content_type: Optional[str],
        content: Optional[bytes],
        file_type: Optional[str]
    ) -> Tuple[Document, bool]:
        """
        Store an uploaded PDF as the user's document of ``file_type``.

        Returns:
            (document, created): created is False when an existing document
            of the same type was replaced

        Raises:
            InvalidUploadError: Missing/non-PDF/oversized file, bad file type,
                                or too little extractable text
        """
        if content is None or not file_name:
            raise InvalidUploadError("Please upload a PDF file")
        if content_type != "application/pdf" and not file_name.lower().endswith(".pdf"):
            raise InvalidUploadError("Only PDF files are allowed")
        if len(content) > MAX_UPLOAD_BYTES:
            raise InvalidUploadError("File too large. Maximum size is 10MB")
        if file_type not in DOCUMENT_TYPES:
            raise InvalidUploadError('Invalid file type. Must be "resume" or "job_description"')

        local_path = self.upload_dir / f"{int(time.time() * 1000)}-{Path(file_name).name}"
        storage_id = None
        try:
            local_path.write_bytes(content)

            extracted_text = self.text_extractor(local_path)
            if not extracted_text or len(extracted_text) < MIN_EXTRACTED_TEXT_LENGTH:
                raise InvalidUploadError("Could not extract sufficient text from PDF")

            storage_id, file_url = self.blob_store.upload(local_path)
            chunks = self._build_chunks(extracted_text, file_type)

            existing = self.document_store.find(user_id, file_type)
            if existing is not None:
                previous_storage_id = existing.storage_id
                document = existing.model_copy(update={
                    "file_name": file_name,
                    "file_url": file_url,
                    "storage_id": storage_id,
                    "extracted_text": extracted_text,
                    "chunks": chunks,
                    "uploaded_at": datetime.now()
                })
                self.document_store.save(document)
                logger.info(f"Replaced {file_type} {document.id} for user {user_id} ({len(chunks)} chunks)")
                self._destroy_previous_blob(previous_storage_id)
                return document, False

            document = Document(
                user_id=user_id,
                file_name=file_name,
                file_type=file_type,
                file_url=file_url,
                storage_id=storage_id,
                extracted_text=extracted_text,
                chunks=chunks
            )
            self.document_store.save(document)
            logger.info(f"Stored {file_type} {document.id} for user {user_id} ({len(chunks)} chunks)")
            return document, True

        except Exception:
            if storage_id is not None:
                self.blob_store.destroy(storage_id)
            raise
        finally:
            cleanup_file(local_path)

    def _destroy_previous_blob(self, storage_id: str) -> None:
        # The replacement is already saved; a stale blob must not undo it.
        try:
            self.blob_store.destroy(storage_id)
        except Exception as e:
            logger.warning(f"⚠️ Could not remove replaced blob {storage_id}: {e}")

    def list_documents(self, user_id: str) -> List[Document]:
        return self.document_store.list_for_user(user_id)

    def delete(self, user_id: str, document_id: str) -> None:
        document = self.document_store.get(document_id, user_id=user_id)
        if document is None:
            raise DocumentNotFoundError()

        self.blob_store.destroy(document.storage_id)
        self.document_store.delete(document.id)


class InterviewPrepService:
    """
    Service class that manages the interview prep components.
    Handles initialization and provides access to the orchestrator and
    document service.
    """

    def __init__(
        self,
        completion_service: Optional[Completer] = None,
        storage_dir: Optional[Path] = None,
        text_extractor: Callable[[Path], str] = extract_text_from_pdf
    ):
        """
        Args:
            completion_service: Completion client. If None, a Groq-backed one
                                is created by ``initialize``.
            storage_dir: Root directory for stores. If None, uses config default.
            text_extractor: PDF-to-text function used for uploads
        """
        self.completion_service = completion_service
        self.storage_dir = Path(storage_dir) if storage_dir is not None else STORAGE_DIR
        self.text_extractor = text_extractor
        self.orchestrator: Optional[InterviewOrchestrator] = None
        self.documents: Optional[DocumentService] = None
        self._initialized = False

    def initialize(self) -> bool:
        """
        Build stores, the completion service and the orchestrator.

        Returns:
            True if initialization successful, False otherwise
        """
        try:
            logger.info("Initializing Interview Prep Service...")

            document_store = DocumentStore(self.storage_dir / "documents")
            session_store = SessionStore(self.storage_dir / "sessions")
            blob_store = LocalBlobStore(self.storage_dir / "blobs")

            if self.completion_service is None:
                logger.info("Initializing LLM...")
                self.completion_service = create_completion_service()

            self.orchestrator = InterviewOrchestrator(
                self.completion_service,
                document_store,
                session_store
            )
            self.documents = DocumentService(
                document_store,
                blob_store,
                upload_dir=self.storage_dir / "uploads",
                text_extractor=self.text_extractor
            )

            self._initialized = True
            logger.info("✅ Interview Prep Service initialized successfully")
            return True

        except Exception as e:
            logger.error(f"❌ Failed to initialize service: {e}")
            self._initialized = False
            return False

    def is_ready(self) -> bool:
        """Check if service is ready to use."""
        return self._initialized and self.orchestrator is not None
