"""
Document storage: one JSON file per uploaded resume or job description.
"""
from pathlib import Path
from typing import List, Optional

from ..domain import Document
from ..utils.logger import setup_logger

logger = setup_logger("document_store")


class DocumentStore:
    """JSON-file store for Document records, at most one per (user, file type)."""

    def __init__(self, storage_dir: Path):
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"DocumentStore initialized, storage: {self.storage_dir}")

    def _path(self, document_id: str) -> Path:
        return self.storage_dir / f"{document_id}.json"

    def _load_all(self) -> List[Document]:
        return [
            Document.model_validate_json(f.read_text(encoding='utf-8'))
            for f in self.storage_dir.glob("*.json")
        ]

    def get(self, document_id: str, user_id: Optional[str] = None) -> Optional[Document]:
        document_file = self._path(document_id)
        if document_file.parent != self.storage_dir or not document_file.exists():
            return None

        document = Document.model_validate_json(document_file.read_text(encoding='utf-8'))
        if user_id is not None and document.user_id != user_id:
            return None
        return document

    def find(self, user_id: str, file_type: str) -> Optional[Document]:
        """The user's document of the given type, if any."""
        for document in self._load_all():
            if document.user_id == user_id and document.file_type == file_type:
                return document
        return None

    def list_for_user(self, user_id: str) -> List[Document]:
        """Documents owned by ``user_id``, most recently uploaded first."""
        documents = [d for d in self._load_all() if d.user_id == user_id]
        documents.sort(key=lambda d: d.uploaded_at, reverse=True)
        return documents

    def save(self, document: Document) -> None:
        try:
            self._path(document.id).write_text(document.model_dump_json(indent=2), encoding='utf-8')
        except Exception as e:
            logger.error(f"Error saving document {document.id}: {e}")
            raise

    def delete(self, document_id: str) -> bool:
        document_file = self._path(document_id)
        if document_file.parent != self.storage_dir or not document_file.exists():
            return False
        document_file.unlink()
        logger.info(f"Deleted document: {document_id}")
        return True
