"""
Local blob storage for uploaded PDF files.

Stands in for a remote file host: ``upload`` copies a file under the blob
directory and returns its storage id and URL, ``destroy`` removes it.
"""
import shutil
from pathlib import Path
from typing import Tuple
import uuid

from ..utils.logger import setup_logger

logger = setup_logger("blob_store")


class LocalBlobStore:

    def __init__(self, storage_dir: Path, folder: str = "interview-prep"):
        self.storage_dir = Path(storage_dir)
        self.folder = folder
        (self.storage_dir / folder).mkdir(parents=True, exist_ok=True)

    def _path(self, storage_id: str) -> Path:
        return self.storage_dir / f"{storage_id}.pdf"

    def upload(self, file_path: Path) -> Tuple[str, str]:
        """
        Copy ``file_path`` into the store.

        Returns:
            (storage_id, url) of the stored copy
        """
        storage_id = f"{self.folder}/{uuid.uuid4().hex}"
        target = self._path(storage_id)
        shutil.copyfile(file_path, target)
        logger.info(f"Stored blob {storage_id}")
        return storage_id, target.resolve().as_uri()

    def destroy(self, storage_id: str) -> None:
        self._path(storage_id).unlink(missing_ok=True)
        logger.info(f"Destroyed blob {storage_id}")
