"""
Interview session storage.

Sessions are stored as one JSON file per session. Every request reads the
whole record, changes it and writes it back; there is no locking, so two
concurrent writers on the same session race and the last write wins.
"""
from pathlib import Path
from typing import List, Optional

from ..domain import InterviewSession
from ..utils.logger import setup_logger

logger = setup_logger("session_store")


class SessionStore:
    """JSON-file store for InterviewSession records."""

    def __init__(self, storage_dir: Path):
        """
        Args:
            storage_dir: Directory holding one ``<session_id>.json`` per session
        """
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"SessionStore initialized, storage: {self.storage_dir}")

    def _path(self, session_id: str) -> Path:
        return self.storage_dir / f"{session_id}.json"

    def create(self, session: InterviewSession) -> InterviewSession:
        self.save(session)
        logger.info(f"Created interview session: {session.id} for user: {session.user_id}")
        return session

    def get(self, session_id: str, user_id: Optional[str] = None) -> Optional[InterviewSession]:
        """Load a session, optionally requiring that ``user_id`` owns it."""
        session_file = self._path(session_id)
        # Ids are generated hex strings; anything else cannot name a session file
        if session_file.parent != self.storage_dir or not session_file.exists():
            return None

        try:
            session = InterviewSession.model_validate_json(session_file.read_text(encoding='utf-8'))
        except Exception as e:
            logger.error(f"Error loading session {session_id}: {e}")
            raise

        if user_id is not None and session.user_id != user_id:
            return None
        return session

    def save(self, session: InterviewSession) -> None:
        try:
            self._path(session.id).write_text(session.model_dump_json(indent=2), encoding='utf-8')
        except Exception as e:
            logger.error(f"Error saving session {session.id}: {e}")
            raise

    def list_for_user(self, user_id: str, limit: Optional[int] = None) -> List[InterviewSession]:
        """Sessions owned by ``user_id``, most recently started first."""
        sessions = []
        for session_file in self.storage_dir.glob("*.json"):
            session = InterviewSession.model_validate_json(session_file.read_text(encoding='utf-8'))
            if session.user_id == user_id:
                sessions.append(session)

        sessions.sort(key=lambda s: s.started_at, reverse=True)
        return sessions[:limit] if limit is not None else sessions
