import pytest
from fastapi.testclient import TestClient

from app import create_app
from interview_prep.api import InterviewPrepService
from interview_prep.interview import InterviewOrchestrator
from interview_prep.storage import DocumentStore, SessionStore

from tests.fakes import (
    USER_ID,
    RESUME_TEXT,
    JOB_DESCRIPTION_TEXT,
    FakeCompletionService,
    fake_extractor,
    make_document
)


@pytest.fixture
def document_store(tmp_path):
    return DocumentStore(tmp_path / "documents")


@pytest.fixture
def session_store(tmp_path):
    return SessionStore(tmp_path / "sessions")


@pytest.fixture
def uploaded_documents(document_store):
    resume = make_document(document_store, "resume", RESUME_TEXT)
    job_description = make_document(document_store, "job_description", JOB_DESCRIPTION_TEXT)
    return resume, job_description


@pytest.fixture
def completion():
    return FakeCompletionService()


@pytest.fixture
def orchestrator(completion, document_store, session_store):
    return InterviewOrchestrator(completion, document_store, session_store)


@pytest.fixture
def service(tmp_path, completion):
    service = InterviewPrepService(
        completion_service=completion,
        storage_dir=tmp_path,
        text_extractor=fake_extractor
    )
    assert service.initialize()
    return service


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


@pytest.fixture
def headers():
    return {"X-User-Id": USER_ID}
