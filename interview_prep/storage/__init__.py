"""
File-backed stores for documents, interview sessions and uploaded PDFs.
"""
from .documents import DocumentStore
from .sessions import SessionStore
from .blobs import LocalBlobStore

__all__ = ['DocumentStore', 'SessionStore', 'LocalBlobStore']
