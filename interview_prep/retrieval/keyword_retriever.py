"""
Keyword-overlap retrieval over document chunks.

Chunks are scored by how often the query's terms appear in them:
1. The query is lowercased and split on whitespace; only tokens longer than
   3 characters are kept as terms, dropping short stop-word-like tokens.
2. For every chunk, each term's literal substring occurrences in the
   lowercased chunk text are counted and summed.
3. Chunks are sorted by descending score. The sort is stable, so ties keep
   document-then-chunk order.

Matching is substring based: "art" also matches "party".
"""
from typing import Iterable, List, Protocol, Sequence

from ..domain import Chunk, ScoredChunk
from ..errors import RetrievalError
from ..utils.logger import setup_logger

logger = setup_logger("keyword_retriever")

MIN_TERM_LENGTH = 4


class ChunkedDocument(Protocol):
    id: str
    chunks: Sequence[Chunk]


def extract_query_terms(query: str) -> List[str]:
    """Lowercased whitespace tokens longer than 3 characters."""
    return [w for w in query.lower().split() if len(w) >= MIN_TERM_LENGTH]


def score_text(text: str, terms: Iterable[str]) -> int:
    """Sum of non-overlapping literal occurrences of each term in ``text``."""
    text_lower = text.lower()
    return sum(text_lower.count(term) for term in terms)


def find_relevant_chunks(
    query: str,
    documents: Iterable[ChunkedDocument],
    top_k: int = 2
) -> List[ScoredChunk]:
    """
    Return the ``top_k`` chunks that best match ``query``.

    Args:
        query: Free text, typically the candidate's answer
        documents: Documents exposing ``id`` and ``chunks``
        top_k: Maximum number of chunks to return

    Returns:
        Scored chunks sorted by non-increasing score, at most ``top_k``

    Raises:
        RetrievalError: If any chunk or document is malformed
    """
    if top_k <= 0:
        return []

    try:
        terms = extract_query_terms(query)
        scored = []
        for doc in documents:
            for chunk in doc.chunks:
                scored.append(ScoredChunk(
                    chunk=chunk,
                    score=score_text(chunk.text, terms),
                    document_id=doc.id
                ))

        scored.sort(key=lambda c: c.score, reverse=True)
        return scored[:top_k]
    except Exception as e:
        logger.error(f"Error finding relevant chunks: {e}")
        raise RetrievalError() from e
