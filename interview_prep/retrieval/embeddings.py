"""
Embedding hook for document chunks.

Retrieval is keyword based (see keyword_retriever), so no embedding model is
loaded. Chunks still carry an embedding slot, filled with an empty vector.
"""
from typing import List


def generate_embedding(text: str) -> List[float]:
    """Return the embedding for ``text``: always an empty vector."""
    return []
