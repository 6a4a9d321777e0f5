"""
Chunk retrieval for answer evaluation.
"""
from .embeddings import generate_embedding
from .keyword_retriever import find_relevant_chunks, extract_query_terms, score_text

__all__ = [
    'generate_embedding',
    'find_relevant_chunks',
    'extract_query_terms',
    'score_text'
]
