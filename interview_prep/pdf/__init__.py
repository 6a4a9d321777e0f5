"""
PDF text extraction and chunking.
"""
from .parser import extract_text_from_pdf
from .chunker import chunk_text, split_sentences

__all__ = ['extract_text_from_pdf', 'chunk_text', 'split_sentences']
