"""
Sentence-aligned text chunking.

Extracted document text is split on terminal punctuation (. ! ?) and the
sentences are packed into chunks of roughly ``target_word_count`` words.
A sentence is never split, so a single long sentence becomes its own
oversized chunk.
"""
import re
from typing import List

from ..utils.config import CHUNK_WORD_COUNT
from ..utils.text_utils import count_words

_SENTENCE = re.compile(r"[^.!?]+[.!?]+")


def split_sentences(text: str) -> List[str]:
    """
    Split text into stripped sentences.

    Text after the last terminal punctuation mark is kept as a final sentence.
    """
    sentences = []
    last_end = 0
    for match in _SENTENCE.finditer(text):
        sentences.append(match.group().strip())
        last_end = match.end()

    if sentences:
        tail = text[last_end:].strip()
        if tail:
            sentences.append(tail)

    return [s for s in sentences if s]


def chunk_text(text: str, target_word_count: int = CHUNK_WORD_COUNT) -> List[str]:
    """
    Split text into sentence-aligned chunks.

    Args:
        text: Text to chunk
        target_word_count: Soft word limit per chunk

    Returns:
        Ordered chunks. ``[text]`` if no sentence boundary is found.
    """
    chunks = []
    current: List[str] = []
    word_count = 0

    for sentence in split_sentences(text):
        sentence_words = count_words(sentence)

        if word_count + sentence_words > target_word_count and current:
            chunks.append(" ".join(current))
            current = [sentence]
            word_count = sentence_words
        else:
            current.append(sentence)
            word_count += sentence_words

    if current:
        chunks.append(" ".join(current))

    return chunks if chunks else [text]
