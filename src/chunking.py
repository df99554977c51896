"""
Paragraph-aware text chunking for retrieval

Splits extracted document text into overlapping, word-counted passages:
1. Normalize line endings and blank-line runs
2. Split into paragraphs on blank lines
3. Greedily pack paragraphs up to CHUNK_SIZE words
4. Carry the last CHUNK_OVERLAP words of each chunk into the next one
5. Split very long paragraphs (> 1.5x CHUNK_SIZE words) on sentence ends, without overlap
6. Drop tiny chunks (MIN_CHUNK_CHARS characters or fewer)

Chunk sizes are counted in words, not characters or model tokens.
"""

import logging
import re
import uuid
from typing import List

from .models import Chunk, Document

logger = logging.getLogger(__name__)

CHUNK_SIZE = 600  # target words per chunk
CHUNK_OVERLAP = 100  # words carried over between chunks
MIN_CHUNK_CHARS = 50  # chunks this short (or shorter) are noise
OVERSIZED_PARAGRAPH_FACTOR = 1.5

_SENTENCE = re.compile(r'[^.!?]+[.!?]+')


def normalize_text(text: str) -> str:
    """Drop a leading byte order mark, unify line endings and collapse 3+ newlines into one blank line"""
    text = text.lstrip('\ufeff').replace('\r\n', '\n')
    text = re.sub(r'\n{3,}', '\n\n', text)
    return text.strip()


def _split_sentences(paragraph: str, chunk_size: int) -> List[str]:
    """
    Pack sentences of an oversized paragraph into chunks (no overlap).

    Text after the last sentence terminator is not matched and is left out.
    """
    sentences = _SENTENCE.findall(paragraph) or [paragraph]

    chunks = []
    current = ''
    count = 0

    for sentence in sentences:
        # Leading whitespace counts as an (empty) word here
        sentence_words = len(re.split(r'\s+', sentence))
        if count + sentence_words > chunk_size and current:
            chunks.append(current.strip())
            current = sentence
            count = sentence_words
        else:
            current += ' ' + sentence
            count += sentence_words

    if current.strip():
        chunks.append(current.strip())

    return chunks


def chunk_text(text: str, chunk_size: int = CHUNK_SIZE, chunk_overlap: int = CHUNK_OVERLAP) -> List[str]:
    """
    Split text into overlapping chunks

    Args:
        text: Extracted document text
        chunk_size: Target words per chunk
        chunk_overlap: Words from the end of a chunk repeated at the start of the next

    Returns:
        Chunk strings in document order, each longer than MIN_CHUNK_CHARS

    Raises:
        ValueError: If chunk_size <= 0 or chunk_overlap < 0
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if chunk_overlap < 0:
        raise ValueError(f"chunk_overlap must be >= 0, got {chunk_overlap}")

    normalized = normalize_text(text)
    paragraphs = re.split(r'\n\n+', normalized)

    chunks: List[str] = []
    current = ''
    count = 0

    for paragraph in paragraphs:
        words = paragraph.split()

        if count + len(words) > chunk_size and current:
            chunks.append(current.strip())
            overlap_words = current.strip().split()[-chunk_overlap:] if chunk_overlap else []
            current = ' '.join(overlap_words) + '\n\n' + paragraph
            count = len(overlap_words) + len(words)
        else:
            current += ('\n\n' if current else '') + paragraph
            count += len(words)

        if len(words) > chunk_size * OVERSIZED_PARAGRAPH_FACTOR:
            logger.debug(f"Paragraph of {len(words)} words exceeds limit, splitting by sentences")
            chunks.extend(_split_sentences(paragraph, chunk_size))
            current = ''
            count = 0

    if current.strip():
        chunks.append(current.strip())

    result = [c for c in chunks if len(c) > MIN_CHUNK_CHARS]
    logger.debug(f"Chunked {len(text)} chars into {len(result)} chunks ({len(chunks) - len(result)} too short)")
    return result


def chunk_document(document: Document) -> List[Chunk]:
    """
    Chunk a document and build Chunk records ready to persist

    Each chunk gets a fresh id and a contiguous chunk_index starting at 0.

    Args:
        document: Document whose content is the extracted text (or an extraction placeholder)

    Returns:
        List of Chunk in document order
    """
    chunks = [
        Chunk(
            id=uuid.uuid4().hex,
            document_id=document.id,
            document_name=document.name,
            content=content,
            chunk_index=index,
        )
        for index, content in enumerate(chunk_text(document.content))
    ]
    logger.info(f"Document {document.name} ({document.id}): {len(chunks)} chunks")
    return chunks


def extraction_placeholder(error) -> str:
    """Text stored in place of a document whose extraction failed"""
    return f"[Text extraction failed: {error}]"
