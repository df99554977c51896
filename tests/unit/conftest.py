"""Unit test fixtures - chunk factories for scoring and assembly tests"""

import pytest

from src.models import Chunk, ScoredChunk


@pytest.fixture
def make_chunk():
    """
    Factory for Chunk records.

    Ids default to "<document_id>-<chunk_index>" so tests can assert on them.
    """
    def _make(content, document_id="doc-1", document_name=None, chunk_index=0, chunk_id=None):
        return Chunk(
            id=chunk_id or f"{document_id}-{chunk_index}",
            document_id=document_id,
            document_name=document_name or f"{document_id}.pdf",
            content=content,
            chunk_index=chunk_index,
        )
    return _make


@pytest.fixture
def make_scored(make_chunk):
    """Factory for ScoredChunk records"""
    def _make(content, score=1.0, **kwargs):
        return ScoredChunk.from_chunk(make_chunk(content, **kwargs), score)
    return _make


@pytest.fixture
def biology_chunks(make_chunk):
    """Small multi-document candidate set"""
    return [
        make_chunk(
            "Photosynthesis converts light energy into chemical energy stored in glucose molecules.",
            document_id="bio", document_name="biology.pdf", chunk_index=0,
        ),
        make_chunk(
            "Cellular respiration releases the energy stored in glucose to produce ATP.",
            document_id="bio", document_name="biology.pdf", chunk_index=1,
        ),
        make_chunk(
            "The French Revolution began in 1789 and reshaped European politics.",
            document_id="hist", document_name="history.docx", chunk_index=0,
        ),
        make_chunk(
            "Chloroplasts host photosynthesis; chlorophyll absorbs red and blue light.",
            document_id="notes", document_name="notes.md", chunk_index=0,
        ),
    ]
