"""Data records shared by chunking, scoring and context assembly"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """Uploaded document with its extracted text (owned by the persistence layer)"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    content: str


class Chunk(BaseModel):
    """Overlapping excerpt of a document, the unit of retrieval"""
    model_config = ConfigDict(frozen=True)

    id: str
    document_id: str
    document_name: str
    content: str
    chunk_index: int = Field(..., ge=0, description="0-based position within the document")


class ScoredChunk(Chunk):
    """Chunk scored against one query. Never persisted."""

    score: float = Field(..., ge=0.0)

    @classmethod
    def from_chunk(cls, chunk: Chunk, score: float) -> "ScoredChunk":
        return cls(**chunk.model_dump(exclude={"score"}), score=score)


class RetrievalResult(BaseModel):
    """Ranked chunks plus the prompt-ready context built from them"""

    chunks: List[ScoredChunk]
    context: str
    sources: List[str] = Field(default_factory=list, description="Deduplicated document names, in rank order")
