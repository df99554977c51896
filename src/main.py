"""
DocuMind Retrieval - FastAPI service for lexical document retrieval

Stateless HTTP front for the retrieval core:
- /v1/chunk: split a document's extracted text into overlapping chunks
- /v1/retrieve: rank candidate chunks for a question and build the prompt context

Storage, text extraction and the LLM call live in the calling application;
every request carries the text or candidate chunks it works on.
"""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import config
from .logging_config import setup_logging

setup_logging(
    log_file=config.LOG_FILE,
    console_level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)

from .chunking import chunk_document
from .context import build_system_prompt
from .models import Chunk, Document, ScoredChunk
from .retrieval import retrieve

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

app = FastAPI(
    title="DocuMind Retrieval API",
    description="Chunking and BM25 retrieval for document question answering",
    version=APP_VERSION,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class ChunkRequest(BaseModel):
    document_id: str = Field(..., description="Owning document id", min_length=1)
    document_name: str = Field(..., description="Display name copied onto each chunk")
    text: str = Field(..., description="Extracted document text")


class ChunkResponse(BaseModel):
    document_id: str
    total_chunks: int
    chunks: List[Chunk]


class RetrieveRequest(BaseModel):
    query: str = Field(..., description="User question", min_length=1)
    chunks: List[Chunk] = Field(default_factory=list, description="Candidate chunks")
    top_k: int = Field(
        default=config.DEFAULT_TOP_K,
        ge=0,
        le=config.MAX_TOP_K,
        description="Maximum number of chunks to return",
    )
    document_ids: Optional[List[str]] = Field(
        default=None,
        description="Only search chunks of these documents (default: all candidates)",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "query": "How does photosynthesis work?",
                "top_k": 6,
                "document_ids": ["doc-1"],
                "chunks": [
                    {
                        "id": "c1",
                        "document_id": "doc-1",
                        "document_name": "biology.pdf",
                        "content": "Photosynthesis converts light energy into chemical energy stored in glucose.",
                        "chunk_index": 0,
                    }
                ],
            }
        }
    }


class RetrieveResponse(BaseModel):
    chunks: List[ScoredChunk]
    context: str
    sources: List[str]
    system_prompt: str


# Routes
@app.get("/", response_model=dict)
def root():
    """Root endpoint"""
    return {
        "service": "DocuMind Retrieval API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
def health():
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/chunk", response_model=ChunkResponse)
def chunk(request: ChunkRequest):
    """Split extracted document text into chunk records"""
    try:
        document = Document(id=request.document_id, name=request.document_name, content=request.text)
        chunks = chunk_document(document)
        return ChunkResponse(
            document_id=request.document_id,
            total_chunks=len(chunks),
            chunks=chunks,
        )

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Chunking failed for document {request.document_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Chunking failed: {str(e)}",
        )


@app.post("/v1/retrieve", response_model=RetrieveResponse)
def retrieve_chunks(request: RetrieveRequest):
    """Rank candidate chunks for a question and build the prompt context"""
    logger.info(
        f"Retrieve: {len(request.chunks)} candidates, top_k={request.top_k}, "
        f"documents={len(request.document_ids) if request.document_ids else 'all'}"
    )
    try:
        result = retrieve(
            request.query,
            request.chunks,
            top_k=request.top_k,
            document_ids=request.document_ids,
        )
        return RetrieveResponse(
            chunks=result.chunks,
            context=result.context,
            sources=result.sources,
            system_prompt=build_system_prompt(result.context),
        )

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Retrieval failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Retrieval failed: {str(e)}",
        )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=config.PORT,
    )
