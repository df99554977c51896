"""
Retrieval pipeline: candidates → ranked chunks → prompt context

One call per user question. Everything happens in memory over the chunk set
passed in; nothing is cached between calls.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from .bm25 import DEFAULT_TOP_K, score_and_rank
from .context import assemble_context, cite_sources
from .models import Chunk, RetrievalResult

logger = logging.getLogger(__name__)


def filter_candidates(chunks: Sequence[Chunk], document_ids: Optional[Iterable[str]] = None) -> List[Chunk]:
    """
    Restrict candidates to the given documents.

    Args:
        chunks: All available chunks
        document_ids: Documents to search; None or empty means all documents

    Returns:
        Matching chunks, in their original order
    """
    wanted = set(document_ids or ())
    if not wanted:
        return list(chunks)
    return [chunk for chunk in chunks if chunk.document_id in wanted]


def retrieve(
    query: str,
    candidates: Sequence[Chunk],
    top_k: int = DEFAULT_TOP_K,
    document_ids: Optional[Iterable[str]] = None,
) -> RetrievalResult:
    """
    Find the chunks most relevant to a query and build the prompt context.

    Args:
        query: User question
        candidates: Chunks to search
        top_k: Maximum number of chunks to keep
        document_ids: Optional subset of documents to search

    Returns:
        RetrievalResult with ranked chunks, formatted context and cited sources

    Raises:
        ValueError: If top_k is negative
    """
    pool = filter_candidates(candidates, document_ids)
    ranked = score_and_rank(query, pool, top_k=top_k)
    context = assemble_context(ranked)

    logger.info(
        f"Retrieved {len(ranked)}/{len(pool)} chunks for query ({len(query)} chars), "
        f"context={len(context)} chars"
    )

    return RetrievalResult(chunks=ranked, context=context, sources=cite_sources(ranked))
