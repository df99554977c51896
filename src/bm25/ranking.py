"""
Query-time ranking of candidate chunks.

Scores every candidate against the query (BM25 term score + phrase bonuses),
drops non-positive scores and keeps the top_k best, highest first.
"""

import logging
from typing import Dict, List, Sequence

from ..models import Chunk, ScoredChunk
from .scorer import SimplifiedBM25, bigram_bonus, phrase_bonus
from .tokenizer import build_term_frequencies, tokenize

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 6

_scorer = SimplifiedBM25()


def score_chunk(query: str, chunk: Chunk) -> float:
    """
    Score a single chunk against a query.

    Convenience wrapper, score_and_rank tokenizes the query only once.
    """
    query_tf = build_term_frequencies(tokenize(query))
    return _score_content(query.lower(), query_tf, chunk.content)


def _score_content(query_lower: str, query_tf: Dict[str, float], content: str) -> float:
    chunk_tokens = tokenize(content)
    chunk_tf = build_term_frequencies(chunk_tokens)

    score = _scorer.score(query_tf, chunk_tf, len(chunk_tokens))

    content_lower = content.lower()
    score += phrase_bonus(query_lower, content_lower)
    score += bigram_bonus(query_lower, content_lower)

    return score


def score_and_rank(
    query: str,
    candidates: Sequence[Chunk],
    top_k: int = DEFAULT_TOP_K,
) -> List[ScoredChunk]:
    """
    Rank candidate chunks by relevance to the query.

    Args:
        query: Raw user query
        candidates: Chunks to score (all chunks, or a per-document subset)
        top_k: Maximum number of results

    Returns:
        Up to top_k ScoredChunk, score > 0, sorted by score (descending).
        Equal scores keep their input order.

    Raises:
        ValueError: If top_k is negative
    """
    if top_k < 0:
        raise ValueError(f"top_k must be >= 0, got {top_k}")

    if not candidates or not query.strip() or top_k == 0:
        return []

    query_lower = query.lower()
    query_tf = build_term_frequencies(tokenize(query))

    scored = []
    for chunk in candidates:
        score = _score_content(query_lower, query_tf, chunk.content)
        if score > 0:
            scored.append((chunk, score))

    # sorted() is stable, ties stay in candidate order
    scored = sorted(scored, key=lambda item: item[1], reverse=True)[:top_k]

    logger.debug(
        f"Ranked {len(candidates)} candidates: {len(scored)} kept "
        f"(query terms={len(query_tf)}, top_k={top_k})"
    )

    return [ScoredChunk.from_chunk(chunk, score) for chunk, score in scored]
