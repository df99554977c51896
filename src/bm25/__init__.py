"""
BM25 (Best Match 25) lexical retrieval over in-memory chunk sets.

This module implements a simplified BM25 scoring algorithm without IDF
(Inverse Document Frequency): candidates are handed over at query time and
scored independently, there is no index to hold corpus statistics.

Components:
- tokenizer: Text tokenization and normalized term frequencies
- scorer: Simplified BM25 term score plus exact-phrase and bigram bonuses
- ranking: Score candidates, drop zero scores, keep top-K

Key simplification: No IDF statistics
- No persistent index, nothing to update when documents change
- Phrase and bigram bonuses reward exact wording instead
"""

from .tokenizer import tokenize, build_term_frequencies, STOPWORDS
from .scorer import SimplifiedBM25, phrase_bonus, bigram_bonus
from .ranking import score_and_rank, score_chunk, DEFAULT_TOP_K

__all__ = [
    "tokenize",
    "build_term_frequencies",
    "STOPWORDS",
    "SimplifiedBM25",
    "phrase_bonus",
    "bigram_bonus",
    "score_and_rank",
    "score_chunk",
    "DEFAULT_TOP_K",
]
