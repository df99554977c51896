"""
Simplified BM25 scorer without IDF, plus phrase bonuses.

BM25 (Best Match 25) is a probabilistic ranking function used for information retrieval.
Candidates are scored in memory at query time, so there is no corpus-wide IDF:
each chunk is scored on its own term frequencies only.

Formula (per query term, summed):
    score(term, chunk) = qf × (tf × (k1 + 1)) / (tf + k1 × (1 - b + b × dl/avgdl))

Where:
    qf = normalized frequency of the term in the query
    tf = normalized frequency of the term in the chunk
    k1 = term frequency saturation parameter (default: 1.5)
    b = length normalization parameter (default: 0.75)
    dl = chunk length (number of tokens)
    avgdl = assumed average chunk length (approximate constant: 400)

Phrase bonuses are computed on the raw lowercased text, not on tokens:
    +2.0 if the whole query appears verbatim in the chunk
    +0.5 for every adjacent query word pair found in the chunk
"""

import re
from typing import Dict

PHRASE_BONUS = 2.0
BIGRAM_BONUS = 0.5


class SimplifiedBM25:
    """
    Simplified BM25 scoring without IDF.

    Works on normalized term frequency maps (see build_term_frequencies),
    weighting each term by its share of the query.
    """

    def __init__(self, k1: float = 1.5, b: float = 0.75, avgdl: float = 400):
        """
        Initialize BM25 scorer.

        Args:
            k1: Term frequency saturation parameter
                Higher = more weight to term frequency
                Default: 1.5

            b: Length normalization parameter
                Higher = more penalty for long chunks
                Range: 0.0 - 1.0
                Default: 0.75 (standard)

            avgdl: Average chunk length (in tokens)
                Approximation constant for normalization
                Default: 400 tokens
        """
        self.k1 = k1
        self.b = b
        self.avgdl = avgdl

    def score(
        self,
        query_term_frequencies: Dict[str, float],
        doc_term_frequencies: Dict[str, float],
        token_count: int,
    ) -> float:
        """
        Compute simplified BM25 score for a chunk given the query terms.

        Args:
            query_term_frequencies: Normalized query TF map {term: freq}
            doc_term_frequencies: Normalized chunk TF map {term: freq}
            token_count: Total number of tokens in the chunk

        Returns:
            BM25 score (higher = more relevant), 0.0 when nothing matches

        Example:
            >>> scorer = SimplifiedBM25()
            >>> scorer.score({"photosynthesis": 1.0}, {"photosynthesis": 0.5, "plants": 0.5}, 2)
            1.4194...
        """
        if not query_term_frequencies or not doc_term_frequencies:
            return 0.0

        score = 0.0
        length_norm = 1 - self.b + self.b * (token_count / self.avgdl)

        for term, query_freq in query_term_frequencies.items():
            tf = doc_term_frequencies.get(term, 0)

            if tf == 0:
                continue

            numerator = tf * (self.k1 + 1)
            denominator = tf + self.k1 * length_norm

            score += query_freq * (numerator / denominator)

        return score


def phrase_bonus(query_lower: str, content_lower: str) -> float:
    """Flat bonus when the whole query appears verbatim in the chunk."""
    return PHRASE_BONUS if query_lower in content_lower else 0.0


def bigram_bonus(query_lower: str, content_lower: str) -> float:
    """
    Partial phrase bonus for adjacent query word pairs.

    Query words are split on whitespace only; stopwords are NOT removed here,
    so "cell of plants" checks "cell of" and "of plants".
    Each adjacent position in the query is checked once.
    """
    words = re.split(r'\s+', query_lower)
    bonus = 0.0

    for first, second in zip(words, words[1:]):
        if f"{first} {second}" in content_lower:
            bonus += BIGRAM_BONUS

    return bonus
