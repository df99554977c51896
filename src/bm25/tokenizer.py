"""
Tokenizer for BM25 text processing.

Tokenization pipeline:
1. Lowercase conversion
2. Replace everything except a-z, 0-9 and whitespace with spaces
3. Split on whitespace
4. Filter short tokens (2 characters or fewer)
5. Filter stopwords (common English function words)
6. Return list of meaningful tokens, in text order

No stemming: "plants" and "plant" are different terms.
"""

import re
from collections import Counter
from typing import Dict, List

# Common English function words, ignored during scoring.
# Tokens of length <= 2 are dropped before this check, so short entries
# ('a', 'be', 'to', ...) are kept only to mirror the full list.
STOPWORDS = frozenset([
    'the', 'be', 'to', 'of', 'and', 'a', 'in', 'that', 'have', 'it',
    'for', 'not', 'on', 'with', 'he', 'as', 'you', 'do', 'at', 'this',
    'but', 'his', 'by', 'from', 'they', 'we', 'say', 'her', 'she', 'or',
    'an', 'will', 'my', 'one', 'all', 'would', 'there', 'their', 'what',
    'so', 'up', 'out', 'if', 'about', 'who', 'get', 'which', 'go', 'me',
    'when', 'make', 'can', 'like', 'time', 'no', 'just', 'him', 'know',
    'take', 'people', 'into', 'year', 'your', 'good', 'some', 'could',
    'them', 'see', 'other', 'than', 'then', 'now', 'look', 'only', 'come',
    'its', 'over', 'think', 'also', 'back', 'after', 'use', 'two', 'how',
    'our', 'work', 'first', 'well', 'way', 'even', 'new', 'want', 'because',
    'any', 'these', 'give', 'day', 'most', 'us', 'is', 'are', 'was', 'were',
    'has', 'had', 'been', 'being', 'am', 'does', 'did', 'doing',
])

MIN_TOKEN_LENGTH = 3

_NON_ALNUM = re.compile(r'[^a-z0-9\s]')


def tokenize(text: str) -> List[str]:
    """
    Tokenize text for BM25 scoring with stopword removal.

    Args:
        text: Input text to tokenize

    Returns:
        List of lowercase tokens without stopwords, in original order

    Examples:
        >>> tokenize("Photosynthesis converts light into chemical energy!")
        ['photosynthesis', 'converts', 'light', 'chemical', 'energy']

        >>> tokenize("It is what it is")
        []

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    text = _NON_ALNUM.sub(' ', text.lower())

    return [
        t for t in text.split()
        if len(t) >= MIN_TOKEN_LENGTH and t not in STOPWORDS
    ]


def build_term_frequencies(tokens: List[str]) -> Dict[str, float]:
    """
    Build a length-normalized term frequency map.

    Each value is the raw count of the term divided by the total number of
    tokens, so long and short texts are comparable.

    Args:
        tokens: Output of tokenize()

    Returns:
        {term: count / len(tokens)}, in first-occurrence order.
        Empty dict for an empty token list.

    Example:
        >>> build_term_frequencies(["cell", "energy", "cell", "membrane"])
        {'cell': 0.5, 'energy': 0.25, 'membrane': 0.25}
    """
    if not tokens:
        return {}

    total = len(tokens)
    return {term: count / total for term, count in Counter(tokens).items()}
