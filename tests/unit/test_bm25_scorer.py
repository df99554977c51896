"""
Unit tests for SimplifiedBM25 scorer and phrase bonuses.
"""

import pytest
from src.bm25.scorer import BIGRAM_BONUS, PHRASE_BONUS, SimplifiedBM25, bigram_bonus, phrase_bonus


class TestSimplifiedBM25:
    """Test BM25 scoring logic"""

    def test_defaults(self):
        scorer = SimplifiedBM25()
        assert scorer.k1 == 1.5
        assert scorer.b == 0.75
        assert scorer.avgdl == 400

    def test_basic_scoring(self):
        """Test BM25 formula on a single matching term"""
        scorer = SimplifiedBM25()

        score = scorer.score(
            query_term_frequencies={"photosynthesis": 1.0},
            doc_term_frequencies={"photosynthesis": 0.5, "plants": 0.5},
            token_count=2,
        )

        # 0.5 * 2.5 / (0.5 + 1.5 * (0.25 + 0.75 * 2 / 400))
        expected = 1.25 / (0.5 + 1.5 * (0.25 + 0.75 * 2 / 400))
        assert score == pytest.approx(expected)
        assert isinstance(score, float)

    def test_query_frequency_weights_terms(self):
        """Test that each term contributes in proportion to its query share"""
        scorer = SimplifiedBM25()
        doc_tf = {"glucose": 0.5, "energy": 0.5}

        single = scorer.score({"glucose": 1.0}, doc_tf, token_count=2)
        shared = scorer.score({"glucose": 0.5, "oxygen": 0.5}, doc_tf, token_count=2)

        assert shared == pytest.approx(single * 0.5)

    def test_zero_score_no_matches(self):
        """Test that score is zero when no query terms match"""
        scorer = SimplifiedBM25()

        score = scorer.score(
            query_term_frequencies={"nonexistent": 0.5, "terms": 0.5},
            doc_term_frequencies={"photosynthesis": 0.5, "plants": 0.5},
            token_count=2,
        )

        assert score == 0.0

    def test_length_normalization(self):
        """Test that longer chunks get penalized"""
        scorer = SimplifiedBM25(b=0.75)

        score_short = scorer.score({"glucose": 1.0}, {"glucose": 0.1}, token_count=200)
        score_long = scorer.score({"glucose": 1.0}, {"glucose": 0.1}, token_count=800)

        assert score_short > score_long

    def test_no_length_normalization_when_b_zero(self):
        scorer = SimplifiedBM25(b=0.0)

        score_short = scorer.score({"glucose": 1.0}, {"glucose": 0.1}, token_count=200)
        score_long = scorer.score({"glucose": 1.0}, {"glucose": 0.1}, token_count=800)

        assert score_short == pytest.approx(score_long)

    def test_term_frequency_saturation(self):
        """Test that higher TF scores higher, with diminishing returns"""
        scorer = SimplifiedBM25()

        score_low_tf = scorer.score({"glucose": 1.0}, {"glucose": 0.1}, token_count=400)
        score_high_tf = scorer.score({"glucose": 1.0}, {"glucose": 0.9}, token_count=400)

        assert score_high_tf > score_low_tf
        assert score_high_tf < score_low_tf * 9  # Saturation effect

    def test_empty_query(self):
        scorer = SimplifiedBM25()
        assert scorer.score({}, {"glucose": 1.0}, token_count=1) == 0.0

    def test_empty_document(self):
        scorer = SimplifiedBM25()
        assert scorer.score({"glucose": 1.0}, {}, token_count=0) == 0.0


class TestPhraseBonus:
    """Test exact phrase and bigram bonuses"""

    def test_exact_phrase(self):
        assert phrase_bonus("light reactions", "the light reactions happen in thylakoids") == PHRASE_BONUS

    def test_no_phrase(self):
        assert phrase_bonus("dark reactions", "the light reactions happen in thylakoids") == 0.0

    def test_bigram_per_adjacent_pair(self):
        """Test that every matching adjacent pair adds the bigram bonus"""
        content = "the calvin cycle fixes carbon dioxide"
        assert bigram_bonus("calvin cycle fixes", content) == pytest.approx(2 * BIGRAM_BONUS)
        assert bigram_bonus("calvin cycle repairs", content) == pytest.approx(BIGRAM_BONUS)
        assert bigram_bonus("krebs cycle", content) == 0.0

    def test_bigram_keeps_stopwords(self):
        """Test that bigrams are built from raw words, stopwords included"""
        content = "energy of the sun"
        assert bigram_bonus("energy of", content) == pytest.approx(BIGRAM_BONUS)
        assert bigram_bonus("of the", content) == pytest.approx(BIGRAM_BONUS)

    def test_repeated_bigram_counted_per_position(self):
        """Test that a bigram repeated in the query is checked at each position"""
        content = "cell wall"
        assert bigram_bonus("cell wall cell wall", content) == pytest.approx(2 * BIGRAM_BONUS)

    def test_single_word_query_has_no_bigrams(self):
        assert bigram_bonus("photosynthesis", "photosynthesis in plants") == 0.0
