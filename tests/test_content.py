"""Tests for the content keyword vector."""

import pytest

from echo_lens import content
from echo_lens.models import SourceId
from tests.conftest import FILLER, make_article


class TestContentVector:
    def test_short_text_abstains(self):
        result = content.analyze(make_article(text="climate crisis"))
        assert result.abstained
        assert result.source_id == SourceId.CONTENT

    def test_no_hits_is_neutral(self):
        result = content.analyze(make_article())
        assert result.score == 0.0
        assert result.confidence == 0.1
        assert not result.abstained

    def test_single_liberal_phrase(self):
        result = content.analyze(make_article(FILLER + "Critics called it a response to the climate crisis."))
        assert result.score == 1.0
        assert result.confidence == pytest.approx(0.9 / 20)
        assert result.details == ("liberal: 'climate crisis' x1 (weight 0.9)",)

    def test_single_conservative_phrase(self):
        result = content.analyze(make_article(FILLER + "Supporters said it would help job creators."))
        assert result.score == -1.0
        assert result.confidence == pytest.approx(0.8 / 20)

    def test_case_insensitive(self):
        result = content.analyze(make_article(FILLER + "The DEATH TAX debate returned."))
        assert result.score == -1.0

    def test_whole_phrase_only(self):
        # "wokeness" must not count as "woke"
        result = content.analyze(make_article(FILLER + "Wokeness was not mentioned."))
        assert result.score == 0.0
        assert result.confidence == 0.1

    def test_occurrences_multiply_weight(self):
        text = FILLER + "climate crisis, climate crisis and death tax."
        result = content.analyze(make_article(text))
        # (1.8 - 0.9) / 2.7
        assert result.score == pytest.approx(1 / 3)
        assert result.confidence == pytest.approx(2.7 / 20)

    def test_balanced_phrases_score_zero(self):
        result = content.analyze(make_article(FILLER + "climate crisis and the death tax"))
        assert result.score == pytest.approx(0.0)
        assert result.confidence == pytest.approx(1.8 / 20)

    def test_confidence_capped(self):
        result = content.analyze(make_article(FILLER + "climate crisis. " * 30))
        assert result.confidence == 0.8
        assert result.score == 1.0

    def test_deterministic(self):
        article = make_article(FILLER + "border security and living wage")
        assert content.analyze(article) == content.analyze(article)
