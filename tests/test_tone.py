"""Tests for the external tone vector (GDELT is mocked)."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from echo_lens import tone
from tests.conftest import FILLER, make_article

URL = "https://example.com/2024/05/senate-passes-infrastructure-bill"


def _response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status = MagicMock()
    return resp


@pytest.fixture
def article():
    return make_article(FILLER, title="Senate passes bill", url=URL)


class TestBuildQueries:
    def test_title_path_and_text(self, article):
        queries = tone.build_queries(article)
        assert queries[0] == "Senate passes bill"
        assert queries[1] == "senate passes infrastructure"
        assert queries[2] == FILLER[:150].strip()

    def test_skips_empty_candidates(self):
        queries = tone.build_queries(make_article(FILLER))
        assert queries == [FILLER[:150].strip()]

    def test_drops_duplicates(self):
        queries = tone.build_queries(make_article(FILLER, title="senate passes infrastructure", url=URL))
        assert len(queries) == 2


class TestQueryTones:
    def test_collects_numeric_tones_only(self):
        client = MagicMock()
        client.get.return_value = _response({"articles": [
            {"tone": -20}, {"tone": 40.5}, {"tone": True}, {"tone": "12"}, {"title": "no tone"}, "junk",
        ]})
        assert tone.query_tones("q", client) == [-20.0, 40.5]

    def test_network_error_returns_empty(self):
        client = MagicMock()
        client.get.side_effect = httpx.ConnectError("down")
        assert tone.query_tones("q", client) == []

    def test_bad_json_returns_empty(self):
        client = MagicMock()
        resp = _response(None)
        resp.json.side_effect = ValueError("not json")
        client.get.return_value = resp
        assert tone.query_tones("q", client) == []

    def test_unexpected_shape_returns_empty(self):
        client = MagicMock()
        client.get.return_value = _response(["not", "a", "dict"])
        assert tone.query_tones("q", client) == []


class TestToneVector:
    def test_short_text_abstains_without_network(self):
        client = MagicMock()
        result = tone.analyze(make_article("too short", title="t"), delay=0, client=client)
        assert result.abstained
        client.get.assert_not_called()

    @patch("echo_lens.tone.time.sleep")
    def test_first_success_wins(self, mock_sleep, article):
        client = MagicMock()
        client.get.return_value = _response({"articles": [{"tone": -20}, {"tone": 40}]})
        result = tone.analyze(article, delay=2.0, client=client)
        assert result.score == pytest.approx(0.1)
        assert result.confidence == 0.6
        assert client.get.call_count == 1
        mock_sleep.assert_not_called()

    @patch("echo_lens.tone.time.sleep")
    def test_failure_advances_to_next_query(self, mock_sleep, article):
        client = MagicMock()
        client.get.side_effect = [
            httpx.ReadTimeout("slow"),
            _response({"articles": [{"tone": -50}]}),
        ]
        result = tone.analyze(article, delay=2.0, client=client)
        assert result.score == pytest.approx(-0.5)
        assert client.get.call_count == 2
        mock_sleep.assert_called_once_with(2.0)
        assert client.get.call_args.kwargs["params"]["query"] == "senate passes infrastructure"

    @patch("echo_lens.tone.time.sleep")
    def test_exhausted_candidates_is_neutral(self, mock_sleep, article):
        client = MagicMock()
        client.get.return_value = _response({"articles": []})
        result = tone.analyze(article, delay=1.0, client=client)
        assert (result.score, result.confidence) == (0.0, 0.1)
        assert client.get.call_count == 3
        assert mock_sleep.call_count == 2

    def test_never_raises(self, article):
        client = MagicMock()
        client.get.side_effect = RuntimeError("anything")
        result = tone.analyze(article, delay=0, client=client)
        assert (result.score, result.confidence) == (0.0, 0.1)

    def test_rescale_clamps(self):
        assert tone.rescale([250.0]) == 1.0
        assert tone.rescale([-100.0, 0.0]) == -0.5
