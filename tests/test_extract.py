from unittest.mock import MagicMock, patch

import httpx

from echo_lens.extract import fetch_article, parse_article

PARAGRAPH = "Lawmakers debated the measure for several hours before the final vote was called. "

HTML = f"""
<html>
<head>
  <title>Senate Passes Budget</title>
  <meta name="author" content="Jane Reporter">
  <meta property="article:published_time" content="2024-05-01T10:00:00Z">
</head>
<body>
  <nav>Home | World | Politics</nav>
  <header><h1>Site Banner</h1></header>
  <article>
    <p>{PARAGRAPH * 8}</p>
    <script>trackReader();</script>
    <div class="share">Share this story</div>
  </article>
  <footer>Copyright</footer>
</body>
</html>
"""


class TestParseArticle:
    def test_metadata(self):
        article = parse_article(HTML, "https://www.example.com/politics/budget")
        meta = article.metadata
        assert meta.title == "Senate Passes Budget"
        assert meta.author == "Jane Reporter"
        assert meta.date == "2024-05-01T10:00:00Z"
        assert meta.domain == "www.example.com"
        assert meta.url == "https://www.example.com/politics/budget"

    def test_article_text_without_noise(self):
        text = parse_article(HTML, "https://example.com/a").text
        assert text.startswith("Lawmakers debated")
        assert "Home | World" not in text
        assert "trackReader" not in text
        assert "Share this story" not in text
        assert "  " not in text

    def test_falls_back_to_body(self):
        html = "<html><body><p>Just a short note.</p></body></html>"
        article = parse_article(html, "https://example.com/note")
        assert article.text == "Just a short note."
        assert article.metadata.title == ""

    def test_largest_block_when_no_known_container(self):
        html = f"<html><body><div><p>Small</p></div><section>{PARAGRAPH * 8}</section></body></html>"
        assert parse_article(html, "https://example.com/x").text.startswith("Lawmakers")


class TestFetchArticle:
    @patch("echo_lens.extract._client.get")
    def test_success(self, mock_get):
        resp = MagicMock()
        resp.text = HTML
        resp.url = httpx.URL("https://example.com/politics/budget")
        mock_get.return_value = resp
        article = fetch_article("https://example.com/politics/budget")
        assert article.metadata.title == "Senate Passes Budget"
        assert len(article.text) > 500

    @patch("echo_lens.extract._client.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = httpx.ConnectError("down")
        assert fetch_article("https://example.com/missing") is None
