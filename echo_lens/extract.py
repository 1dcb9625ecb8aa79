import logging
import re
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from echo_lens.models import ArticleInput, ArticleMetadata

log = logging.getLogger(__name__)

_client = httpx.Client(timeout=15, follow_redirects=True, headers={
    "User-Agent": "echo_lens/0.1 (article bias analysis)"
})

MIN_ARTICLE_CHARS = 500

ARTICLE_SELECTORS = [
    "article",
    '[role="article"]',
    ".article-content",
    ".post-content",
    ".entry-content",
    ".article-body",
    ".content",
    "main",
    '[class*="article"]',
    '[class*="post"]',
    '[class*="story"]',
    '[id*="article"]',
    '[id*="content"]',
]

NOISE_SELECTORS = [
    "nav", "header", "footer", "aside", "script", "style", "noscript",
    ".nav", ".navigation", ".menu", ".sidebar", ".ad", ".advertisement",
    ".social", ".share", ".comments",
    '[class*="advert"]', '[id*="advert"]',
]

AUTHOR_SELECTORS = ['meta[property="article:author"]', 'meta[name="author"]', ".author", '[rel="author"]']
DATE_SELECTORS = ['meta[property="article:published_time"]', 'meta[name="publish-date"]', "time[datetime]"]


def _text(el) -> str:
    return el.get_text(separator=" ", strip=True)


def _find_body(soup: BeautifulSoup):
    """Try known article containers, then the largest block, then <body>."""
    for selector in ARTICLE_SELECTORS:
        for el in soup.select(selector):
            if len(_text(el)) > MIN_ARTICLE_CHARS:
                return el

    blocks = [el for el in soup.find_all(["div", "section", "main", "article"]) if len(_text(el)) > MIN_ARTICLE_CHARS]
    if blocks:
        return max(blocks, key=lambda el: len(_text(el)))

    return soup.body or soup


def extract_text(soup: BeautifulSoup) -> str:
    for selector in NOISE_SELECTORS:
        for el in soup.select(selector):
            el.decompose()
    body = _find_body(soup)
    return re.sub(r"\s+", " ", _text(body)).strip()


def _first_value(soup: BeautifulSoup, selectors: list[str]) -> str | None:
    for selector in selectors:
        el = soup.select_one(selector)
        if el is None:
            continue
        value = el.get("content") or el.get("datetime") or _text(el)
        if value:
            return value.strip()
    return None


def extract_metadata(soup: BeautifulSoup, url: str) -> ArticleMetadata:
    title = ""
    if soup.title and soup.title.string:
        title = soup.title.string.strip()
    if not title and soup.find("h1"):
        title = _text(soup.find("h1"))
    if not title:
        title = _first_value(soup, ['meta[property="og:title"]', 'meta[name="title"]']) or ""

    return ArticleMetadata(
        title=title,
        domain=urlparse(url).hostname or "",
        url=url,
        author=_first_value(soup, AUTHOR_SELECTORS),
        date=_first_value(soup, DATE_SELECTORS),
    )


def parse_article(html: str, url: str) -> ArticleInput:
    """Build an ArticleInput from raw page HTML."""
    soup = BeautifulSoup(html, "lxml")
    # metadata first: text extraction strips header/meta noise in place
    metadata = extract_metadata(soup, url)
    return ArticleInput(text=extract_text(soup), metadata=metadata)


def fetch_article(url: str) -> ArticleInput | None:
    """Fetch a page and extract its article text and metadata."""
    try:
        resp = _client.get(url)
        resp.raise_for_status()
    except Exception as e:
        log.warning("Failed to fetch %s: %s", url, e)
        return None
    return parse_article(resp.text, str(resp.url))

