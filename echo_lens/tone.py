"""External tone vector: GDELT article tone as a loose proxy for leaning.

Candidate queries are tried in order with a fixed delay between them; the
first one that returns at least one article with a numeric tone wins. Any
network or parse failure just moves on to the next candidate.
"""
import logging
import math
import re
import time
from urllib.parse import urlparse

import httpx

from echo_lens.config import GDELT_DOC_URL, MIN_TEXT_LENGTH, TONE_MAX_RECORDS, TONE_QUERY_DELAY
from echo_lens.models import ArticleInput, SourceId, VectorResult, abstain, clamp, neutral

log = logging.getLogger(__name__)

_client = httpx.Client(timeout=15, follow_redirects=True, headers={
    "User-Agent": "echo_lens/0.1 (article bias analysis)"
})

CONFIDENCE = 0.6
MAX_CANDIDATES = 3
TEXT_QUERY_CHARS = 150
MIN_PATH_TOKEN = 6  # path tokens must be longer than 5 chars


def build_queries(article: ArticleInput) -> list[str]:
    """Title, then URL path keywords, then the opening of the body."""
    meta = article.metadata
    candidates = [(meta.title or "").strip()]

    path = urlparse(meta.url or "").path
    tokens = [t for t in re.split(r"[^A-Za-z0-9]+", path) if len(t) >= MIN_PATH_TOKEN]
    candidates.append(" ".join(tokens))

    candidates.append((article.text or "")[:TEXT_QUERY_CHARS].strip())

    queries = []
    for q in candidates:
        if q and q not in queries:
            queries.append(q)
    return queries[:MAX_CANDIDATES]


def _usable_tone(value) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value):
        return None
    return float(value)


def query_tones(query: str, client: httpx.Client | None = None) -> list[float]:
    """Query GDELT and return the numeric tones found. Empty list means no data."""
    client = client or _client
    try:
        resp = client.get(
            GDELT_DOC_URL,
            params={"query": query, "mode": "artlist", "format": "json", "maxrecords": TONE_MAX_RECORDS},
        )
        resp.raise_for_status()
        data = resp.json()
    except Exception as e:
        log.debug("GDELT query failed for %r: %s", query[:60], e)
        return []

    articles = data.get("articles") if isinstance(data, dict) else None
    if not isinstance(articles, list):
        return []
    tones = []
    for item in articles:
        if isinstance(item, dict):
            tone = _usable_tone(item.get("tone"))
            if tone is not None:
                tones.append(tone)
    return tones


def rescale(tones: list[float]) -> float:
    """Average tone on GDELT's -100..100 scale mapped linearly onto [-1, 1]."""
    return clamp(sum(tones) / len(tones) / 100)


def analyze(
    article: ArticleInput,
    delay: float = TONE_QUERY_DELAY,
    client: httpx.Client | None = None,
) -> VectorResult:
    if len(article.text or "") < MIN_TEXT_LENGTH:
        return abstain(SourceId.TONE, "text too short for tone lookup")

    queries = build_queries(article)
    for i, query in enumerate(queries):
        if i > 0:
            time.sleep(delay)  # GDELT rate limit
        tones = query_tones(query, client)
        if tones:
            score = rescale(tones)
            log.info("GDELT tone %.3f from %d articles (query %d/%d)", score, len(tones), i + 1, len(queries))
            return VectorResult(
                score=score,
                confidence=CONFIDENCE,
                source_id=SourceId.TONE,
                explanation=f"Average GDELT tone across {len(tones)} related articles",
                details=(f"query: {query}", f"articles with tone: {len(tones)}"),
            )

    log.debug("No usable GDELT tone after %d queries", len(queries))
    return neutral(SourceId.TONE, "no usable tone data from GDELT")
