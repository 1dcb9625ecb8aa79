"""Domain reputation vector: publisher identity against a static leaning table.

Scores run from -1 (conservative) to 1 (liberal).
"""
import logging
import re

from echo_lens.models import ArticleInput, SourceId, VectorResult, abstain

log = logging.getLogger(__name__)

CONFIDENCE = 0.9

DOMAIN_SCORES = {
    # Conservative / right-leaning
    "foxnews.com": -0.8,
    "breitbart.com": -0.9,
    "dailywire.com": -0.7,
    "nationalreview.com": -0.8,
    "newsmax.com": -0.8,
    "theblaze.com": -0.8,
    "washingtonexaminer.com": -0.6,
    "washingtontimes.com": -0.6,
    "dailycaller.com": -0.7,
    "nypost.com": -0.5,
    "wsj.com": -0.4,
    "foxbusiness.com": -0.6,
    # Liberal / left-leaning
    "cnn.com": 0.7,
    "msnbc.com": 0.8,
    "nytimes.com": 0.6,
    "washingtonpost.com": 0.6,
    "theguardian.com": 0.7,
    "huffpost.com": 0.8,
    "vox.com": 0.7,
    "slate.com": 0.6,
    "motherjones.com": 0.8,
    "thenation.com": 0.8,
    "theatlantic.com": 0.5,
    "nbcnews.com": 0.4,
    # Center
    "bbc.com": 0.0,
    "bbc.co.uk": 0.0,
    "reuters.com": 0.0,
    "apnews.com": 0.0,
    "ap.org": 0.0,
    "npr.org": 0.1,
    "pbs.org": 0.0,
    "economist.com": 0.0,
    "thehill.com": 0.0,
    "axios.com": 0.1,
    "bloomberg.com": 0.1,
}

# Checked in order, first match wins.
PATTERN_RULES = [
    (re.compile(r"(^|\.)foxnews\.com$"), -0.8, "Fox News property"),
    (re.compile(r"(^|\.)cnn\.com$"), 0.7, "CNN property"),
    (re.compile(r"(^|\.)nytimes\.com$"), 0.6, "New York Times property"),
    (re.compile(r"(^|\.)washingtonpost\.com$"), 0.6, "Washington Post property"),
    (re.compile(r"(^|\.)theguardian\.com$|(^|\.)guardian\.co\.uk$"), 0.7, "Guardian property"),
    (re.compile(r"(^|\.)bbc\.(com|co\.uk)$"), 0.0, "BBC property"),
    (re.compile(r"(^|\.)reuters\.[a-z.]+$"), 0.0, "Reuters regional edition"),
    (re.compile(r"(^|\.)(gov|mil)(\.[a-z]{2})?$"), 0.0, "government publisher"),
]

# Last resort: domain merely contains a known network name.
NETWORK_NAMES = {
    "breitbart": -0.9,
    "foxnews": -0.8,
    "newsmax": -0.8,
    "dailywire": -0.7,
    "msnbc": 0.8,
    "huffpost": 0.8,
    "cnn": 0.7,
    "nytimes": 0.6,
    "guardian": 0.7,
    "reuters": 0.0,
    "bbc": 0.0,
}


def normalize_domain(domain: str) -> str:
    domain = (domain or "").strip().lower().rstrip(".")
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def lookup(domain: str) -> tuple[float, str] | None:
    """Return (score, how it matched) or None if the domain is unknown."""
    if domain in DOMAIN_SCORES:
        return DOMAIN_SCORES[domain], "exact match"
    for pattern, score, description in PATTERN_RULES:
        if pattern.search(domain):
            return score, f"pattern rule ({description})"
    for name, score in NETWORK_NAMES.items():
        if name in domain:
            return score, f"contains network name '{name}'"
    return None


def analyze(article: ArticleInput) -> VectorResult:
    domain = normalize_domain(article.metadata.domain)
    match = lookup(domain) if domain else None
    if match is None:
        log.debug("Domain not recognized: %r", domain)
        return abstain(SourceId.DOMAIN, "domain not recognized")

    score, how = match
    return VectorResult(
        score=score,
        confidence=CONFIDENCE,
        source_id=SourceId.DOMAIN,
        explanation=f"Source domain {domain} ({how})",
        details=(how,),
    )
