import argparse
import json
import logging
import sys

from echo_lens import db, summarize
from echo_lens.analyze import analyze
from echo_lens.combine import CombinerExhaustion
from echo_lens.config import OPENAI_API_KEY
from echo_lens.extract import fetch_article

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger(__name__)


def run(url: str, use_cache: bool = True, with_summaries: bool = True, api_key: str = OPENAI_API_KEY) -> dict | None:
    """Analyze one article URL. Returns None when no analysis is possible."""
    db.init_db()

    if use_cache:
        cached = db.get_cached_analysis(url)
        if cached:
            log.info("Using cached analysis for %s", url)
            return cached

    log.info("Fetching %s", url)
    article = fetch_article(url)
    if article is None:
        return None
    log.info("Extracted %d characters from %s", len(article.text), article.metadata.domain)

    try:
        analysis = analyze(article)
    except CombinerExhaustion as e:
        log.warning("Analysis unavailable for %s: %s", url, e)
        return None

    if with_summaries:
        log.info("Generating summaries")
        analysis.neutral_summary = summarize.neutral_summary(article.text, api_key)
        analysis.opposing_viewpoint = summarize.opposing_viewpoint(article.text, api_key)

    result = analysis.to_dict()
    db.save_analysis(url, result)
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Estimate political leaning and emotional charge of an article")
    parser.add_argument("url", nargs="?", help="Article URL to analyze")
    parser.add_argument("--no-cache", action="store_true", help="Ignore cached results and re-analyze")
    parser.add_argument("--no-summary", action="store_true", help="Skip the OpenAI summaries")
    parser.add_argument("--clear-cache", action="store_true", help="Delete all cached analyses and exit")
    args = parser.parse_args(argv)

    if args.clear_cache:
        db.init_db()
        log.info("Removed %d cached analyses", db.clear_cache())
        return 0
    if not args.url:
        parser.error("url is required")

    result = run(args.url, use_cache=not args.no_cache, with_summaries=not args.no_summary)
    if result is None:
        print("Analysis unavailable for this article.", file=sys.stderr)
        return 1

    bias = result["bias"]
    log.info("%s (score %+.2f, confidence %.2f)", bias["label"], bias["score"], bias["confidence"])
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
