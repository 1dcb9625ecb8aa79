import logging

from echo_lens import content, domain, emotion, framing, language, tone
from echo_lens.combine import combine
from echo_lens.config import TONE_QUERY_DELAY
from echo_lens.models import Analysis, ArticleInput, SourceId, VectorResult

log = logging.getLogger(__name__)


def run_vectors(article: ArticleInput, tone_delay: float = TONE_QUERY_DELAY) -> dict[SourceId, VectorResult]:
    """Run the five political vectors. None of them raise."""
    vectors = {
        SourceId.DOMAIN: domain.analyze(article),
        SourceId.CONTENT: content.analyze(article),
        SourceId.TONE: tone.analyze(article, delay=tone_delay),
        SourceId.LANGUAGE: language.analyze(article),
        SourceId.FRAMING: framing.analyze(article),
    }
    for source_id, result in vectors.items():
        if result.abstained:
            log.info("  %s: abstained (%s)", source_id.value, result.explanation)
        else:
            log.info("  %s: score %+.2f, confidence %.2f", source_id.value, result.score, result.confidence)
    return vectors


def analyze(article: ArticleInput, tone_delay: float = TONE_QUERY_DELAY) -> Analysis:
    """Political leaning plus emotional charge for one article.

    Raises CombinerExhaustion when no vector found any evidence.
    """
    vectors = run_vectors(article, tone_delay=tone_delay)
    bias = combine(vectors)
    emotional_charge = emotion.analyze(article.text)
    log.info("Bias: %s (%+.2f), emotional charge: %s", bias.label, bias.score, emotional_charge.label)
    return Analysis(
        metadata=article.metadata,
        bias=bias,
        emotional_charge=emotional_charge,
        vectors={s.value: r for s, r in vectors.items()},
    )
