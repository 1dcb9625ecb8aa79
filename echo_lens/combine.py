"""Confidence-weighted combination of the political vectors.

Each vector's influence is its nominal weight times its own confidence, so a
weak vector (framing, 0.3) cannot outvote a strong one (domain, 0.9). The
shared denominator renormalizes over whichever vectors actually spoke.
"""
import logging
from collections.abc import Mapping

from echo_lens.labels import political_label
from echo_lens.models import CombinedResult, SourceId, VectorResult, clamp

log = logging.getLogger(__name__)

WEIGHTS = {
    SourceId.DOMAIN: 0.35,
    SourceId.CONTENT: 0.25,
    SourceId.TONE: 0.20,
    SourceId.LANGUAGE: 0.12,
    SourceId.FRAMING: 0.08,
}

MAX_CONFIDENCE = 0.9


class CombinerExhaustion(RuntimeError):
    """Every vector abstained or reported zero confidence: no evidence at all."""


def combine(vectors: Mapping[SourceId, VectorResult | None]) -> CombinedResult:
    weighted_sum = 0.0
    total_weight = 0.0
    active: list[VectorResult] = []

    for source_id, nominal in WEIGHTS.items():
        result = vectors.get(source_id)
        if result is None or result.confidence <= 0:
            continue
        effective = nominal * result.confidence
        weighted_sum += result.score * effective
        total_weight += effective
        active.append(result)

    if total_weight == 0:
        raise CombinerExhaustion("No vector produced usable evidence")

    score = clamp(weighted_sum / total_weight)
    confidence = min(len(active) / len(WEIGHTS), MAX_CONFIDENCE)
    per_vector = {r.source_id.value: r.score for r in active}
    explanation = "Combined from {} of {} vectors: {}".format(
        len(active),
        len(WEIGHTS),
        ", ".join(f"{r.source_id.value} ({r.score:+.2f})" for r in active),
    )
    log.debug("Combined score %.3f, confidence %.2f", score, confidence)

    return CombinedResult(
        score=score,
        label=political_label(score),
        confidence=confidence,
        contributing_vectors=tuple(r.source_id for r in active),
        per_vector_scores=per_vector,
        explanation=explanation,
    )
