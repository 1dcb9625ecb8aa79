"""Weighted phrase dictionaries: matching and the shared polarity formula."""
import re
from dataclasses import dataclass

from echo_lens.models import SourceId, VectorResult, clamp, neutral


@dataclass(frozen=True)
class PhraseHit:
    phrase: str
    count: int
    weight: float

    @property
    def total(self) -> float:
        return self.count * self.weight

    def describe(self, side: str) -> str:
        return f"{side}: '{self.phrase}' x{self.count} (weight {self.weight})"


def compile_phrases(weights: dict[str, float]) -> list[tuple[str, re.Pattern, float]]:
    """Compile case-insensitive whole-phrase patterns."""
    return [
        (phrase, re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE), weight)
        for phrase, weight in weights.items()
    ]


def find_hits(text: str, compiled: list[tuple[str, re.Pattern, float]]) -> list[PhraseHit]:
    hits = []
    for phrase, pattern, weight in compiled:
        count = len(pattern.findall(text))
        if count:
            hits.append(PhraseHit(phrase, count, weight))
    return hits


def score_polarity(
    source_id: SourceId,
    positive: list[PhraseHit],
    negative: list[PhraseHit],
    max_confidence: float,
    labels: tuple[str, str],
) -> VectorResult:
    """Score = (pos - neg) / (pos + neg); confidence = min(total / 20, max_confidence).

    ``labels`` names the (positive, negative) sides for explanations and details.
    """
    pos_sum = sum(h.total for h in positive)
    neg_sum = sum(h.total for h in negative)
    total = pos_sum + neg_sum
    if total == 0:
        return neutral(source_id, "No indicative phrases found")

    score = clamp((pos_sum - neg_sum) / total)
    confidence = min(total / 20, max_confidence)
    pos_label, neg_label = labels
    details = tuple(h.describe(pos_label) for h in positive) + tuple(h.describe(neg_label) for h in negative)
    explanation = (
        f"{len(positive) + len(negative)} phrases matched "
        f"({pos_label} weight {pos_sum:.2f}, {neg_label} weight {neg_sum:.2f})"
    )
    return VectorResult(
        score=score,
        confidence=confidence,
        source_id=source_id,
        explanation=explanation,
        details=details,
    )
