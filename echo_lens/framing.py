"""Framing heuristic vector: the least trusted signal, used as a last resort."""
import re

from echo_lens.config import MIN_TEXT_LENGTH
from echo_lens.models import ArticleInput, SourceId, VectorResult, abstain, neutral

CONFIDENCE = 0.3

EMOTIONAL = re.compile(
    r"\b(crisis|catastroph\w*|outrage\w*|devastat\w*|disaster\w*|chaos|shocking|horrific|alarming|nightmare)\b",
    re.IGNORECASE,
)
VICTIM = re.compile(
    r"\b(victims? of|suffer(?:s|ed|ing)?|vulnerable|marginali[sz]ed|oppressed|targeted by|left behind)\b",
    re.IGNORECASE,
)
US_VS_THEM = re.compile(
    r"\b(us versus them|us vs\.? them|real americans|the elites?|those people|our way of life"
    r"|enemy of the people|they want to|they don't want you)\b",
    re.IGNORECASE,
)
# A question opened by a leading construction, e.g. "Isn't it time ...?"
QUESTION = re.compile(
    r"\b(isn't|aren't|shouldn't|wouldn't|why (?:do|does|did|would|won't|can't)|how (?:can|could|long)"
    r"|who (?:really|benefits)|what if)\b[^.!?]*\?",
    re.IGNORECASE,
)


def detect(text: str) -> dict[str, bool]:
    return {
        "emotional": bool(EMOTIONAL.search(text)),
        "victim": bool(VICTIM.search(text)),
        "us_vs_them": bool(US_VS_THEM.search(text)),
        "question": bool(QUESTION.search(text)),
    }


def analyze(article: ArticleInput) -> VectorResult:
    text = article.text or ""
    if len(text) < MIN_TEXT_LENGTH:
        return abstain(SourceId.FRAMING, "text too short for framing analysis")

    found = detect(text)
    present = tuple(name for name, hit in found.items() if hit)
    if not present:
        return neutral(SourceId.FRAMING, "no framing patterns detected")

    if found["emotional"] and found["us_vs_them"]:
        score, explanation = -0.3, "Emotional language combined with us-vs-them framing"
    elif found["victim"]:
        score, explanation = 0.2, "Victim-oriented framing"
    elif found["question"]:
        score, explanation = 0.0, "Rhetorical-question framing"
    else:
        score, explanation = 0.0, "Framing present without a directional pattern"

    return VectorResult(
        score=score,
        confidence=CONFIDENCE,
        source_id=SourceId.FRAMING,
        explanation=explanation,
        details=present,
    )
