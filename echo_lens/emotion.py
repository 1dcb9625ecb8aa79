"""Emotional charge analyzer: a small valence lexicon in the style of VADER.

Strong valence in either direction reads as emotional, so the normalized
compound score is inverted: -1 is highly emotional, +1 is analytical.
"""
import re

from echo_lens.labels import emotional_label
from echo_lens.models import EmotionalResult, clamp

LEXICON = {
    # positive
    "excellent": 2.5, "amazing": 2.3, "wonderful": 2.2, "fantastic": 2.1,
    "great": 1.9, "love": 2.1, "best": 1.8, "perfect": 2.0,
    "brilliant": 2.0, "outstanding": 2.1, "incredible": 2.2,
    "shocking": 2.0,
    # negative
    "devastating": -2.5, "terrible": -2.3, "horrific": -2.8, "awful": -2.1,
    "disgusting": -2.4, "outrageous": -2.0, "appalling": -2.2,
    "hate": -2.5, "worst": -2.0, "horrible": -2.3, "disaster": -2.1,
    "crisis": -1.8, "tragedy": -2.2, "scandal": -1.9,
    # intensifiers (positive and below 1.0)
    "extremely": 0.8, "incredibly": 0.9, "absolutely": 0.8,
    "completely": 0.6, "totally": 0.7, "very": 0.3,
    # hedges
    "however": -0.2, "but": -0.3, "although": -0.2,
    "nevertheless": -0.1, "despite": -0.2,
}

NEGATORS = {"not", "no", "never"}
MIN_NORMALIZER = 10


def tokenize(text: str) -> list[str]:
    return re.sub(r"[^\w\s]", " ", (text or "").lower()).split()


def _is_intensifier(token: str) -> bool:
    value = LEXICON.get(token)
    return value is not None and 0 < value < 1


def compound(tokens: list[str]) -> tuple[float, int]:
    """Raw valence sum and the number of lexicon tokens matched."""
    total = 0.0
    matched = 0
    for i, token in enumerate(tokens):
        if token in LEXICON:
            value = LEXICON[token]
            if i > 0 and _is_intensifier(tokens[i - 1]):
                value *= 1 + LEXICON[tokens[i - 1]]
            total += value
            matched += 1

        # approximate flip: take back half of the negated word's valence
        if token in NEGATORS and i + 1 < len(tokens) and tokens[i + 1] in LEXICON:
            total -= LEXICON[tokens[i + 1]] * 0.5
    return total, matched


def analyze(text: str) -> EmotionalResult:
    total, matched = compound(tokenize(text))
    normalized = clamp(total / max(matched, MIN_NORMALIZER))
    score = -normalized if normalized else 0.0
    return EmotionalResult(score=score, label=emotional_label(score), intensity=abs(score))
