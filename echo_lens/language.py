"""Language pattern vector: rhetorical phrasing rather than topical keywords.

Certainty-assertion phrasing leans conservative; structural or systemic
framing leans liberal.
"""
from echo_lens.config import MIN_TEXT_LENGTH
from echo_lens.models import ArticleInput, SourceId, VectorResult, abstain
from echo_lens.phrases import compile_phrases, find_hits, score_polarity

MAX_CONFIDENCE = 0.5

CERTAINTY_PHRASES = {
    "make no mistake": 0.6,
    "everyone knows": 0.5,
    "the fact is": 0.4,
    "the truth is": 0.5,
    "common sense": 0.5,
    "let's be clear": 0.4,
    "no one can deny": 0.6,
    "plain and simple": 0.5,
    "it's that simple": 0.5,
    "hard-working americans": 0.6,
    "personal responsibility": 0.5,
    "obviously": 0.3,
    "undeniably": 0.4,
}

SYSTEMIC_PHRASES = {
    "systemic": 0.5,
    "structural": 0.4,
    "root causes": 0.5,
    "historically excluded": 0.6,
    "disproportionately affects": 0.5,
    "disproportionately impacts": 0.5,
    "lived experience": 0.5,
    "power structures": 0.6,
    "institutional barriers": 0.6,
    "underserved": 0.4,
    "collective action": 0.4,
    "in the context of": 0.3,
}

_CERTAINTY = compile_phrases(CERTAINTY_PHRASES)
_SYSTEMIC = compile_phrases(SYSTEMIC_PHRASES)


def analyze(article: ArticleInput) -> VectorResult:
    text = article.text or ""
    if len(text) < MIN_TEXT_LENGTH:
        return abstain(SourceId.LANGUAGE, "text too short for language pattern analysis")

    return score_polarity(
        SourceId.LANGUAGE,
        positive=find_hits(text, _SYSTEMIC),
        negative=find_hits(text, _CERTAINTY),
        max_confidence=MAX_CONFIDENCE,
        labels=("systemic framing", "certainty assertion"),
    )
