"""Content keyword vector: weighted political phrases in the article body."""
from echo_lens.config import MIN_TEXT_LENGTH
from echo_lens.models import ArticleInput, SourceId, VectorResult, abstain
from echo_lens.phrases import compile_phrases, find_hits, score_polarity

MAX_CONFIDENCE = 0.8

# Weight reflects how specific a phrase is to one side of the debate.
LIBERAL_PHRASES = {
    "climate crisis": 0.9,
    "climate justice": 0.9,
    "reproductive rights": 0.9,
    "gun violence epidemic": 0.9,
    "undocumented immigrants": 0.8,
    "systemic racism": 0.9,
    "white privilege": 0.9,
    "social justice": 0.7,
    "wealth inequality": 0.7,
    "income inequality": 0.6,
    "living wage": 0.6,
    "universal healthcare": 0.7,
    "medicare for all": 0.8,
    "voter suppression": 0.8,
    "marginalized communities": 0.7,
    "lgbtq rights": 0.6,
    "progressive": 0.5,
    "climate change": 0.4,
    "diversity": 0.3,
    "equity": 0.4,
    "corporate greed": 0.7,
    "far-right": 0.6,
}

CONSERVATIVE_PHRASES = {
    "illegal aliens": 0.9,
    "illegal immigrants": 0.7,
    "pro-life": 0.8,
    "unborn child": 0.9,
    "second amendment rights": 0.8,
    "border security": 0.6,
    "radical left": 0.9,
    "woke": 0.7,
    "big government": 0.7,
    "job creators": 0.8,
    "tax relief": 0.6,
    "death tax": 0.9,
    "religious liberty": 0.7,
    "traditional values": 0.7,
    "law and order": 0.6,
    "free market": 0.5,
    "deep state": 0.8,
    "mainstream media": 0.5,
    "election integrity": 0.7,
    "patriotism": 0.4,
    "constitutional": 0.3,
    "far-left": 0.6,
}

_LIBERAL = compile_phrases(LIBERAL_PHRASES)
_CONSERVATIVE = compile_phrases(CONSERVATIVE_PHRASES)


def analyze(article: ArticleInput) -> VectorResult:
    text = article.text or ""
    if len(text) < MIN_TEXT_LENGTH:
        return abstain(SourceId.CONTENT, "text too short for keyword analysis")

    return score_polarity(
        SourceId.CONTENT,
        positive=find_hits(text, _LIBERAL),
        negative=find_hits(text, _CONSERVATIVE),
        max_confidence=MAX_CONFIDENCE,
        labels=("liberal", "conservative"),
    )
