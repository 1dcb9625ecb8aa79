from dataclasses import dataclass, field, asdict
from enum import Enum


class SourceId(str, Enum):
    DOMAIN = "domain"
    CONTENT = "content"
    TONE = "tone"
    LANGUAGE = "language"
    FRAMING = "framing"


@dataclass
class ArticleMetadata:
    title: str = ""
    domain: str = ""
    url: str = ""
    author: str | None = None
    date: str | None = None


@dataclass
class ArticleInput:
    text: str
    metadata: ArticleMetadata = field(default_factory=ArticleMetadata)


@dataclass(frozen=True)
class VectorResult:
    score: float
    confidence: float
    source_id: SourceId
    explanation: str
    details: tuple[str, ...] = ()

    @property
    def abstained(self) -> bool:
        return self.confidence <= 0


@dataclass(frozen=True)
class CombinedResult:
    score: float
    label: str
    confidence: float
    contributing_vectors: tuple[SourceId, ...]
    per_vector_scores: dict[str, float]
    explanation: str


@dataclass(frozen=True)
class EmotionalResult:
    score: float
    label: str
    intensity: float


@dataclass
class Analysis:
    metadata: ArticleMetadata
    bias: CombinedResult
    emotional_charge: EmotionalResult
    vectors: dict[str, VectorResult] = field(default_factory=dict)
    neutral_summary: str | None = None
    opposing_viewpoint: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def abstain(source_id: SourceId, reason: str) -> VectorResult:
    """Vector had nothing to look at; the combiner ignores it."""
    return VectorResult(score=0.0, confidence=0.0, source_id=source_id, explanation=reason)


def neutral(source_id: SourceId, reason: str) -> VectorResult:
    """Vector looked but found no signal."""
    return VectorResult(score=0.0, confidence=0.1, source_id=source_id, explanation=reason)


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return max(low, min(high, value))
