"""Seven-bucket labels shared by the political and emotional axes."""

# Upper bounds (exclusive) for the first six buckets; anything higher falls in the last.
THRESHOLDS = (-0.6, -0.3, -0.1, 0.1, 0.3, 0.6)

POLITICAL_LABELS = (
    "Conservative",
    "Moderately Conservative",
    "Slightly Conservative",
    "Moderate",
    "Slightly Liberal",
    "Moderately Liberal",
    "Liberal",
)

EMOTIONAL_LABELS = (
    "Highly Emotional",
    "Emotionally Charged",
    "Somewhat Emotional",
    "Neutral",
    "Somewhat Analytical",
    "Analytical",
    "Emotionless",
)


def bucket(score: float) -> int:
    for i, upper in enumerate(THRESHOLDS):
        if score < upper:
            return i
    return len(THRESHOLDS)


def political_label(score: float) -> str:
    return POLITICAL_LABELS[bucket(score)]


def emotional_label(score: float) -> str:
    return EMOTIONAL_LABELS[bucket(score)]
