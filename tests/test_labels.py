import pytest

from echo_lens.labels import emotional_label, political_label


@pytest.mark.parametrize("score,label", [
    (-1.0, "Conservative"),
    (-0.61, "Conservative"),
    (-0.6, "Moderately Conservative"),
    (-0.3, "Slightly Conservative"),
    (-0.1, "Moderate"),
    (0.0, "Moderate"),
    (0.1, "Slightly Liberal"),
    (0.3, "Moderately Liberal"),
    (0.6, "Liberal"),
    (1.0, "Liberal"),
])
def test_political_buckets(score, label):
    assert political_label(score) == label


@pytest.mark.parametrize("score,label", [
    (-0.9, "Highly Emotional"),
    (-0.45, "Emotionally Charged"),
    (-0.2, "Somewhat Emotional"),
    (0.05, "Neutral"),
    (0.2, "Somewhat Analytical"),
    (0.45, "Analytical"),
    (0.9, "Emotionless"),
])
def test_emotional_buckets(score, label):
    assert emotional_label(score) == label
