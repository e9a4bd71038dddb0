"""Confidence scoring over text tails, classification and display helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable

from tail_confidence.contracts import ConfidenceLevel, ConfidenceResult
from tail_confidence.utils.text import (
    DEFAULT_TAIL_LENGTH,
    jaccard_score,
    normalize,
    tail_window,
    word_set,
)

HIGH_THRESHOLD = 0.7
MEDIUM_THRESHOLD = 0.4

COLOR_TOKENS: dict[ConfidenceLevel, str] = {
    ConfidenceLevel.HIGH: "emerald",
    ConfidenceLevel.MEDIUM: "amber",
    ConfidenceLevel.LOW: "rose",
}


def classify_confidence(
    score: float,
    *,
    high: float = HIGH_THRESHOLD,
    medium: float = MEDIUM_THRESHOLD,
) -> ConfidenceLevel:
    """Classify a numeric score into confidence level."""
    if score >= high:
        return ConfidenceLevel.HIGH
    if score >= medium:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def get_confidence_score(
    original: str,
    processed: str,
    tail_length: int = DEFAULT_TAIL_LENGTH,
) -> ConfidenceResult:
    """Score how closely the tail of ``processed`` matches the tail of ``original``.

    Both texts are normalized, cut to their last ``tail_length`` characters and
    reduced to unique-word sets. The score is the Jaccard similarity of those
    sets. If either side has no words there is nothing to compare, and the
    result is a zero score at LOW confidence.
    """
    a = word_set(tail_window(normalize(original), tail_length))
    b = word_set(tail_window(normalize(processed), tail_length))
    if not a or not b:
        return ConfidenceResult(score=0.0, level=ConfidenceLevel.LOW)

    score = jaccard_score(a, b)
    return ConfidenceResult(score=score, level=classify_confidence(score))


def confidence_color_class(level: ConfidenceLevel | str) -> str:
    """Map a level to its display color token; unknown levels get the LOW color."""
    try:
        return COLOR_TOKENS[ConfidenceLevel(level)]
    except ValueError:
        return COLOR_TOKENS[ConfidenceLevel.LOW]


def confidence_text_class(level: ConfidenceLevel | str) -> str:
    """Utility-class string for rendering a level as colored text."""
    color = confidence_color_class(level)
    return f"text-{color}-600 dark:text-{color}-400"


def format_confidence(result: ConfidenceResult, *, previous: bool = False) -> str:
    """Human-readable label, e.g. ``Confidence high (83%)``."""
    # Halves round up
    percent = math.floor(result.score * 100 + 0.5)
    prefix = "Previous Confidence" if previous else "Confidence"
    return f"{prefix} {result.level.value} ({percent}%)"


def summarize_confidence(results: Iterable[ConfidenceResult]) -> dict[str, int]:
    """Count results by confidence level."""
    counts: dict[str, int] = {c.value: 0 for c in ConfidenceLevel}
    for r in results:
        counts[ConfidenceLevel(r.level).value] += 1
    return counts
