"""Single source of truth for confidence types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# --- Enums ---


class ConfidenceLevel(str, Enum):
    HIGH = "high"  # >= 0.7
    MEDIUM = "medium"  # 0.4 - 0.7
    LOW = "low"  # < 0.4


# --- Data Types ---


@dataclass(frozen=True)
class ConfidenceResult:
    """Tail similarity between an original text and its processed version."""

    score: float  # Jaccard similarity, 0.0 - 1.0
    level: ConfidenceLevel

    def to_dict(self) -> dict[str, float | str]:
        return {"score": self.score, "level": self.level.value}


@dataclass(frozen=True)
class VerificationSnippet:
    """Raw text endings shown side by side, with their word overlap."""

    original_snippet: str
    processed_snippet: str
    similarity: float  # Jaccard on unique words, 0.0 - 1.0
