"""Text utilities — normalization, tail windows and Jaccard scoring."""

from __future__ import annotations

import re

# Runs of anything that is not a Unicode letter, number or whitespace.
# \w also matches "_", which is punctuation here.
_SYMBOL_RUN = re.compile(r"(?:[^\w\s]|_)+")

DEFAULT_TAIL_LENGTH = 250


def normalize(text: str) -> str:
    """Case-fold, replace punctuation/symbols with spaces, collapse whitespace.

    The result holds only lowercase letters (any script), digits and single
    spaces, with nothing leading or trailing. Idempotent.
    """
    folded = _SYMBOL_RUN.sub(" ", text.casefold())
    return " ".join(folded.split())


def tail_window(text: str, tail_length: int = DEFAULT_TAIL_LENGTH) -> str:
    """Return the last ``tail_length`` characters of ``text``."""
    if tail_length < 0:
        raise ValueError(f"tail_length must be >= 0, got {tail_length}")
    if tail_length == 0:
        # text[-0:] would be the whole string
        return ""
    return text[-tail_length:]


def word_set(text: str) -> set[str]:
    """Unique whitespace-separated tokens of ``text``."""
    return set(text.split())


def jaccard_score(a: set[str], b: set[str]) -> float:
    """Jaccard similarity between two token sets (0.0 if either is empty)."""
    if not a or not b:
        return 0.0
    intersection = len(a & b)
    union = len(a) + len(b) - intersection
    return intersection / union if union else 0.0
