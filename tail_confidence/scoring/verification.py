"""Verification snippets — raw text endings plus a light-weight similarity."""

from __future__ import annotations

from tail_confidence.contracts import VerificationSnippet
from tail_confidence.utils.text import (
    DEFAULT_TAIL_LENGTH,
    jaccard_score,
    normalize,
    tail_window,
    word_set,
)


def generate_verification_snippet(
    original: str,
    processed: str,
    tail_length: int = DEFAULT_TAIL_LENGTH,
) -> VerificationSnippet:
    """Extract the last ``tail_length`` characters of each text for display.

    Unlike ``get_confidence_score``, the window is cut from the raw text and
    normalized afterwards, so punctuation and spacing inside the window use up
    characters. The snippets are returned unmodified.
    """
    original_snippet = tail_window(original, tail_length)
    processed_snippet = tail_window(processed, tail_length)

    a = word_set(normalize(original_snippet))
    b = word_set(normalize(processed_snippet))
    return VerificationSnippet(
        original_snippet=original_snippet,
        processed_snippet=processed_snippet,
        similarity=jaccard_score(a, b),
    )
