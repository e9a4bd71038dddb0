"""Test fixtures."""

from __future__ import annotations

import pytest

from tail_confidence.contracts import ConfidenceLevel, ConfidenceResult


@pytest.fixture
def sample_original() -> str:
    return (
        "Quantum entanglement is a phenomenon in quantum mechanics. "
        "Measurements on one particle are correlated with measurements on the other, "
        "even when the particles are separated by large distances."
    )


@pytest.fixture
def sample_results() -> list[ConfidenceResult]:
    return [
        ConfidenceResult(score=0.91, level=ConfidenceLevel.HIGH),
        ConfidenceResult(score=0.75, level=ConfidenceLevel.HIGH),
        ConfidenceResult(score=0.5, level=ConfidenceLevel.MEDIUM),
        ConfidenceResult(score=0.0, level=ConfidenceLevel.LOW),
    ]
