"""Settings loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


def _load_env() -> None:
    """Load .env from project root if it exists."""
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)


_load_env()


@dataclass(frozen=True)
class Settings:
    # Scoring
    tail_length: int = field(
        default_factory=lambda: int(os.environ.get("CONFIDENCE_TAIL_LENGTH", "250"))
    )

    def validate(self) -> list[str]:
        """Return list of validation errors. Empty list means valid."""
        errors = []
        if self.tail_length < 0:
            errors.append(f"CONFIDENCE_TAIL_LENGTH must be >= 0, got {self.tail_length}")
        return errors


def get_settings() -> Settings:
    """Create Settings from current environment."""
    return Settings()
