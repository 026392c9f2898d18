"""
UX Detective Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    CORE_VERSION: str = "1.0.0"

    # --- Text location ---
    CONTEXT_LENGTH: int = int(os.getenv("UXDETECTIVE_CONTEXT_LENGTH", "50"))

    # --- Snapshot limits ---
    MAX_TEXT_CHARS: int = int(os.getenv("UXDETECTIVE_MAX_TEXT_CHARS", "500000"))

    # --- Orchestrator ---
    # 0 = run detectors sequentially on the calling thread
    DETECTOR_WORKERS: int = int(os.getenv("UXDETECTIVE_DETECTOR_WORKERS", "0"))

    # --- Reports ---
    SNIPPET_LIMIT: int = int(os.getenv("UXDETECTIVE_SNIPPET_LIMIT", "3"))
    TOP_PATTERNS: int = int(os.getenv("UXDETECTIVE_TOP_PATTERNS", "10"))


settings = Settings()
