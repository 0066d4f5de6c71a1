"""Application configuration loaded from environment variables.

  - GEMINI_API_KEY → key for the Gemini REST API (fact extraction)
  - GEMINI_MODEL   → model used for extraction
  - Upload limits are enforced by the audit router before any model call.
"""

from __future__ import annotations

import os


class Settings:
    # Gemini fact extractor
    GEMINI_API_KEY: str = (
        os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY") or ""
    )
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
    GEMINI_API_BASE: str = os.getenv(
        "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
    )
    GEMINI_TIMEOUT_S: float = float(os.getenv("GEMINI_TIMEOUT_S", "120"))

    # Request limits
    MAX_UPLOAD_SIZE_MB: int = int(os.getenv("MAX_UPLOAD_SIZE_MB", "10"))
    MAX_PDF_PAGES: int = int(os.getenv("MAX_PDF_PAGES", "20"))


settings = Settings()
