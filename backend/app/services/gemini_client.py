"""HTTP client for the Gemini fact extractor.

The backend never reads resume content itself: the raw file is sent to
Gemini as inline data and the model answers with the ForensicExtraction
JSON schema. Scores are computed locally afterwards.
"""

from __future__ import annotations

import base64
import json
import logging
import time

import httpx
from pydantic import ValidationError

from prophet.models import ForensicExtraction
from prophet.prompts import SYSTEM_INSTRUCTION, USER_INSTRUCTION
from app.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/pdf"


class ExtractionError(RuntimeError):
    """Raised when the extractor call fails or returns an unusable answer."""


class ConfigurationError(ExtractionError):
    """Raised when no Gemini API key is configured."""


def build_payload(content: bytes, mime_type: str | None) -> dict:
    """Build the generateContent request body for one resume file."""
    return {
        "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
        "contents": [{
            "parts": [
                {
                    "inlineData": {
                        "data": base64.b64encode(content).decode("ascii"),
                        "mimeType": mime_type or DEFAULT_MIME_TYPE,
                    }
                },
                {"text": USER_INSTRUCTION},
            ]
        }],
        "generationConfig": {
            "responseMimeType": "application/json",
            "temperature": 0,
        },
    }


def _response_text(data: object) -> str:
    if not isinstance(data, dict):
        raise ExtractionError("Gemini returned an unexpected response shape")
    candidates = data.get("candidates") or []
    if not candidates:
        raise ExtractionError("Gemini returned no candidates")
    if not isinstance(candidates, list) or not isinstance(candidates[0], dict):
        raise ExtractionError("Gemini returned an unexpected response shape")
    content = candidates[0].get("content") or {}
    if not isinstance(content, dict):
        raise ExtractionError("Gemini returned an unexpected response shape")
    parts = content.get("parts") or []
    if not isinstance(parts, list) or not all(isinstance(part, dict) for part in parts):
        raise ExtractionError("Gemini returned an unexpected response shape")
    return "".join(str(part.get("text", "")) for part in parts).strip()


def _strip_fence(text: str) -> str:
    # Models occasionally wrap JSON in ```json fences despite the mime type
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def parse_extraction(text: str) -> ForensicExtraction:
    """Parse the model's JSON answer into a validated ForensicExtraction."""
    text = _strip_fence(text)
    if not text:
        raise ExtractionError("Gemini returned an empty answer")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Gemini answer is not valid JSON: {exc}") from exc
    try:
        return ForensicExtraction.model_validate(data)
    except ValidationError as exc:
        raise ExtractionError(f"Gemini answer does not match the schema: {exc}") from exc


async def extract_facts(
    content: bytes,
    mime_type: str | None,
    client: httpx.AsyncClient | None = None,
) -> ForensicExtraction:
    """Send a resume file to Gemini and return the extracted facts.

    *client* lets callers (and tests) supply their own AsyncClient; one is
    created per call otherwise.
    """
    if not settings.GEMINI_API_KEY:
        raise ConfigurationError("GEMINI_API_KEY is not set")

    url = f"{settings.GEMINI_API_BASE}/models/{settings.GEMINI_MODEL}:generateContent"
    headers = {"x-goog-api-key": settings.GEMINI_API_KEY}
    payload = build_payload(content, mime_type)
    start = time.perf_counter()

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.GEMINI_TIMEOUT_S) as own_client:
                resp = await own_client.post(url, json=payload, headers=headers)
        else:
            resp = await client.post(url, json=payload, headers=headers)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise ExtractionError(
            f"Gemini returned HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise ExtractionError(f"Gemini request failed: {exc}") from exc

    latency_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Gemini extraction model=%s latency=%.1f ms",
        settings.GEMINI_MODEL, latency_ms,
        extra={
            "latency_ms": latency_ms,
            "model": settings.GEMINI_MODEL,
            "mime_type": mime_type or DEFAULT_MIME_TYPE,
            "size_bytes": len(content),
        },
    )

    try:
        data = resp.json()
    except ValueError as exc:
        raise ExtractionError("Gemini response body is not JSON") from exc
    return parse_extraction(_response_text(data))
