"""FastAPI application entrypoint.

Responsibilities:
  - Validate resume uploads
  - Delegate fact extraction to Gemini
  - Score the extracted facts deterministically

NOT responsible for:
  - Parsing PDF or image content (delegated to the model)
  - Storing uploads or results (every audit is stateless)
"""

from __future__ import annotations

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prophet.logging_config import setup_logging
from prophet.models import ApiResponse
from app.routers import audit

setup_logging()

app = FastAPI(
    title="Prophet ATS Auditor",
    version="2.1.0",
    description="Forensic resume audit: Gemini fact extraction plus deterministic scoring",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(audit.router, tags=["audit"])


@app.get("/health", response_model=ApiResponse)
async def health() -> ApiResponse:
    return ApiResponse(message="ok", status="success")
