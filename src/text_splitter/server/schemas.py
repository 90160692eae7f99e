"""Pydantic request/response schemas for the FastAPI server."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from text_splitter import __version__

from ..models import ErrorMode


class HealthResponse(BaseModel):
    ok: bool = True
    version: str = __version__


class TransformRequest(BaseModel):
    items: list[dict[str, Any]] = Field(default_factory=list)
    parameters: dict[str, Any] = Field(default_factory=dict)
    on_error: ErrorMode | None = None


class TransformResponse(BaseModel):
    items: list[dict[str, Any]] = Field(default_factory=list)
    count: int = 0


class ErrorResponse(BaseModel):
    error: str
    detail: str
