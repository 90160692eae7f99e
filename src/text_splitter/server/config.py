"""Server runtime configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..models import ErrorMode
from ..patterns import DEFAULT_TIMEOUT


class ServerRuntimeConfig(BaseModel):
    regex_timeout: float | None = DEFAULT_TIMEOUT
    default_on_error: ErrorMode = "abort"
    max_items: int = Field(default=10_000, ge=1)
