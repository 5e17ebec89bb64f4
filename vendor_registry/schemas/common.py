"""Shared Pydantic schema base and small response bodies."""

from __future__ import annotations

from pydantic import BaseModel


class ApiModel(BaseModel):
    """All API schemas inherit from this so ORM rows validate directly."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""
    error: str


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
