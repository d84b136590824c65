"""Pydantic models for API request/response validation."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QueryRequest(BaseModel):
    """Request body for the query endpoint."""

    query: str | None = Field(default=None, description="The user's query text")


class WorkflowRequest(BaseModel):
    """Request body for the workflow endpoint."""

    workflow: str | None = Field(default=None, description="Workflow type, e.g. onboarding")
    parameters: dict[str, Any] | None = Field(
        default=None,
        description="Arbitrary parameters interpolated into the prompt",
    )


class QueryResponse(BaseModel):
    """Response body for the query endpoint."""

    success: bool = True
    query: str
    response: str = Field(..., description="Raw text returned by the provider")
    aiProvider: str
    timestamp: datetime = Field(default_factory=utcnow)


class WorkflowResponse(BaseModel):
    """Response body for the workflow endpoint."""

    success: bool = True
    workflow: str
    parameters: dict[str, Any] | None
    automationSteps: str = Field(..., description="Generated step list, unparsed")
    generatedBy: str
    timestamp: datetime = Field(default_factory=utcnow)


class StartResponse(BaseModel):
    """Capability descriptor returned by the start endpoint."""

    status: str
    aiProvider: str
    automation: str
    capabilities: list[str]
    timestamp: datetime = Field(default_factory=utcnow)


class ErrorResponse(BaseModel):
    """Error response body."""

    success: bool = False
    error: str = Field(..., description="Error message")


class ServiceStatus(BaseModel):
    """Connectivity flags reported by the health endpoint."""

    store: bool = Field(..., description="Cached document store connection state")
    provider: bool = Field(..., description="Whether a provider key is configured")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    services: ServiceStatus
    timestamp: datetime = Field(default_factory=utcnow)
