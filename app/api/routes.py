"""API routes for the agent relay service."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.schemas import (
    ErrorResponse,
    HealthResponse,
    QueryRequest,
    QueryResponse,
    ServiceStatus,
    StartResponse,
    WorkflowRequest,
    WorkflowResponse,
)
from app.core.errors import Failure
from app.core.relay import AIRelay

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid field"},
    500: {"model": ErrorResponse, "description": "AI provider failure"},
}


def get_relay(request: Request) -> AIRelay:
    """Process-scoped relay created during application startup."""
    return request.app.state.relay


def provider_failure(result: Failure) -> JSONResponse:
    return JSONResponse(
        status_code=result.error.status_code,
        content=ErrorResponse(error=result.message).model_dump(),
    )


@router.get("/health", response_model=HealthResponse)
async def health(relay: AIRelay = Depends(get_relay)) -> HealthResponse:
    """Health check endpoint. Never calls the provider."""
    return HealthResponse(services=ServiceStatus(**relay.health()))


@router.post("/agent/start", response_model=StartResponse)
async def start(relay: AIRelay = Depends(get_relay)) -> StartResponse:
    return StartResponse(**relay.start())


@router.post("/agent/query", response_model=QueryResponse, responses=ERROR_RESPONSES)
async def query(
    payload: QueryRequest | None = None,
    relay: AIRelay = Depends(get_relay),
):
    """
    Forward the query to the AI provider and return its raw text.

    Provider failures become a 500 with success=false; the process keeps serving.
    """
    payload = payload or QueryRequest()
    result = await relay.query(payload.query)
    if isinstance(result, Failure):
        return provider_failure(result)

    return QueryResponse(
        query=payload.query,
        response=result.text,
        aiProvider=relay.provider_name,
    )


@router.post("/agent/workflow", response_model=WorkflowResponse, responses=ERROR_RESPONSES)
async def workflow(
    payload: WorkflowRequest | None = None,
    relay: AIRelay = Depends(get_relay),
):
    """Generate 5-7 numbered automation steps for the named workflow."""
    payload = payload or WorkflowRequest()
    result = await relay.workflow(payload.workflow, payload.parameters)
    if isinstance(result, Failure):
        return provider_failure(result)

    return WorkflowResponse(
        workflow=payload.workflow,
        parameters=payload.parameters,
        automationSteps=result.text,
        generatedBy=relay.provider_name,
    )
