"""FastAPI application entry point with lifespan management."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.api.schemas import ErrorResponse
from app.config import settings
from app.core.errors import ValidationError
from app.core.relay import AIRelay
from app.services.llm import LLMService
from app.services.store import StoreService

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create process-scoped services and release them on shutdown."""
    # Startup
    logger.info("Starting agent relay service...")

    llm_service = LLMService()
    llm_service.initialize()

    # Store failures are non-fatal; AI endpoints do not depend on it
    store_service = StoreService()
    await asyncio.to_thread(store_service.connect)

    app.state.relay = AIRelay(llm=llm_service, store=store_service)

    logger.info(f"Agent relay running on port {settings.port}")
    logger.info(f"AI: {llm_service.model} {'configured' if llm_service.is_configured else 'NOT configured'}")
    logger.info(f"MongoDB: {'connected' if store_service.is_connected else 'pending'}")

    yield

    # Shutdown
    logger.info("Shutting down agent relay service...")
    store_service.close()
    await llm_service.close()
    logger.info("Agent relay service stopped")


app = FastAPI(
    title="Agent Relay API",
    description="Relays queries and workflow requests to a generative AI provider",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors, reported like missing fields."""
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request body"
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=message).model_dump(),
    )


# Include API routes
app.include_router(router)


def run() -> None:
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
