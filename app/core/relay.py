"""AI relay - validates requests, builds prompts and forwards them to the LLM."""

import logging
from typing import Any

from app.core.errors import AIResponse, ValidationError
from app.core.prompts import build_workflow_prompt
from app.services.llm import PROVIDER_NAME, LLMService
from app.services.store import StoreService

logger = logging.getLogger(__name__)

CAPABILITIES = [
    "Natural Language Processing",
    "Workflow Automation",
    "HR/CRM/ERP Integration",
]


class AIRelay:
    """
    Stateless pass-through between API callers and the provider.

    Every operation is independent. The LLM service and the store are
    process-scoped and only read here.
    """

    provider_name = PROVIDER_NAME

    def __init__(self, llm: LLMService, store: StoreService):
        self.llm = llm
        self.store = store

    def start(self) -> dict:
        """Static capability descriptor. Makes no external calls."""
        return {
            "status": "AI Agent started",
            "aiProvider": self.provider_name,
            "automation": "BMAD Method",
            "capabilities": list(CAPABILITIES),
        }

    async def query(self, query: str | None) -> AIResponse:
        """
        Forward a free-form query to the provider.

        Raises:
            ValidationError: If query is missing or empty
        """
        if not query:
            raise ValidationError("Query is required")

        logger.info(f"Processing query: {query[:50]}")
        return await self.llm.generate(query)

    async def workflow(
        self,
        workflow: str | None,
        parameters: dict[str, Any] | None = None,
    ) -> AIResponse:
        """
        Ask the provider for numbered automation steps for a workflow.

        Raises:
            ValidationError: If workflow is missing or empty
        """
        if not workflow:
            raise ValidationError("Workflow type required")

        logger.info(f"Generating workflow: {workflow}")
        return await self.llm.generate(build_workflow_prompt(workflow, parameters))

    def health(self) -> dict:
        return {
            "store": self.store.is_connected,
            "provider": self.llm.is_configured,
        }
