"""Prompt templates sent to the provider."""

import json
from typing import Any

WORKFLOW_PROMPT = """Generate detailed automation steps for {workflow} workflow.
Parameters: {parameters}

Provide 5-7 numbered steps that an automation system should follow."""


def build_workflow_prompt(workflow: str, parameters: dict[str, Any] | None) -> str:
    """Render the workflow template with parameters serialized as indented JSON."""
    return WORKFLOW_PROMPT.format(
        workflow=workflow,
        parameters=json.dumps(parameters, indent=2, ensure_ascii=False, default=str),
    )
