"""Tool registry for the Gamma MCP server.

Centralizes all tool definitions with metadata for routing, documentation, and validation.
"""

import functools
from typing import Any, Dict

from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.models import EmptyRequest, GenerateAndWaitRequest, GenerateRequest, StatusRequest
from gamma_mcp.tools.generation import (
    gamma_generate,
    gamma_generate_and_wait,
    gamma_get_status,
    gamma_get_themes,
)

TOOL_SPECS: Dict[str, Dict[str, Any]] = {
    "gamma_generate": {
        "fn": gamma_generate,
        "type": "generation",
        "input_model": GenerateRequest,
        "tag": "Content Generation",
        "doc": (
            "Generate a presentation, document, or social content using Gamma AI.\n\n"
            "Returns immediately with a generationId; use gamma_get_status to follow up.\n\n"
            "- **inputText**: Text used to generate content (required)\n"
            "- **format**: presentation | document | social\n"
            "- **numCards**: Number of cards (clamped to 1-75)"
        ),
    },
    "gamma_generate_and_wait": {
        "fn": gamma_generate_and_wait,
        "type": "generation",
        "input_model": GenerateAndWaitRequest,
        "tag": "Content Generation",
        "doc": (
            "Generate content and wait until Gamma produces a shareable URL.\n\n"
            "Same parameters as gamma_generate, plus:\n\n"
            "- **maxAttempts**: Status checks before giving up (default: 20)"
        ),
    },
    "gamma_get_status": {
        "fn": gamma_get_status,
        "type": "generation",
        "input_model": StatusRequest,
        "tag": "Content Generation",
        "doc": "Check the status of a generation request.\n\n- **generationId**: The ID of the generation to check",
    },
    "gamma_get_themes": {
        "fn": gamma_get_themes,
        "type": "generation",
        "input_model": EmptyRequest,
        "tag": "Themes",
        "doc": "Get available themes for Gamma presentations.",
    },
}


def get_tools_registry(client: GammaClient) -> Dict[str, Dict[str, Any]]:
    """Get the tools registry bound to a client.

    Args:
        client: GammaClient every tool will use

    Returns:
        Dictionary mapping tool names to their configurations, with fn
        taking a single validated request model
    """
    return {
        name: {**spec, "fn": functools.partial(spec["fn"], client)}
        for name, spec in TOOL_SPECS.items()
    }
