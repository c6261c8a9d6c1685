"""Tool executor for the Gamma MCP tools.

Executes tools from the registry with parameter validation and error handling.
"""

import time
from typing import Any, Dict

from pydantic import ValidationError

from gamma_mcp.core.logging import logger


def format_validation_error(error: ValidationError) -> str:
    """Render a pydantic ValidationError as 'path: message, ...'."""
    parts = []
    for item in error.errors():
        path = ".".join(str(p) for p in item.get("loc", ())) or "<root>"
        parts.append(f"{path}: {item.get('msg')}")
    return "Invalid parameters: " + ", ".join(parts)


class ToolExecutor:
    """Executes tools from the tools registry.

    Validates parameters against each tool's input model before anything
    touches the network. Only returns failures for unknown tools and invalid
    parameters; unexpected exceptions from the tool itself propagate.
    """

    def __init__(self, tools: Dict[str, Dict[str, Any]]):
        """Initialize ToolExecutor with tools registry.

        Args:
            tools: Registry dict {tool_name: {fn, type, input_model, tag, doc}}
        """
        self.tools = tools

    async def execute(self, tool_name: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Execute a tool by name with given parameters.

        Args:
            tool_name: Name of tool to execute
            params: Raw parameters dict for the tool

        Returns:
            Dict with: success, tool_name, tool_type, data/error, error_type, execution_time_ms
        """
        start_time = time.time()

        # Check if tool exists
        if tool_name not in self.tools:
            return {
                "success": False,
                "tool_name": tool_name,
                "error": f"Tool '{tool_name}' not found in registry",
                "error_type": "KeyError",
                "execution_time_ms": (time.time() - start_time) * 1000,
            }

        tool_config = self.tools[tool_name]
        tool_type = tool_config.get("type", "unknown")

        # Validate parameters
        try:
            request = tool_config["input_model"].model_validate(params or {})
        except ValidationError as e:
            logger.info("tool_params_invalid", tool_name=tool_name, errors=e.error_count())
            return {
                "success": False,
                "tool_name": tool_name,
                "tool_type": tool_type,
                "error": format_validation_error(e),
                "error_type": "ValidationError",
                "execution_time_ms": (time.time() - start_time) * 1000,
            }

        result = await tool_config["fn"](request)

        return {
            "success": True,
            "tool_name": tool_name,
            "tool_type": tool_type,
            "data": result,
            "execution_time_ms": (time.time() - start_time) * 1000,
        }
