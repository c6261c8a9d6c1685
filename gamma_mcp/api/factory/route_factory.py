"""Route factory for the Gamma tools API.

Factory pattern for creating FastAPI route handlers with consistent
validation, logging and error mapping.
"""

import time
from typing import Any, Callable, Dict

from fastapi import Body
from fastapi.responses import JSONResponse

from gamma_mcp.core.execution import ToolExecutor
from gamma_mcp.core.logging import logger


class RouteFactory:
    """Factory for creating tool route handlers.

    Validation failures map to 400, unexpected exceptions to 500. Expected
    Gamma failures are already normalized by the tools and return 200 with
    a failure-shaped body.
    """

    def __init__(self, tools_registry: Dict[str, Dict[str, Any]]):
        """Initialize route factory.

        Args:
            tools_registry: Registry the executor resolves tool names against
        """
        self.executor = ToolExecutor(tools_registry)

    def create_tool_route(self, tool_name: str, tool_config: Dict[str, Any]) -> Callable:
        """Create a FastAPI route handler for a tool.

        Args:
            tool_name: Name of the tool (e.g., "gamma_generate")
            tool_config: Tool configuration dictionary with:
                - fn: Tool function bound to a client
                - type: Tool type
                - input_model: Pydantic model for the body
                - doc: Tool documentation string

        Returns:
            Async route handler function
        """

        async def handler(request_data: Dict[str, Any] = Body(default={})):
            start_time = time.time()

            try:
                result = await self.executor.execute(tool_name, request_data)
            except Exception as e:
                logger.exception("tool_route_error", tool_name=tool_name, error=str(e))
                return JSONResponse(
                    status_code=500,
                    content={"success": False, "error": str(e), "error_type": type(e).__name__},
                )

            processing_ms = int((time.time() - start_time) * 1000)
            logger.info(
                "tool_route_called",
                tool_name=tool_name,
                tool_type=tool_config["type"],
                success=result["success"],
                processing_ms=processing_ms,
            )

            if not result["success"]:
                return JSONResponse(status_code=400, content=result)

            return JSONResponse(content=result)

        # Set handler metadata
        handler.__doc__ = tool_config["doc"]
        handler.__name__ = f"{tool_name}_route"
        return handler
