"""Tool decorators for the Gamma MCP tools.

Provides standardized translation of expected failures into the normalized
result shape.
"""

import functools
from typing import Callable

from gamma_mcp.core.errors import GammaError
from gamma_mcp.core.logging import logger
from gamma_mcp.models.results import GenerationResult


def gamma_tool(source: str):
    """Decorator that turns expected Gamma failures into a failure result.

    GammaError subclasses (API errors, network errors, incomplete
    submissions) become a GenerationResult dict with status error/timeout.
    Anything else propagates so the adapter can report it distinctly.

    Args:
        source: Tool name for log events

    Returns:
        Decorated coroutine function taking (client, request)
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        async def wrapper(client, request):
            try:
                return await func(client, request)
            except GammaError as e:
                generation_id = getattr(request, "generation_id", None)
                logger.warning(
                    "tool_failed",
                    tool=source,
                    generation_id=generation_id,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                return GenerationResult.from_error(e, generation_id).to_dict()
        return wrapper
    return decorator
