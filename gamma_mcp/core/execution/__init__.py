"""Execution module for the Gamma MCP tools.

Provides classes for error classification, retries and tool execution.
"""

from gamma_mcp.core.execution.backoff import calculate_backoff_delay
from gamma_mcp.core.execution.error_classifier import ErrorClassification, ErrorClassifier
from gamma_mcp.core.execution.error_handler import ErrorHandler
from gamma_mcp.core.execution.tool_executor import ToolExecutor

__all__ = [
    "ErrorClassification",
    "ErrorClassifier",
    "ErrorHandler",
    "ToolExecutor",
    "calculate_backoff_delay",
]
