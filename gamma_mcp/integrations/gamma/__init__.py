"""Gamma API integration."""

from gamma_mcp.integrations.gamma.client import DEFAULT_THEMES, GammaClient
from gamma_mcp.integrations.gamma.transport import HttpxTransport, Transport, TransportResponse

__all__ = ["DEFAULT_THEMES", "GammaClient", "HttpxTransport", "Transport", "TransportResponse"]
