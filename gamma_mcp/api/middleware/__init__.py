"""Middleware for the Gamma tools API."""

from gamma_mcp.api.middleware.request_id import request_id_middleware

__all__ = ["request_id_middleware"]
