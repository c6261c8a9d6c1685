"""Gamma MCP tools: submit Gamma generations and wait for shareable URLs."""

__version__ = "1.0.0"
